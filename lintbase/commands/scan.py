"""Scan a database and report schema, performance, security and cost issues.

Usage: lintbase scan firestore --key ./service-account.json
"""

import click

from lintbase.client import ReportClient
from lintbase.commands import connector_options, sample_database
from lintbase.config_runtime import load_runtime_config
from lintbase.core.aggregate import AnalysisOptions
from lintbase.engine import analyze_scan
from lintbase.exceptions import ReportSaveError
from lintbase.reporters.terminal import print_banner, print_issues, print_scan_results
from lintbase.ui import print_status, print_warning
from lintbase.utils.error_handler import handle_exceptions
from lintbase.utils.exit_codes import ExitCodes
from lintbase.utils.logging import logger


@click.command("scan")
@click.argument("database")
@connector_options
@click.option("--limit", type=int, default=None, help="Max documents sampled per collection [default: 100]")
@click.option("--json", "json_output", is_flag=True, help="Write only the report JSON to stdout")
@click.option("--ignore", multiple=True, metavar="RULE", help="Rule id to suppress (repeatable)")
@click.option(
    "--collection",
    "collections",
    multiple=True,
    metavar="NAME",
    help="Only scan this collection (repeatable)",
)
@click.option("--save", "save_url", default=None, metavar="URL", help="Push the report to a dashboard")
@click.option("--token", default=None, help="API token for --save")
@click.option("--parallel", is_flag=True, help="Run analyzers on a thread pool")
@click.pass_context
@handle_exceptions
def scan(ctx, database, key, file, limit, json_output, ignore, collections, save_url, token, parallel):
    """Sample a document database and lint what comes back.

    Reads at most --limit documents per collection, runs the schema,
    performance, security and cost analyzers, and prints a risk score with
    every issue grouped by severity.

    \b
    EXIT CODES:
      0  no error-severity issues
      1  at least one error-severity issue (use as a CI gate)
      2  the scan could not run (credentials, export file, options)

    \b
    EXAMPLES:
      lintbase scan firestore --key ./service-account.json
      lintbase scan firestore --key ./sa.json --collection users --collection orders
      lintbase scan json --file ./export.json --json > report.json
      lintbase scan json --file ./export.json --ignore cost/collection-at-limit

    \b
    CONFIG (.lintbase/config.json or LINTBASE_<SECTION>_<KEY>):
      scan.limit, scan.ignore, scan.parallel,
      save.url, save.token, save.timeout,
      report.max_affected_shown, report.max_issues_shown
    """
    cfg = load_runtime_config()

    limit = limit if limit is not None else cfg["scan"]["limit"]
    ignored = [*cfg["scan"]["ignore"], *ignore]
    parallel = parallel or cfg["scan"]["parallel"]

    if not json_output:
        print_banner()
        print_status(f"Connecting to {database}...")

    result = sample_database(database, key, file, limit, list(collections))

    if not json_output:
        print_scan_results(result)

    report = analyze_scan(result, AnalysisOptions(limit=limit), ignore=ignored, parallel=parallel)

    if json_output:
        click.echo(report.to_json())
    else:
        print_issues(
            report,
            max_affected_shown=cfg["report"]["max_affected_shown"],
            max_issues_shown=cfg["report"]["max_issues_shown"],
        )

    save_url = save_url or cfg["save"]["url"]
    if save_url:
        _save_report(report, save_url, token or cfg["save"]["token"], cfg["save"]["timeout"], json_output)

    exit_code = ExitCodes.ERRORS_FOUND if report.summary.errors > 0 else ExitCodes.SUCCESS
    logger.info("exit {code}: {desc}", code=exit_code, desc=ExitCodes.get_description(exit_code))
    if ExitCodes.should_fail_pipeline(exit_code):
        ctx.exit(exit_code)


def _save_report(report, url: str, token: str, timeout: float, json_output: bool) -> None:
    """Push the report; failures are reported but never change the exit code."""
    if not token:
        print_warning("--save requires --token <api-key>. Report not saved.")
        return

    print_status(f"Saving report to {url}...", json_mode=json_output)
    try:
        scan_id = ReportClient(url, token, timeout=timeout).save(report)
    except ReportSaveError as e:
        logger.debug("save failed (status={status})", status=e.status_code)
        print_warning(f"Could not save report: {e.message}")
        return

    suffix = f" (scan id: {scan_id})" if scan_id else ""
    print_status(f"Report saved{suffix}", json_mode=json_output)
