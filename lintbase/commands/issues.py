"""Query issues as JSON.

Usage: lintbase issues json --file ./export.json --severity error
"""

import json

import click

from lintbase.commands import connector_options, sample_database
from lintbase.config_runtime import load_runtime_config
from lintbase.core.aggregate import AnalysisOptions
from lintbase.engine import analyze_scan
from lintbase.exceptions import ConnectorError
from lintbase.utils.error_handler import handle_exceptions
from lintbase.utils.finding_priority import filter_issues, sort_issues


@click.command("issues")
@click.argument("database")
@connector_options
@click.option("--limit", type=int, default=50, show_default=True, help="Max documents sampled per collection")
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    help="Only issues of this severity",
)
@click.option("--collection", default=None, metavar="NAME", help="Only issues for this collection")
@click.option("--rule", "rule_prefix", default=None, metavar="PREFIX", help='Rule id prefix, e.g. "security/"')
@handle_exceptions
def issues(database, key, file, limit, severity, collection, rule_prefix):
    """Scan, then print the matching issues as JSON.

    Meant for scripts and AI assistants: the output is always a single JSON
    object on stdout and the exit code does not depend on what was found.

    \b
    OUTPUT:
      {"issues": [...], "totalScanned": <documents>, "collectionsScanned": [<names>]}
      Issues are sorted errors -> warnings -> infos, then by collection.

    \b
    EXAMPLES:
      lintbase issues json --file ./export.json --severity error
      lintbase issues firestore --key ./sa.json --rule security/
      lintbase issues firestore --key ./sa.json --collection users
    """
    cfg = load_runtime_config()

    result = sample_database(database, key, file, limit)
    if collection and collection not in result.collections:
        raise ConnectorError(
            f'Collection "{collection}" not found.',
            hint=f"Available collections: {', '.join(result.collections) or '(none)'}",
        )

    report = analyze_scan(
        result,
        AnalysisOptions(limit=limit),
        ignore=cfg["scan"]["ignore"],
        parallel=cfg["scan"]["parallel"],
    )

    matched = sort_issues(
        filter_issues(report.issues, severity=severity, collection=collection, rule_prefix=rule_prefix)
    )
    payload = {
        "issues": [issue.to_dict() for issue in matched],
        "totalScanned": result.document_count,
        "collectionsScanned": list(result.collections),
    }
    click.echo(json.dumps(payload, indent=2))
