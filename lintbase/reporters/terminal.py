"""Rich terminal rendering for scan results and reports."""

from rich import box
from rich.markup import escape
from rich.table import Table

from lintbase import __version__
from lintbase.core.aggregate import group_by_collection
from lintbase.core.models import Issue, Report, ScanResult
from lintbase.engine import risk_label
from lintbase.ui import console
from lintbase.utils.finding_priority import normalize_severity, sort_issues

RISK_BAR_WIDTH = 20

SEVERITY_SECTIONS = (
    ("error", "ERRORS", "error", "x"),
    ("warning", "WARNINGS", "warning", "!"),
    ("info", "INFOS", "info", "i"),
)


def print_banner() -> None:
    console.print()
    console.print(f"  [brand]LINTBASE[/brand] [dim]v{__version__}[/dim]", highlight=False)
    console.print("  [dim]Linter for document databases[/dim]")
    console.print()


def depth_style(depth: int) -> str:
    if depth >= 5:
        return "red"
    if depth >= 3:
        return "yellow"
    return "green"


def print_scan_results(result: ScanResult) -> None:
    """Table of sampled collections followed by a one-line scan summary."""
    table = Table(box=box.ASCII, header_style="brand")
    table.add_column("Collection", style="collection", min_width=24)
    table.add_column("Docs sampled", justify="right")
    table.add_column("Avg size (bytes)", justify="right", style="dim")
    table.add_column("Max depth", justify="right")

    for name, stats in group_by_collection(result).items():
        style = depth_style(stats.max_depth)
        table.add_row(
            escape(name),
            str(stats.count),
            str(stats.avg_bytes),
            f"[{style}]{stats.max_depth}[/{style}]",
        )

    console.print("  [brand]Collections discovered[/brand]")
    console.print(table)
    console.print(
        f"  [success]Scan complete[/success] [dim]-[/dim] {len(result.collections)} collections "
        f"[dim]-[/dim] {result.document_count} documents sampled "
        f"[dim]- {result.scanned_at.isoformat(timespec='seconds')}[/dim]",
        highlight=False,
    )
    console.print()


def render_risk_bar(score: int) -> str:
    filled = round(score / (100 / RISK_BAR_WIDTH))
    style = risk_label(score).lower()
    return f"[{style}]{'#' * filled}[/{style}][dim]{'-' * (RISK_BAR_WIDTH - filled)}[/dim]"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def print_issue(issue: Issue, icon: str, style: str, max_affected_shown: int = 3) -> None:
    collection = escape(f"{issue.collection:<24}")
    console.print(
        f"  [{style}]{icon}[/{style}]  [collection]{collection}[/collection] "
        f"[dim]>[/dim] [rule_id]{escape(issue.rule)}[/rule_id]",
        highlight=False,
    )
    console.print(f"     {issue.message}", highlight=False, markup=False)

    if issue.affected_documents:
        shown = issue.affected_documents[:max_affected_shown]
        more = len(issue.affected_documents) - len(shown)
        affected = ", ".join(f'"{d}"' for d in shown)
        suffix = f" + {more} more" if more > 0 else ""
        console.print(f"     Affected: {affected}{suffix}", style="dim", highlight=False, markup=False)

    if issue.suggestion:
        console.print(f"     -> {issue.suggestion}", style="dim", highlight=False, markup=False)
    console.print()


def print_issues(report: Report, max_affected_shown: int = 3, max_issues_shown: int = 200) -> None:
    """Risk score, severity counts and issues grouped by severity."""
    summary = report.summary

    console.print()
    console.print("  [brand]Analysis Results[/brand]")
    console.print()
    label = risk_label(summary.risk_score)
    console.print(
        f"  Risk Score  {render_risk_bar(summary.risk_score)}  "
        f"[{label.lower()}]{summary.risk_score}/100  {label}[/{label.lower()}]",
        highlight=False,
    )
    console.print()
    console.print(
        f"  [error]{_plural(summary.errors, 'error')}[/error]   "
        f"[warning]{_plural(summary.warnings, 'warning')}[/warning]   "
        f"[info]{_plural(summary.infos, 'info')}[/info]",
        highlight=False,
    )
    console.print()

    if not report.issues:
        console.print("  [success]No issues found. Your database looks great![/success]")
        console.print()
        return

    ordered = sort_issues(report.issues)
    shown = 0
    for severity, title, style, icon in SEVERITY_SECTIONS:
        if shown >= max_issues_shown:
            break
        group = [i for i in ordered if normalize_severity(i.severity) == severity]
        if not group:
            continue

        console.print(f"  [{style}]{title}[/{style}]")
        console.print("  " + "-" * 68, style="dim")
        console.print()
        for issue in group[: max_issues_shown - shown]:
            print_issue(issue, icon, style, max_affected_shown)
            shown += 1

    hidden = len(report.issues) - shown
    if hidden > 0:
        console.print(f"  [dim]... {hidden} more issue(s) not shown (use --json for the full list)[/dim]")
        console.print()
