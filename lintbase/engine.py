"""Run the analyzer catalog and assemble the final report."""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from lintbase.analyzers import ANALYZERS
from lintbase.core.aggregate import AnalysisOptions
from lintbase.core.models import Issue, Report, ReportSummary, ScanResult
from lintbase.utils.finding_priority import count_by_severity
from lintbase.utils.logging import logger

ERROR_WEIGHT = 12
WARNING_WEIGHT = 4
INFO_WEIGHT = 1
MAX_RISK_SCORE = 100


def compute_risk_score(errors: int, warnings: int, infos: int) -> int:
    """Weighted severity count, capped at 100."""
    return min(
        MAX_RISK_SCORE,
        errors * ERROR_WEIGHT + warnings * WARNING_WEIGHT + infos * INFO_WEIGHT,
    )


def risk_label(score: int) -> str:
    if score >= 75:
        return "CRITICAL"
    if score >= 50:
        return "HIGH"
    if score >= 25:
        return "MEDIUM"
    return "LOW"


def run_analyzers(
    result: ScanResult, options: AnalysisOptions, parallel: bool = False
) -> list[Issue]:
    """Run all analyzers and concatenate their issues in catalog order.

    Analyzers share no state, so parallel execution only changes wall time;
    results are always joined in catalog order.
    """
    if parallel:
        with ThreadPoolExecutor(max_workers=len(ANALYZERS)) as executor:
            futures = [executor.submit(fn, result, options) for _, fn in ANALYZERS]
            per_analyzer = [future.result() for future in futures]
    else:
        per_analyzer = [fn(result, options) for _, fn in ANALYZERS]

    issues: list[Issue] = []
    for (kind, _), found in zip(ANALYZERS, per_analyzer):
        logger.debug("{kind} analyzer: {n} issue(s)", kind=kind.value, n=len(found))
        issues.extend(found)
    return issues


def build_report(
    result: ScanResult, issues: Iterable[Issue], ignore: Iterable[str] = ()
) -> Report:
    """Drop ignored rules, count severities and score the scan."""
    ignored = set(ignore)
    kept = tuple(issue for issue in issues if issue.rule not in ignored)
    counts = count_by_severity(kept)

    summary = ReportSummary(
        total_collections=len(result.collections),
        total_documents=result.document_count,
        errors=counts["error"],
        warnings=counts["warning"],
        infos=counts["info"],
        risk_score=compute_risk_score(counts["error"], counts["warning"], counts["info"]),
    )
    return Report(summary=summary, issues=kept, scanned_at=result.scanned_at)


def analyze_scan(
    result: ScanResult,
    options: AnalysisOptions,
    ignore: Iterable[str] = (),
    parallel: bool = False,
) -> Report:
    """Convenience pipeline: analyzers -> ignore filter -> scored report."""
    return build_report(result, run_analyzers(result, options, parallel=parallel), ignore)
