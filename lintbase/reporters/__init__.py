"""Report presentation."""

from lintbase.reporters.terminal import print_banner, print_issues, print_scan_results

__all__ = ["print_banner", "print_issues", "print_scan_results"]
