"""Centralized exit codes for the LintBase CLI."""


class ExitCodes:
    """Standard exit codes for LintBase CLI commands."""

    SUCCESS = 0

    ERRORS_FOUND = 1

    SCAN_FAILED = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """One-line meaning of a LintBase exit code."""
        descriptions = {
            cls.SUCCESS: "Success - no error-severity issues found",
            cls.ERRORS_FOUND: "Report contains error-severity issues",
            cls.SCAN_FAILED: "Scan could not complete (connector or configuration failure)",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")

    @classmethod
    def should_fail_pipeline(cls, code: int) -> bool:
        """True for any code a CI gate should treat as a failed step."""
        return code != cls.SUCCESS
