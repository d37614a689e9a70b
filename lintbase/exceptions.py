"""Exception taxonomy for LintBase.

The analysis core never raises: everything here originates in connectors,
configuration handling or the report persistence client.
"""


class LintBaseError(Exception):
    """Base class for expected, user-facing failures.

    Attributes:
        message: Human-readable error description
        hint: Optional remediation shown below the message
    """

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConnectorError(LintBaseError):
    """Raised when a data source cannot be reached, authenticated or read."""


class ConfigError(LintBaseError):
    """Raised when an option or configuration value is invalid."""


class ReportSaveError(LintBaseError):
    """Raised when a report cannot be pushed to the dashboard."""

    def __init__(self, message: str, status_code: int | None = None, hint: str | None = None):
        super().__init__(message, hint)
        self.status_code = status_code
