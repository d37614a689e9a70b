"""LintBase utilities package."""

from .constants import CONFIG_FILE, ERROR_LOG_FILE, LINTBASE_DIR
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "LINTBASE_DIR",
    "CONFIG_FILE",
    "ERROR_LOG_FILE",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
