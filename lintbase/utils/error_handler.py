"""Centralized error handler for LintBase commands."""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from lintbase.exceptions import LintBaseError
from lintbase.utils.logging import logger

from .constants import ERROR_LOG_FILE, LINTBASE_DIR
from .exit_codes import ExitCodes


class ScanFailed(click.ClickException):
    """Click-level failure raised before any report exists."""

    exit_code = ExitCodes.SCAN_FAILED


def _write_error_log(func_name: str, error: Exception) -> None:
    LINTBASE_DIR.mkdir(parents=True, exist_ok=True)
    with open(ERROR_LOG_FILE, "a", encoding="utf-8") as f:
        f.write("\n" + "=" * 80 + "\n")
        f.write(f"[{datetime.now().isoformat()}] Error in command: {func_name}\n")
        f.write("=" * 80 + "\n")
        f.write(f"{type(error).__name__}: {error}\n\n")
        f.write(traceback.format_exc())
        f.write("=" * 80 + "\n\n")


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that turns failures into click errors with detailed logging.

    Expected failures (LintBaseError) become a short message plus hint.
    Anything else is logged with its traceback to the error log file.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.exceptions.Exit:
            raise
        except click.ClickException:
            raise
        except LintBaseError as e:
            logger.debug("Command '{cmd}' failed: {err}", cmd=func.__name__, err=e.message)
            user_message = e.message if not e.hint else f"{e.message}\n  -> {e.hint}"
            raise ScanFailed(user_message) from e
        except Exception as e:
            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=str(e),
            )
            _write_error_log(func.__name__, e)

            user_message = (
                f"{type(e).__name__}: {e}\n\n"
                f"Full traceback logged to: {ERROR_LOG_FILE}"
            )
            raise ScanFailed(user_message) from e

    return wrapper
