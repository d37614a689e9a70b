"""Loguru setup shared by every LintBase module.

    from lintbase.utils.logging import logger
    logger.debug("sampled {n} document(s)", n=12)

Controlled by the environment:
    LINTBASE_LOG_LEVEL   DEBUG|INFO|WARNING|ERROR (default WARNING)
    LINTBASE_LOG_JSON    1 for one JSON object per line instead of text
    LINTBASE_LOG_FILE    also append JSON lines to this file
    LINTBASE_REQUEST_ID  correlation id stamped on every record

Console records always go to stderr; stdout belongs to `--json` reports.
"""

import json
import os
import sys
import uuid
from pathlib import Path

from loguru import logger

LEVEL = os.environ.get("LINTBASE_LOG_LEVEL", "WARNING").upper()
REQUEST_ID = os.environ.get("LINTBASE_REQUEST_ID") or uuid.uuid4().hex

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {name}:{function}:{line} {message}"

_SCALARS = (str, int, float, bool, type(None))


def record_to_json(record) -> str:
    """One log record as a compact JSON line (no trailing newline)."""
    payload = {
        "ts": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "msg": record["message"],
        "request_id": REQUEST_ID,
    }
    payload.update(
        {k: v if isinstance(v, _SCALARS) else repr(v) for k, v in record["extra"].items()}
    )
    exc = record["exception"]
    if exc is not None and exc.type is not None:
        payload["error"] = f"{exc.type.__name__}: {exc.value}"
    return json.dumps(payload, separators=(",", ":"))


def _json_to_stderr(message) -> None:
    # sinks must not log themselves
    print(record_to_json(message.record), file=sys.stderr, flush=True)


def _json_to_file(path: str):
    def sink(message) -> None:
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(record_to_json(message.record) + "\n")

    return sink


logger.remove()
if os.environ.get("LINTBASE_LOG_JSON") == "1":
    logger.add(_json_to_stderr, level=LEVEL, colorize=False)
else:
    logger.add(sys.stderr, level=LEVEL, format=CONSOLE_FORMAT)

if os.environ.get("LINTBASE_LOG_FILE"):
    logger.add(_json_to_file(os.environ["LINTBASE_LOG_FILE"]), level="DEBUG")


def configure_file_logging(log_dir: Path, level: str = "DEBUG") -> None:
    """Keep a rotating plain-text log under log_dir (lintbase.log)."""
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "lintbase.log",
        level=level,
        format=FILE_FORMAT,
        rotation="10 MB",
        retention="7 days",
        encoding="utf-8",
    )


__all__ = ["logger", "configure_file_logging", "record_to_json"]
