"""Centralized paths for LintBase artifacts."""

from pathlib import Path

# Per-project working directory (config, logs)
LINTBASE_DIR = Path("./.lintbase")

CONFIG_FILE = LINTBASE_DIR / "config.json"
ERROR_LOG_FILE = LINTBASE_DIR / "error.log"
