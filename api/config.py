"""Application configuration and constants."""
import os
import sys
from pathlib import Path


def _resource_path(relative: str) -> Path:
    """Get path to resource, works for PyInstaller bundles."""
    if getattr(sys, "frozen", False):
        base_dir = Path(sys._MEIPASS)
    else:
        base_dir = Path(__file__).resolve().parent.parent
    return base_dir / relative


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Task source: local path or http(s) URL of the task workbook
TASKS_SOURCE = os.environ.get(
    "TASKS_SOURCE", str(Path.cwd() / "data" / "Question.xlsx")
)
SOURCE_TIMEOUT_SECONDS = _parse_int_env("SOURCE_TIMEOUT_SECONDS", 30)

# Directories
IMAGES_DIR = Path(os.environ.get("IMAGES_DIR", Path.cwd() / "data" / "images"))
STATIC_DIR = _resource_path("static")

# Sessions
SESSION_RETENTION_MINUTES = _parse_int_env("SESSION_RETENTION_MINUTES", 12 * 60)
SESSION_CLEANUP_INTERVAL_SECONDS = _parse_int_env(
    "SESSION_CLEANUP_INTERVAL_SECONDS", 10 * 60
)
