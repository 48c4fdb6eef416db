from __future__ import annotations
import logging
import os


def _level_from_env(default: int) -> int:
    raw = os.environ.get("LOG_LEVEL")
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def setup_console_logging(level: int = logging.INFO) -> None:
    """
    Call once at app start. LOG_LEVEL from the environment wins over `level`.
    """
    level = _level_from_env(level)
    root = logging.getLogger()
    if root.handlers:
        # already configured by uvicorn or pytest
        root.setLevel(level)
        return

    root.setLevel(level)
    h = logging.StreamHandler()
    h.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(h)
