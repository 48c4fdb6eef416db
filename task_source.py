from __future__ import annotations

import logging
import zipfile
from pathlib import Path

import requests
from openpyxl.utils.exceptions import InvalidFileException

from models import Task
from task_parser import parse_task_workbook

log = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http://", "https://")


class TaskSourceError(Exception):
    """The task workbook could not be fetched or decoded."""


def fetch_source(location: str | Path, timeout: float = 30) -> bytes:
    location = str(location)
    if location.startswith(REMOTE_SCHEMES):
        try:
            response = requests.get(location, timeout=timeout)
        except requests.RequestException as exc:
            raise TaskSourceError(f"Request failed: {exc}") from exc
        if not response.ok:
            raise TaskSourceError(f"HTTP {response.status_code}")
        return response.content

    path = Path(location)
    if not path.is_file():
        raise TaskSourceError(f"File not found: {path}")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise TaskSourceError(f"Cannot read {path}: {exc}") from exc


def load_tasks(location: str | Path, timeout: float = 30) -> list[Task]:
    log.info("Loading tasks from %s", location)
    data = fetch_source(location, timeout=timeout)
    try:
        return parse_task_workbook(data)
    except (
        zipfile.BadZipFile,
        InvalidFileException,
        SyntaxError,
        KeyError,
        IndexError,
        TypeError,
        ValueError,
        OSError,
    ) as exc:
        # SyntaxError covers the XML parse errors of truncated sheet parts
        raise TaskSourceError(f"Cannot decode workbook: {exc}") from exc
