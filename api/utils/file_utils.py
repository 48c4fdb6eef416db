"""File handling utilities."""
from pathlib import Path

from fastapi import HTTPException


def safe_asset_path(base_dir: Path, asset_path: str) -> Path:
    """Resolve asset path safely (prevent path traversal)."""
    resolved = (base_dir / asset_path).resolve()
    if base_dir.resolve() not in resolved.parents:
        raise HTTPException(status_code=400, detail="Invalid asset path")
    return resolved
