"""Utility modules."""
from api.utils.file_utils import safe_asset_path
from api.utils.json_utils import json_dump
from api.utils.time_utils import utc_now
from api.utils.validation import validate_id

__all__ = [
    "safe_asset_path",
    "json_dump",
    "utc_now",
    "validate_id",
]
