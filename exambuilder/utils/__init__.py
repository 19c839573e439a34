"""Utility modules."""
from exambuilder.utils.file_utils import remove_file, save_upload_file, upload_file_name
from exambuilder.utils.paths import uploads_dir
from exambuilder.utils.time_utils import parse_iso_timestamp, to_iso, utc_now

__all__ = [
    "remove_file",
    "save_upload_file",
    "upload_file_name",
    "uploads_dir",
    "parse_iso_timestamp",
    "to_iso",
    "utc_now",
]
