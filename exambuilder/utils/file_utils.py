"""File handling utilities."""
import shutil
import time
from pathlib import Path

from fastapi import UploadFile

from exambuilder.config import UPLOAD_CHUNK_SIZE


def upload_file_name(filename: str | None) -> str:
    """Build a unique on-disk name: ``<epoch millis>-<basename>``."""
    safe_name = Path(filename or "upload.csv").name
    return f"{int(time.time() * 1000)}-{safe_name}"


def save_upload_file(upload: UploadFile, target_dir: Path) -> Path:
    """Copy an uploaded file into target directory chunk by chunk."""
    target_dir.mkdir(parents=True, exist_ok=True)
    candidate = target_dir / upload_file_name(upload.filename)
    with candidate.open("wb") as out:
        shutil.copyfileobj(upload.file, out, UPLOAD_CHUNK_SIZE)
    return candidate


def remove_file(path: Path) -> None:
    """Delete a file if it is still there."""
    path.unlink(missing_ok=True)
