"""Path utilities for uploads."""
from pathlib import Path

from exambuilder.config import UPLOADS_DIR


def uploads_dir() -> Path:
    """Get directory for transient uploads."""
    return UPLOADS_DIR
