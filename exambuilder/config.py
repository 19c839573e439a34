"""Application configuration and constants."""
import os
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Uploads
UPLOADS_DIR = Path(os.environ.get("UPLOADS_DIR", Path.cwd() / "uploads"))

CSV_CONTENT_TYPES = {"text/csv"}
CSV_EXTENSION = ".csv"
UPLOAD_CHUNK_SIZE = 64 * 1024
UPLOAD_RETENTION_HOURS = _parse_int_env("UPLOAD_RETENTION_HOURS", 24)
UPLOAD_CLEANUP_INTERVAL_SECONDS = _parse_int_env(
    "UPLOAD_CLEANUP_INTERVAL_SECONDS", 60 * 60
)

# Database
DB_DIR = Path(os.environ.get("DB_DIR", Path.cwd() / "data"))
DATABASE_URL = os.environ.get(
    "DATABASE_URL", f"sqlite:///{DB_DIR / 'exambuilder.db'}"
)

# Authentication
SECRET_KEY = os.environ.get(
    "SECRET_KEY",
    "CHANGE_ME_IN_PRODUCTION_USE_openssl_rand_hex_32"
)
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = _parse_int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 24 * 60)

# Question labels, in display order
OPTION_LABELS = ("A", "B", "C", "D")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
