"""Service for cleanup operations."""
import logging
import threading
import time

from exambuilder.config import UPLOAD_CLEANUP_INTERVAL_SECONDS, UPLOAD_RETENTION_HOURS
from exambuilder.utils.paths import uploads_dir

logger = logging.getLogger(__name__)


def cleanup_stale_uploads(now: float | None = None) -> int:
    """Remove upload files older than the retention period."""
    if UPLOAD_RETENTION_HOURS <= 0:
        return 0

    directory = uploads_dir()
    if not directory.exists():
        return 0

    cutoff = (now if now is not None else time.time()) - UPLOAD_RETENTION_HOURS * 60 * 60
    removed = 0
    for path in directory.iterdir():
        if not path.is_file():
            continue
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except OSError as e:
            logger.warning(f"Could not remove stale upload {path.name}: {e}")

    if removed > 0:
        logger.info(f"Cleaned up {removed} stale uploads")
    return removed


def schedule_uploads_cleanup() -> None:
    """Schedule periodic cleanup of leftover uploads."""

    def _worker() -> None:
        while True:
            try:
                cleanup_stale_uploads()
            except Exception:
                logger.exception("Uploads cleanup failed")
            time.sleep(UPLOAD_CLEANUP_INTERVAL_SECONDS)

    thread = threading.Thread(
        target=_worker,
        name="uploads_cleanup",
        daemon=True,
    )
    thread.start()
