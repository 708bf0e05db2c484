import logging
import os
from pathlib import Path

from pydantic_core import PydanticSerializationError

from ingest.errors import PersistenceError
from models.metrics import UserModelMetrics

logger = logging.getLogger(__name__)

FILE_MODE = 0o644
DIR_MODE = 0o777    # narrowed by the process umask


def save_user_model_metrics(record: UserModelMetrics, out_path: Path) -> Path:
    """
    Write one record to `out_path` as compact JSON, creating parent
    directories as needed. An existing file at the same path is replaced.

    Blocking; the route runs it in a worker thread.
    """
    try:
        buffer = record.model_dump_json().encode("utf-8")
    except PydanticSerializationError as exc:
        logger.error("Failed to marshal user model metrics: %s", exc)
        raise PersistenceError(f"serialize: {exc}") from exc

    try:
        # exist_ok keeps concurrent writers into the same week directory safe
        out_path.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create directory for user model metrics %s: %s", out_path.parent, exc)
        raise PersistenceError(f"mkdir {out_path.parent}: {exc}") from exc

    try:
        fd = os.open(out_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(buffer)
    except OSError as exc:
        logger.error("Failed to write user model metrics to file %s: %s", out_path, exc)
        raise PersistenceError(f"write {out_path}: {exc}") from exc

    logger.info("Wrote user model metrics to file %s", out_path)
    return out_path
