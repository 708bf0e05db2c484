import os
from pathlib import Path
from typing import Union

from ingest.timestamps import format_rfc3339_nano, to_datetime

METRICS_DIR_NAME = "UserModelMetrics"


def iso_week_partition(created_at: int) -> str:
    """`<isoYear>-<isoWeek>`, e.g. 2024-12-31 -> "2025-1"."""
    iso_year, iso_week, _ = to_datetime(created_at).isocalendar()
    return f"{iso_year}-{iso_week}"


def derive_metrics_path(data_root: Union[str, os.PathLike], created_at: int) -> Path:
    """
    Where a record captured at `created_at` (ns since epoch) is stored:

        <data_root>/UserModelMetrics/<isoYear>-<isoWeek>/<RFC3339Nano>.json

    Pure; nothing is touched on disk.
    """
    return (
        Path(data_root)
        / METRICS_DIR_NAME
        / iso_week_partition(created_at)
        / f"{format_rfc3339_nano(created_at)}.json"
    )
