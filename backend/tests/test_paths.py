"""
Tests for timestamp rendering and storage path derivation.
"""

from datetime import datetime, timezone
from pathlib import Path

from ingest.paths import derive_metrics_path, iso_week_partition
from ingest.timestamps import format_rfc3339_nano, to_datetime

SECOND = 10**9


def _ns(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp()) * SECOND


class TestFormatRfc3339Nano:
    def test_full_nanoseconds(self):
        assert format_rfc3339_nano(_ns(2024, 3, 5, 7, 8, 9) + 123_456_789) == "2024-03-05T07:08:09.123456789Z"

    def test_trailing_zeros_are_trimmed(self):
        assert format_rfc3339_nano(_ns(2024, 3, 5, 7, 8, 9) + 500_000_000) == "2024-03-05T07:08:09.5Z"

    def test_whole_second_has_no_fraction(self):
        assert format_rfc3339_nano(_ns(2024, 3, 5, 7, 8, 9)) == "2024-03-05T07:08:09Z"

    def test_single_nanosecond(self):
        assert format_rfc3339_nano(_ns(2024, 3, 5) + 1) == "2024-03-05T00:00:00.000000001Z"

    def test_to_datetime_is_utc(self):
        moment = to_datetime(_ns(2024, 3, 5, 7) + 1_500)
        assert moment.tzinfo == timezone.utc
        assert moment.microsecond == 1


class TestIsoWeekPartition:
    def test_new_year_eve_rolls_forward(self):
        # 2024-12-31 is a Tuesday in ISO week 1 of 2025
        assert iso_week_partition(_ns(2024, 12, 31, 10)) == "2025-1"

    def test_early_january_rolls_back(self):
        # 2021-01-01 is a Friday in ISO week 53 of 2020
        assert iso_week_partition(_ns(2021, 1, 1)) == "2020-53"

    def test_mid_year(self):
        assert iso_week_partition(_ns(2024, 6, 15)) == "2024-24"


class TestDeriveMetricsPath:
    def test_layout(self):
        path = derive_metrics_path("/srv/data", _ns(2024, 12, 31, 10) + 123_456_789)
        assert path == Path("/srv/data/UserModelMetrics/2025-1/2024-12-31T10:00:00.123456789Z.json")

    def test_accepts_path_root(self, tmp_path):
        path = derive_metrics_path(tmp_path, _ns(2024, 6, 15))
        assert path.parent.parent == tmp_path / "UserModelMetrics"
        assert path.suffix == ".json"

    def test_distinct_timestamps_give_distinct_paths(self):
        base = _ns(2024, 6, 15, 12)
        paths = {derive_metrics_path("data", base + offset) for offset in (0, 1, 10, 999, SECOND)}
        assert len(paths) == 5

    def test_no_io(self, tmp_path):
        derive_metrics_path(tmp_path / "missing", _ns(2024, 6, 15))
        assert not (tmp_path / "missing").exists()
