"""
Tests for the processing layer.

Covers reducers, normalization, day bucketing, directional statistics and
time-of-day windows.
"""

import pytest  # type: ignore

from src.weather_digest.models import DayBucket, HourlyRecord, TimeWindow
from src.weather_digest.processing import (
    DayBucketer,
    SeriesNormalizer,
    WindowExtractor,
    average,
    circular_mean,
    circular_spread,
    daily_keys,
    degree_to_compass,
    first_finite,
    forecast_blocks,
    maximum,
    minimum,
    pick_first,
    total,
)
from src.weather_digest.processing.normalizer import OPEN_METEO_HOURLY_FIELDS


def angular_distance(a, b):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


@pytest.mark.unit
class TestReducers:
    """Test statistical reducers."""

    def test_empty_input(self):
        assert average([]) is None
        assert minimum([]) is None
        assert maximum([]) is None
        assert total([]) == 0.0

    def test_non_finite_values_are_ignored(self):
        values = [1.0, None, float("nan"), float("inf"), "7", True, 3.0]
        assert average(values) == pytest.approx(2.0)
        assert minimum(values) == 1.0
        assert maximum(values) == 3.0
        assert total(values) == pytest.approx(4.0)

    def test_only_non_finite_values(self):
        assert average([None, float("nan")]) is None
        assert total([None, float("-inf")]) == 0.0

    def test_first_finite(self):
        assert first_finite(None, float("nan"), 4, 5) == 4.0
        assert first_finite(None, None) is None


@pytest.mark.unit
class TestSeriesNormalizer:
    """Test zipping of parallel arrays."""

    @pytest.fixture
    def normalizer(self):
        return SeriesNormalizer()

    def test_zip_block_tolerates_short_arrays(self, normalizer):
        block = {
            "time": ["2024-05-10T00:00", "2024-05-10T01:00", "2024-05-10T02:00"],
            "temperature_2m": [10.0, 11.0],
        }
        records = normalizer.zip_block(block, {"air_temp": ("temperature_2m",)})

        assert len(records) == 3
        assert [r.get("air_temp") for r in records] == [10.0, 11.0, None]

    def test_zip_block_uses_priority_list(self, normalizer):
        block = {
            "time": ["2024-05-10T00:00", "2024-05-10T01:00"],
            "relativehumidity_2m": [50, 51],
            "relative_humidity_2m": [None, 70],
        }
        records = normalizer.zip_block(block, OPEN_METEO_HOURLY_FIELDS)

        assert records[0].get("humidity") == 50.0
        assert records[1].get("humidity") == 70.0

    def test_zip_block_missing_block(self, normalizer):
        assert normalizer.zip_block(None, OPEN_METEO_HOURLY_FIELDS) == []
        assert normalizer.zip_block({"time": []}, OPEN_METEO_HOURLY_FIELDS) == []

    def test_pick_first(self):
        assert pick_first({"a": None, "b": 2}, ("a", "b")) == 2.0
        assert pick_first({}, ("a",)) is None

    def test_zip_met_no(self, normalizer, met_no_payload):
        records = normalizer.zip_met_no(met_no_payload)

        assert len(records) == 6
        assert records[0].get("air_temp") == 8.4
        assert records[0].get("wind_direction") == 350.0
        assert records[2].get("wind_direction") is None

    def test_forecast_blocks_requires_both_time_axes(self, gardening_payload):
        assert forecast_blocks(gardening_payload) is not None
        assert forecast_blocks(None) is None
        assert forecast_blocks({"hourly": {"time": ["2024-05-10T00:00"]}, "daily": {"time": []}}) is None

    def test_daily_keys_skip_malformed_dates(self):
        daily = {"time": ["2024-05-10", "garbage", "2024-05-12", "2024-05-13"]}
        assert daily_keys(daily, horizon=3) == [(0, "2024-05-10"), (2, "2024-05-12")]


@pytest.mark.unit
class TestDayBucketer:
    """Test grouping samples into calendar days."""

    def test_bucket_by_day_sorted(self):
        records = [
            HourlyRecord("2024-05-11T03:00", {"air_temp": 5.0}),
            HourlyRecord("2024-05-10T23:00", {"air_temp": 7.0}),
            HourlyRecord("2024-05-10T01:00", {"air_temp": 9.0}),
        ]
        buckets = DayBucketer().bucket(records)

        assert list(buckets) == ["2024-05-10", "2024-05-11"]
        assert sorted(buckets["2024-05-10"].values("air_temp")) == [7.0, 9.0]

    def test_order_independent(self):
        records = [
            HourlyRecord("2024-05-10T01:00", {"air_temp": 1.0}),
            HourlyRecord("2024-05-10T02:00", {"air_temp": 2.0}),
            HourlyRecord("2024-05-11T01:00", {"air_temp": 3.0}),
        ]
        forward = DayBucketer().bucket(records)
        backward = DayBucketer().bucket(list(reversed(records)))

        assert list(forward) == list(backward)
        for key in forward:
            assert sorted(forward[key].values("air_temp")) == sorted(backward[key].values("air_temp"))

    def test_malformed_timestamps_dropped(self):
        records = [
            HourlyRecord("2024-05", {"air_temp": 1.0}),
            HourlyRecord(None, {"air_temp": 2.0}),
            HourlyRecord("2024-13-40T00:00", {"air_temp": 3.0}),
            HourlyRecord("2024-05-10T00:00", {"air_temp": 4.0}),
        ]
        buckets = DayBucketer().bucket(records)

        assert list(buckets) == ["2024-05-10"]
        assert buckets["2024-05-10"].values("air_temp") == [4.0]

    def test_non_finite_values_excluded_but_day_kept(self):
        records = [HourlyRecord("2024-05-10T00:00", {"air_temp": float("nan")})]
        buckets = DayBucketer().bucket(records)

        assert "2024-05-10" in buckets
        assert buckets["2024-05-10"].values("air_temp") == []
        assert average(buckets["2024-05-10"].values("air_temp")) is None

    def test_horizon_keeps_first_days(self):
        records = [HourlyRecord(f"2024-05-{day:02d}T12:00", {"air_temp": 1.0}) for day in range(1, 10)]
        buckets = DayBucketer().bucket(records, horizon=7)

        assert len(buckets) == 7
        assert list(buckets)[-1] == "2024-05-07"

    def test_offset_timestamps_converted_to_local_day(self):
        bucketer = DayBucketer(timezone="Europe/Riga")
        buckets = bucketer.bucket([HourlyRecord("2024-05-10T21:30:00Z", {"air_temp": 1.0})])

        assert list(buckets) == ["2024-05-11"]
        assert buckets["2024-05-11"].values_between("air_temp", 30, 30) == [1.0]

    def test_naive_timestamps_are_local(self):
        bucketer = DayBucketer(timezone="Europe/Riga")
        buckets = bucketer.bucket([HourlyRecord("2024-05-10T23:00", {"air_temp": 1.0})])

        assert list(buckets) == ["2024-05-10"]


@pytest.mark.unit
class TestDirectional:
    """Test circular statistics."""

    def test_mean_across_north(self):
        mean = circular_mean([350, 10])
        assert angular_distance(mean, 0.0) < 1e-6

    def test_mean_is_not_arithmetic(self):
        mean = circular_mean([350, 10])
        assert angular_distance(mean, 180.0) > 170

    def test_mean_single_and_empty(self):
        assert circular_mean([90]) == pytest.approx(90.0)
        assert circular_mean([]) is None
        assert circular_mean([None, float("nan")]) is None

    def test_mean_range(self):
        mean = circular_mean([200, 250, 300])
        assert 0 <= mean < 360
        assert mean == pytest.approx(250.0)

    def test_opposite_vectors_cancel(self):
        assert circular_mean([0, 180]) is None

    def test_spread(self):
        assert circular_spread([45]) == 0.0
        assert circular_spread([]) is None
        assert circular_spread([0, 10]) < circular_spread([0, 90])

    @pytest.mark.parametrize("angle,label", [
        (0, "N"), (359, "N"), (360, "N"), (11.2, "N"), (11.3, "NNE"),
        (90, "E"), (180, "S"), (225, "SW"), (270, "W"), (-90, "W"), (337.5, "NNW"),
    ])
    def test_compass(self, angle, label):
        assert degree_to_compass(angle) == label

    def test_compass_missing(self):
        assert degree_to_compass(None) is None


@pytest.mark.unit
class TestWindowExtractor:
    """Test golden hour and night windows."""

    @pytest.fixture
    def extractor(self):
        return WindowExtractor()

    def test_morning_window(self, extractor):
        assert extractor.morning_window(270) == TimeWindow(270, 330)
        assert extractor.morning_window(1420) == TimeWindow(1420, 1439)
        assert not extractor.morning_window(None).is_bounded

    def test_evening_window(self, extractor):
        assert extractor.evening_window(1290) == TimeWindow(1230, 1290)
        assert extractor.evening_window(30) == TimeWindow(0, 30)

    def test_window_average_inclusive_bounds(self, extractor):
        bucket = DayBucket("2024-06-15")
        for minute, value in [(240, 100.0), (270, 10.0), (300, 20.0), (330, 30.0), (360, 100.0)]:
            bucket.add("cloud", minute, value)

        assert extractor.window_average(bucket, "cloud", TimeWindow(270, 330)) == pytest.approx(20.0)

    def test_window_average_unknown_start(self, extractor):
        bucket = DayBucket("2024-06-15")
        bucket.add("cloud", 0, 50.0)
        assert extractor.window_average(bucket, "cloud", TimeWindow(None, None)) is None

    def test_window_average_no_samples(self, extractor):
        bucket = DayBucket("2024-06-15")
        bucket.add("cloud", 600, 50.0)
        assert extractor.window_average(bucket, "cloud", TimeWindow(270, 330)) is None

    def test_night_stitches_next_day(self, extractor):
        today = DayBucket("2024-06-15")
        today.add("cloud", 1380, 10.0)
        today.add("cloud", 600, 90.0)
        tomorrow = DayBucket("2024-06-16")
        tomorrow.add("cloud", 30, 30.0)
        tomorrow.add("cloud", 1380, 90.0)

        assert extractor.night_average(today, tomorrow, "cloud") == pytest.approx(20.0)
        assert today.values("cloud") == [10.0, 90.0]

    def test_night_without_next_day(self, extractor):
        today = DayBucket("2024-06-15")
        today.add("cloud", 1380, 10.0)

        assert extractor.night_average(today, None, "cloud") == pytest.approx(10.0)
        assert extractor.night_average(None, None, "cloud") is None
