"""
Tests for the rule-based classifiers and astronomical geometry.
"""

from datetime import date
from unittest.mock import Mock

import pytest  # type: ignore

from src.weather_digest.algorithms import (
    AstronomyCalculator,
    EnergyCoefficients,
    EnergyScorer,
    classify_cloud,
    classify_pollen,
    classify_pressure_trend,
    classify_transparency,
    classify_uv,
    cover_alert,
    evaluate_planting,
    evaluate_watering,
    milky_way_chance,
    moon_phase_name,
)
from src.weather_digest.models import (
    CloudCondition,
    EnergyLevel,
    GardeningDaySummary,
    MilkyWayChance,
    MoonPhaseName,
    PlantingStatus,
    PollenLevel,
    PressureTendency,
    Transparency,
    UVLevel,
    WateringStatus,
)


def summary(**kwargs):
    return GardeningDaySummary(date="2024-05-10", **kwargs)


@pytest.mark.unit
class TestPlanting:
    """Test planting suitability rules."""

    @pytest.mark.parametrize("temp,moisture,precip,prob,expected", [
        (7.0, 0.5, None, None, PlantingStatus.TOO_COLD),
        (9.0, 0.26, None, None, PlantingStatus.COLD),
        (28.0, 0.26, None, None, PlantingStatus.TOO_HOT),
        (15.0, 0.10, None, None, PlantingStatus.TOO_DRY),
        (15.0, 0.45, None, None, PlantingStatus.TOO_WET),
        (15.0, 0.26, 5.0, 80.0, PlantingStatus.RAINY),
        (15.0, 0.26, 9.0, 0.0, PlantingStatus.RAINY),
        (15.0, 0.26, 5.0, 50.0, PlantingStatus.OK),
        (15.0, 0.26, 1.0, 20.0, PlantingStatus.IDEAL),
        (15.0, 0.17, 0.0, 0.0, PlantingStatus.OK),
        (24.0, 0.26, 0.0, 0.0, PlantingStatus.OK),
        (26.0, 0.26, 0.0, 0.0, PlantingStatus.WATCH),
    ])
    def test_rules(self, temp, moisture, precip, prob, expected):
        verdict = evaluate_planting(summary(
            soil_temp_avg=temp, soil_moist_avg=moisture, precip_sum=precip, precip_probability=prob
        ))
        assert verdict.status == expected
        assert verdict.reason

    def test_missing_moisture_and_precipitation_can_be_ideal(self):
        verdict = evaluate_planting(summary(soil_temp_avg=15.0))
        assert verdict.status == PlantingStatus.IDEAL

    def test_unknown_without_soil_temperature(self):
        verdict = evaluate_planting(summary(soil_moist_avg=0.26, precip_sum=0.0))
        assert verdict.status == PlantingStatus.UNKNOWN


@pytest.mark.unit
class TestWatering:
    """Test watering rules."""

    @pytest.mark.parametrize("moisture,precip,expected", [
        (None, 0.0, WateringStatus.UNKNOWN),
        (0.15, 1.0, WateringStatus.NEEDS),
        (0.15, None, WateringStatus.NEEDS),
        (0.15, 3.0, WateringStatus.LIGHT),
        (0.20, 1.0, WateringStatus.LIGHT),
        (0.40, 0.0, WateringStatus.SKIP),
        (0.30, 6.0, WateringStatus.SKIP),
        (0.30, 0.0, WateringStatus.MONITOR),
        (0.15, 4.5, WateringStatus.MONITOR),
    ])
    def test_rules(self, moisture, precip, expected):
        verdict = evaluate_watering(summary(soil_moist_avg=moisture, precip_sum=precip))
        assert verdict.status == expected


@pytest.mark.unit
class TestCoverAlert:
    """Test frost cover alert."""

    def test_cold_air(self):
        assert cover_alert(summary(air_temp_min=2.9, soil_temp_min=10.0))

    def test_cold_soil(self):
        assert cover_alert(summary(air_temp_min=8.0, soil_temp_min=4.9))

    def test_thresholds_are_exclusive(self):
        assert not cover_alert(summary(air_temp_min=3.0, soil_temp_min=5.0))

    def test_missing_data(self):
        assert not cover_alert(summary())


@pytest.mark.unit
class TestEnergyScorer:
    """Test the biometeorological energy score."""

    @pytest.fixture
    def scorer(self):
        return EnergyScorer()

    def test_comfortable_day(self, scorer):
        verdict = scorer.evaluate(20.0, 55.0, 1016.0)
        assert verdict.score == pytest.approx(65.0)
        assert verdict.level == EnergyLevel.STEADY
        assert verdict.gauge == 7

    def test_penalties(self, scorer):
        assert scorer.score(20.0, 80.0, 1016.0) == pytest.approx(59.0)
        assert scorer.score(20.0, 30.0, 1016.0) == pytest.approx(61.0)
        assert scorer.score(20.0, 55.0, 1006.0) == pytest.approx(63.5)
        assert scorer.score(20.0, 55.0, 1016.0, pressure_trend=20.0) == pytest.approx(53.0)
        assert scorer.score(20.0, 55.0, 1016.0, pressure_trend=-2.0) == pytest.approx(62.0)
        assert scorer.score(20.0, 55.0, 1016.0, uv_index=8.0) == pytest.approx(60.0)
        assert scorer.score(20.0, 55.0, 1016.0, uv_index=7.0) == pytest.approx(65.0)

    def test_clamped(self, scorer):
        verdict = scorer.evaluate(80.0, 100.0, 950.0, 30.0, 11.0)
        assert verdict.score == 0.0
        assert verdict.gauge == 0
        assert verdict.level == EnergyLevel.EXHAUSTED

    def test_monotonic_in_apparent_temperature(self, scorer):
        scores = [scorer.score(20.0 + delta, 55.0, 1016.0) for delta in range(0, 30, 3)]
        assert scores == sorted(scores, reverse=True)

    def test_partial_inputs(self, scorer):
        verdict = scorer.evaluate(None, None, 1016.0)
        assert verdict.score == pytest.approx(65.0)

    def test_unknown_when_all_inputs_missing(self, scorer):
        verdict = scorer.evaluate(None, None, None, pressure_trend=3.0, uv_index=9.0)
        assert verdict.level == EnergyLevel.UNKNOWN
        assert verdict.score is None
        assert verdict.gauge is None

    def test_labels(self):
        scorer = EnergyScorer(EnergyCoefficients.from_overrides({"baseline": 70}))
        assert scorer.evaluate(20.0, 55.0, 1016.0).level == EnergyLevel.ENERGETIC
        assert scorer.label(54.9) == EnergyLevel.DROWSY
        assert scorer.label(39.9) == EnergyLevel.EXHAUSTED

    def test_overrides(self):
        coefficients = EnergyCoefficients.from_overrides({"temp_weight": "2", "label_thresholds": [80, 60, 30]})
        assert coefficients.temp_weight == 2.0
        assert coefficients.label_thresholds == (80.0, 60.0, 30.0)
        assert coefficients.baseline == 65.0

    def test_invalid_overrides(self):
        with pytest.raises(ValueError):
            EnergyCoefficients.from_overrides({"unknown": 1})
        with pytest.raises(ValueError):
            EnergyCoefficients.from_overrides({"baseline": "high"})
        with pytest.raises(ValueError):
            EnergyCoefficients.from_overrides({"label_thresholds": [1, 2]})


@pytest.mark.unit
class TestBioClassifiers:
    """Test UV, pressure tendency and pollen levels."""

    @pytest.mark.parametrize("uv,expected", [
        (None, UVLevel.UNKNOWN), (0.0, UVLevel.LOW), (2.99, UVLevel.LOW), (3.0, UVLevel.MODERATE),
        (6.0, UVLevel.HIGH), (7.9, UVLevel.HIGH), (8.0, UVLevel.VERY_HIGH),
    ])
    def test_uv(self, uv, expected):
        assert classify_uv(uv) == expected

    @pytest.mark.parametrize("trend,expected", [
        (None, PressureTendency.UNKNOWN), (4.1, PressureTendency.RISING), (4.0, PressureTendency.STABLE),
        (-4.0, PressureTendency.STABLE), (-4.1, PressureTendency.FALLING), (0.0, PressureTendency.STABLE),
    ])
    def test_pressure_trend(self, trend, expected):
        assert classify_pressure_trend(trend) == expected

    @pytest.mark.parametrize("value,expected", [
        (None, PollenLevel.UNKNOWN), (0.0, PollenLevel.NONE), (-1.0, PollenLevel.NONE),
        (19.9, PollenLevel.LOW), (20.0, PollenLevel.MODERATE), (60.0, PollenLevel.HIGH),
    ])
    def test_pollen(self, value, expected):
        assert classify_pollen(value) == expected


@pytest.mark.unit
class TestPhotographyClassifiers:
    """Test sky condition rules."""

    @pytest.mark.parametrize("cloud,expected", [
        (None, CloudCondition.UNKNOWN), (0.0, CloudCondition.CLEAR), (15.4, CloudCondition.CLEAR),
        (15.5, CloudCondition.HAZY), (40.0, CloudCondition.HAZY), (70.0, CloudCondition.PARTLY_CLOUDY),
        (90.0, CloudCondition.CLOUDY), (90.5, CloudCondition.OVERCAST), (100.0, CloudCondition.OVERCAST),
    ])
    def test_cloud(self, cloud, expected):
        assert classify_cloud(cloud) == expected

    @pytest.mark.parametrize("aod,expected", [
        (None, Transparency.UNKNOWN), (0.05, Transparency.CRYSTAL), (0.08, Transparency.SLIGHT_HAZE),
        (0.2, Transparency.HAZE), (0.25, Transparency.DENSE_HAZE),
    ])
    def test_transparency(self, aod, expected):
        assert classify_transparency(aod) == expected

    @pytest.mark.parametrize("phase,expected", [
        (None, MoonPhaseName.UNKNOWN), (0.0, MoonPhaseName.NEW_MOON), (0.1, MoonPhaseName.WAXING_CRESCENT),
        (0.25, MoonPhaseName.FIRST_QUARTER), (0.3, MoonPhaseName.WAXING_GIBBOUS),
        (0.5, MoonPhaseName.FULL_MOON), (0.6, MoonPhaseName.WANING_GIBBOUS),
        (0.75, MoonPhaseName.LAST_QUARTER), (0.9, MoonPhaseName.WANING_CRESCENT),
        (0.97, MoonPhaseName.NEW_MOON),
    ])
    def test_moon_phase_name(self, phase, expected):
        assert moon_phase_name(phase) == expected

    @pytest.mark.parametrize("illumination,cloud,aod,expected", [
        (0.1, 20.0, 0.1, MilkyWayChance.EXCELLENT),
        (0.1, None, 0.1, MilkyWayChance.POSSIBLE),
        (0.1, 20.0, None, MilkyWayChance.POSSIBLE),
        (0.1, 60.0, 0.1, MilkyWayChance.POSSIBLE),
        (0.3, 0.0, 0.05, MilkyWayChance.POSSIBLE),
        (0.5, 0.0, 0.05, MilkyWayChance.MOONLIT),
        (None, 0.0, 0.05, MilkyWayChance.UNKNOWN),
    ])
    def test_milky_way(self, illumination, cloud, aod, expected):
        assert milky_way_chance(illumination, cloud, aod) == expected


@pytest.mark.unit
class TestAllMissing:
    """Every classifier degrades to unknown on an all-empty day."""

    def test_unknown_everywhere(self):
        empty = summary()
        assert evaluate_planting(empty).status == PlantingStatus.UNKNOWN
        assert evaluate_watering(empty).status == WateringStatus.UNKNOWN
        assert cover_alert(empty) is False
        assert EnergyScorer().evaluate(None, None, None).level == EnergyLevel.UNKNOWN
        assert classify_uv(None) == UVLevel.UNKNOWN
        assert classify_pressure_trend(None) == PressureTendency.UNKNOWN
        assert classify_pollen(None) == PollenLevel.UNKNOWN
        assert classify_cloud(None) == CloudCondition.UNKNOWN
        assert classify_transparency(None) == Transparency.UNKNOWN
        assert moon_phase_name(None) == MoonPhaseName.UNKNOWN
        assert milky_way_chance(None, None, None) == MilkyWayChance.UNKNOWN


@pytest.mark.unit
class TestAstronomyCalculator:
    """Test astronomical sun and moon geometry."""

    @pytest.fixture
    def calculator(self):
        return AstronomyCalculator()

    def test_julian_day(self, calculator):
        assert calculator.julian_day(2000, 1, 1) == 2451544.5

    def test_riga_midsummer(self, calculator):
        times = calculator.sun_times(date(2024, 6, 21), 56.95, 24.1, "Europe/Riga")

        assert times.polar is None
        assert times.sunrise.startswith("2024-06-21T04:")
        assert times.sunset.startswith("2024-06-21T22:")
        assert 17.5 < times.daylight_hours < 18.2

    def test_equator_day_length(self, calculator):
        day_number = date(2024, 3, 20).timetuple().tm_yday
        assert calculator.daylight_hours(0.0, day_number) == pytest.approx(12.1, abs=0.1)

    def test_sun_times_reports_day_length(self, calculator):
        calculator.daylight_hours = Mock(return_value=16.5)

        times = calculator.sun_times(date(2024, 5, 10), 56.95, 24.1, "Europe/Riga")

        assert times.daylight_hours == 16.5
        calculator.daylight_hours.assert_called_once_with(56.95, 131)

    def test_polar_day_and_night(self, calculator):
        summer = calculator.sun_times(date(2024, 6, 21), 69.65, 18.96, "Europe/Oslo")
        winter = calculator.sun_times(date(2024, 12, 21), 69.65, 18.96, "Europe/Oslo")

        assert summer.polar == "polar_day"
        assert summer.sunrise is None and summer.sunset is None
        assert summer.daylight_hours == pytest.approx(24.0)
        assert winter.polar == "polar_night"
        assert winter.daylight_hours == pytest.approx(0.0)

    def test_moon_phase_new_and_full(self, calculator):
        new_moon = calculator.moon_phase(date(2024, 1, 11))
        full_moon = calculator.moon_phase(date(2024, 1, 25))

        assert new_moon < 0.05 or new_moon > 0.95
        assert 0.45 < full_moon < 0.55
        assert calculator.moon_illumination(full_moon) > 0.9

    def test_moon_illumination(self, calculator):
        assert calculator.moon_illumination(0.0) == 0.0
        assert calculator.moon_illumination(0.25) == pytest.approx(0.5)
        assert calculator.moon_illumination(0.5) == pytest.approx(1.0)
        assert calculator.moon_illumination(0.75) == pytest.approx(0.5)
        assert calculator.moon_illumination(None) is None
