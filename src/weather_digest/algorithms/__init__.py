"""
Rule and geometry algorithms for the weather digest engine.

Provides gardening, biometeorological and photography classifiers and the
astronomical sunrise/moon phase calculator.
"""

from .astronomy import AstronomyCalculator, SunTimes
from .gardening import evaluate_planting, evaluate_watering, cover_alert
from .biometeo import (
    EnergyCoefficients,
    EnergyScorer,
    classify_uv,
    classify_pressure_trend,
    classify_pollen,
)
from .photography import classify_cloud, classify_transparency, moon_phase_name, milky_way_chance

__all__ = [
    "AstronomyCalculator",
    "SunTimes",
    "evaluate_planting",
    "evaluate_watering",
    "cover_alert",
    "EnergyCoefficients",
    "EnergyScorer",
    "classify_uv",
    "classify_pressure_trend",
    "classify_pollen",
    "classify_cloud",
    "classify_transparency",
    "moon_phase_name",
    "milky_way_chance",
]
