"""
Application-wide constants for the weather digest engine.

Thresholds of the rule-based classifiers and forecast horizons live here.
Coefficients of the energy score are defaults; see EnergyCoefficients.
"""

# Forecast horizons (days) per feature
GARDENING_FORECAST_DAYS = 7
BIO_FORECAST_DAYS = 5
PHOTOGRAPHY_FORECAST_DAYS = 3
LOCAL_FORECAST_DAYS = 7

# Day key format (YYYY-MM-DD)
DAY_KEY_LENGTH = 10
MINUTES_PER_DAY = 24 * 60

# Golden hour length (minutes)
GOLDEN_HOUR_MINUTES = 60

# Night sky windows (minutes of day)
NIGHT_START_MINUTE = 22 * 60
NIGHT_END_MINUTE = 24 * 60
AFTER_MIDNIGHT_START_MINUTE = 0
AFTER_MIDNIGHT_END_MINUTE = 2 * 60

# Compass rose, 16 sectors of 22.5°
COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
COMPASS_SECTOR_DEGREES = 360.0 / len(COMPASS_POINTS)

# Planting suitability (soil temperature °C, volumetric moisture m³/m³, mm, %)
PLANTING_TOO_COLD_BELOW = 8.0
PLANTING_COLD_BELOW = 10.0
PLANTING_TOO_HOT_ABOVE = 27.0
PLANTING_TOO_DRY_BELOW = 0.16
PLANTING_TOO_WET_ABOVE = 0.42
PLANTING_RAIN_PROBABILITY_ABOVE = 70.0
PLANTING_RAIN_WITH_PROBABILITY_MM = 4.0
PLANTING_RAIN_HEAVY_MM = 8.0
PLANTING_IDEAL_TEMP_RANGE = (12.0, 23.0)
PLANTING_IDEAL_MOISTURE_RANGE = (0.18, 0.34)
PLANTING_IDEAL_MAX_PRECIP_MM = 4.0
PLANTING_OK_TEMP_RANGE = (10.0, 25.0)

# Watering
WATERING_NEEDS_MOISTURE_BELOW = 0.18
WATERING_NEEDS_PRECIP_BELOW = 2.0
WATERING_LIGHT_MOISTURE_BELOW = 0.24
WATERING_LIGHT_PRECIP_BELOW = 4.0
WATERING_SKIP_MOISTURE_ABOVE = 0.35
WATERING_SKIP_PRECIP_ABOVE = 5.0

# Frost cover alert
COVER_AIR_TEMP_BELOW = 3.0
COVER_SOIL_TEMP_BELOW = 5.0

# Energy score defaults
ENERGY_BASELINE = 65.0
ENERGY_COMFORT_TEMP = 20.0
ENERGY_TEMP_WEIGHT = 1.2
ENERGY_HUMIDITY_HIGH = 70.0
ENERGY_HUMIDITY_LOW = 40.0
ENERGY_HUMIDITY_HIGH_WEIGHT = 0.6
ENERGY_HUMIDITY_LOW_WEIGHT = 0.4
ENERGY_REFERENCE_PRESSURE = 1016.0
ENERGY_PRESSURE_WEIGHT = 0.15
ENERGY_TREND_WEIGHT = 1.5
ENERGY_TREND_CAP = 12.0
ENERGY_UV_THRESHOLD = 7.0
ENERGY_UV_PENALTY = 5.0
ENERGY_LABEL_THRESHOLDS = (70.0, 55.0, 40.0)

# Pressure tendency (hPa/day)
PRESSURE_TREND_THRESHOLD = 4.0

# Aurora visibility threshold (Kp)
AURORA_KP_THRESHOLD = 5.0

# Historical archive starts with ERA5 coverage
ARCHIVE_FIRST_YEAR = 1979

# Moon
SYNODIC_MONTH_DAYS = 29.53058867
REFERENCE_NEW_MOON_JD = 2451550.259  # 2000-01-06 18:14 UTC

# Solar geometry (FAO-56)
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians
SUNRISE_ALTITUDE_DEGREES = -0.833  # refraction + solar disc
