"""
SHIPENGINE Physical Constants and Calculation Basis

Constants used throughout SHIPENGINE for power estimation, the engine
system calculator and the calibration harness.
"""

# ==================== Physical Constants ====================

# Gravitational acceleration
GRAVITY_M_S2 = 9.81  # m/s²

# Unit conversions - Power
HP_TO_KW = 0.7457  # 1 SHP = 0.7457 kW
KW_TO_HP = 1 / HP_TO_KW

# Unit conversions - Speed
KNOTS_TO_MS = 0.514444
MS_TO_KNOTS = 1.94384

# ==================== Admiralty Method ====================

# Exponents of C = D^(2/3) * V^3 / P
DISPLACEMENT_EXPONENT = 2 / 3
SPEED_EXPONENT = 3.0

# Planing efficiency factors applied to small hulls
PLANING_HULL_DISPLACEMENT_MT = 1500.0
SMALL_HULL_DISPLACEMENT_MT = 4000.0
PLANING_EFFICIENCY_PLANING = 0.82
PLANING_EFFICIENCY_SMALL_HULL = 0.91
PLANING_EFFICIENCY_LARGE_HULL = 1.0

# ==================== Empirical Power Law ====================

# P (HP) = 0.0035 * D^0.67 * V^3 * (1 + 8 * drag)
EMPIRICAL_HP_COEFFICIENT = 0.0035
EMPIRICAL_DISPLACEMENT_EXPONENT = 0.67
EMPIRICAL_DRAG_SCALE = 8.0

# ==================== Engine System Calculation Basis ====================

# USD per horsepower for a complete propulsion package (DDG-51 derived)
COST_PER_HP = 1_500
# USD per tonne of marine fuel
FUEL_COST_PER_TONNE = 600

# Full propulsion plant consumption at full power (tonnes/kWh)
BASE_FULL_POWER_CONSUMPTION = 0.00064
# Part-load curve exponent; engines are least efficient away from 60-75% load
POWER_SETTING_EXPONENT = 1.25
# Default cruise operating point as a fraction of top-speed power
DEFAULT_CRUISE_POWER_SETTING = 0.65

# Baseline mean time between failures (hours)
BASE_MTBF_HOURS = 8000

# Fraction of displacement carried as fuel
FUEL_LOAD_FRACTION = 0.35

# Engine weight = (D * 0.14 + P * 0.003) * multipliers
WEIGHT_PER_TONNE_DISPLACEMENT = 0.14
WEIGHT_PER_HP = 0.003

# Engine volume per tonne of engine weight (m³)
VOLUME_PER_TONNE = 2.5

# Default cruising speeds (knots) when none is requested
SLEEK_HULL_THRESHOLD = 0.12
SLEEK_HULL_CRUISE_KTS = 18.0
DEFAULT_CRUISE_KTS = 15.0

# Accepted request envelope; anything outside fails input validation
MAX_TOP_SPEED_KTS = 100.0
MAX_DISPLACEMENT_MT = 200_000.0
MAX_DRAG_COEFFICIENT = 10.0

# Ratings
ACCELERATION_POWER_TO_WEIGHT_REFERENCE = 50.0  # hp/t for a rating of 100
HEAT_CONSUMPTION_SCALE = 10.0
HEAT_CONSUMPTION_CAP = 20.0
RATING_MAX = 100

# ==================== Calibration Harness ====================

# Baseline speed for normalised Admiralty coefficients (lowest dataset speed)
NORMALIZATION_BASELINE_SPEED_KTS = 27.0

# Fleet average normalised coefficient (excluding the Brooke-class outlier)
FLEET_AVERAGE_COEFFICIENT = 73.5
OUTLIER_THRESHOLD = 40.0

# ==================== System Configuration ====================

SHIPENGINE_VERSION = "0.4.0"
