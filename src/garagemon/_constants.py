"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Performance score  (score = 100 - (rpm/100 + load*0.5 + (temp-90)*2))
# ------------------------------------------------------------------

SCORE_BASELINE = 100.0
RPM_DIVISOR = 100.0
LOAD_FACTOR = 0.5
COOLANT_BASELINE_C = 90.0
COOLANT_FACTOR = 2.0

# Scores strictly below this raise a severe-stress alert.
SEVERE_STRESS_THRESHOLD = 40.0

# ------------------------------------------------------------------
# Workload generator
# ------------------------------------------------------------------

DEFAULT_SEED = 12345
DEFAULT_VEHICLE_IDS: tuple[str, ...] = ("Car1", "Car2", "Car3")
DEFAULT_ITERATIONS = 1000
DEFAULT_THREADS = 4

RPM_RANGE: tuple[float, float] = (600.0, 7000.0)
ENGINE_LOAD_RANGE: tuple[float, float] = (0.0, 100.0)
COOLANT_TEMP_RANGE: tuple[float, float] = (70.0, 130.0)
