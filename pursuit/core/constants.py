# pursuit/core/constants.py

DEFAULT_PREDICTION_HORIZON = 1.2   # seconds ahead for the blended prediction
DEFAULT_MODEL_MEMORY = 0.15        # upper bound of the retrodiction probe (s)
DEFAULT_SOFTENING = 0.01           # added to squared errors before inversion
DEFAULT_PROBE_FLOOR = 0.02         # lower bound of the retrodiction probe (s)
DEFAULT_MIN_TURN_SPEED = 1e-4      # below this speed the turn rate is zero
DEFAULT_MIN_SAMPLE_INTERVAL = 1e-6 # samples closer than this are dropped
DEFAULT_PROCESS_NOISE = 0.05       # Kalman Q per axis per tick
DEFAULT_MEASUREMENT_NOISE = 0.5    # Kalman R per axis
DEFAULT_VELOCITY_SMOOTHING = 0.6   # share of the previous velocity estimate kept
DEFAULT_MAX_LEAD_TIME = 5.0        # intercept time cap (s)
DEFAULT_FOLLOWER_SPEED = 6.0       # units/s
DEFAULT_ESTIMATOR = "multi_model"

QUADRATIC_EPSILON = 1e-6           # |a| below this solves the linear equation
