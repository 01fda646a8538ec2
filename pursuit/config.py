"""
Configuration for the prediction engine.

Every tunable used by the estimators, the intercept solver and the service
lives on PredictionConfig. Values are validated on construction so a bad
parameter is rejected up front rather than discovered mid-computation.
"""

import json
import logging
import math
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

import yaml

from pursuit.core.bounds import WorldBounds
from pursuit.core.constants import (
    DEFAULT_ESTIMATOR,
    DEFAULT_FOLLOWER_SPEED,
    DEFAULT_MAX_LEAD_TIME,
    DEFAULT_MEASUREMENT_NOISE,
    DEFAULT_MIN_SAMPLE_INTERVAL,
    DEFAULT_MIN_TURN_SPEED,
    DEFAULT_MODEL_MEMORY,
    DEFAULT_PREDICTION_HORIZON,
    DEFAULT_PROBE_FLOOR,
    DEFAULT_PROCESS_NOISE,
    DEFAULT_SOFTENING,
    DEFAULT_VELOCITY_SMOOTHING,
)
from pursuit.utils.errors import ValidationError, invalid_range_error

logger = logging.getLogger(__name__)

ENV_PREFIX = "PURSUIT_"

# field name -> (min, max, min_inclusive)
_RANGES = {
    "prediction_horizon": (0.0, None, True),
    "model_memory": (0.0, None, False),
    "softening": (0.0, None, False),
    "probe_floor": (0.0, None, False),
    "min_turn_speed": (0.0, None, True),
    "min_sample_interval": (0.0, None, True),
    "process_noise": (0.0, None, False),
    "measurement_noise": (0.0, None, False),
    "velocity_smoothing": (0.0, 1.0, True),
    "max_lead_time": (0.0, None, True),
    "follower_speed": (0.0, None, True),
}


@dataclass
class PredictionConfig:
    """
    Prediction engine configuration container.

    Can be constructed directly, from a dict, from a YAML/JSON file or from
    PURSUIT_* environment variables.
    """

    # Estimator selection ("multi_model" or "kalman", see EstimatorFactory)
    estimator: str = DEFAULT_ESTIMATOR

    # Multi-model predictor
    prediction_horizon: float = DEFAULT_PREDICTION_HORIZON
    model_memory: float = DEFAULT_MODEL_MEMORY
    softening: float = DEFAULT_SOFTENING
    probe_floor: float = DEFAULT_PROBE_FLOOR
    min_turn_speed: float = DEFAULT_MIN_TURN_SPEED
    min_sample_interval: float = DEFAULT_MIN_SAMPLE_INTERVAL

    # Scalar Kalman estimator
    process_noise: float = DEFAULT_PROCESS_NOISE
    measurement_noise: float = DEFAULT_MEASUREMENT_NOISE
    velocity_smoothing: float = DEFAULT_VELOCITY_SMOOTHING

    # Intercept
    max_lead_time: float = DEFAULT_MAX_LEAD_TIME
    follower_speed: float = DEFAULT_FOLLOWER_SPEED

    # Clamp applied to returned predictions only
    world_bounds: WorldBounds = field(default_factory=WorldBounds)

    def __post_init__(self):
        """Coerce and validate every field."""
        if isinstance(self.world_bounds, dict):
            self.world_bounds = WorldBounds.from_dict(self.world_bounds)
        elif not isinstance(self.world_bounds, WorldBounds):
            raise ValidationError(f"world_bounds must be a mapping, got {type(self.world_bounds).__name__}")

        self.estimator = str(self.estimator).lower()

        for name, (min_val, max_val, min_inclusive) in _RANGES.items():
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ValidationError(f"{name}: expected a number, got {value!r}")
            if math.isnan(value) or math.isinf(value):
                raise ValidationError(f"{name}: invalid number (NaN or Inf)")
            if not min_inclusive and value <= min_val:
                raise ValidationError(f"{name} must be > {min_val} (got {value})")
            if value < min_val or (max_val is not None and value >= max_val):
                raise ValidationError(invalid_range_error(name, min_val, max_val, value))
            setattr(self, name, value)

        # Deferred to avoid a circular import with the estimator package
        from pursuit.estimation.factory import EstimatorFactory
        if self.estimator not in EstimatorFactory.PROGRAMS:
            available = ", ".join(EstimatorFactory.list_estimators())
            raise ValidationError(f"Unknown estimator: '{self.estimator}'. Available: {available}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PredictionConfig":
        """Create config from a mapping; unknown keys are rejected."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValidationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, filepath: str) -> "PredictionConfig":
        """Load config from a YAML or JSON file.

        A top-level ``config`` section is used when present, so track files
        can be passed directly.
        """
        data = load_document(filepath)
        if isinstance(data, dict) and isinstance(data.get("config"), dict):
            data = data["config"]
        logger.info(f"Loaded prediction config from {filepath}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "PredictionConfig":
        """Create config from PURSUIT_* environment variables."""
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name == "world_bounds":
                continue
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is not None:
                data[f.name] = raw
        bounds = {}
        for key in ("min_x", "max_x", "min_y", "max_y"):
            raw = environ.get(f"{ENV_PREFIX}BOUNDS_{key.upper()}")
            if raw is not None:
                bounds[key] = raw
        if bounds:
            data["world_bounds"] = WorldBounds.from_dict(bounds)
        return cls(**data)

    def replace(self, **changes) -> "PredictionConfig":
        """Return a validated copy with ``changes`` applied (None values ignored)."""
        data = self.to_dict()
        data["world_bounds"] = self.world_bounds
        data.update({k: v for k, v in changes.items() if v is not None})
        return type(self).from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result["world_bounds"] = self.world_bounds.to_dict()
        return result


def load_document(filepath: str) -> Any:
    """Read a YAML or JSON document, chosen by file extension."""
    _, ext = os.path.splitext(filepath)

    with open(filepath, 'r', encoding='utf-8') as f:
        if ext in ['.yaml', '.yml']:
            return yaml.safe_load(f)
        elif ext == '.json':
            return json.load(f)
        else:
            raise ValidationError(f"Unsupported file format: {ext}")


def get_default_config() -> PredictionConfig:
    """Get the default prediction configuration."""
    return PredictionConfig()
