# pursuit/core/track.py
"""Observation, track state and query result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pursuit.core.vec import Vec3
from pursuit.utils.errors import ValidationError
from pursuit.utils.math_utils import is_valid_number


@dataclass(frozen=True)
class Observation:
    """A timestamped target position sample."""
    position: Vec3
    timestamp: float

    def validate(self) -> None:
        """Raise ValidationError if the sample cannot be used."""
        if not isinstance(self.position, Vec3):
            raise ValidationError(f"Observation position must be a Vec3, got {type(self.position).__name__}")
        try:
            finite = self.position.is_finite() and is_valid_number(self.timestamp)
        except TypeError as e:
            raise ValidationError(f"Observation has non-numeric components: {self}") from e
        if not self.position.is_finite():
            raise ValidationError(f"Observation position is not finite: {self.position}")
        if not finite:
            raise ValidationError(f"Observation timestamp is not finite: {self.timestamp}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Observation":
        """Build from ``{"position": ..., "timestamp"|"t": ...}``."""
        if "position" not in data:
            raise ValidationError("Observation requires a 'position'")
        timestamp = data.get("timestamp", data.get("t"))
        if timestamp is None:
            raise ValidationError("Observation requires a 'timestamp' (or 't')")
        try:
            return cls(position=Vec3.from_any(data["position"]), timestamp=float(timestamp))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid observation {data!r}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position.to_dict(), "timestamp": self.timestamp}


@dataclass
class TrackState:
    """Kinematic state of one tracked target.

    ``previous_*`` fields hold the sample that preceded the current one.
    ``last_dt`` is the interval between those two samples and ``frame_dt``
    the scheduler step reported with the current sample.
    """
    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    previous_position: Vec3 = field(default_factory=Vec3)
    previous_velocity: Vec3 = field(default_factory=Vec3)
    previous_timestamp: float = 0.0
    timestamp: float = 0.0
    last_dt: float = 0.0
    frame_dt: float = 0.0
    samples: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.to_dict(),
            "velocity": self.velocity.to_dict(),
            "acceleration": self.acceleration.to_dict(),
            "previous_position": self.previous_position.to_dict(),
            "previous_velocity": self.previous_velocity.to_dict(),
            "previous_timestamp": self.previous_timestamp,
            "timestamp": self.timestamp,
            "last_dt": self.last_dt,
            "frame_dt": self.frame_dt,
            "samples": self.samples,
        }


@dataclass(frozen=True)
class PredictionResult:
    """Predicted target position ``lookahead`` seconds after the last sample."""
    position: Vec3
    lookahead: float


@dataclass(frozen=True)
class InterceptSolution:
    """Pursuit point for a fixed-speed follower.

    ``time_to_intercept`` is None whenever ``feasible`` is False; ``point``
    is then the degraded fallback aim point.
    """
    point: Vec3
    time_to_intercept: Optional[float]
    feasible: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "point": self.point.to_dict(),
            "time_to_intercept": self.time_to_intercept,
            "feasible": self.feasible,
        }
