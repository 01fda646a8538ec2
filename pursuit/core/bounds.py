# pursuit/core/bounds.py
"""Horizontal world bounds applied to returned predictions."""

import math
from dataclasses import dataclass
from typing import Dict, Optional

from pursuit.core.vec import Vec3
from pursuit.utils.errors import ValidationError
from pursuit.utils.math_utils import clamp


@dataclass(frozen=True)
class WorldBounds:
    """Axis-aligned limits on the horizontal (x, y) plane.

    The vertical axis is never clamped. The default instance is unbounded.
    """

    min_x: float = -math.inf
    max_x: float = math.inf
    min_y: float = -math.inf
    max_y: float = math.inf

    def __post_init__(self):
        for axis in ("x", "y"):
            lo = getattr(self, f"min_{axis}")
            hi = getattr(self, f"max_{axis}")
            if math.isnan(lo) or math.isnan(hi):
                raise ValidationError(f"World bound on {axis} is NaN")
            if lo > hi:
                raise ValidationError(f"min_{axis} ({lo}) is greater than max_{axis} ({hi})")

    @property
    def is_bounded(self) -> bool:
        return any(math.isfinite(v) for v in (self.min_x, self.max_x, self.min_y, self.max_y))

    def clamp(self, position: Vec3) -> Vec3:
        """Return ``position`` with x and y clamped into the bounds."""
        if not self.is_bounded:
            return position
        return Vec3(
            clamp(position.x, self.min_x, self.max_x),
            clamp(position.y, self.min_y, self.max_y),
            position.z,
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "min_x": self.min_x,
            "max_x": self.max_x,
            "min_y": self.min_y,
            "max_y": self.max_y,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "WorldBounds":
        if not data:
            return cls()
        unknown = set(data) - {"min_x", "max_x", "min_y", "max_y"}
        if unknown:
            raise ValidationError(f"Unknown world bound keys: {sorted(unknown)}")
        try:
            values = {k: float(v) for k, v in data.items() if v is not None}
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid world bounds: {e}") from e
        return cls(**values)
