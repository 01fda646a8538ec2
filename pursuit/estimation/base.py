# pursuit/estimation/base.py
"""Base estimator class."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from pursuit.config import PredictionConfig
from pursuit.core.track import Observation
from pursuit.core.vec import Vec3
from pursuit.utils.errors import TrackingError


class BaseEstimator(ABC):
    """Abstract base class for all target state estimators.

    An estimator consumes one observation per tick through ``update`` and
    answers ``predict`` queries from its current state. Queries never mutate
    state, and the configured world bounds are applied to returned
    predictions only.
    """

    name = "base"

    def __init__(self, config: Optional[PredictionConfig] = None):
        """Initialize estimator.

        Args:
            config: Prediction configuration (defaults if omitted)
        """
        self.config = config or PredictionConfig()
        self.status = "idle"

    @abstractmethod
    def update(self, observation: Observation, frame_dt: Optional[float] = None) -> bool:
        """Fold a new observation into the state.

        Args:
            observation: Latest target sample
            frame_dt: Scheduler time step, if known

        Returns:
            bool: True if the sample was accepted, False if it was skipped
        """
        pass

    @abstractmethod
    def _extrapolate(self, lookahead: float) -> Vec3:
        """Unclamped position ``lookahead`` seconds after the last sample."""
        pass

    @property
    @abstractmethod
    def is_tracking(self) -> bool:
        """True once at least one observation has been accepted."""
        pass

    @property
    @abstractmethod
    def position(self) -> Vec3:
        """Best estimate of the target's current position."""
        pass

    @property
    @abstractmethod
    def velocity(self) -> Vec3:
        """Best estimate of the target's current velocity."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Drop all track state."""
        pass

    def predict(self, lookahead: float) -> Vec3:
        """Predict the target position ``lookahead`` seconds ahead.

        Args:
            lookahead: Prediction horizon in seconds

        Returns:
            Vec3: Predicted position, clamped to the world bounds on x/y

        Raises:
            TrackingError: If no observation has been received yet
        """
        self._require_track()
        return self.config.world_bounds.clamp(self._extrapolate(lookahead))

    def get_state(self) -> Dict:
        """Get estimator state.

        Returns:
            dict: Current state
        """
        return {
            "estimator": self.name,
            "status": self.status,
            "tracking": self.is_tracking,
        }

    def _require_track(self) -> None:
        if not self.is_tracking:
            raise TrackingError(f"{self.name} estimator has no observations yet")
