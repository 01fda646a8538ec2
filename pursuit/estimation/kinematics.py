# pursuit/estimation/kinematics.py
"""Finite-difference velocity and acceleration from position samples."""

import logging
from typing import Optional

from pursuit.core.constants import DEFAULT_MIN_SAMPLE_INTERVAL
from pursuit.core.track import Observation, TrackState
from pursuit.utils.math_utils import MIN_DIVISOR

logger = logging.getLogger(__name__)


class KinematicDifferentiator:
    """Maintains a TrackState from a stream of observations.

    The first observation seeds the state with zero velocity. Samples whose
    timestamp is not at least ``min_sample_interval`` after the current one
    are dropped and the state is left untouched.
    """

    def __init__(self, min_sample_interval: float = DEFAULT_MIN_SAMPLE_INTERVAL):
        self.min_sample_interval = min_sample_interval
        self.state: Optional[TrackState] = None
        self.skipped = 0

    @property
    def is_tracking(self) -> bool:
        return self.state is not None

    def update(self, observation: Observation, frame_dt: Optional[float] = None) -> bool:
        """Differentiate the new sample against the current state.

        Args:
            observation: Latest target sample
            frame_dt: Scheduler step reported alongside the sample

        Returns:
            bool: True if the state changed
        """
        observation.validate()

        if self.state is None:
            self.state = TrackState(
                position=observation.position,
                previous_position=observation.position,
                previous_timestamp=observation.timestamp,
                timestamp=observation.timestamp,
                samples=1,
            )
            logger.debug(f"Track started at t={observation.timestamp:.3f}")
            return True

        state = self.state
        dt = observation.timestamp - state.timestamp
        if dt <= self.min_sample_interval:
            self.skipped += 1
            logger.debug(f"Skipping sample at t={observation.timestamp:.6f} (dt={dt:.2e})")
            return False

        velocity = (observation.position - state.position) / dt
        acceleration = (velocity - state.velocity) / max(dt, MIN_DIVISOR)

        state.previous_position = state.position
        state.previous_velocity = state.velocity
        state.previous_timestamp = state.timestamp
        state.position = observation.position
        state.velocity = velocity
        state.acceleration = acceleration
        state.timestamp = observation.timestamp
        state.last_dt = dt
        state.frame_dt = frame_dt if frame_dt and frame_dt > 0 else dt
        state.samples += 1
        return True

    def reset(self) -> None:
        self.state = None
        self.skipped = 0
