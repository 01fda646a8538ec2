# pursuit/estimation/kalman.py
"""Per-axis scalar Kalman estimator."""

import logging
from typing import Dict, Optional

import numpy as np

from pursuit.config import PredictionConfig
from pursuit.core.track import Observation
from pursuit.core.vec import Vec3
from pursuit.estimation.base import BaseEstimator

logger = logging.getLogger(__name__)


class ScalarKalmanEstimator(BaseEstimator):
    """
    Independent scalar Kalman filters on x, y and z.

    Features:
    - Position estimate and covariance per axis (no cross-axis terms)
    - Velocity smoothed by exponential blending of measured velocity
    - Linear extrapolation for prediction

    Each axis is an element of a numpy array, so the three filters run as
    one vectorised update.
    """

    name = "kalman"

    def __init__(self, config: Optional[PredictionConfig] = None):
        """
        Initialize estimator.

        Args:
            config: Uses process_noise (Q), measurement_noise (R),
                velocity_smoothing and min_sample_interval
        """
        super().__init__(config)
        self.process_noise = self.config.process_noise
        self.measurement_noise = self.config.measurement_noise
        self.smoothing = self.config.velocity_smoothing
        self._clear()

    def _clear(self) -> None:
        self.estimated_position: Optional[np.ndarray] = None
        self.estimated_velocity = np.zeros(3)
        self.covariance = np.zeros(3)
        self.last_gain = np.zeros(3)
        self.last_innovation = np.zeros(3)
        self.last_measurement: Optional[np.ndarray] = None
        self.last_timestamp = 0.0
        self.samples = 0
        self.skipped = 0

    @property
    def is_tracking(self) -> bool:
        return self.estimated_position is not None

    @property
    def position(self) -> Vec3:
        self._require_track()
        return Vec3.from_array(self.estimated_position)

    @property
    def velocity(self) -> Vec3:
        self._require_track()
        return Vec3.from_array(self.estimated_velocity)

    def update(self, observation: Observation, frame_dt: Optional[float] = None) -> bool:
        """
        Run one predict/update cycle with a new measurement.

        Args:
            observation: Measured target position
            frame_dt: Unused; the sample interval drives the filter

        Returns:
            True if the measurement was folded in
        """
        observation.validate()
        measurement = observation.position.to_array()

        if self.estimated_position is None:
            self.estimated_position = measurement.copy()
            self.estimated_velocity = np.zeros(3)
            self.covariance = np.full(3, self.measurement_noise)
            self.last_measurement = measurement
            self.last_timestamp = observation.timestamp
            self.samples = 1
            self.status = "tracking"
            logger.debug(f"Kalman track started at t={observation.timestamp:.3f}")
            return True

        dt = observation.timestamp - self.last_timestamp
        if dt <= self.config.min_sample_interval:
            self.skipped += 1
            logger.debug(f"Skipping sample at t={observation.timestamp:.6f} (dt={dt:.2e})")
            return False

        # Predict
        predicted = self.estimated_position + self.estimated_velocity * dt
        prior = self.covariance + self.process_noise

        # Update
        innovation = measurement - predicted
        gain = prior / (prior + self.measurement_noise)
        self.estimated_position = predicted + gain * innovation
        self.covariance = (1.0 - gain) * prior

        # Velocity smoothing, outside the formal filter
        measured_velocity = (measurement - self.last_measurement) / dt
        self.estimated_velocity = (
            self.smoothing * self.estimated_velocity
            + (1.0 - self.smoothing) * measured_velocity
        )

        self.last_gain = gain
        self.last_innovation = innovation
        self.last_measurement = measurement
        self.last_timestamp = observation.timestamp
        self.samples += 1
        return True

    def _extrapolate(self, lookahead: float) -> Vec3:
        return Vec3.from_array(self.estimated_position + self.estimated_velocity * lookahead)

    def reset(self) -> None:
        self._clear()
        self.status = "idle"

    def get_state(self) -> Dict:
        state = super().get_state()
        if self.is_tracking:
            state.update({
                "position": self.position.to_dict(),
                "velocity": self.velocity.to_dict(),
                "covariance": self.covariance.tolist(),
                "gain": self.last_gain.tolist(),
                "innovation": self.last_innovation.tolist(),
                "samples": self.samples,
                "skipped_samples": self.skipped,
            })
        return state
