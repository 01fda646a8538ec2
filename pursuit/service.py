# pursuit/service.py
"""Prediction service: one estimator and one intercept solver per target."""

import logging
from typing import Dict, Optional

from pursuit.config import PredictionConfig
from pursuit.core.track import InterceptSolution, Observation, PredictionResult
from pursuit.core.vec import Vec3
from pursuit.estimation.base import BaseEstimator
from pursuit.estimation.factory import EstimatorFactory
from pursuit.intercept import InterceptSolver, effective_velocity

logger = logging.getLogger(__name__)


class PredictionService:
    """Facade over a target estimator and the intercept solver.

    ``tick`` is the only method that mutates state and should be called once
    per fixed simulation step. ``predict``, ``predicted_position`` and
    ``intercept_point`` are pure functions of the current state and may be
    called any number of times between ticks.
    """

    def __init__(self, config: Optional[PredictionConfig] = None,
                 estimator: Optional[BaseEstimator] = None):
        """Initialize service.

        Args:
            config: Prediction configuration (defaults if omitted)
            estimator: Estimator instance; built from ``config.estimator``
                through EstimatorFactory when omitted
        """
        self.config = config or PredictionConfig()
        self.estimator = estimator or EstimatorFactory.create(self.config.estimator, self.config)
        self.solver = InterceptSolver(self.config.max_lead_time)
        self.ticks = 0

    @property
    def is_tracking(self) -> bool:
        return self.estimator.is_tracking

    def tick(self, observation: Observation, dt: Optional[float] = None) -> bool:
        """Feed the latest target sample.

        Args:
            observation: Target position and timestamp
            dt: Fixed scheduler step, if the caller runs one

        Returns:
            bool: True if the estimator accepted the sample
        """
        self.ticks += 1
        return self.estimator.update(observation, dt)

    def predict(self, lookahead: Optional[float] = None) -> PredictionResult:
        """Predicted target position ``lookahead`` seconds ahead.

        Args:
            lookahead: Seconds ahead (defaults to the configured horizon)

        Raises:
            TrackingError: If no observation has been received yet
        """
        if lookahead is None:
            lookahead = self.config.prediction_horizon
        return PredictionResult(position=self.estimator.predict(lookahead), lookahead=lookahead)

    def predicted_position(self, lookahead: Optional[float] = None) -> Vec3:
        return self.predict(lookahead).position

    def intercept_point(self, follower_position: Vec3,
                        follower_speed: Optional[float] = None) -> InterceptSolution:
        """Point a follower can reach at the same time as the target.

        The target velocity used is the straight-line velocity implied by the
        horizon prediction rather than the raw instantaneous velocity. When
        no intercept exists the horizon prediction is returned as the aim
        point with ``feasible`` False.

        Args:
            follower_position: Follower position now
            follower_speed: Follower speed (defaults to ``config.follower_speed``)

        Returns:
            InterceptSolution
        """
        if follower_speed is None:
            follower_speed = self.config.follower_speed
        horizon = self.config.prediction_horizon
        predicted = self.estimator.predict(horizon)
        current = self.estimator.position
        target_velocity = effective_velocity(current, predicted, horizon)
        return self.solver.solve(follower_position, current, target_velocity,
                                 follower_speed, fallback_point=predicted)

    def reset(self) -> None:
        """End tracking; the next tick starts a new track."""
        self.estimator.reset()
        self.ticks = 0
        logger.info("Prediction service reset")

    def get_state(self) -> Dict:
        """Snapshot for external renderers and debugging.

        Returns:
            dict: Estimator state plus the horizon prediction when tracking
        """
        state = {
            "ticks": self.ticks,
            "horizon": self.config.prediction_horizon,
            "estimator": self.estimator.get_state(),
        }
        if self.is_tracking:
            state["estimated_position"] = self.estimator.position.to_dict()
            state["predicted_position"] = self.predicted_position().to_dict()
        return state
