# pursuit/estimation/multi_model.py
"""Multi-model predictor: CV, CA and constant-turn candidates blended by
inverse retrodiction error.

Each tick the three motion models are replayed from the previous sample
over a short probe interval and compared with the sample actually observed.
Models that reproduce the latest motion well get more weight in the
forecast, so the blend follows CV on straight runs and leans towards CA or
CT while the target accelerates or turns, with no explicit mode switching.
"""

import logging
import math
from typing import Dict, Optional

from pursuit.config import PredictionConfig
from pursuit.core.track import Observation, TrackState
from pursuit.core.vec import Vec3
from pursuit.estimation.base import BaseEstimator
from pursuit.estimation.kinematics import KinematicDifferentiator
from pursuit.utils.math_utils import MIN_DIVISOR, delta_angle

logger = logging.getLogger(__name__)

MODELS = ("cv", "ca", "ct")


def blend_positions(candidates: Dict[str, Vec3], scores: Dict[str, float]) -> Vec3:
    """Convex combination of candidate positions.

    Args:
        candidates: Model name -> candidate position
        scores: Model name -> non-negative weight (need not be normalised)

    Returns:
        Vec3: Weighted mean, or the plain mean if the weights sum to zero
    """
    total = sum(scores[name] for name in candidates)
    if not math.isfinite(total) or total <= 0.0:
        share = 1.0 / len(candidates)
        scores = {name: share for name in candidates}
        total = 1.0
    blended = Vec3()
    for name, position in candidates.items():
        blended = blended + position * (scores[name] / total)
    return blended


class MultiModelEstimator(BaseEstimator):
    """Kinematic differentiator plus the three-model blended forecast."""

    name = "multi_model"

    def __init__(self, config: Optional[PredictionConfig] = None):
        super().__init__(config)
        self.kinematics = KinematicDifferentiator(self.config.min_sample_interval)

    # ----- Update -----
    def update(self, observation: Observation, frame_dt: Optional[float] = None) -> bool:
        accepted = self.kinematics.update(observation, frame_dt)
        if accepted:
            self.status = "tracking"
        return accepted

    @property
    def state(self) -> Optional[TrackState]:
        return self.kinematics.state

    @property
    def is_tracking(self) -> bool:
        return self.kinematics.is_tracking

    @property
    def position(self) -> Vec3:
        self._require_track()
        return self.state.position

    @property
    def velocity(self) -> Vec3:
        self._require_track()
        return self.state.velocity

    def reset(self) -> None:
        self.kinematics.reset()
        self.status = "idle"

    # ----- Models -----
    def angular_velocity(self) -> float:
        """Signed turn rate of the velocity vector about the vertical axis (rad/s).

        Zero when either velocity sample is too slow to have a heading.
        """
        self._require_track()
        state = self.state
        floor = self.config.min_turn_speed
        if state.velocity.norm() <= floor or state.previous_velocity.norm() <= floor:
            return 0.0
        turn = delta_angle(state.previous_velocity.heading(), state.velocity.heading())
        return turn / max(state.last_dt, MIN_DIVISOR)

    def candidates(self, horizon: float) -> Dict[str, Vec3]:
        """Unclamped CV, CA and CT positions ``horizon`` seconds ahead."""
        self._require_track()
        state = self.state
        p, v, a = state.position, state.velocity, state.acceleration
        omega = self.angular_velocity()
        return {
            "cv": p + v * horizon,
            "ca": p + v * horizon + a * (0.5 * horizon * horizon),
            "ct": p + v.rotated_z(omega * horizon) * horizon,
        }

    def probe_interval(self) -> float:
        """Retrodiction interval: min(model_memory, max(frame_dt, probe_floor))."""
        self._require_track()
        return min(self.config.model_memory, max(self.state.frame_dt, self.config.probe_floor))

    def model_errors(self) -> Dict[str, float]:
        """Squared error of each model replayed from the previous sample."""
        self._require_track()
        state = self.state
        probe = self.probe_interval()
        p0, v0, a = state.previous_position, state.previous_velocity, state.acceleration
        omega = self.angular_velocity()
        retrodicted = {
            "cv": p0 + v0 * probe,
            "ca": p0 + v0 * probe + a * (0.5 * probe * probe),
            "ct": p0 + v0.rotated_z(omega * probe) * probe,
        }
        return {name: (state.position - guess).sqr_norm() for name, guess in retrodicted.items()}

    def model_weights(self) -> Dict[str, float]:
        """Normalised inverse-error weights, summing to 1."""
        errors = self.model_errors()
        softening = self.config.softening
        raw = {name: 1.0 / (err + softening) for name, err in errors.items()}
        total = sum(raw.values())
        if not math.isfinite(total) or total <= 0.0:
            logger.debug(f"Degenerate model scores {raw}, using equal weights")
            return {name: 1.0 / len(MODELS) for name in MODELS}
        return {name: w / total for name, w in raw.items()}

    def _extrapolate(self, lookahead: float) -> Vec3:
        return blend_positions(self.candidates(lookahead), self.model_weights())

    def get_state(self) -> Dict:
        state = super().get_state()
        if self.is_tracking:
            state.update({
                "track": self.state.to_dict(),
                "angular_velocity": self.angular_velocity(),
                "weights": self.model_weights(),
                "skipped_samples": self.kinematics.skipped,
            })
        return state
