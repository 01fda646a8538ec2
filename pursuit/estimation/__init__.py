"""Target state estimators."""

from .base import BaseEstimator
from .kinematics import KinematicDifferentiator
from .multi_model import MultiModelEstimator, blend_positions
from .kalman import ScalarKalmanEstimator
from .factory import EstimatorFactory

__all__ = [
    'BaseEstimator',
    'KinematicDifferentiator',
    'MultiModelEstimator',
    'ScalarKalmanEstimator',
    'EstimatorFactory',
    'blend_positions',
]
