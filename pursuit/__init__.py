"""
Predictive targeting engine.

Estimates a maneuvering target's kinematic state from periodic position
samples, forecasts where it will be, and computes a pursuit point that a
fixed-speed follower can reach at the same time as the target.
"""

from pursuit.config import PredictionConfig
from pursuit.core import Vec3, WorldBounds, Observation, TrackState, PredictionResult, InterceptSolution
from pursuit.estimation import (
    BaseEstimator,
    EstimatorFactory,
    KinematicDifferentiator,
    MultiModelEstimator,
    ScalarKalmanEstimator,
)
from pursuit.intercept import InterceptSolver, solve_intercept
from pursuit.service import PredictionService
from pursuit.utils.errors import PursuitError, ValidationError, TrackingError

__version__ = "0.1.0"

__all__ = [
    'PredictionConfig',
    'PredictionService',
    'Vec3',
    'WorldBounds',
    'Observation',
    'TrackState',
    'PredictionResult',
    'InterceptSolution',
    'BaseEstimator',
    'EstimatorFactory',
    'KinematicDifferentiator',
    'MultiModelEstimator',
    'ScalarKalmanEstimator',
    'InterceptSolver',
    'solve_intercept',
    'PursuitError',
    'ValidationError',
    'TrackingError',
]
