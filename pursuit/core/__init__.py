# pursuit/core/__init__.py
"""Vector math and data model."""

from pursuit.core.vec import Vec3
from pursuit.core.bounds import WorldBounds
from pursuit.core.track import Observation, TrackState, PredictionResult, InterceptSolution

__all__ = ['Vec3', 'WorldBounds', 'Observation', 'TrackState', 'PredictionResult', 'InterceptSolution']
