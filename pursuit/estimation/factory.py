# pursuit/estimation/factory.py
"""Factory for creating estimator instances."""

import logging
from typing import Optional

from pursuit.estimation.base import BaseEstimator
from pursuit.estimation.kalman import ScalarKalmanEstimator
from pursuit.estimation.multi_model import MultiModelEstimator
from pursuit.utils.errors import ValidationError

logger = logging.getLogger(__name__)


class EstimatorFactory:
    """Factory for creating estimator instances."""

    # Registry of available estimators
    PROGRAMS = {
        "multi_model": MultiModelEstimator,
        "mixed": MultiModelEstimator,  # Alias
        "blend": MultiModelEstimator,  # Alias
        "kalman": ScalarKalmanEstimator,
        "scalar_kalman": ScalarKalmanEstimator,  # Alias
    }

    @classmethod
    def create(cls, name: Optional[str] = None, config=None) -> BaseEstimator:
        """Create an estimator instance.

        Args:
            name: Estimator name (defaults to ``config.estimator``)
            config: PredictionConfig for the estimator

        Returns:
            BaseEstimator: Estimator instance

        Raises:
            ValidationError: If the name is unknown
        """
        if name is None:
            name = config.estimator if config is not None else "multi_model"
        name_lower = name.lower()

        if name_lower not in cls.PROGRAMS:
            available = ", ".join(cls.PROGRAMS.keys())
            raise ValidationError(
                f"Unknown estimator: '{name}'. "
                f"Available: {available}"
            )

        instance = cls.PROGRAMS[name_lower](config)
        logger.info(f"Created estimator: {instance.name}")
        return instance

    @classmethod
    def list_estimators(cls) -> list:
        """Get list of available estimator names.

        Returns:
            list: Estimator names
        """
        return list(cls.PROGRAMS.keys())

    @classmethod
    def get_help(cls, name: Optional[str] = None) -> str:
        """Get help text for estimators.

        Args:
            name: Specific estimator or None for all

        Returns:
            str: Help text
        """
        help_text = {
            "multi_model": "Blend of constant-velocity, constant-acceleration and constant-turn forecasts",
            "kalman": "Per-axis scalar Kalman filter with linear extrapolation",
        }

        if name:
            return help_text.get(name.lower(), "Unknown estimator")

        lines = ["Available estimators:"]
        for key in sorted(help_text.keys()):
            lines.append(f"  {key}: {help_text[key]}")

        return "\n".join(lines)
