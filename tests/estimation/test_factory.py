import pytest

from pursuit.config import PredictionConfig
from pursuit.estimation.base import BaseEstimator
from pursuit.estimation.factory import EstimatorFactory
from pursuit.estimation.kalman import ScalarKalmanEstimator
from pursuit.estimation.multi_model import MultiModelEstimator
from pursuit.utils.errors import ValidationError


@pytest.mark.parametrize("name,cls", [
    ("multi_model", MultiModelEstimator),
    ("mixed", MultiModelEstimator),
    ("KALMAN", ScalarKalmanEstimator),
    ("scalar_kalman", ScalarKalmanEstimator),
])
def test_create_by_name(name, cls):
    estimator = EstimatorFactory.create(name)
    assert isinstance(estimator, cls)
    assert isinstance(estimator, BaseEstimator)


def test_create_from_config():
    config = PredictionConfig(estimator="kalman", process_noise=0.2)
    estimator = EstimatorFactory.create(config=config)
    assert isinstance(estimator, ScalarKalmanEstimator)
    assert estimator.process_noise == 0.2
    assert estimator.config is config


def test_unknown_estimator():
    with pytest.raises(ValidationError, match="Unknown estimator"):
        EstimatorFactory.create("particle")


def test_help_lists_estimators():
    text = EstimatorFactory.get_help()
    assert "multi_model" in text
    assert "kalman" in text
    assert EstimatorFactory.get_help("nope") == "Unknown estimator"
    assert "kalman" in EstimatorFactory.list_estimators()
