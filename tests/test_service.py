import pytest

from pursuit.config import PredictionConfig
from pursuit.core.track import Observation
from pursuit.core.vec import Vec3
from pursuit.estimation.kalman import ScalarKalmanEstimator
from pursuit.estimation.multi_model import MultiModelEstimator
from pursuit.service import PredictionService
from pursuit.utils.errors import TrackingError


def run_straight(service, velocity, n=5, dt=0.1, start=Vec3()):
    for i in range(n):
        t = i * dt
        service.tick(Observation(start + velocity * t, t), dt)


def test_default_service_uses_multi_model():
    service = PredictionService()
    assert isinstance(service.estimator, MultiModelEstimator)
    assert not service.is_tracking


def test_kalman_selected_from_config():
    service = PredictionService(PredictionConfig(estimator="kalman"))
    assert isinstance(service.estimator, ScalarKalmanEstimator)


def test_explicit_estimator_instance_is_used():
    estimator = ScalarKalmanEstimator()
    service = PredictionService(estimator=estimator)
    assert service.estimator is estimator


def test_queries_before_first_tick_raise():
    service = PredictionService()
    with pytest.raises(TrackingError):
        service.predicted_position()
    with pytest.raises(TrackingError):
        service.intercept_point(Vec3(), 1.0)


def test_predicted_position_defaults_to_horizon():
    service = PredictionService(PredictionConfig(prediction_horizon=2.0))
    run_straight(service, Vec3(1.0, 0.0, 0.0))
    result = service.predict()
    assert result.lookahead == 2.0
    assert result.position.is_close(Vec3(0.4 + 2.0, 0.0, 0.0), 1e-6)
    assert service.predicted_position(1.0).is_close(Vec3(1.4, 0.0, 0.0), 1e-6)


def test_queries_are_pure_between_ticks():
    service = PredictionService()
    service.tick(Observation(Vec3(0.0, 0.0, 0.0), 0.0))
    service.tick(Observation(Vec3(1.0, 0.2, 0.0), 0.1))
    service.tick(Observation(Vec3(1.8, 0.7, 0.0), 0.2))
    service.tick(Observation(Vec3(2.4, 1.5, 0.0), 0.3))

    follower = Vec3(-10.0, 3.0, 0.0)
    first = (service.predicted_position(), service.intercept_point(follower, 8.0))
    for _ in range(5):
        assert service.predicted_position() == first[0]
        assert service.intercept_point(follower, 8.0) == first[1]


def test_intercept_uses_horizon_derived_velocity():
    service = PredictionService(PredictionConfig(max_lead_time=10.0))
    run_straight(service, Vec3(1.0, 0.0, 0.0))
    # target now at x=0.4 moving at 1 m/s, follower 5 m behind at 2 m/s
    sol = service.intercept_point(Vec3(-4.6, 0.0, 0.0), 2.0)
    assert sol.feasible
    assert sol.time_to_intercept == pytest.approx(5.0, abs=1e-6)
    assert sol.point.is_close(Vec3(5.4, 0.0, 0.0), 1e-5)


def test_infeasible_intercept_falls_back_to_prediction():
    service = PredictionService()
    run_straight(service, Vec3(10.0, 0.0, 0.0))
    sol = service.intercept_point(Vec3(-5.0, 0.0, 0.0), 1.0)
    assert not sol.feasible
    assert sol.time_to_intercept is None
    assert sol.point == service.predicted_position()


def test_follower_speed_defaults_to_config():
    service = PredictionService(PredictionConfig(follower_speed=2.0, max_lead_time=10.0))
    run_straight(service, Vec3(1.0, 0.0, 0.0))
    assert service.intercept_point(Vec3(-4.6, 0.0, 0.0)) == service.intercept_point(Vec3(-4.6, 0.0, 0.0), 2.0)


def test_tick_passes_frame_step_to_estimator():
    service = PredictionService()
    service.tick(Observation(Vec3(), 0.0), 0.02)
    service.tick(Observation(Vec3(1.0, 0.0, 0.0), 0.1), 0.02)
    assert service.estimator.state.frame_dt == 0.02
    assert service.ticks == 2


def test_duplicate_tick_returns_false():
    service = PredictionService()
    assert service.tick(Observation(Vec3(), 1.0))
    assert not service.tick(Observation(Vec3(5.0, 0.0, 0.0), 1.0))


def test_reset_ends_tracking():
    service = PredictionService()
    run_straight(service, Vec3(1.0, 0.0, 0.0))
    service.reset()
    assert not service.is_tracking
    assert service.ticks == 0
    with pytest.raises(TrackingError):
        service.predicted_position()


def test_get_state_snapshot():
    service = PredictionService(PredictionConfig(estimator="kalman"))
    assert "predicted_position" not in service.get_state()
    run_straight(service, Vec3(0.0, 1.0, 0.0))
    state = service.get_state()
    assert state["ticks"] == 5
    assert state["estimator"]["estimator"] == "kalman"
    assert set(state["predicted_position"]) == {"x", "y", "z"}


@pytest.mark.parametrize("estimator", ["multi_model", "kalman"])
def test_both_estimators_share_the_contract(estimator):
    service = PredictionService(PredictionConfig(estimator=estimator))
    run_straight(service, Vec3(1.0, 1.0, 0.0), n=30)
    predicted = service.predicted_position(1.0)
    current = service.estimator.position
    assert predicted.x > current.x
    assert predicted.y > current.y
    assert service.intercept_point(Vec3(-10.0, -10.0, 0.0), 5.0).feasible
