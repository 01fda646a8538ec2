from pursuit.utils.errors import (
    PursuitError,
    TrackingError,
    ValidationError,
    format_error,
    invalid_range_error,
)


def test_error_hierarchy():
    assert issubclass(ValidationError, PursuitError)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(TrackingError, PursuitError)


def test_format_error_with_suggestion():
    text = format_error("NO_TRACK", "No observations", "Tick the service first")
    assert "NO_TRACK: No observations" in text
    assert "Tick the service first" in text


def test_invalid_range_error_messages():
    assert invalid_range_error("speed", 0.0, None, -1.0) == "speed must be >= 0.0 (got -1.0)"
    assert invalid_range_error("alpha", 0.0, 1.0) == "alpha must be between 0.0 and 1.0"
