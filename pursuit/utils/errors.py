# pursuit/utils/errors.py
"""Error types and formatting utilities."""


class PursuitError(Exception):
    """Errors reported to the caller - must be clear and actionable."""
    pass


class ValidationError(PursuitError, ValueError):
    """Invalid configuration or input shape."""
    pass


class TrackingError(PursuitError):
    """Query made against an estimator that has no observations."""
    pass


def format_error(error_type, message, suggestion=None):
    """Format an error message for display.

    Args:
        error_type (str): Type of error (e.g., "INVALID_CONFIG", "NO_TRACK")
        message (str): Error message
        suggestion (str, optional): Helpful suggestion for the user

    Returns:
        str: Formatted error message
    """
    output = f"⚠ {error_type}: {message}"
    if suggestion:
        output += f"\n  → {suggestion}"
    return output


def invalid_range_error(param_name, min_val=None, max_val=None, current_val=None):
    """Build the message for a parameter outside its allowed range.

    Args:
        param_name (str): Parameter name
        min_val: Minimum allowed value (None if unbounded)
        max_val: Maximum allowed value (None if unbounded)
        current_val: Current invalid value (optional)

    Returns:
        str: Error message
    """
    if min_val is not None and max_val is not None:
        message = f"{param_name} must be between {min_val} and {max_val}"
    elif min_val is not None:
        message = f"{param_name} must be >= {min_val}"
    else:
        message = f"{param_name} must be <= {max_val}"
    if current_val is not None:
        message += f" (got {current_val})"
    return message
