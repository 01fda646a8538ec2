"""Closed-form intercept for a fixed-speed follower chasing a linear target.

The target is modelled as ``P + V*t``. A follower leaving ``Q`` at speed
``s`` meets it at the smallest ``t > 0`` with ``|P + V*t - Q| = s*t``;
squaring gives

    (|V|^2 - s^2) t^2 + 2 (R . V) t + |R|^2 = 0,   R = P - Q
"""

from __future__ import annotations
import logging
import math
from typing import Optional
from pursuit.core.constants import DEFAULT_MAX_LEAD_TIME, QUADRATIC_EPSILON
from pursuit.core.track import InterceptSolution
from pursuit.core.vec import Vec3
from pursuit.utils.errors import ValidationError
from pursuit.utils.math_utils import MIN_DIVISOR, is_valid_number

logger = logging.getLogger(__name__)


def intercept_time(follower_pos:Vec3, target_pos:Vec3, target_vel:Vec3, follower_speed:float) -> Optional[float]:
    """Smallest non-negative intercept time, or None if the follower can never catch up."""
    r = target_pos - follower_pos; v = target_vel; s = follower_speed
    a = v.dot(v) - s*s; b = 2.0 * r.dot(v); c = r.dot(r)
    if c <= QUADRATIC_EPSILON * QUADRATIC_EPSILON: return 0.0
    if abs(a) < QUADRATIC_EPSILON:
        if abs(b) <= QUADRATIC_EPSILON: return None
        t = -c / b
        return t if t > 0 else None
    disc = b*b - 4*a*c
    if disc < 0: return None
    sd = math.sqrt(disc); t1 = (-b - sd)/(2*a); t2 = (-b + sd)/(2*a)
    poss = [t for t in (t1, t2) if t > 0]
    if not poss: return None
    return min(poss)


def solve_intercept(follower_position: Vec3, target_position: Vec3, target_velocity: Vec3,
                    follower_speed: float, max_lead_time: float = DEFAULT_MAX_LEAD_TIME,
                    fallback_point: Optional[Vec3] = None) -> InterceptSolution:
    """Compute the pursuit point for a follower.

    Args:
        follower_position: Follower position now
        target_position: Target position now
        target_velocity: Linear target velocity estimate
        follower_speed: Follower speed (>= 0)
        max_lead_time: Cap applied to the intercept time
        fallback_point: Aim point returned when no intercept exists
            (defaults to ``target_position``)

    Returns:
        InterceptSolution: ``feasible`` False means ``point`` is the fallback
        and ``time_to_intercept`` is None
    """
    if not is_valid_number(follower_speed) or follower_speed < 0:
        raise ValidationError(f"follower_speed must be a non-negative number (got {follower_speed})")
    if not is_valid_number(max_lead_time) or max_lead_time < 0:
        raise ValidationError(f"max_lead_time must be a non-negative number (got {max_lead_time})")

    tau = intercept_time(follower_position, target_position, target_velocity, follower_speed)
    if tau is None:
        point = fallback_point if fallback_point is not None else target_position
        logger.debug(f"No intercept for follower at {follower_position} (speed {follower_speed:.2f})")
        return InterceptSolution(point=point, time_to_intercept=None, feasible=False)

    tau = min(tau, max_lead_time)
    return InterceptSolution(point=target_position + target_velocity * tau,
                             time_to_intercept=tau, feasible=True)


def effective_velocity(current_position: Vec3, predicted_position: Vec3, horizon: float) -> Vec3:
    """Straight-line velocity implied by a prediction ``horizon`` seconds ahead."""
    if horizon <= MIN_DIVISOR:
        return Vec3()
    return (predicted_position - current_position) / horizon


class InterceptSolver:
    """Intercept solver bound to a maximum lead time."""

    def __init__(self, max_lead_time: float = DEFAULT_MAX_LEAD_TIME):
        if not is_valid_number(max_lead_time) or max_lead_time < 0:
            raise ValidationError(f"max_lead_time must be a non-negative number (got {max_lead_time})")
        self.max_lead_time = max_lead_time

    def solve(self, follower_position: Vec3, target_position: Vec3, target_velocity: Vec3,
              follower_speed: float, fallback_point: Optional[Vec3] = None) -> InterceptSolution:
        return solve_intercept(follower_position, target_position, target_velocity,
                               follower_speed, self.max_lead_time, fallback_point)
