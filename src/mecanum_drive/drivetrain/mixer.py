"""
Mecanum wheel mixer.
Converts a desired planar motion (direction, magnitude, turn) into four
clamped motor powers.
"""

import math
from typing import Optional

import numpy as np

from ..utils.data_structures import MotionRequest, MotorPowers

SLOW_FACTOR = 0.5
MIN_SCALE_DENOMINATOR = 1e-9


def clamp(minimum: float, maximum: float, value: float) -> float:
    """
    Clamp a value within a range.

    Args:
        minimum: The minimum value
        maximum: The maximum value
        value: The value to clamp

    Returns:
        A value between minimum and maximum inclusive
    """
    return min(max(value, minimum), maximum)


def compute_motor_powers(angle: float, magnitude: float, turn: float, speed: float) -> MotorPowers:
    """
    Mix a motion into motor powers for X-pattern mecanum wheels.

    The drive direction is rotated pi/4 clockwise so that the cosine and
    sine of the result are the powers of the two diagonal wheel pairs.
    Both are divided by the larger of the two so that at least one pair
    runs at full magnitude whatever the direction.

    Args:
        angle: Drive direction in radians, positive is clockwise from the
            positive x-axis, e.g. +pi/2 is forward
        magnitude: Length of the drive vector (0-1, not clamped)
        turn: Turn power, -1.0 is full anticlockwise, 1.0 full clockwise
        speed: Maximum motor power (i.e. 0.40 is 40% of max speed)

    Returns:
        MotorPowers (FL, FR, BL, BR), each clamped to [-1.0, 1.0]
    """
    left_turn = turn
    right_turn = -turn

    theta = angle - math.pi / 4.0

    forward = math.cos(theta)
    side = math.sin(theta)

    # cos and sin never vanish together; the floor only guards against NaN
    denominator = max(abs(forward), abs(side), MIN_SCALE_DENOMINATOR)
    forward_power = magnitude * (forward / denominator)
    side_power = magnitude * (side / denominator)

    powers = speed * np.array([
        forward_power + left_turn,
        side_power + right_turn,
        side_power + left_turn,
        forward_power + right_turn,
    ])

    return MotorPowers.from_array(np.clip(powers, -1.0, 1.0))


class MecanumMixer:
    """Open-loop mixer holding the default maximum speed."""

    def __init__(self, default_speed: float = 1.0):
        """
        Initialize mixer.

        Args:
            default_speed: Max speed used unless a call overrides it. Values
                outside [0, 1] are accepted and only change the gain.
        """
        self.default_speed = default_speed

    def effective_speed(self, slow: bool = False, speed: Optional[float] = None) -> float:
        """Resolve the speed scale for one call; an explicit speed wins over slow."""
        if speed is not None:
            return speed
        return self.default_speed * (SLOW_FACTOR if slow else 1.0)

    def mix(self, angle: float, magnitude: float, turn: float,
            slow: bool = False, speed: Optional[float] = None) -> MotorPowers:
        """
        Compute motor powers at the default, halved, or overridden speed.

        Args:
            angle: Drive direction (radians, clockwise from +x, +pi/2 forward)
            magnitude: Drive vector length (0-1)
            turn: Turn power (-1 to 1, positive clockwise)
            slow: If True drive at half of the default speed
            speed: Absolute max motor power, ignores the default and slow

        Returns:
            MotorPowers (FL, FR, BL, BR)
        """
        return compute_motor_powers(angle, magnitude, turn, self.effective_speed(slow, speed))

    def mix_request(self, request: MotionRequest) -> MotorPowers:
        """Compute motor powers for a MotionRequest."""
        return self.mix(request.angle, request.magnitude, request.turn,
                        slow=request.slow, speed=request.speed)
