"""
Data structures for drivetrain commands.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional
import numpy as np


@dataclass
class MotionRequest:
    """Desired planar motion for one control cycle."""
    angle: float  # Direction (radians), 0 = +x axis, positive is clockwise, +pi/2 is forward
    magnitude: float  # Drive vector length (0-1)
    turn: float  # Rotation (-1 full anticlockwise, 1 full clockwise)
    slow: bool = False  # Drive at half of the default speed
    speed: Optional[float] = None  # Absolute speed override (ignores default and slow)


class MotorPowers(NamedTuple):
    """Four motor powers in output order, each in [-1.0, 1.0]."""
    front_left: float
    front_right: float
    back_left: float
    back_right: float

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [FL, FR, BL, BR]."""
        return np.array(self, dtype=float)

    @classmethod
    def from_array(cls, powers):
        """Create from a sequence of four powers."""
        fl, fr, bl, br = (float(p) for p in powers)
        return cls(fl, fr, bl, br)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0, 0.0)
