"""
Drivetrain subsystem.
Mixes motion requests and sends the resulting powers to the motor sink.
"""

from typing import Optional

from ..utils.data_structures import MotionRequest, MotorPowers
from ..utils.logger import get_logger
from .actuators import ActuatorSink
from .mixer import MecanumMixer


class Drivetrain:
    """Four-motor mecanum drivetrain (open loop)."""

    def __init__(self, sink: ActuatorSink, speed: float = 1.0):
        """
        Initialize drivetrain.

        Args:
            sink: Actuator sink for the four motors
            speed: The max speed (unless otherwise specified) to use for driving
        """
        self.sink = sink
        self.mixer = MecanumMixer(default_speed=speed)
        self.logger = get_logger(__name__)

    @property
    def speed(self) -> float:
        return self.mixer.default_speed

    @speed.setter
    def speed(self, value: float):
        self.mixer.default_speed = value

    def drive(self, angle: float, magnitude: float, turn: float,
              slow: bool = False, speed: Optional[float] = None) -> MotorPowers:
        """
        Drive the robot in a direction.

        Args:
            angle: Direction in radians, positive is clockwise from the
                positive x-axis, e.g. +pi/2 is forward
            magnitude: 0 to 1.0, the length of the drive vector
            turn: -1.0 (full anticlockwise) to 1.0 (full clockwise)
            slow: If True drive at half of the subsystem's speed
            speed: Max motor power for this call, ignores the subsystem's speed

        Returns:
            The powers written to the sink, before motor polarity
        """
        powers = self.mixer.mix(angle, magnitude, turn, slow=slow, speed=speed)
        self.logger.debug(
            f"drive angle={angle:.3f} magnitude={magnitude:.2f} turn={turn:.2f} -> "
            f"FL={powers.front_left:.2f} FR={powers.front_right:.2f} "
            f"BL={powers.back_left:.2f} BR={powers.back_right:.2f}"
        )
        self.sink.write_powers(powers)
        return powers

    def drive_request(self, request: MotionRequest) -> MotorPowers:
        """Drive from a MotionRequest."""
        return self.drive(request.angle, request.magnitude, request.turn,
                          slow=request.slow, speed=request.speed)

    def stop(self) -> bool:
        """Set all four motors to zero power."""
        self.logger.debug("stop")
        return self.sink.stop()
