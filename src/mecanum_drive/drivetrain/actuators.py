"""
Actuator sinks for the four drive motors.
Motor polarity is applied here, where a power is sent to a physical channel,
so the mixing math stays hardware-agnostic.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..utils.data_structures import MotorPowers

MOTOR_COUNT = 4


@dataclass(frozen=True)
class MotorChannel:
    """A named physical motor output."""
    name: str  # Hardware name, e.g. "frontLeft"
    wheel_id: str  # Short id used on the wire, e.g. "FL"
    inverted: bool = False  # Wired with reversed rotational sense


# Output order matches MotorPowers; the back-right motor is mounted reversed
DEFAULT_MOTOR_CHANNELS = (
    MotorChannel("frontLeft", "FL"),
    MotorChannel("frontRight", "FR"),
    MotorChannel("backLeft", "BL"),
    MotorChannel("backRight", "BR", inverted=True),
)


class ActuatorSink(ABC):
    """Sink accepting a channel index and a power value."""

    def __init__(self, channels: Optional[Sequence[MotorChannel]] = None):
        """
        Initialize sink.

        Args:
            channels: Four motor channels in output order (None for defaults)
        """
        channels = tuple(channels) if channels is not None else DEFAULT_MOTOR_CHANNELS
        if len(channels) != MOTOR_COUNT:
            raise ValueError(f"Expected {MOTOR_COUNT} motor channels, got {len(channels)}")
        self.channels = channels

    @abstractmethod
    def _write(self, channel: MotorChannel, power: float) -> bool:
        """Send a raw (polarity-corrected) power to one physical motor."""

    def set_power(self, index: int, power: float) -> bool:
        """
        Set one motor's power.

        Args:
            index: Channel index in output order (0-3)
            power: Power in [-1.0, 1.0] before polarity correction

        Returns:
            True if the power was written
        """
        channel = self.channels[index]
        raw = -power if channel.inverted else power
        return self._write(channel, raw)

    def write_powers(self, powers: Sequence[float]) -> bool:
        """Write all four powers in fixed order. Not atomic across channels."""
        if len(powers) != MOTOR_COUNT:
            raise ValueError(f"Expected {MOTOR_COUNT} motor powers, got {len(powers)}")
        results = [self.set_power(i, p) for i, p in enumerate(powers)]
        return all(results)

    def stop(self) -> bool:
        """Set all four motors to zero."""
        return self.write_powers(MotorPowers.zero())


class RecordingSink(ActuatorSink):
    """In-memory sink that records raw writes (no hardware)."""

    def __init__(self, channels: Optional[Sequence[MotorChannel]] = None):
        super().__init__(channels)
        self.raw_powers: Dict[str, float] = {c.wheel_id: 0.0 for c in self.channels}
        self.history: List[Tuple[str, float]] = []

    def _write(self, channel: MotorChannel, power: float) -> bool:
        self.raw_powers[channel.wheel_id] = power
        self.history.append((channel.wheel_id, power))
        return True

    def last_raw(self) -> Tuple[float, ...]:
        """Last raw power of each channel, in output order."""
        return tuple(self.raw_powers[c.wheel_id] for c in self.channels)
