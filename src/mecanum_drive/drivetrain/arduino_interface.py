"""
Arduino Interface for USB Serial communication.
Sends per-wheel power commands to the motor board.
"""

import serial
import serial.tools.list_ports
import time
import threading
from typing import Optional, Sequence

from ..utils.logger import get_logger
from .actuators import ActuatorSink, MotorChannel
from .mixer import clamp

PORT_KEYWORDS = ['arduino', 'mega', 'usb serial', 'ch340', 'cp210', 'ftdi']
ARDUINO_VIDS = [0x2341, 0x2A03]  # Arduino LLC, Arduino.org


class ArduinoInterface:
    """Interface for communicating with the motor board via USB Serial."""

    def __init__(self, port=None, baud_rate=115200, timeout=1.0):
        """
        Initialize Arduino interface.

        Args:
            port: Serial port (None for auto-detect)
            baud_rate: Serial baud rate (default: 115200)
            timeout: Serial timeout in seconds
        """
        self.port = port
        self.baud_rate = baud_rate
        self.timeout = timeout
        self.serial_connection = None
        self.connected = False
        self.lock = threading.Lock()
        self.logger = get_logger(__name__)

    def find_arduino_port(self) -> Optional[str]:
        """Auto-detect Arduino port."""
        for port in serial.tools.list_ports.comports():
            description = (port.description or '').lower()
            if any(keyword in description for keyword in PORT_KEYWORDS):
                return port.device
            if getattr(port, 'vid', None) in ARDUINO_VIDS:
                return port.device
        return None

    def connect(self) -> bool:
        """Connect to Arduino."""
        if self.connected:
            return True

        if self.port is None:
            self.port = self.find_arduino_port()
            if self.port is None:
                self.logger.error("Could not find Arduino port")
                return False

        try:
            self.serial_connection = serial.Serial(
                port=self.port,
                baudrate=self.baud_rate,
                timeout=self.timeout,
                write_timeout=self.timeout
            )

            # Wait for Arduino to reset after the port opens
            time.sleep(2.0)

            self.serial_connection.reset_input_buffer()
            self.serial_connection.reset_output_buffer()
        except serial.SerialException as e:
            self.logger.error(f"Failed to connect to Arduino: {e}")
            self.connected = False
            return False

        self.connected = True
        self.logger.info(f"Connected to Arduino on {self.port}")
        return True

    def disconnect(self):
        """Disconnect from Arduino."""
        if self.serial_connection and self.serial_connection.is_open:
            self.serial_connection.close()
        self.connected = False
        self.serial_connection = None
        self.logger.info("Disconnected from Arduino")

    def send_command(self, command: str) -> bool:
        """
        Send command to Arduino.

        Args:
            command: Command string (e.g., "WHEEL:FL:50")

        Returns:
            True if command sent successfully
        """
        if not self.connected or not self.serial_connection:
            self.logger.error("Not connected to Arduino")
            return False

        try:
            with self.lock:
                self.serial_connection.write((command + '\n').encode('utf-8'))
                self.serial_connection.flush()
                return True
        except serial.SerialException as e:
            self.logger.error(f"Failed to send command {command!r}: {e}")
            self.connected = False
            return False

    def read_response(self, timeout=None) -> Optional[str]:
        """
        Read response from Arduino.

        Args:
            timeout: Timeout in seconds (None uses default)

        Returns:
            Response string or None if nothing is waiting
        """
        if not self.connected or not self.serial_connection:
            return None

        try:
            with self.lock:
                old_timeout = self.serial_connection.timeout
                if timeout is not None:
                    self.serial_connection.timeout = timeout
                try:
                    if self.serial_connection.in_waiting > 0:
                        return self.serial_connection.readline().decode('utf-8').strip()
                    return None
                finally:
                    self.serial_connection.timeout = old_timeout
        except serial.SerialException as e:
            self.logger.error(f"Error reading response: {e}")
            return None

    def set_wheel(self, wheel_id: str, percent: int) -> bool:
        """Send a single wheel power command (-100 to 100)."""
        if percent < -100 or percent > 100:
            self.logger.error(f"Wheel power must be between -100 and 100, got {percent}")
            return False
        return self.send_command(f"WHEEL:{wheel_id}:{percent}")

    def stop(self) -> bool:
        """Send stop command."""
        return self.send_command("STOP")

    def is_connected(self) -> bool:
        """Check if connected to Arduino."""
        return self.connected and self.serial_connection is not None and self.serial_connection.is_open


class ArduinoMotorSink(ActuatorSink):
    """Actuator sink that drives the four wheels through an ArduinoInterface."""

    def __init__(self, arduino: ArduinoInterface, channels: Optional[Sequence[MotorChannel]] = None):
        super().__init__(channels)
        self.arduino = arduino

    @staticmethod
    def to_percent(power: float) -> int:
        """Convert a power in [-1.0, 1.0] to the board's -100..100 range."""
        return int(round(clamp(-1.0, 1.0, power) * 100))

    def _write(self, channel: MotorChannel, power: float) -> bool:
        return self.arduino.set_wheel(channel.wheel_id, self.to_percent(power))

    def stop(self) -> bool:
        """Zero every wheel, then send the board-level stop."""
        zeroed = super().stop()
        return self.arduino.stop() and zeroed
