#!/usr/bin/env python3
"""
Teleop entry point for the mecanum drivetrain.
Reads single-key commands from stdin and drives the robot open loop.
"""

import argparse
import logging
import math
import signal
import sys
import time
from pathlib import Path

# Add src to path for package imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from mecanum_drive.drivetrain import ArduinoInterface, ArduinoMotorSink, Drivetrain, RecordingSink
from mecanum_drive.utils.config import drive_speed_from_config, load_config, motor_channels_from_config
from mecanum_drive.utils.data_structures import MotionRequest
from mecanum_drive.utils.logger import setup_logger

# Angles are clockwise from the +x axis, so +pi/2 is forward and pi is left
KEY_DIRECTIONS = {
    'w': math.pi / 2,
    's': -math.pi / 2,
    'a': math.pi,
    'd': 0.0,
}
KEY_TURNS = {
    'q': -1.0,  # anticlockwise
    'e': 1.0,  # clockwise
}


def request_for_key(key: str, magnitude: float = 1.0, turn: float = 0.5, slow: bool = False):
    """
    Map a teleop key to a MotionRequest.

    Returns:
        MotionRequest, or None if the key is not a motion key
    """
    if key in KEY_DIRECTIONS:
        return MotionRequest(angle=KEY_DIRECTIONS[key], magnitude=magnitude, turn=0.0, slow=slow)
    if key in KEY_TURNS:
        return MotionRequest(angle=0.0, magnitude=0.0, turn=KEY_TURNS[key] * turn, slow=slow)
    return None


class Teleop:
    """Keyboard teleop loop around a Drivetrain."""

    def __init__(self, config_path=None, dry_run=False):
        """
        Initialize teleop.

        Args:
            config_path: Path to robot_config.yaml
            dry_run: Record motor powers in memory instead of using the serial port
        """
        if config_path is None:
            config_path = Path(__file__).parent / "config" / "robot_config.yaml"
        config = load_config(config_path)

        logging_config = config.get('logging') or {}
        level = getattr(logging, str(logging_config.get('level', 'INFO')).upper(), logging.INFO)
        self.logger = setup_logger("mecanum_drive", log_file=logging_config.get('log_file'), level=level)

        channels = motor_channels_from_config(config)
        self.arduino = None
        if dry_run:
            self.logger.info("Dry run: motor powers are recorded, not sent")
            sink = RecordingSink(channels)
        else:
            arduino_config = (config.get('motors') or {}).get('arduino') or {}
            self.arduino = ArduinoInterface(
                port=arduino_config.get('port'),
                baud_rate=arduino_config.get('baud_rate', 115200),
                timeout=arduino_config.get('timeout', 1.0)
            )
            sink = ArduinoMotorSink(self.arduino, channels)

        self.drivetrain = Drivetrain(sink, speed=drive_speed_from_config(config))

        teleop_config = config.get('teleop') or {}
        self.magnitude = teleop_config.get('magnitude', 1.0)
        self.turn = teleop_config.get('turn', 0.5)
        self.hold_time = teleop_config.get('hold_time', 0.5)
        self.slow = False
        self.running = False

        signal.signal(signal.SIGTERM, self.signal_handler)

    def signal_handler(self, signum, frame):
        """Handle shutdown signals."""
        self.logger.info("Received shutdown signal, stopping...")
        self.shutdown()
        sys.exit(0)

    def start(self) -> bool:
        if self.arduino is not None and not self.arduino.connect():
            self.logger.error("Failed to connect to Arduino")
            return False
        self.run()
        return True

    def shutdown(self):
        """Stop the motors and release the port; later calls do nothing."""
        if not self.running:
            return
        self.running = False
        self.drivetrain.stop()
        if self.arduino is not None:
            self.arduino.disconnect()
        self.logger.info("Teleop stopped")

    def handle_key(self, key: str) -> bool:
        """
        Execute one teleop key.

        Returns:
            False when the loop should exit
        """
        if key == 'x':
            return False
        if key in (' ', 'space', ''):
            self.drivetrain.stop()
            return True
        if key == 'z':
            self.slow = not self.slow
            self.logger.info(f"Slow mode: {self.slow}")
            return True

        request = request_for_key(key, self.magnitude, self.turn, self.slow)
        if request is None:
            self.logger.warning(f"Unknown command: {key!r}")
            return True

        self.drivetrain.drive_request(request)
        time.sleep(self.hold_time)
        self.drivetrain.stop()
        return True

    def run(self):
        self.logger.info("Entering teleop loop...")
        self.running = True
        try:
            while True:
                key = input("\nCommand (w/a/s/d move, q/e turn, z slow, space stop, x exit): ")
                if not self.handle_key(key.strip().lower() or ' '):
                    break
        except (KeyboardInterrupt, EOFError):
            self.logger.info("Input closed")
        finally:
            self.shutdown()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Mecanum drivetrain teleop")
    parser.add_argument('--config', type=Path, default=None, help="Path to robot_config.yaml")
    parser.add_argument('--dry-run', action='store_true', help="Do not open the serial port")
    args = parser.parse_args()

    teleop = Teleop(config_path=args.config, dry_run=args.dry_run)
    if not teleop.start():
        sys.exit(1)


if __name__ == "__main__":
    main()
