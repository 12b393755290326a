#!/usr/bin/env python3
"""
Hardware wheel check for the mecanum drivetrain.
Spins each wheel individually, then runs the basic motion patterns.
Use it to confirm wheel order and polarity against the robot's wiring.
"""

import math
import sys
import time
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mecanum_drive.drivetrain import ArduinoInterface, ArduinoMotorSink, Drivetrain
from mecanum_drive.utils.config import drive_speed_from_config, load_config, motor_channels_from_config

CHECK_POWER = 0.5
SPIN_TIME = 1.5
PATTERN_TIME = 2.0

PATTERNS = [
    ("Forward", math.pi / 2, 1.0, 0.0),
    ("Backward", -math.pi / 2, 1.0, 0.0),
    ("Strafe right", 0.0, 1.0, 0.0),
    ("Strafe left", math.pi, 1.0, 0.0),
    ("Turn clockwise", 0.0, 0.0, 1.0),
    ("Turn anticlockwise", 0.0, 0.0, -1.0),
]


def check_individual_wheels(sink):
    """Spin each wheel forward then backward."""
    print("\n" + "=" * 50)
    print("CHECKING INDIVIDUAL WHEELS")
    print("=" * 50)

    for index, channel in enumerate(sink.channels):
        print(f"\n--- {channel.name} ({channel.wheel_id}, inverted={channel.inverted}) ---")
        for power in (CHECK_POWER, -CHECK_POWER):
            print(f"  Power {power:+.2f}...")
            sink.set_power(index, power)
            time.sleep(SPIN_TIME)
            sink.set_power(index, 0.0)
            time.sleep(0.5)


def check_motion_patterns(drivetrain):
    """Drive each pattern for a fixed time at half speed."""
    print("\n" + "=" * 50)
    print("CHECKING MOTION PATTERNS")
    print("=" * 50)

    for name, angle, magnitude, turn in PATTERNS:
        powers = drivetrain.drive(angle, magnitude, turn, slow=True)
        print(f"\n--- {name}: FL={powers.front_left:+.2f} FR={powers.front_right:+.2f} "
              f"BL={powers.back_left:+.2f} BR={powers.back_right:+.2f}")
        time.sleep(PATTERN_TIME)
        drivetrain.stop()
        time.sleep(1.0)


def main():
    """Run the wheel check."""
    print("Make sure the robot is on blocks or in a safe area!")
    print("Starting in 3 seconds...")
    time.sleep(3)

    config = load_config(Path(__file__).parent.parent / "config" / "robot_config.yaml")
    arduino_config = config.get('motors', {}).get('arduino', {})
    arduino = ArduinoInterface(
        port=arduino_config.get('port'),
        baud_rate=arduino_config.get('baud_rate', 115200),
        timeout=arduino_config.get('timeout', 1.0)
    )
    if not arduino.connect():
        print("ERROR: Failed to connect to Arduino")
        return 1

    sink = ArduinoMotorSink(arduino, motor_channels_from_config(config))
    drivetrain = Drivetrain(sink, speed=drive_speed_from_config(config))

    try:
        check_individual_wheels(sink)
        check_motion_patterns(drivetrain)
        print("\nWheel check complete")
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    finally:
        drivetrain.stop()
        arduino.disconnect()


if __name__ == "__main__":
    sys.exit(main())
