"""
Unit tests for actuator sinks and the drivetrain subsystem.
"""

import math
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mecanum_drive.drivetrain.actuators import (
    DEFAULT_MOTOR_CHANNELS, MotorChannel, RecordingSink
)
from mecanum_drive.drivetrain.drivetrain import Drivetrain
from mecanum_drive.drivetrain.mixer import compute_motor_powers
from mecanum_drive.utils.data_structures import MotionRequest, MotorPowers


class TestRecordingSink(unittest.TestCase):
    """Test polarity and ordering at the sink."""

    def test_default_channels(self):
        sink = RecordingSink()
        self.assertEqual([c.wheel_id for c in sink.channels], ['FL', 'FR', 'BL', 'BR'])
        self.assertEqual([c.name for c in sink.channels],
                         ['frontLeft', 'frontRight', 'backLeft', 'backRight'])
        self.assertEqual([c.inverted for c in sink.channels], [False, False, False, True])

    def test_wrong_channel_count(self):
        with self.assertRaises(ValueError):
            RecordingSink(DEFAULT_MOTOR_CHANNELS[:3])

    def test_inverted_channel_is_negated(self):
        sink = RecordingSink()
        sink.write_powers(MotorPowers(0.1, 0.2, 0.3, 0.4))
        self.assertEqual(sink.last_raw(), (0.1, 0.2, 0.3, -0.4))

    def test_write_order(self):
        sink = RecordingSink()
        sink.write_powers([0.5, 0.5, 0.5, 0.5])
        self.assertEqual([wheel_id for wheel_id, _ in sink.history], ['FL', 'FR', 'BL', 'BR'])

    def test_set_power_single_channel(self):
        sink = RecordingSink()
        self.assertTrue(sink.set_power(3, 0.25))
        self.assertEqual(sink.history, [('BR', -0.25)])

    def test_write_powers_wrong_length(self):
        sink = RecordingSink()
        with self.assertRaises(ValueError):
            sink.write_powers([0.5, 0.5])
        with self.assertRaises(ValueError):
            sink.write_powers([0.5, 0.5, 0.5, 0.5, 0.5])
        self.assertEqual(sink.history, [])

    def test_custom_polarity(self):
        channels = [MotorChannel("m0", "A", inverted=True), MotorChannel("m1", "B"),
                    MotorChannel("m2", "C"), MotorChannel("m3", "D")]
        sink = RecordingSink(channels)
        sink.write_powers([1.0, 1.0, 1.0, 1.0])
        self.assertEqual(sink.last_raw(), (-1.0, 1.0, 1.0, 1.0))

    def test_stop_zeroes_all(self):
        sink = RecordingSink()
        sink.write_powers([1.0, -1.0, 0.5, -0.5])
        self.assertTrue(sink.stop())
        for power in sink.last_raw():
            self.assertEqual(power, 0.0)


class TestDrivetrain(unittest.TestCase):
    """Test drivetrain drive/stop."""

    def setUp(self):
        self.sink = RecordingSink()
        self.drivetrain = Drivetrain(self.sink, speed=0.8)

    def test_initialization(self):
        self.assertEqual(self.drivetrain.speed, 0.8)
        self.assertEqual(self.drivetrain.mixer.default_speed, 0.8)

    def test_speed_setter(self):
        self.drivetrain.speed = 0.5
        self.assertEqual(self.drivetrain.mixer.default_speed, 0.5)

    def test_drive_writes_powers(self):
        powers = self.drivetrain.drive(math.pi / 2, 1.0, 0.0)
        self.assertEqual(powers, compute_motor_powers(math.pi / 2, 1.0, 0.0, 0.8))
        fl, fr, bl, br = self.sink.last_raw()
        self.assertAlmostEqual(fl, 0.8)
        self.assertAlmostEqual(fr, 0.8)
        self.assertAlmostEqual(bl, 0.8)
        self.assertAlmostEqual(br, -0.8)

    def test_drive_slow(self):
        powers = self.drivetrain.drive(0.0, 1.0, 0.0, slow=True)
        self.assertEqual(powers, compute_motor_powers(0.0, 1.0, 0.0, 0.4))

    def test_drive_speed_override(self):
        powers = self.drivetrain.drive(0.0, 1.0, 0.0, speed=1.0)
        self.assertEqual(powers, compute_motor_powers(0.0, 1.0, 0.0, 1.0))

    def test_drive_request(self):
        request = MotionRequest(angle=0.0, magnitude=0.0, turn=0.5, speed=1.0)
        powers = self.drivetrain.drive_request(request)
        self.assertEqual(powers, MotorPowers(0.5, -0.5, -0.5, 0.5))
        self.assertEqual(self.sink.last_raw(), (0.5, -0.5, -0.5, -0.5))

    def test_stop_after_drive(self):
        self.drivetrain.drive(1.0, 1.0, 0.3)
        self.drivetrain.stop()
        self.assertEqual(len(self.sink.history), 8)
        for power in self.sink.last_raw():
            self.assertEqual(power, 0.0)


if __name__ == "__main__":
    unittest.main()
