"""
Drivetrain module for mecanum mixing and motor output.
"""

from .mixer import MecanumMixer, clamp, compute_motor_powers
from .actuators import ActuatorSink, MotorChannel, RecordingSink, DEFAULT_MOTOR_CHANNELS
from .arduino_interface import ArduinoInterface, ArduinoMotorSink
from .drivetrain import Drivetrain

__all__ = ['MecanumMixer', 'clamp', 'compute_motor_powers', 'ActuatorSink', 'MotorChannel',
           'RecordingSink', 'DEFAULT_MOTOR_CHANNELS', 'ArduinoInterface', 'ArduinoMotorSink',
           'Drivetrain']
