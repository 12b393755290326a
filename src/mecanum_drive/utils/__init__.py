"""
Utility functions for logging and data structures.
"""

from .logger import setup_logger, get_logger
from .data_structures import MotionRequest, MotorPowers

__all__ = ['setup_logger', 'get_logger', 'MotionRequest', 'MotorPowers']
