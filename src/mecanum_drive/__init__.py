"""
Open-loop mecanum drivetrain mixing for four-motor robots.
"""

__version__ = "0.1.0"
