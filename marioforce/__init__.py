"""Bruteforce joystick inputs to steer Mario toward a target state."""

__version__ = "0.1.0"

__all__ = ["bounds", "bruteforcer", "defaults", "params"]