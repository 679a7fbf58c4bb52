"""Rotation representations: Euler angles, axis-angle, quaternions, look rotation."""

__version__ = "0.1.0"
