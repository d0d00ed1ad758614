"""Rotation helpers, joint command and state records, wire formats and per-cycle control logic for quadruped robots and their joint actuators."""

__version__ = "0.1.0"