"""Argument parsing, build information, error numbers and validated encoder parameter types for a video capture service."""

__version__ = "0.1.0"