"""Distribute mineral rocks among weight-limited space probes."""

__version__ = "0.1.0"