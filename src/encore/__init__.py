"""Progression scoring engine for a music-career simulation."""

__version__ = "0.1.0"
