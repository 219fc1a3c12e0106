"""Dining philosophers simulation with threads, forks and a monitor."""

__version__ = "1.0.0"
__all__ = ["bonus", "cli", "config", "numparse", "simulation", "timing"]