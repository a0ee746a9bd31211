"""Threaded dining philosophers simulation: argument parsing, timing, simulation and command line."""

__version__ = "0.1.0"
__all__ = ["args", "timing", "simulation", "cli"]