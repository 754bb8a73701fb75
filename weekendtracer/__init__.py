"""A small path tracer, its ready-made scenes and Monte Carlo sampling experiments."""

__version__ = "0.1.0"