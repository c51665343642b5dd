"""Neural-network operators with gradients, example trainings and run helpers, built on NumPy."""

__version__ = "0.1.0"