"""Discrete-event queueing simulation with generators, queues, workers and a command-line runner."""

__version__ = "0.1.0"
__all__ = ["__version__"]