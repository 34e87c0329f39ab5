"""Monty Hall Simulator

A tiny, readable simulator of the three-door Monty Hall game.
Uses NumPy only for deterministic, reproducible Monte Carlo simulations.
"""

__version__ = "0.1.0"
