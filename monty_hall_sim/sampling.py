"""Sampling utilities for Monty Hall Simulator.

Centralized, reproducible randomness for building games and picking doors.
"""

from __future__ import annotations

import numpy as np

from monty_hall_sim.models import CAR, DOORS, GOAT, Arrangement


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def create_game(rng: np.random.Generator | None = None) -> Arrangement:
    """Hide one car and two goats behind three doors.

    Args:
        rng: Random number generator

    Returns:
        Arrangement with the car at a uniformly random door
    """
    if rng is None:
        rng = make_rng()

    prizes = np.array([GOAT, GOAT, CAR])
    return Arrangement(tuple(str(p) for p in rng.permutation(prizes)))


def select_door(rng: np.random.Generator | None = None) -> int:
    """Pick the contestant's first door uniformly from 1..3."""
    if rng is None:
        rng = make_rng()

    return int(rng.integers(DOORS[0], DOORS[-1], endpoint=True))
