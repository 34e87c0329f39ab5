"""Simulation engine for Monty Hall Simulator.

Contains the single-round runner and the batch runner.
"""

from __future__ import annotations

import logging
from numbers import Integral

import numpy as np

from monty_hall_sim.metrics import format_table, proportion_table
from monty_hall_sim.models import (
    BatchResult,
    InvalidTrialCount,
    RoundResult,
    Strategy,
)
from monty_hall_sim.sampling import create_game, make_rng, select_door
from monty_hall_sim.strategies import change_door, determine_winner, open_goat_door

logger = logging.getLogger(__name__)


def validate_trial_count(n: int) -> int:
    """Check the number of games and return it as a plain int."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidTrialCount(f"Number of games must be an integer, got {n!r}")
    if n < 1:
        raise InvalidTrialCount(f"Number of games must be at least 1, got {n}")
    return int(n)


def play_game(rng: np.random.Generator | None = None) -> RoundResult:
    """Play one round and judge both strategies on it.

    Stay and switch share the same arrangement, first pick and reveal, so a
    round is a counterfactual pair: exactly one of the two wins.
    """
    if rng is None:
        rng = make_rng()

    # Step 1: Set up the doors and the contestant's first pick
    game = create_game(rng)
    first_pick = select_door(rng)

    # Step 2: Host reveals a goat
    opened_door = open_goat_door(game, first_pick, rng)

    # Step 3: Final door and outcome per strategy
    outcomes = {}
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        final_pick = change_door(strategy is Strategy.STAY, opened_door, first_pick)
        outcomes[strategy] = determine_winner(final_pick, game)

    logger.debug(
        "game=%s pick=%d opened=%d stay=%s switch=%s",
        list(game),
        first_pick,
        opened_door,
        outcomes[Strategy.STAY].value,
        outcomes[Strategy.SWITCH].value,
    )

    return RoundResult(
        arrangement=game,
        first_pick=first_pick,
        opened_door=opened_door,
        outcomes=outcomes,
    )


def play_n_games(
    n: int = 100, rng: np.random.Generator | None = None, show: bool = True
) -> BatchResult:
    """Play n rounds and collect 2n (strategy, outcome) records.

    Args:
        n: Number of rounds, a positive integer
        rng: Random number generator shared by all rounds
        show: Print the rounded proportion table when done

    Returns:
        BatchResult with n "stay" and n "switch" records in play order
    """
    n = validate_trial_count(n)
    if rng is None:
        rng = make_rng()

    batch = BatchResult()
    step = max(1, n // 20)
    for i in range(n):
        batch.extend(play_game(rng))

        # Lightweight progress logging every ~5% or on last
        if n >= 20 and ((i + 1) % step == 0 or i + 1 == n):
            logger.info("Progress: %d/%d", i + 1, n)

    rates = batch.win_rates()
    logger.info(
        "Played %d games: stay won %.3f, switch won %.3f",
        n,
        rates[Strategy.STAY],
        rates[Strategy.SWITCH],
    )

    if show:
        print(format_table(proportion_table(batch)))

    return batch
