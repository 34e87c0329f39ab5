"""Host and contestant rules for Monty Hall Simulator.

Contains the host's reveal, the stay/switch resolution and the winner check.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from monty_hall_sim.models import (
    CAR,
    DOORS,
    GOAT,
    Arrangement,
    InvalidDoorIndex,
    Outcome,
    Prize,
    validate_door,
)


def open_goat_door(
    game: Arrangement | Sequence[Prize],
    pick: int,
    rng: np.random.Generator | None = None,
) -> int:
    """Choose the door the host opens.

    The host never opens the contestant's door and never reveals the car.
    When the contestant picked the car both other doors hide goats and the
    host chooses between them at random. Otherwise exactly one door is left
    and it is opened without consuming randomness.

    Args:
        game: Prizes behind the doors, an Arrangement or a 3-item sequence
        pick: Contestant's current door
        rng: Random number generator

    Returns:
        Index of a goat door different from pick
    """
    if not isinstance(game, Arrangement):
        game = Arrangement(game)
    pick = validate_door(pick, "pick")

    if game[pick] == CAR:
        if rng is None:
            rng = np.random.default_rng()
        goat_doors = [door for door in DOORS if game[door] == GOAT]
        return int(rng.choice(goat_doors))

    return next(door for door in DOORS if door != pick and game[door] != CAR)


def change_door(stay: bool, opened_door: int, pick: int) -> int:
    """Resolve the contestant's final door.

    Args:
        stay: Keep the first pick if True, otherwise switch
        opened_door: Door opened by the host
        pick: Contestant's first door

    Returns:
        Final door index
    """
    opened_door = validate_door(opened_door, "opened_door")
    pick = validate_door(pick, "pick")

    if stay:
        return pick

    if opened_door == pick:
        raise InvalidDoorIndex("opened_door must differ from pick to switch")

    (final_pick,) = (door for door in DOORS if door not in (opened_door, pick))
    return final_pick


def determine_winner(
    final_pick: int, game: Arrangement | Sequence[Prize]
) -> Outcome:
    """WIN if the car is behind the final door, LOSE otherwise."""
    if not isinstance(game, Arrangement):
        game = Arrangement(game)
    final_pick = validate_door(final_pick, "final_pick")
    return Outcome.WIN if game[final_pick] == CAR else Outcome.LOSE
