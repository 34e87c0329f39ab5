"""Data models for Monty Hall Simulator.

Contains Arrangement, Strategy, Outcome and result containers with basic validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Iterator, Literal

Prize = Literal["car", "goat"]

CAR: Prize = "car"
GOAT: Prize = "goat"
DOORS: tuple[int, int, int] = (1, 2, 3)


class InvalidDoorIndex(ValueError):
    """Raised when a door index is not one of 1, 2 or 3."""


class InvalidTrialCount(ValueError):
    """Raised when the number of games to play is not a positive integer."""


class Strategy(str, Enum):
    """Contestant strategy after the host's reveal."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of a single game for one strategy."""

    WIN = "WIN"
    LOSE = "LOSE"


def validate_door(door: int, name: str = "door") -> int:
    """Check a door index and return it as a plain int."""
    if isinstance(door, bool) or not isinstance(door, Integral):
        raise InvalidDoorIndex(f"{name} must be an integer in {DOORS}, got {door!r}")
    if int(door) not in DOORS:
        raise InvalidDoorIndex(f"{name} must be one of {DOORS}, got {door}")
    return int(door)


@dataclass(frozen=True)
class Arrangement:
    """Prizes behind the three doors, addressed by door index 1..3."""

    labels: tuple[Prize, ...]

    def __post_init__(self) -> None:
        """Validate door count and prize multiset."""
        labels = tuple(self.labels)
        object.__setattr__(self, "labels", labels)
        if len(labels) != len(DOORS):
            raise ValueError(f"Arrangement must have exactly 3 doors, got {len(labels)}")
        if any(label not in (CAR, GOAT) for label in labels):
            raise ValueError(f"Arrangement labels must be 'car' or 'goat', got {labels}")
        if labels.count(CAR) != 1:
            raise ValueError("Arrangement must have exactly one car")

    def __getitem__(self, door: int) -> Prize:
        return self.prize_at(door)

    def __iter__(self) -> Iterator[Prize]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def prize_at(self, door: int) -> Prize:
        """Return the prize behind a door."""
        return self.labels[validate_door(door) - 1]

    @property
    def car_door(self) -> int:
        """Door index hiding the car."""
        return self.labels.index(CAR) + 1


@dataclass(frozen=True)
class GameRecord:
    """One row of results: a strategy and how it fared."""

    strategy: Strategy
    outcome: Outcome


@dataclass
class RoundResult:
    """Outcomes of both strategies for one played round."""

    arrangement: Arrangement
    first_pick: int
    opened_door: int
    outcomes: dict[Strategy, Outcome]

    def __getitem__(self, strategy: Strategy) -> Outcome:
        return self.outcomes[strategy]

    def records(self) -> list[GameRecord]:
        """Return the round as two rows, stay first."""
        return [GameRecord(s, self.outcomes[s]) for s in (Strategy.STAY, Strategy.SWITCH)]


@dataclass
class BatchResult:
    """Rows accumulated across many rounds."""

    records: list[GameRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self.records)

    def extend(self, result: RoundResult) -> None:
        """Append both rows of a round."""
        self.records.extend(result.records())

    def counts(self) -> dict[tuple[Strategy, Outcome], int]:
        """Count records per (strategy, outcome) pair."""
        from monty_hall_sim.metrics import outcome_counts

        return outcome_counts(self.records)

    def proportions(self, decimals: int = 2) -> dict[Strategy, dict[Outcome, float]]:
        """Rounded outcome proportions per strategy."""
        from monty_hall_sim.metrics import proportion_table

        return proportion_table(self.records, decimals)

    def win_rates(self) -> dict[Strategy, float]:
        """Fraction of games won per strategy."""
        from monty_hall_sim.metrics import win_rates

        return win_rates(self.records)
