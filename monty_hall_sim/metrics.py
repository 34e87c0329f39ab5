"""Metrics and analysis utilities for Monty Hall Simulator.

Functions for aggregating game records into counts, rates and a printable table.
"""

from __future__ import annotations

from typing import Any, Iterable

from monty_hall_sim.models import BatchResult, GameRecord, Outcome, Strategy


def outcome_counts(
    records: Iterable[GameRecord],
) -> dict[tuple[Strategy, Outcome], int]:
    """Count records per (strategy, outcome) pair.

    Args:
        records: Game records

    Returns:
        Dictionary with every pair present, zero counts included
    """
    counts = {(s, o): 0 for s in Strategy for o in Outcome}
    for record in records:
        counts[(record.strategy, record.outcome)] += 1
    return counts


def _played_rates(
    counts: dict[tuple[Strategy, Outcome], int]
) -> dict[Strategy, float]:
    rates = {}
    for strategy in Strategy:
        wins = counts[(strategy, Outcome.WIN)]
        total = wins + counts[(strategy, Outcome.LOSE)]
        if total:
            rates[strategy] = wins / total
    return rates


def win_rates(records: Iterable[GameRecord]) -> dict[Strategy, float]:
    """Fraction of games won per strategy (0.0 for a strategy with no games)."""
    rates = _played_rates(outcome_counts(records))
    return {strategy: rates.get(strategy, 0.0) for strategy in Strategy}


def proportion_table(
    records: Iterable[GameRecord], decimals: int = 2
) -> dict[Strategy, dict[Outcome, float]]:
    """Row proportions of outcomes per strategy.

    Args:
        records: Game records
        decimals: Rounding precision

    Returns:
        Nested dictionary strategy -> outcome -> rate, each row summing to 1
    """
    counts = outcome_counts(records)
    if sum(counts.values()) == 0:
        raise ValueError("Cannot build a proportion table from no records")

    table: dict[Strategy, dict[Outcome, float]] = {}
    for strategy, rate in _played_rates(counts).items():
        win = round(rate, decimals)
        # LOSE is the complement of the rounded WIN so the row sums to 1
        table[strategy] = {Outcome.LOSE: round(1.0 - win, decimals), Outcome.WIN: win}
    return table


def format_table(table: dict[Strategy, dict[Outcome, float]]) -> str:
    """Render a proportion table as aligned text."""
    lines = [f"{'strategy':<10}{Outcome.LOSE.value:>6}{Outcome.WIN.value:>6}"]
    for strategy, row in table.items():
        lines.append(
            f"{strategy.value:<10}{row[Outcome.LOSE]:>6.2f}{row[Outcome.WIN]:>6.2f}"
        )
    return "\n".join(lines)


def summary(batch: BatchResult) -> dict[str, Any]:
    """Generate JSON-ready summary statistics for a batch.

    Args:
        batch: Records from play_n_games

    Returns:
        Dictionary with game count, wins, rates and the rounded table
    """
    counts = outcome_counts(batch)
    games = sum(counts.values()) // len(Strategy)

    return {
        "games": games,
        "wins": {s.value: counts[(s, Outcome.WIN)] for s in Strategy},
        "win_rate": {s.value: rate for s, rate in win_rates(batch).items()},
        "table": {
            s.value: {o.value: v for o, v in row.items()}
            for s, row in proportion_table(batch).items()
        },
    }
