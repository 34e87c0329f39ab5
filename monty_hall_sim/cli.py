"""Command-line interface for Monty Hall Simulator.

Provides entry point for running a batch of games and printing the results.
"""

from __future__ import annotations

import argparse
import json
import logging

from monty_hall_sim.metrics import summary
from monty_hall_sim.models import InvalidTrialCount, Strategy
from monty_hall_sim.sampling import make_rng
from monty_hall_sim.simulator import play_n_games, validate_trial_count


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Monty Hall Simulator")

    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    parser.add_argument(
        "--json", action="store_true", help="Also print a JSON summary"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every game at DEBUG level"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    rng = make_rng(args.seed)

    try:
        games = validate_trial_count(args.games)
    except InvalidTrialCount as exc:
        parser.error(str(exc))

    print("Monty Hall Simulator Results")
    print("=" * 40)
    batch = play_n_games(games, rng=rng, show=True)

    results = summary(batch)
    print()
    print(f"Games: {results['games']}")
    print(f"Seed: {args.seed}")
    print(f"Win rate (stay): {results['win_rate'][Strategy.STAY.value]:.3f}")
    print(f"Win rate (switch): {results['win_rate'][Strategy.SWITCH.value]:.3f}")

    if args.json:
        print("\n" + "=" * 40)
        print("JSON Output:")
        print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
