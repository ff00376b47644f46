import argparse
import sys
import time

from loguru import logger

from nexus_wars.ai import available
from nexus_wars.config import config
from nexus_wars.simulator import Simulator, summarize


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate Nexus Wars games between two computer opponents"
    )
    choices = sorted(available())
    parser.add_argument(
        "--player", type=str, default="medium", choices=choices,
        help="Difficulty tier for the PLAYER seat",
    )
    parser.add_argument(
        "--ai", type=str, default="hard", choices=choices,
        help="Difficulty tier for the AI seat",
    )
    parser.add_argument("--games", type=int, default=100, help="Number of games")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument(
        "--max-rounds", type=int, default=config.MAX_ROUNDS, help="Round cap per game"
    )
    parser.add_argument(
        "--check-invariants", action="store_true",
        help="Verify board bookkeeping after every action",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every game event")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    print("--- Nexus Wars Simulation ---")
    print(f"PLAYER: {args.player}  vs  AI: {args.ai}")
    print(f"Games: {args.games}, round cap: {args.max_rounds}")

    sim = Simulator(
        player_difficulty=args.player,
        ai_difficulty=args.ai,
        seed=args.seed,
        max_rounds=args.max_rounds,
        check_invariants=args.check_invariants,
    )

    start_time = time.time()
    results = sim.run_many(args.games)
    elapsed = time.time() - start_time

    stats = summarize(results)
    print("\n--- SIMULATION COMPLETE ---")
    if not stats["games"]:
        print("No games played.")
        return
    for seat, rate in stats["win_rate"].items():
        print(f"{seat:>7} win rate: {rate:.1%}")
    print("Victory types:", stats["victory_types"])
    print(f"Mean rounds: {stats['mean_rounds']:.2f} (max {stats['max_rounds']})")
    print(f"Simulation Time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    main()
