# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Evaluation harness for the hunt/target strategy.

Plays the strategy against randomly placed fleets and reports how many
shots it needs.
"""

import argparse
import json
import logging
import random
import time
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from battleship.board import Board
from battleship.config import load_config, setup_logging
from battleship.placement import FLEET_SIZE, place_fleet
from battleship.rules import ShotOutcome, fleet_sunk, resolve_shot
from targeting.hunt_target import HuntTargetAI


logger = logging.getLogger(__name__)


def play_game(seed: int, max_steps: int = 100) -> Dict:
    """
    Let the strategy shoot at one randomly placed fleet until it is sunk.

    Args:
        seed: Seed for both the fleet layout and the strategy
        max_steps: Maximum shots before giving up

    Returns:
        Game statistics dict
    """
    rng = random.Random(seed)
    board = Board()
    fleet = place_fleet(board, rng)
    ai = HuntTargetAI(board_size=board.size, rng=rng)

    shots = set()
    hits = 0
    moves = 0
    repeated = 0

    while moves < max_steps and not fleet_sunk(fleet):
        row, col = ai.next_shot()
        outcome = resolve_shot(shots, board, fleet, row, col)
        if not outcome.consumes_shot:
            repeated += 1
            continue

        moves += 1
        if outcome.is_hit:
            hits += 1
        ai.register_result(row, col, outcome.is_hit, outcome is ShotOutcome.SUNK)

    return {
        'seed': seed,
        'won': fleet_sunk(fleet),
        'moves': moves,
        'hits': hits,
        'ships_sunk': sum(1 for ship in fleet if ship.is_sunk),
        'accuracy': hits / moves if moves > 0 else 0.0,
        'repeated_shots': repeated,
    }


class Evaluator:
    """Benchmark for the targeting strategy."""

    def __init__(
        self,
        num_games: int = 100,
        seeds: Optional[List[int]] = None,
        max_steps: int = 100,
    ):
        """
        Initialize evaluator.

        Args:
            num_games: Number of games to evaluate
            seeds: Random seeds for reproducibility
            max_steps: Maximum steps per game
        """
        self.num_games = num_games
        self.seeds = seeds if seeds else list(range(42, 42 + num_games))
        self.max_steps = max_steps

    @classmethod
    def from_config(cls, config: Dict) -> 'Evaluator':
        """Build an evaluator from the ``evaluation`` section of a config."""
        section = config.get('evaluation', {})
        return cls(
            num_games=section.get('num_games', 100),
            seeds=section.get('seeds'),
            max_steps=section.get('max_steps', 100),
        )

    def evaluate(self, verbose: bool = False) -> Dict:
        """
        Run the strategy on every configured seed.

        Args:
            verbose: Log per-game results

        Returns:
            Evaluation statistics dictionary
        """
        seeds = self.seeds[:self.num_games]
        logger.info(f"Evaluating hunt/target strategy on {len(seeds)} games...")
        start_time = time.time()

        results = []
        for i, seed in enumerate(seeds):
            stats = play_game(seed, self.max_steps)
            results.append(stats)

            if verbose:
                status = "WON" if stats['won'] else "INCOMPLETE"
                logger.info(
                    f"Game {i+1}/{len(seeds)} (seed={seed}): {status} | "
                    f"Moves: {stats['moves']} | Ships: {stats['ships_sunk']}/{FLEET_SIZE} | "
                    f"Accuracy: {stats['accuracy']:.2%}"
                )

        elapsed_time = time.time() - start_time

        wins = [r['won'] for r in results]
        moves = [r['moves'] for r in results]
        winning_moves = [r['moves'] for r in results if r['won']]
        accuracies = [r['accuracy'] for r in results]

        return {
            'num_games': len(results),
            'wins': sum(wins),
            'win_rate': float(np.mean(wins)),
            'avg_moves': float(np.mean(moves)),
            'std_moves': float(np.std(moves)),
            'min_moves': int(np.min(moves)),
            'max_moves': int(np.max(moves)),
            'avg_winning_moves': float(np.mean(winning_moves)) if winning_moves else None,
            'avg_accuracy': float(np.mean(accuracies)),
            'avg_ships_sunk': float(np.mean([r['ships_sunk'] for r in results])),
            'repeated_shots': sum(r['repeated_shots'] for r in results),
            'total_time': elapsed_time,
            'game_logs': results,
        }

    @staticmethod
    def format_summary(results: Dict) -> str:
        """Human-readable summary of ``evaluate`` output."""
        lines = [
            "=" * 60,
            "HUNT/TARGET STRATEGY EVALUATION",
            "=" * 60,
            f"Games Played:        {results['num_games']}",
            f"Wins:                {results['wins']}",
            f"Win Rate:            {results['win_rate']:.2%}",
            f"Avg Moves:           {results['avg_moves']:.1f} ± {results['std_moves']:.1f}",
            f"Min / Max Moves:     {results['min_moves']} / {results['max_moves']}",
            f"Avg Accuracy:        {results['avg_accuracy']:.2%}",
            f"Avg Ships Sunk:      {results['avg_ships_sunk']:.1f}/{FLEET_SIZE}",
            f"Repeated Shots:      {results['repeated_shots']}",
            "=" * 60,
        ]
        return "\n".join(lines)


def main(argv: Optional[List[str]] = None):
    """Main evaluation entry point."""
    parser = argparse.ArgumentParser(description="Evaluate the hunt/target strategy")
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to YAML config file'
    )
    parser.add_argument(
        '--num-games',
        type=int,
        default=None,
        help='Number of games to evaluate (overrides config)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default='results',
        help='Output directory for results'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log per-game results'
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.num_games is not None:
        config['evaluation']['num_games'] = args.num_games
    setup_logging(config)

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    evaluator = Evaluator.from_config(config)
    results = evaluator.evaluate(verbose=args.verbose)

    results_path = output_dir / "evaluation_results.json"
    with open(results_path, 'w') as f:
        json.dump(results, f, indent=2)

    print(Evaluator.format_summary(results))
    logger.info(f"Results saved to {results_path}")
    return results


if __name__ == "__main__":
    main()
