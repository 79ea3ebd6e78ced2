# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Tests for the strategy evaluation harness.
"""

import json

from battleship.config import load_config
from battleship.placement import FLEET_SIZE
from targeting.evaluate import Evaluator, main, play_game


class TestPlayGame:
    """Tests for a single benchmark game."""

    def test_sinks_whole_fleet(self):
        stats = play_game(seed=42)
        assert stats['won']
        assert stats['ships_sunk'] == FLEET_SIZE
        assert stats['hits'] == 20
        assert 20 <= stats['moves'] <= 100
        assert stats['repeated_shots'] == 0
        assert stats['accuracy'] == stats['hits'] / stats['moves']

    def test_deterministic(self):
        assert play_game(seed=9) == play_game(seed=9)

    def test_step_limit(self):
        """Stopping early leaves the game unfinished."""
        stats = play_game(seed=42, max_steps=10)
        assert stats['moves'] == 10
        assert not stats['won']


class TestEvaluator:
    """Tests for the Evaluator class."""

    def test_evaluate(self):
        results = Evaluator(num_games=5).evaluate()

        assert results['num_games'] == 5
        assert results['wins'] == 5
        assert results['win_rate'] == 1.0
        assert results['repeated_shots'] == 0
        assert results['min_moves'] >= 20
        assert results['max_moves'] <= 100
        assert results['min_moves'] <= results['avg_moves'] <= results['max_moves']
        assert results['avg_ships_sunk'] == FLEET_SIZE
        assert [log['seed'] for log in results['game_logs']] == [42, 43, 44, 45, 46]

    def test_explicit_seeds(self):
        results = Evaluator(num_games=2, seeds=[3, 4, 5]).evaluate(verbose=True)
        assert [log['seed'] for log in results['game_logs']] == [3, 4]

    def test_from_config(self):
        config = load_config()
        config['evaluation']['num_games'] = 3
        evaluator = Evaluator.from_config(config)
        assert evaluator.num_games == 3
        assert evaluator.seeds == [42, 43, 44]
        assert evaluator.max_steps == 100

    def test_format_summary(self):
        results = Evaluator(num_games=2).evaluate()
        summary = Evaluator.format_summary(results)
        assert "Games Played:        2" in summary
        assert "Win Rate:            100.00%" in summary


class TestMain:
    """Tests for the command-line entry point."""

    def test_writes_results(self, tmp_path, capsys):
        results = main(['--num-games', '2', '--output', str(tmp_path)])

        saved = json.loads((tmp_path / "evaluation_results.json").read_text())
        assert saved['num_games'] == 2
        assert saved['wins'] == results['wins']
        assert "HUNT/TARGET STRATEGY EVALUATION" in capsys.readouterr().out
