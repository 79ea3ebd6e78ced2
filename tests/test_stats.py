# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Tests for player statistics.
"""

import pytest

from battleship.session import Side
from battleship.stats import PlayerStats


class TestPlayerStats:
    """Tests for the PlayerStats record."""

    def test_accuracy_without_shots(self):
        assert PlayerStats("Alice").accuracy == 0.0

    def test_accuracy(self):
        stats = PlayerStats("Alice", games_played=2, total_shots=40, total_hits=30)
        assert stats.accuracy == 75.0

    def test_unfinished_session_rejected(self, playing_session):
        stats = PlayerStats("Alice")
        with pytest.raises(ValueError, match="finished"):
            stats.record_session(playing_session)
        assert stats.games_played == 0

    def test_record_win(self, finished_session):
        stats = PlayerStats("Alice")
        stats.record_session(finished_session)

        assert stats.games_played == 1
        assert stats.games_won == 1
        assert stats.total_shots == 20
        assert stats.total_hits == 20
        assert stats.accuracy == 100.0

    def test_record_loss(self, finished_session):
        stats = PlayerStats("Machine")
        stats.record_session(finished_session, side=Side.MACHINE)

        assert stats.games_played == 1
        assert stats.games_won == 0
        assert stats.total_shots == 0

    def test_dict_round_trip(self):
        stats = PlayerStats("Bob", games_played=3, games_won=1, total_shots=90, total_hits=25)
        assert PlayerStats.from_dict(stats.to_dict()) == stats

    def test_str(self):
        text = str(PlayerStats("Bob", games_played=1, games_won=1, total_shots=4, total_hits=1))
        assert text == "Player: Bob | Games: 1 | Won: 1 | Accuracy: 25.0%"
