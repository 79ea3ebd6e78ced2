# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the hunt/target strategy.
"""

import random

import pytest

from battleship.board import Board, CellState
from battleship.placement import place_fleet
from battleship.rules import ShotOutcome, fleet_sunk, resolve_shot
from battleship.ship import Direction
from targeting.hunt_target import HuntTargetAI, Knowledge, Mode


def play_against(ai: HuntTargetAI, seed: int):
    """Shoot at a seeded fleet until it is sunk; return the shot sequence."""
    board = Board()
    fleet = place_fleet(board, random.Random(seed))
    record = set()
    sequence = []
    while not fleet_sunk(fleet):
        row, col = ai.next_shot()
        outcome = resolve_shot(record, board, fleet, row, col)
        assert outcome.consumes_shot
        ai.register_result(row, col, outcome.is_hit, outcome is ShotOutcome.SUNK)
        sequence.append((row, col))
    return sequence


class TestHuntMode:
    """Tests for checkerboard hunting."""

    def test_parity_then_fallback(self):
        """Even cells first, then the odd ones, then nothing left."""
        ai = HuntTargetAI(seed=1)
        shots = []
        for _ in range(100):
            row, col = ai.next_shot()
            ai.register_result(row, col, hit=False, sunk=False)
            shots.append((row, col))

        assert all((r + c) % 2 == 0 for r, c in shots[:50])
        assert all((r + c) % 2 == 1 for r, c in shots[50:])
        assert len(set(shots)) == 100
        assert ai.mode is Mode.HUNT

        with pytest.raises(RuntimeError, match="No untried cells"):
            ai.next_shot()

    def test_deterministic_with_seed(self):
        """Same seed and same results give the same shots."""
        first = play_against(HuntTargetAI(seed=5), seed=3)
        second = play_against(HuntTargetAI(seed=5), seed=3)
        assert first == second

    def test_injected_rng(self):
        a = HuntTargetAI(rng=random.Random(8))
        b = HuntTargetAI(rng=random.Random(8))
        assert [a.next_shot() for _ in range(10)] == [b.next_shot() for _ in range(10)]

    def test_never_repeats(self):
        ai = HuntTargetAI(seed=2)
        sequence = play_against(ai, seed=10)
        assert len(sequence) == len(set(sequence))
        assert len(sequence) <= 100

    def test_sync_with_board(self):
        """Cells already shot on the supplied board are skipped."""
        board = Board()
        for row in range(10):
            for col in range(10):
                if (row, col) != (4, 6):
                    board.set_cell(row, col, CellState.MISS)

        ai = HuntTargetAI(seed=0)
        assert ai.next_shot(board) == (4, 6)


class TestTargetMode:
    """Tests for pursuing a hit ship."""

    def test_first_hit_probes_neighbours(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(5, 5, hit=True, sunk=False)
        assert ai.mode is Mode.TARGET
        assert ai.first_hit == (5, 5)

        probes = set()
        for _ in range(4):
            row, col = ai.next_shot()
            ai.register_result(row, col, hit=False)
            probes.add((row, col))
        assert probes == {(4, 5), (6, 5), (5, 4), (5, 6)}

    def test_corner_hit_stays_on_board(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(0, 0, hit=True, sunk=False)
        assert set(ai.stack) == {(1, 0), (0, 1)}

    def test_second_hit_follows_line(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(5, 5, hit=True, sunk=False)
        ai.register_result(5, 6, hit=True, sunk=False)

        assert ai.direction is Direction.RIGHT
        assert all(row == 5 for row, _ in ai.stack)

        assert ai.next_shot() == (5, 7)
        ai.register_result(5, 7, hit=False)
        assert ai.next_shot() == (5, 4)

    def test_hit_from_middle_outward(self):
        """A second hit behind the first reverses the travel direction."""
        ai = HuntTargetAI(seed=0)
        ai.register_result(5, 5, hit=True, sunk=False)
        ai.register_result(5, 4, hit=True, sunk=False)

        assert ai.direction is Direction.LEFT
        assert ai.next_shot() == (5, 3)
        ai.register_result(5, 3, hit=False)
        assert ai.next_shot() == (5, 6)

    def test_line_skips_known_hits(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(3, 2, hit=True, sunk=False)
        ai.register_result(4, 2, hit=True, sunk=False)
        assert ai.next_shot() == (5, 2)
        ai.register_result(5, 2, hit=True, sunk=False)

        assert ai.direction is Direction.DOWN
        assert ai.next_shot() == (6, 2)
        ai.register_result(6, 2, hit=False)
        assert ai.next_shot() == (2, 2)

    def test_empty_stack_falls_back_to_hunt(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(0, 0, hit=True, sunk=False)
        for _ in range(2):
            row, col = ai.next_shot()
            ai.register_result(row, col, hit=False)

        row, col = ai.next_shot()
        assert (row + col) % 2 == 0
        assert (row, col) != (0, 0)


class TestSinking:
    """Tests for the return to HUNT mode."""

    def test_sunk_resets_target_state(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(5, 5, hit=True, sunk=False)
        ai.register_result(5, 6, hit=True, sunk=True)

        assert ai.mode is Mode.HUNT
        assert ai.stack == []
        assert ai.first_hit is None
        assert ai.direction is None
        assert ai.known[5, 5] == Knowledge.SUNK
        assert ai.known[5, 6] == Knowledge.SUNK
        assert {(5, 5), (5, 6)} <= ai.tried

    def test_single_cell_ship(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(2, 2, hit=True, sunk=True)
        assert ai.mode is Mode.HUNT
        assert ai.known[2, 2] == Knowledge.SUNK

    def test_other_ship_hits_keep_target_mode(self):
        """Hits not on the sunk ship are pursued next."""
        ai = HuntTargetAI(seed=0)
        ai.register_result(5, 5, hit=True, sunk=False)
        ai.register_result(8, 8, hit=True, sunk=False)
        ai.register_result(8, 9, hit=True, sunk=True)

        assert ai.known[8, 8] == Knowledge.SUNK
        assert ai.known[5, 5] == Knowledge.HIT
        assert ai.mode is Mode.TARGET
        assert ai.first_hit == (5, 5)
        assert ai.next_shot() in {(4, 5), (6, 5), (5, 4), (5, 6)}

    def test_long_run_split_between_ships(self):
        """Hits beyond the largest ship size stay pending."""
        ai = HuntTargetAI(seed=0)
        for col in range(4):
            ai.register_result(5, col, hit=True, sunk=False)
        ai.register_result(5, 4, hit=True, sunk=True)

        for col in range(1, 5):
            assert ai.known[5, col] == Knowledge.SUNK
        assert ai.known[5, 0] == Knowledge.HIT
        assert ai.mode is Mode.TARGET
        assert ai.first_hit == (5, 0)
        assert ai.current_hits == [(5, 0)]
        assert ai.next_shot() in {(4, 0), (6, 0)}

    def test_reset(self):
        ai = HuntTargetAI(seed=0)
        ai.register_result(5, 5, hit=True, sunk=False)
        ai.reset()
        assert ai.mode is Mode.HUNT
        assert ai.tried == set()
        assert not ai.known.any()


class TestSnapshot:
    """Tests for strategy serialization."""

    def test_round_trip(self):
        ai = HuntTargetAI(seed=4)
        ai.register_result(5, 5, hit=True, sunk=False)
        ai.register_result(5, 6, hit=True, sunk=False)
        ai.next_shot()

        data = ai.to_dict()
        restored = HuntTargetAI.from_dict(data, seed=4)
        assert restored.to_dict() == data
        assert restored.next_shot() == ai.next_shot()
