# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the Board cell store.
"""

import pytest

from battleship.board import BOARD_SIZE, Board, CellState, in_bounds


class TestBoard:
    """Tests for Board class."""

    def test_fresh_board_is_empty(self):
        """Every cell of a new board is EMPTY."""
        board = Board()
        assert board.size == BOARD_SIZE
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                assert board.get_cell(row, col) == CellState.EMPTY

    def test_set_and_get(self):
        board = Board()
        board.set_cell(3, 7, CellState.SHIP)
        assert board.get_cell(3, 7) == CellState.SHIP
        assert board.get_cell(7, 3) == CellState.EMPTY

    def test_get_out_of_range_returns_empty(self):
        """Reads off the grid return EMPTY, including negative indices."""
        board = Board()
        board.set_cell(9, 9, CellState.HIT)
        assert board.get_cell(-1, -1) == CellState.EMPTY
        assert board.get_cell(10, 0) == CellState.EMPTY
        assert board.get_cell(0, 10) == CellState.EMPTY

    def test_set_out_of_range_raises(self):
        """Writes off the grid are rejected without touching the grid."""
        board = Board()
        with pytest.raises(ValueError, match="out of bounds"):
            board.set_cell(10, 0, CellState.SHIP)
        with pytest.raises(ValueError):
            board.set_cell(0, -1, CellState.SHIP)
        assert board.count(CellState.SHIP) == 0

    def test_cells_in_state_and_count(self):
        board = Board()
        board.set_cell(0, 1, CellState.MISS)
        board.set_cell(2, 0, CellState.MISS)
        board.set_cell(1, 1, CellState.HIT)

        assert board.cells_in_state(CellState.MISS) == [(0, 1), (2, 0)]
        assert board.count(CellState.HIT) == 1
        assert board.count(CellState.EMPTY) == 97

    def test_list_round_trip(self):
        board = Board()
        board.set_cell(4, 4, CellState.SHIP)
        board.set_cell(5, 5, CellState.MISS)

        rows = board.to_list()
        assert rows[4][4] == 1
        assert rows[5][5] == 2
        assert Board.from_list(rows) == board

    def test_from_list_rejects_bad_data(self):
        with pytest.raises(ValueError, match="square"):
            Board.from_list([[0, 0, 0], [0, 0, 0]])
        with pytest.raises(ValueError, match="unknown cell states"):
            Board.from_list([[0, 7], [0, 0]])

    def test_copy_is_independent(self):
        board = Board()
        clone = board.copy()
        clone.set_cell(0, 0, CellState.SHIP)
        assert board.get_cell(0, 0) == CellState.EMPTY


class TestInBounds:
    """Tests for the bounds helper."""

    def test_edges(self):
        assert in_bounds(0, 0)
        assert in_bounds(9, 9)
        assert not in_bounds(-1, 0)
        assert not in_bounds(0, 10)
