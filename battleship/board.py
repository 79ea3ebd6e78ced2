# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Board representation for the Battleship engine.

A board is a fixed 10x10 grid of cell states indexed by 0-based
(row, col). Each side of a match owns one board.
"""

from enum import IntEnum
from typing import List, Tuple

import numpy as np


BOARD_SIZE = 10

Coord = Tuple[int, int]


class CellState(IntEnum):
    """State of a cell on the board."""
    EMPTY = 0
    SHIP = 1
    MISS = 2
    HIT = 3


def in_bounds(row: int, col: int, size: int = BOARD_SIZE) -> bool:
    """Check whether (row, col) lies on a size x size grid."""
    return 0 <= row < size and 0 <= col < size


class Board:
    """
    Cell-state store for one side.

    Writes outside the grid raise ValueError. Reads outside the grid
    return EMPTY.
    """

    def __init__(self, size: int = BOARD_SIZE):
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)

    def set_cell(self, row: int, col: int, state: CellState) -> None:
        """
        Set the state of a cell.

        Args:
            row: 0-based row index
            col: 0-based column index
            state: New cell state

        Raises:
            ValueError: If the coordinate is off the board.
        """
        # numpy would silently wrap negative indices
        if not in_bounds(row, col, self.size):
            raise ValueError(f"Cell ({row}, {col}) is out of bounds")
        self.grid[row, col] = int(CellState(state))

    def get_cell(self, row: int, col: int) -> CellState:
        """Return the state of a cell, EMPTY if it is off the board."""
        if not in_bounds(row, col, self.size):
            return CellState.EMPTY
        return CellState(int(self.grid[row, col]))

    def cells_in_state(self, state: CellState) -> List[Coord]:
        """All coordinates currently holding ``state``, in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == int(state))]

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.grid == int(state)))

    def copy(self) -> "Board":
        board = Board(self.size)
        board.grid = self.grid.copy()
        return board

    def to_list(self) -> List[List[int]]:
        """Plain nested-list form of the grid for snapshots."""
        return self.grid.tolist()

    @classmethod
    def from_list(cls, rows: List[List[int]]) -> "Board":
        """
        Rebuild a board from ``to_list`` output.

        Raises:
            ValueError: If the data is not square or holds unknown states.
        """
        grid = np.array(rows, dtype=np.int8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Board data must be square, got shape {grid.shape}")
        valid = [int(state) for state in CellState]
        if not np.isin(grid, valid).all():
            raise ValueError("Board data contains unknown cell states")
        board = cls(grid.shape[0])
        board.grid = grid
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        return (
            f"Board(size={self.size}, ships={self.count(CellState.SHIP)}, "
            f"hits={self.count(CellState.HIT)}, misses={self.count(CellState.MISS)})"
        )
