# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Hunt/target opponent strategy.

HUNT mode samples untried checkerboard cells ((row + col) even) uniformly
at random, falling back to any untried cell once the checkerboard is used
up. A hit switches to TARGET mode, which pops candidate cells off a stack:
the four neighbours of the first hit, then cells extending the line once a
second hit reveals the ship's orientation. Sinking a ship clears the
target state and returns to HUNT.
"""

import logging
import random
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Set

import numpy as np

from battleship.board import BOARD_SIZE, Board, CellState, Coord, in_bounds
from battleship.ship import SHIP_SIZES, Direction


logger = logging.getLogger(__name__)

MAX_SHIP_SIZE = max(SHIP_SIZES.values())


class Mode(Enum):
    """Operational mode of the strategy."""
    HUNT = "hunt"
    TARGET = "target"


class Knowledge(IntEnum):
    """What the strategy knows about a cell of the enemy grid."""
    UNKNOWN = 0
    WATER = 1
    HIT = 2
    SUNK = 3


class HuntTargetAI:
    """
    Targeting state machine for the machine player.

    Usage:
        row, col = ai.next_shot()
        ... resolve the shot ...
        ai.register_result(row, col, hit, sunk)

    All randomness comes from ``rng`` so a seeded random.Random and a fixed
    sequence of results reproduce the same shots.
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the strategy.

        Args:
            board_size: Size of the square enemy grid
            rng: Random source; takes precedence over ``seed``
            seed: Seed for a private random.Random when ``rng`` is None
        """
        self.board_size = board_size
        self.rng = rng if rng is not None else random.Random(seed)

        rows, cols = np.indices((board_size, board_size))
        self.parity_mask = (rows + cols) % 2 == 0

        self.reset()

    def reset(self) -> None:
        """Forget everything; used at match start."""
        self.known = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        self.tried_mask = np.zeros((self.board_size, self.board_size), dtype=bool)
        self._clear_target()

    def _clear_target(self) -> None:
        self.mode = Mode.HUNT
        self.stack: List[Coord] = []
        self.first_hit: Optional[Coord] = None
        self.direction: Optional[Direction] = None
        # Unsunk hits being pursued, possibly spanning more than one ship
        self.current_hits: List[Coord] = []

    @property
    def tried(self) -> Set[Coord]:
        return {(int(r), int(c)) for r, c in np.argwhere(self.tried_mask)}

    def _in_bounds(self, coord: Coord) -> bool:
        return in_bounds(coord[0], coord[1], self.board_size)

    def _untried(self, coord: Coord) -> bool:
        return self._in_bounds(coord) and not self.tried_mask[coord]

    def _mark_tried(self, coord: Coord) -> None:
        self.tried_mask[coord] = True

    # ------------------------------------------------------------------
    # Shot selection
    # ------------------------------------------------------------------

    def next_shot(self, board: Optional[Board] = None) -> Coord:
        """
        Choose the next cell to fire at.

        Args:
            board: Optional enemy board; its MISS and HIT cells are taken
                as already tried. SHIP cells are never looked at.

        Returns:
            (row, col) of an untried cell, already marked as tried.

        Raises:
            RuntimeError: If every cell has been tried.
        """
        if board is not None:
            self.sync(board)

        shot = None
        if self.mode is Mode.TARGET:
            shot = self._pop_target()
        if shot is None:
            shot = self._hunt_shot()

        self._mark_tried(shot)
        logger.debug(f"[{self.mode.value}] shooting at {shot}, {len(self.stack)} queued")
        return shot

    def _pop_target(self) -> Optional[Coord]:
        while self.stack:
            coord = self.stack.pop()
            if self._untried(coord):
                return coord
        return None

    def _hunt_shot(self) -> Coord:
        open_cells = ~self.tried_mask
        candidates = np.argwhere(open_cells & self.parity_mask)
        if len(candidates) == 0:
            candidates = np.argwhere(open_cells)
        if len(candidates) == 0:
            raise RuntimeError("No untried cells remain")

        row, col = candidates[self.rng.randrange(len(candidates))]
        return (int(row), int(col))

    def sync(self, board: Board) -> None:
        """Mark cells already shot on ``board`` as tried."""
        for coord in board.cells_in_state(CellState.MISS):
            self._mark_tried(coord)
            if self.known[coord] == Knowledge.UNKNOWN:
                self.known[coord] = Knowledge.WATER
        for coord in board.cells_in_state(CellState.HIT):
            self._mark_tried(coord)
            if self.known[coord] == Knowledge.UNKNOWN:
                self.known[coord] = Knowledge.HIT

    # ------------------------------------------------------------------
    # Result handling
    # ------------------------------------------------------------------

    def register_result(self, row: int, col: int, hit: bool, sunk: bool = False) -> None:
        """
        Feed back the outcome of a shot.

        Args:
            row: Row that was fired at
            col: Column that was fired at
            hit: Whether a ship was hit
            sunk: Whether that hit sank the ship
        """
        coord = (row, col)
        self._mark_tried(coord)

        if not hit:
            self.known[coord] = Knowledge.WATER
            return

        self.known[coord] = Knowledge.HIT
        if coord not in self.current_hits:
            self.current_hits.append(coord)

        if sunk:
            self._handle_sunk(coord)
            return

        self.mode = Mode.TARGET
        if self.first_hit is None:
            self.first_hit = coord
            self._push_neighbours(coord)
        else:
            self._extend_line(coord)

    def _push_neighbours(self, coord: Coord) -> None:
        row, col = coord
        for direction in Direction:
            neighbour = (row + direction.dr, col + direction.dc)
            if self._untried(neighbour):
                self.stack.append(neighbour)

    def _next_along(self, start: Coord, direction: Direction) -> Optional[Coord]:
        """First untried cell from ``start`` in ``direction``, skipping known hits."""
        row, col = start[0] + direction.dr, start[1] + direction.dc
        while self._in_bounds((row, col)) and self.known[row, col] == Knowledge.HIT:
            row, col = row + direction.dr, col + direction.dc
        coord = (row, col)
        return coord if self._untried(coord) else None

    def _extend_line(self, coord: Coord) -> None:
        dr = coord[0] - self.first_hit[0]
        dc = coord[1] - self.first_hit[1]

        if (dr == 0) == (dc == 0):
            # Not in line with the first hit: probably another ship
            self._push_neighbours(coord)
            return

        self.direction = Direction.from_delta(int(np.sign(dr)), int(np.sign(dc)))
        if dr == 0:
            self.stack = [c for c in self.stack if c[0] == coord[0]]
        else:
            self.stack = [c for c in self.stack if c[1] == coord[1]]

        # Pushed last is popped first: keep travelling, then try behind
        for candidate in (
            self._next_along(self.first_hit, self.direction.opposite),
            self._next_along(coord, self.direction),
        ):
            if candidate is not None:
                self.stack.append(candidate)

    def _sunk_axis(self, coord: Coord) -> Optional[Direction]:
        """Orientation of the ship sunk at ``coord``, None for a lone hit."""
        if self.direction is not None:
            return self.direction

        others = [self.first_hit] if self.first_hit is not None else []
        adjacent = [
            hit for hit in self.current_hits
            if abs(hit[0] - coord[0]) + abs(hit[1] - coord[1]) == 1
        ]
        for other in others + adjacent:
            dr = coord[0] - other[0]
            dc = coord[1] - other[1]
            if (dr == 0) != (dc == 0):
                return Direction.from_delta(int(np.sign(dr)), int(np.sign(dc)))
        return None

    def _sunk_cells(self, coord: Coord) -> List[Coord]:
        """Cells of the ship that was just sunk at ``coord``."""
        direction = self._sunk_axis(coord)
        if direction is None:
            return [coord]

        # Back toward the earlier hits first; a run longer than the largest
        # ship belongs to more than one ship
        cells = [coord]
        for step in (direction.opposite, direction):
            row, col = coord[0] + step.dr, coord[1] + step.dc
            while (
                len(cells) < MAX_SHIP_SIZE
                and self._in_bounds((row, col))
                and self.known[row, col] == Knowledge.HIT
            ):
                cells.append((row, col))
                row, col = row + step.dr, col + step.dc
        return cells

    def _handle_sunk(self, coord: Coord) -> None:
        sunk_cells = self._sunk_cells(coord)
        for cell in sunk_cells:
            self.known[cell] = Knowledge.SUNK

        leftover = [hit for hit in self.current_hits if hit not in sunk_cells]
        self._clear_target()
        logger.debug(f"Sunk ship of {len(sunk_cells)} cells at {sorted(sunk_cells)}")

        if leftover:
            # Hits on a different ship: keep pursuing those
            self.mode = Mode.TARGET
            self.current_hits = leftover
            self.first_hit = leftover[0]
            for hit in leftover:
                self._push_neighbours(hit)
            logger.debug(f"{len(leftover)} unsunk hits remain, staying in TARGET mode")

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict:
        """Plain-data form of the targeting state."""
        return {
            "mode": self.mode.value,
            "stack": [list(coord) for coord in self.stack],
            "first_hit": list(self.first_hit) if self.first_hit else None,
            "direction": self.direction.name if self.direction else None,
            "current_hits": [list(coord) for coord in self.current_hits],
            "tried": sorted(list(coord) for coord in self.tried),
            "known": self.known.tolist(),
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "HuntTargetAI":
        """Rebuild a strategy from ``to_dict`` output."""
        known = np.array(data["known"], dtype=np.int8)
        ai = cls(board_size=known.shape[0], rng=rng, seed=seed)
        ai.known = known
        for row, col in data.get("tried", []):
            ai.tried_mask[row, col] = True
        ai.mode = Mode(data["mode"])
        ai.stack = [tuple(coord) for coord in data.get("stack", [])]
        ai.first_hit = tuple(data["first_hit"]) if data.get("first_hit") else None
        ai.direction = Direction[data["direction"]] if data.get("direction") else None
        ai.current_hits = [tuple(coord) for coord in data.get("current_hits", [])]
        return ai
