# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shot resolution and turn rules.

``resolve_shot`` is the only function that mutates boards and ships
during play. Repeat detection always runs before any mutation.
"""

import logging
from enum import Enum
from typing import List, Optional, Set

from battleship.board import Board, CellState, Coord, in_bounds
from battleship.ship import Ship


logger = logging.getLogger(__name__)


class ShotOutcome(Enum):
    """Result of a single shot."""
    MISS = "miss"
    HIT = "hit"
    SUNK = "sunk"
    ALREADY_SHOT = "already_shot"
    INVALID = "invalid"

    @property
    def is_hit(self) -> bool:
        return self in (ShotOutcome.HIT, ShotOutcome.SUNK)

    @property
    def consumes_shot(self) -> bool:
        """False for outcomes the shooter must retry."""
        return self not in (ShotOutcome.ALREADY_SHOT, ShotOutcome.INVALID)


def turn_advances(outcome: ShotOutcome) -> bool:
    """Only a miss passes the turn to the other side."""
    return outcome is ShotOutcome.MISS


def find_ship_at(fleet: List[Ship], row: int, col: int) -> Optional[Ship]:
    """Return the ship covering (row, col), or None."""
    for ship in fleet:
        if ship.occupies(row, col):
            return ship
    return None


def fleet_sunk(fleet: List[Ship]) -> bool:
    """True when every ship of a non-empty fleet is sunk."""
    return bool(fleet) and all(ship.is_sunk for ship in fleet)


def resolve_shot(
    shot_record: Set[Coord],
    target_board: Board,
    target_fleet: List[Ship],
    row: int,
    col: int,
) -> ShotOutcome:
    """
    Fire at (row, col) on the target side.

    Args:
        shot_record: Coordinates the attacker has already fired at;
            updated in place for consumed shots
        target_board: Defender's board
        target_fleet: Defender's ships
        row: 0-based row index
        col: 0-based column index

    Returns:
        ALREADY_SHOT or INVALID without touching any state, otherwise
        MISS, HIT or SUNK after recording the shot.
    """
    coord = (row, col)

    if coord in shot_record:
        return ShotOutcome.ALREADY_SHOT

    if not in_bounds(row, col, target_board.size):
        return ShotOutcome.INVALID

    shot_record.add(coord)
    cell = target_board.get_cell(row, col)

    if cell == CellState.EMPTY:
        target_board.set_cell(row, col, CellState.MISS)
        logger.debug(f"Water at {coord}")
        return ShotOutcome.MISS

    if cell == CellState.SHIP:
        target_board.set_cell(row, col, CellState.HIT)
        ship = find_ship_at(target_fleet, row, col)
        if ship is None:
            logger.warning(f"SHIP cell {coord} has no ship in the fleet")
            return ShotOutcome.HIT

        ship.register_hit()
        if ship.is_sunk:
            logger.debug(f"Hit at {coord}, sunk {ship}")
            return ShotOutcome.SUNK
        logger.debug(f"Hit at {coord}")
        return ShotOutcome.HIT

    # Cell was shot through some other path (e.g. a restored snapshot)
    return ShotOutcome.ALREADY_SHOT
