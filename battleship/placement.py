# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Fleet placement.

Random placement walks a shuffled list of all 100 anchor cells, largest
ships first, trying the four directions of each anchor in random order.
Manual placement validates one ship at a time against the same
in-bounds / no-overlap rule.
"""

import logging
import random
from collections import Counter
from typing import List, Optional, Tuple

from battleship.board import BOARD_SIZE, Board, CellState, Coord, in_bounds
from battleship.errors import InvalidPlacementError, SetupExhaustedError
from battleship.ship import Direction, Ship, ShipType


logger = logging.getLogger(__name__)


# (ship type, count) per side: 1x4, 2x3, 3x2, 4x1 = 10 ships, 20 cells
FLEET_COMPOSITION: List[Tuple[ShipType, int]] = [
    (ShipType.AIRCRAFT_CARRIER, 1),
    (ShipType.SUBMARINE, 2),
    (ShipType.DESTROYER, 3),
    (ShipType.FRIGATE, 4),
]

FLEET_SIZE = sum(count for _, count in FLEET_COMPOSITION)


def candidate_cells(rng: random.Random, size: int = BOARD_SIZE) -> List[Coord]:
    """Every cell of the grid in shuffled order."""
    cells = [(row, col) for row in range(size) for col in range(size)]
    rng.shuffle(cells)
    return cells


def ship_fits(board: Board, ship: Ship) -> bool:
    """Check that every cell of ``ship`` is on the board and EMPTY."""
    return all(
        in_bounds(row, col, board.size) and board.get_cell(row, col) == CellState.EMPTY
        for row, col in ship.occupied_cells()
    )


def validate_placement(board: Board, ship: Ship) -> None:
    """
    Check a ship position for manual placement.

    Raises:
        InvalidPlacementError: If the ship goes out of bounds or overlaps
            another ship.
    """
    for row, col in ship.occupied_cells():
        if not in_bounds(row, col, board.size):
            raise InvalidPlacementError(f"{ship} goes out of bounds")
        if board.get_cell(row, col) != CellState.EMPTY:
            raise InvalidPlacementError(f"{ship} overlaps with another ship")


def try_place(board: Board, fleet: List[Ship], ship: Ship) -> bool:
    """
    Place ``ship`` if it fits.

    Marks its cells SHIP on ``board`` and appends it to ``fleet``.

    Returns:
        True if the ship was placed, False if it did not fit.
    """
    if not ship_fits(board, ship):
        return False
    for row, col in ship.occupied_cells():
        board.set_cell(row, col, CellState.SHIP)
    fleet.append(ship)
    return True


def place_fleet(
    board: Board,
    rng: Optional[random.Random] = None,
    composition: List[Tuple[ShipType, int]] = FLEET_COMPOSITION,
) -> List[Ship]:
    """
    Randomly place a full fleet on ``board``.

    Args:
        board: Target board, normally empty
        rng: Random source (a fresh unseeded one if None)
        composition: (ship type, count) pairs

    Returns:
        The placed ships, largest first.

    Raises:
        SetupExhaustedError: If some ship could not be placed after
            trying every candidate anchor.
    """
    rng = rng or random.Random()
    candidates = candidate_cells(rng, board.size)
    directions = list(Direction)
    fleet: List[Ship] = []

    for ship_type, count in sorted(composition, key=lambda item: item[0].size, reverse=True):
        placed = 0
        for row, col in candidates:
            if placed == count:
                break
            rng.shuffle(directions)
            for direction in directions:
                if try_place(board, fleet, Ship(ship_type, row, col, direction)):
                    placed += 1
                    break

        if placed < count:
            raise SetupExhaustedError(
                f"Placed only {placed} of {count} {ship_type.name} ships"
            )
        logger.debug(f"{ship_type.name} placed: {placed}")

    return fleet


def remaining_ship_types(
    fleet: List[Ship],
    composition: List[Tuple[ShipType, int]] = FLEET_COMPOSITION,
) -> List[ShipType]:
    """Ship types still missing from ``fleet``, one entry per missing ship."""
    placed = Counter(ship.ship_type for ship in fleet)
    missing = []
    for ship_type, count in composition:
        missing.extend([ship_type] * max(0, count - placed[ship_type]))
    return missing


def fleet_is_complete(
    fleet: List[Ship],
    composition: List[Tuple[ShipType, int]] = FLEET_COMPOSITION,
) -> bool:
    """True when ``fleet`` holds exactly the ships in ``composition``."""
    expected = Counter({ship_type: count for ship_type, count in composition})
    return Counter(ship.ship_type for ship in fleet) == expected
