# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Ship model.

Ships are identified by a ShipType tag; the tag's size table decides how
many cells a ship covers. Position and direction never change after
construction, only the hit counter does.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from battleship.board import Coord


class Direction(Enum):
    """Cardinal direction a ship extends in from its anchor cell."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_delta(cls, dr: int, dc: int) -> "Direction":
        """Direction for a unit step (dr, dc)."""
        return cls((dr, dc))


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class ShipType(Enum):
    """Ship variants in the fleet."""
    AIRCRAFT_CARRIER = "aircraft_carrier"
    SUBMARINE = "submarine"
    DESTROYER = "destroyer"
    FRIGATE = "frigate"

    @property
    def size(self) -> int:
        return SHIP_SIZES[self]


SHIP_SIZES: Dict[ShipType, int] = {
    ShipType.AIRCRAFT_CARRIER: 4,
    ShipType.SUBMARINE: 3,
    ShipType.DESTROYER: 2,
    ShipType.FRIGATE: 1,
}


@dataclass
class Ship:
    """Represents a ship anchored at (row, col) extending in ``direction``."""
    ship_type: ShipType
    row: int
    col: int
    direction: Direction = Direction.RIGHT
    hit_count: int = 0

    @property
    def size(self) -> int:
        return self.ship_type.size

    @property
    def anchor(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_sunk(self) -> bool:
        """True once the ship has taken at least ``size`` hits."""
        return self.hit_count >= self.size

    def occupied_cells(self) -> List[Coord]:
        """
        Cells covered by the ship.

        Returns:
            ``size`` coordinates ordered from the anchor outward.
        """
        return [
            (self.row + self.direction.dr * i, self.col + self.direction.dc * i)
            for i in range(self.size)
        ]

    def occupies(self, row: int, col: int) -> bool:
        return (row, col) in self.occupied_cells()

    def register_hit(self) -> None:
        """Record a hit. Hits past sinking still count but change nothing else."""
        self.hit_count += 1

    def to_dict(self) -> dict:
        return {
            "type": self.ship_type.value,
            "row": self.row,
            "col": self.col,
            "direction": self.direction.name,
            "hits": self.hit_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Ship":
        return cls(
            ship_type=ShipType(data["type"]),
            row=int(data["row"]),
            col=int(data["col"]),
            direction=Direction[data["direction"]],
            hit_count=int(data.get("hits", 0)),
        )

    def __str__(self) -> str:
        name = self.ship_type.name.replace("_", " ").title()
        state = "sunk" if self.is_sunk else f"{self.hit_count}/{self.size} hits"
        return f"{name} at ({self.row}, {self.col}) {self.direction.name} [{state}]"
