# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Battleship rules engine.

GameSession lives in ``battleship.session`` and the host-facing functions
in ``battleship.api``; both pull in the ``targeting`` package, so they are
not imported here.
"""

from .board import BOARD_SIZE, Board, CellState
from .errors import (
    BattleshipError,
    InvalidGameStateError,
    InvalidPlacementError,
    SetupExhaustedError,
)
from .rules import ShotOutcome
from .ship import Direction, Ship, ShipType

__all__ = [
    'BOARD_SIZE',
    'Board',
    'CellState',
    'BattleshipError',
    'InvalidGameStateError',
    'InvalidPlacementError',
    'SetupExhaustedError',
    'ShotOutcome',
    'Direction',
    'Ship',
    'ShipType',
]
