# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the Battleship tests.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from battleship.board import CellState
from battleship.session import GameSession, Side


def sink_fleet(session: GameSession, side: Side) -> None:
    """Have ``side`` hit every ship cell of its opponent (hits keep the turn)."""
    for ship in session.fleets[side.opponent]:
        for row, col in ship.occupied_cells():
            if session.is_over:
                return
            session.shoot(side, row, col)


def first_cell(session: GameSession, side: Side, state: CellState):
    """First cell of ``side``'s board in ``state``."""
    return session.boards[side].cells_in_state(state)[0]


@pytest.fixture
def playing_session() -> GameSession:
    """Session with both fleets placed randomly, human to shoot."""
    session = GameSession("Alice", seed=7)
    session.auto_place_fleet(Side.HUMAN)
    session.auto_place_fleet(Side.MACHINE)
    return session


@pytest.fixture
def finished_session(playing_session) -> GameSession:
    """Session the human has won without missing."""
    sink_fleet(playing_session, Side.HUMAN)
    return playing_session
