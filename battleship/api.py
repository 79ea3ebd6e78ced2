# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Function-style entry points for host applications.

Thin wrappers over GameSession and HuntTargetAI so a UI shell can drive a
match without knowing the class layout.
"""

import random
from typing import Dict, List, Optional, Tuple

from battleship.board import Board, Coord
from battleship.errors import InvalidPlacementError
from battleship.rules import ShotOutcome
from battleship.session import GameSession, Side
from battleship.ship import Direction, Ship, ShipType
from targeting.hunt_target import HuntTargetAI


def new_session(
    player_name: str,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """Start a new match in the SETUP phase."""
    return GameSession(player_name, seed=seed, rng=rng)


def session_from_config(config: Dict, rng: Optional[random.Random] = None) -> GameSession:
    """Start a new match using the ``game`` section of a loaded config."""
    return GameSession.from_config(config, rng=rng)


def place_human_ship(
    session: GameSession,
    ship_type: ShipType,
    row: int,
    col: int,
    direction: Direction = Direction.RIGHT,
) -> Tuple[bool, Optional[str]]:
    """
    Place one human ship.

    Returns:
        (True, None) on success, (False, reason) if the position is
        rejected. The caller may retry with another position.
    """
    try:
        session.place_human_ship(ship_type, row, col, direction)
    except InvalidPlacementError as e:
        return False, str(e)
    return True, None


def auto_place_fleet(session: GameSession, side: Side) -> List[Ship]:
    return session.auto_place_fleet(side)


def shoot(session: GameSession, side: Side, row: int, col: int) -> ShotOutcome:
    return session.shoot(side, row, col)


def current_turn(session: GameSession) -> Side:
    return session.current_turn


def is_game_over(session: GameSession) -> bool:
    return session.is_over


def winner(session: GameSession) -> Optional[Side]:
    return session.winner


def snapshot(session: GameSession) -> dict:
    return session.snapshot()


def restore(
    data: dict,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GameSession:
    return GameSession.restore(data, seed=seed, rng=rng)


def next_ai_shot(ai: HuntTargetAI, board: Optional[Board] = None) -> Coord:
    """Next coordinate chosen by ``ai``; ``board`` only contributes shot cells."""
    return ai.next_shot(board)


def register_ai_result(ai: HuntTargetAI, row: int, col: int, hit: bool, sunk: bool) -> None:
    ai.register_result(row, col, hit, sunk)


__all__ = [
    "auto_place_fleet",
    "current_turn",
    "is_game_over",
    "new_session",
    "next_ai_shot",
    "place_human_ship",
    "register_ai_result",
    "restore",
    "session_from_config",
    "shoot",
    "snapshot",
    "winner",
]
