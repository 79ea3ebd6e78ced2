# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Game session: one match between a human and the machine.

The session owns both boards, both fleets, both shot records, the turn
indicator and the phase. It is a plain caller-owned object with no
locking; a host running UI and AI work in parallel must serialize every
mutating call itself.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from battleship.board import Board, CellState, Coord
from battleship.errors import InvalidGameStateError, InvalidPlacementError
from battleship.placement import (
    fleet_is_complete,
    place_fleet,
    remaining_ship_types,
    validate_placement,
)
from battleship.rules import ShotOutcome, fleet_sunk, resolve_shot
from battleship.ship import Direction, Ship, ShipType
from targeting.hunt_target import HuntTargetAI


logger = logging.getLogger(__name__)


class Side(Enum):
    """The two sides of a match."""
    HUMAN = "human"
    MACHINE = "machine"

    @property
    def opponent(self) -> "Side":
        return Side.MACHINE if self is Side.HUMAN else Side.HUMAN


class Phase(Enum):
    """Lifecycle of a match."""
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


# Turn order used for the snapshot turn index
TURN_ORDER = [Side.HUMAN, Side.MACHINE]


class GameSession:
    """
    A single Battleship match.

    Both fleets are placed during SETUP (the human's either ship by ship or
    randomly); the session moves to PLAYING as soon as both are complete,
    with the human shooting first. It moves to FINISHED when one fleet is
    fully sunk.
    """

    def __init__(
        self,
        player_name: str = "Player",
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a new session in the SETUP phase.

        Args:
            player_name: Name of the human player
            seed: Random seed for reproducible placement and AI choices
            rng: Random source; takes precedence over ``seed``
        """
        self.player_name = player_name.strip() or "Player"
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

        self.boards: Dict[Side, Board] = {side: Board() for side in Side}
        self.fleets: Dict[Side, List[Ship]] = {side: [] for side in Side}
        self.shots: Dict[Side, Set[Coord]] = {side: set() for side in Side}

        self.turn = Side.HUMAN
        self.phase = Phase.SETUP
        self._winner: Optional[Side] = None

        self.ai = HuntTargetAI(board_size=self.boards[Side.HUMAN].size, rng=self.rng)

    @classmethod
    def from_config(
        cls,
        config: Dict,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """Build a session from the ``game`` section of a config."""
        section = config.get("game", {})
        return cls(
            player_name=section.get("player_name") or "Player",
            seed=section.get("seed"),
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def current_turn(self) -> Side:
        return self.turn

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.FINISHED

    @property
    def winner(self) -> Optional[Side]:
        """The side that sank the other's fleet, None while undecided."""
        return self._winner

    def remaining_ships(self, side: Side) -> List[ShipType]:
        """Ship types ``side`` still has to place."""
        return remaining_ship_types(self.fleets[side])

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def _require_phase(self, phase: Phase, action: str) -> None:
        if self.phase is not phase:
            raise InvalidGameStateError(
                f"Cannot {action} during {self.phase.value} phase"
            )

    def place_human_ship(
        self,
        ship_type: ShipType,
        row: int,
        col: int,
        direction: Direction = Direction.RIGHT,
    ) -> Ship:
        """
        Place one human ship manually.

        Args:
            ship_type: Which ship to place
            row: Anchor row (0-based)
            col: Anchor column (0-based)
            direction: Direction the ship extends from its anchor

        Returns:
            The placed ship.

        Raises:
            InvalidPlacementError: If the ship leaves the grid, overlaps
                another ship, or the fleet already has all ships of that type.
            InvalidGameStateError: If the match is past SETUP.
        """
        self._require_phase(Phase.SETUP, "place ships")

        if ship_type not in self.remaining_ships(Side.HUMAN):
            raise InvalidPlacementError(
                f"Fleet already has every {ship_type.name} it is allowed"
            )

        ship = Ship(ship_type, row, col, direction)
        board = self.boards[Side.HUMAN]
        validate_placement(board, ship)

        for cell in ship.occupied_cells():
            board.set_cell(cell[0], cell[1], CellState.SHIP)
        self.fleets[Side.HUMAN].append(ship)
        logger.debug(f"{self.player_name} placed {ship}")

        self._maybe_start()
        return ship

    def auto_place_fleet(self, side: Side) -> List[Ship]:
        """
        Randomly place the whole fleet for ``side``.

        Anything that side had already placed is discarded first.

        Raises:
            SetupExhaustedError: If placement could not complete.
            InvalidGameStateError: If the match is past SETUP.
        """
        self._require_phase(Phase.SETUP, "place ships")

        board = Board(self.boards[side].size)
        fleet = place_fleet(board, self.rng)
        self.boards[side] = board
        self.fleets[side] = fleet
        logger.info(f"Fleet placed for {side.value}: {len(fleet)} ships")

        self._maybe_start()
        return fleet

    def _maybe_start(self) -> None:
        if all(fleet_is_complete(self.fleets[side]) for side in Side):
            self.ai.reset()
            self.turn = Side.HUMAN
            self.phase = Phase.PLAYING
            logger.info(f"Match started: {self.player_name} vs machine")

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def shoot(self, side: Side, row: int, col: int) -> ShotOutcome:
        """
        Fire a shot for ``side`` at the opponent's board.

        HIT and SUNK keep the turn, MISS passes it, ALREADY_SHOT and
        INVALID leave everything unchanged so the shooter can retry.

        Raises:
            InvalidGameStateError: If the match is not in PLAYING or it is
                not ``side``'s turn.
        """
        self._require_phase(Phase.PLAYING, "shoot")
        if side is not self.turn:
            raise InvalidGameStateError(f"It is not the {side.value} side's turn")

        target = side.opponent
        outcome = resolve_shot(
            self.shots[side], self.boards[target], self.fleets[target], row, col
        )
        logger.debug(f"{side.value} fired at ({row}, {col}): {outcome.value}")

        if side is Side.MACHINE and outcome.consumes_shot:
            self.ai.register_result(row, col, outcome.is_hit, outcome is ShotOutcome.SUNK)

        if fleet_sunk(self.fleets[target]):
            self.phase = Phase.FINISHED
            self._winner = side
            logger.info(f"Game over: {side.value} wins")
        elif outcome is ShotOutcome.MISS:
            self.turn = target

        return outcome

    def next_ai_shot(self) -> Coord:
        """Coordinate the machine wants to fire at next."""
        return self.ai.next_shot(self.boards[Side.HUMAN])

    def ai_shoot(self) -> Tuple[int, int, ShotOutcome]:
        """
        Let the machine fire one shot.

        Re-selects until a shot is consumed, so the returned outcome is
        always MISS, HIT or SUNK.

        Returns:
            (row, col, outcome)
        """
        self._require_phase(Phase.PLAYING, "shoot")
        if self.turn is not Side.MACHINE:
            raise InvalidGameStateError("It is not the machine side's turn")

        # Each attempt marks a cell tried, so this ends within one board
        for _ in range(self.boards[Side.HUMAN].size ** 2):
            row, col = self.next_ai_shot()
            outcome = self.shoot(Side.MACHINE, row, col)
            if outcome.consumes_shot:
                return row, col, outcome
            logger.debug(f"AI shot at ({row}, {col}) rejected: {outcome.value}")
        raise InvalidGameStateError("Machine found no cell left to shoot")

    def play_ai_turn(self) -> List[Tuple[int, int, ShotOutcome]]:
        """
        Let the machine shoot until its turn passes or the game ends.

        Returns:
            The shots fired, in order.
        """
        shots = []
        while self.phase is Phase.PLAYING and self.turn is Side.MACHINE:
            shots.append(self.ai_shoot())
        return shots

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def side_status(self, side: Side) -> dict:
        """Shot and fleet statistics for ``side``."""
        fired = len(self.shots[side])
        hits = self.boards[side.opponent].count(CellState.HIT)
        sunk = sum(1 for ship in self.fleets[side.opponent] if ship.is_sunk)
        return {
            "shots_fired": fired,
            "hits": hits,
            "misses": fired - hits,
            "enemy_ships_sunk": sunk,
            "ships_remaining": sum(1 for ship in self.fleets[side] if not ship.is_sunk),
        }

    def status(self) -> dict:
        """
        Get current session status.

        Returns:
            Dict with phase, turn, winner and per-side statistics.
        """
        return {
            "player_name": self.player_name,
            "phase": self.phase.value,
            "turn": self.turn.value,
            "game_over": self.is_over,
            "winner": self._winner.value if self._winner else None,
            "sides": {side.value: self.side_status(side) for side in Side},
        }

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> dict:
        """
        Capture the full session state as plain data.

        The host decides how to store it (JSON, YAML, pickle, ...).
        """
        return {
            "player_name": self.player_name,
            "boards": {side.value: self.boards[side].to_list() for side in Side},
            "fleets": {
                side.value: [ship.to_dict() for ship in self.fleets[side]] for side in Side
            },
            "shot_history": {
                side.value: sorted(list(coord) for coord in self.shots[side]) for side in Side
            },
            "turn_index": TURN_ORDER.index(self.turn),
            "phase": self.phase.value,
            "winner": self._winner.value if self._winner else None,
            "ai": self.ai.to_dict(),
        }

    @classmethod
    def restore(
        cls,
        snapshot: dict,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """
        Rebuild a session from ``snapshot`` output.

        Args:
            snapshot: Data produced by ``snapshot()``
            seed: Seed for the restored session's random source
            rng: Random source; takes precedence over ``seed``

        Raises:
            ValueError: If the snapshot is malformed.
        """
        session = cls(snapshot.get("player_name", "Player"), seed=seed, rng=rng)
        try:
            for side in Side:
                session.boards[side] = Board.from_list(snapshot["boards"][side.value])
                session.fleets[side] = [
                    Ship.from_dict(data) for data in snapshot["fleets"][side.value]
                ]
                session.shots[side] = {
                    (int(r), int(c)) for r, c in snapshot["shot_history"][side.value]
                }
            turn_index = snapshot["turn_index"]
            if turn_index not in range(len(TURN_ORDER)):
                raise ValueError(f"turn index {turn_index!r} is not 0 or 1")
            session.turn = TURN_ORDER[turn_index]
            session.phase = Phase(snapshot["phase"])

            if snapshot.get("ai"):
                session.ai = HuntTargetAI.from_dict(snapshot["ai"], rng=session.rng)
            else:
                session.ai.sync(session.boards[Side.HUMAN])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed session snapshot: {e}") from e

        winner = snapshot.get("winner")
        if winner is not None:
            session._winner = Side(winner)
        elif session.phase is Phase.FINISHED:
            session._winner = next(
                (side for side in Side if fleet_sunk(session.fleets[side.opponent])), None
            )

        logger.info(
            f"Session restored for {session.player_name} "
            f"({session.phase.value}, {session.turn.value} to play)"
        )
        return session
