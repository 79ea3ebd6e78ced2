# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Per-player lifetime statistics.

Only the record lives here; reading and writing it to disk is up to the
host application.
"""

from dataclasses import asdict, dataclass

from battleship.session import GameSession, Side


@dataclass
class PlayerStats:
    """Accumulated results for one player."""
    name: str
    games_played: int = 0
    games_won: int = 0
    total_shots: int = 0
    total_hits: int = 0

    @property
    def accuracy(self) -> float:
        """Hit percentage over all recorded shots."""
        if self.total_shots == 0:
            return 0.0
        return self.total_hits * 100.0 / self.total_shots

    def record_session(self, session: GameSession, side: Side = Side.HUMAN) -> None:
        """
        Add the results of a finished session.

        Args:
            session: Session in the FINISHED phase
            side: Which side these statistics belong to

        Raises:
            ValueError: If the session has not finished.
        """
        if not session.is_over:
            raise ValueError("Only finished sessions can be recorded")

        status = session.side_status(side)
        self.games_played += 1
        if session.winner is side:
            self.games_won += 1
        self.total_shots += status["shots_fired"]
        self.total_hits += status["hits"]

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerStats":
        return cls(
            name=data["name"],
            games_played=int(data.get("games_played", 0)),
            games_won=int(data.get("games_won", 0)),
            total_shots=int(data.get("total_shots", 0)),
            total_hits=int(data.get("total_hits", 0)),
        )

    def __str__(self) -> str:
        return (
            f"Player: {self.name} | Games: {self.games_played} | "
            f"Won: {self.games_won} | Accuracy: {self.accuracy:.1f}%"
        )
