# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Exception types raised by the Battleship engine.

Shot problems (out of range, repeated) are reported as shot outcomes,
not exceptions.
"""


class BattleshipError(Exception):
    """Base class for engine errors."""


class InvalidPlacementError(BattleshipError, ValueError):
    """A ship would leave the grid or overlap another ship."""


class SetupExhaustedError(BattleshipError, RuntimeError):
    """Fleet placement ran out of candidate cells."""


class InvalidGameStateError(BattleshipError, RuntimeError):
    """An operation was attempted in the wrong phase or out of turn."""
