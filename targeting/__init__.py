# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Opponent targeting for Battleship.

Provides the hunt/target strategy used by the machine player and a
harness for benchmarking it.
"""

from targeting.hunt_target import HuntTargetAI, Knowledge, Mode
from targeting.evaluate import Evaluator, play_game

__all__ = [
    'HuntTargetAI',
    'Knowledge',
    'Mode',
    'Evaluator',
    'play_game',
]
