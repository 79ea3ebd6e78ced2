# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Configuration loading and logging setup.

Configuration is a nested dict read from YAML and merged over DEFAULT_CONFIG,
so a file only needs the keys it changes.
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Optional, Union

import yaml


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_CONFIG: Dict = {
    'game': {
        'seed': None,
        'player_name': 'Player',
    },
    'logging': {
        'level': 'INFO',
        'format': LOG_FORMAT,
    },
    'evaluation': {
        'num_games': 100,
        'seeds': None,
        'max_steps': 100,
    },
}


def _merge(base: Dict, override: Dict) -> Dict:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file; defaults only if None

    Returns:
        Configuration dict with every default key present.

    Raises:
        ValueError: If the file does not hold a YAML mapping.
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return _merge(DEFAULT_CONFIG, loaded)


def setup_logging(config: Optional[Dict] = None) -> None:
    """Configure root logging from the ``logging`` section of ``config``."""
    settings = (config or DEFAULT_CONFIG).get('logging', {})
    level = settings.get('level', 'INFO')
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=settings.get('format', LOG_FORMAT),
    )
