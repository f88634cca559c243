"""
Run configuration for the benchmark runner.

Responsibility: read config/default.yaml (or a user file), fill in defaults
and reject bad values before any sieving starts.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from .prime_table import DEFAULT_WINDOW

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'default.yaml'

DEFAULTS: Dict[str, Any] = {
    'limits': [10**6],
    'window': DEFAULT_WINDOW,
    'known_counts': {},
    'verbose': False,
}


def _as_int(value: Any, key: str) -> int:
    # yaml reads 1e6 as a float and 10**6 is not valid yaml
    if isinstance(value, bool):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{key}: expected an integer, got {value!r}")
        return int(value)
    if isinstance(value, int):
        return value
    raise ValueError(f"{key}: expected an integer, got {value!r}")


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalise and check a config dict.

    Parameters
    ----------
    config : dict
        Raw config, already merged over DEFAULTS.

    Returns
    -------
    dict
        Config with integer limits, window and known_counts.
    """
    unknown = set(config) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    limits = config['limits']
    if not isinstance(limits, list) or not limits:
        raise ValueError(f"limits: expected a non-empty list, got {limits!r}")
    limits = [_as_int(v, 'limits') for v in limits]
    for limit in limits:
        if limit < 0:
            raise ValueError(f"limits: must be >= 0, got {limit}")

    window = _as_int(config['window'], 'window')
    if window < 1:
        raise ValueError(f"window: must be >= 1, got {window}")

    known_counts = config['known_counts'] or {}
    if not isinstance(known_counts, dict):
        raise ValueError(f"known_counts: expected a mapping, got {known_counts!r}")
    known_counts = {
        _as_int(k, 'known_counts'): _as_int(v, 'known_counts')
        for k, v in known_counts.items()
    }

    return {
        'limits': limits,
        'window': window,
        'known_counts': known_counts,
        'verbose': bool(config['verbose']),
    }


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over DEFAULTS.

    Parameters
    ----------
    path : Path, optional
        Config file. Defaults to config/default.yaml.

    Returns
    -------
    dict
        Validated config.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    config = dict(DEFAULTS)
    config.update(raw)
    return validate_config(config)
