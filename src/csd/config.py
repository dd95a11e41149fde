"""
Configuration for the CSD command line.

A YAML mapping supplies the defaults the CLI uses when --place or --nnz
are not given:

    places: 6
    nnz: 4

Unknown keys are ignored with a warning. Invalid values raise
InvalidArgument.
"""

import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml

from csd.errors import InvalidArgument


@dataclass
class CsdConfig:
    """
    CLI defaults.

    Properties:
        places: Fractional places for to_csd (>= 0)
        nnz: Non-zero digit budget for to_csdnnz (>= 1)
    """

    places: int = 4
    nnz: int = 3


_MINIMUM = {"places": 0, "nnz": 1}


def config_from_dict(d: Dict[str, Any]) -> CsdConfig:
    known = {f.name for f in fields(CsdConfig)}
    values: Dict[str, int] = {}
    for key, value in d.items():
        if key not in known:
            warnings.warn(f"Unknown config key ignored: {key}", UserWarning)
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Config key '{key}' must be an integer, got {value!r}")
        if value < _MINIMUM[key]:
            raise InvalidArgument(f"Config key '{key}' must be >= {_MINIMUM[key]}, got {value}")
        values[key] = value
    return CsdConfig(**values)


def load_config(text: str) -> CsdConfig:
    """
    Parse a YAML document into a CsdConfig.

    An empty document gives the defaults.

    Raises:
        InvalidArgument: If the document is not a mapping or holds invalid values
    """
    try:
        d = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidArgument(f"Invalid config YAML: {e}")
    if d is None:
        return CsdConfig()
    if not isinstance(d, dict):
        raise InvalidArgument(f"Config must be a mapping, got {type(d).__name__}")
    return config_from_dict(d)


def load_config_file(filepath: str) -> CsdConfig:
    """
    Read a YAML config file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidArgument: If the content is invalid
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")
    return load_config(content)
