# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tolerance configuration and YAML loading."""

import logging
import math
from pathlib import Path

import yaml

from .errors import InvalidParameterError

logger = logging.getLogger(__name__)


class GeometryConfig:
    """
    Numeric tolerances shared by the geometry primitives.

    Attributes
    ----------
    degenerate_tolerance : float
        Segment lengths at or below this value count as zero.
    equality_tolerance : float
        Default tolerance for Vec2D.equals_with_tolerance.

    """

    DEFAULT_DEGENERATE_TOLERANCE = 1e-9
    DEFAULT_EQUALITY_TOLERANCE = 1e-6

    def __init__(self, degenerate_tolerance=DEFAULT_DEGENERATE_TOLERANCE,
                 equality_tolerance=DEFAULT_EQUALITY_TOLERANCE):
        self.degenerate_tolerance = _check_tolerance(
            'degenerate_tolerance', degenerate_tolerance)
        self.equality_tolerance = _check_tolerance(
            'equality_tolerance', equality_tolerance)

    @classmethod
    def from_dict(cls, values):
        """
        Build a config from a mapping of setting names to values.

        Raises
        ------
        ValueError
            If the mapping contains unknown keys

        """
        known = {'degenerate_tolerance', 'equality_tolerance'}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown geometry settings: {sorted(unknown)}")
        return cls(**values)

    def to_dict(self):
        """Return the settings as a plain dictionary."""
        return {
            'degenerate_tolerance': self.degenerate_tolerance,
            'equality_tolerance': self.equality_tolerance,
        }

    def __eq__(self, other):
        if not isinstance(other, GeometryConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        """Return string representation of config."""
        return (f"GeometryConfig(degenerate_tolerance={self.degenerate_tolerance}, "
                f"equality_tolerance={self.equality_tolerance})")


def _check_tolerance(name, value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value) or value < 0:
        raise InvalidParameterError(f"{name} must be finite and non-negative, got {value}")
    return value


_active_config = GeometryConfig()


def get_config():
    """Return the configuration currently used by the geometry primitives."""
    return _active_config


def set_config(config):
    """
    Replace the active configuration.

    Args:
        config : GeometryConfig or None
            New configuration; None restores the defaults

    Returns
    -------
    GeometryConfig
        The previously active configuration

    """
    global _active_config
    previous = _active_config
    _active_config = config if config is not None else GeometryConfig()
    return previous


def load_config(yaml_path, activate=True):
    """
    Load geometry tolerances from a YAML file.

    The file must contain a top-level ``geometry`` mapping, e.g.::

        geometry:
          degenerate_tolerance: 1.0e-9
          equality_tolerance: 1.0e-6

    Parameters
    ----------
    yaml_path : str
        Path to the YAML configuration file.
    activate : bool, optional
        Make the loaded config the active one (default True).

    Returns
    -------
    GeometryConfig
        The loaded configuration.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or 'geometry' not in data:
        raise ValueError("Missing required key in YAML: 'geometry'")

    section = data['geometry'] or {}
    if not isinstance(section, dict):
        raise ValueError("'geometry' must be a mapping")

    config = GeometryConfig.from_dict(section)
    logger.info("Loaded geometry config from %s: %s", yaml_path, config)

    if activate:
        set_config(config)
    return config
