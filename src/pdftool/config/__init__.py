"""Configuration defaults and loading for pdftool.

Main components:
- STRUCTURE_DEFAULTS: Built-in heuristic constants
- load_structure_config: Merge defaults, YAML file and environment overrides
"""

from pdftool.config.defaults import STRUCTURE_DEFAULTS, STRUCTURE_ENV_VARS
from pdftool.config.loader import load_structure_config

__all__ = [
    "STRUCTURE_DEFAULTS",
    "STRUCTURE_ENV_VARS",
    "load_structure_config",
]
