"""Configuration adapter - layered loading, settings, assignments and display.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - ``[paramcore]`` section validation and application
    * :mod:`.assignments` - CLI ``--param`` assignment parsing
    * :mod:`.display` - Parameter display in human/JSON formats
"""

from __future__ import annotations

from .assignments import apply_assignments, parse_assignment
from .display import display_parameters
from .loader import get_config, get_default_config_path
from .settings import ParamcoreSettingsModel, apply_settings, load_settings

__all__ = [
    "ParamcoreSettingsModel",
    "apply_assignments",
    "apply_settings",
    "display_parameters",
    "get_config",
    "get_default_config_path",
    "load_settings",
    "parse_assignment",
]
