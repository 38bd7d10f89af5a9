"""Logging adapter - lib_log_rich setup and the stdlib-backed logging collaborator.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :class:`.controller.StdLoggingController` - Logging collaborator
"""

from __future__ import annotations

from .controller import StdLoggingController, register_level_names
from .setup import init_logging

__all__ = ["StdLoggingController", "init_logging", "register_level_names"]
