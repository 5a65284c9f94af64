"""Logging double that leaves the lib_log_rich runtime untouched."""

from __future__ import annotations

from lib_layered_config import Config


def start_logging_in_memory(config: Config) -> None:
    pass


__all__ = ["start_logging_in_memory"]
