"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import DEFAULT_PAGE_SIZE, EngineSettings, bundled_dictionary_path

__all__ = [
    "telemetry",
    "EngineSettings",
    "DEFAULT_PAGE_SIZE",
    "bundled_dictionary_path",
]
