"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, KeyStroke, make_token
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)
from .defaults import DEFAULT_BINDINGS, default_actions, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "make_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
    "default_actions",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
