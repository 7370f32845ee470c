"""Editing verbs invoked through keymaps or directly by the session."""

from . import column, core, linear
from .core import noop_action, redo, undo

__all__ = ["column", "core", "linear", "noop_action", "redo", "undo"]
