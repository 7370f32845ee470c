"""Textual front end for the editing engine."""

from .controller import TextualEditorAdapter, TextualUIHooks, translate_key
from .render import render_mirror

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "render_mirror", "translate_key"]
