"""UI-agnostic plain-text editing engine."""

__all__ = [
    "adapters",
    "buffer",
    "editing",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "text",
    "session",
]

__version__ = "0.1.0"
