"""Error types shared across the engine."""

from __future__ import annotations


class TextpadEngineError(RuntimeError):
    """Base class for recoverable engine errors."""


class DictionaryRequiredError(TextpadEngineError):
    """Raised when a case style needs the word dictionary before it is loaded."""

    def __init__(self, style: str) -> None:
        super().__init__(f"Dictionary required for {style}")
        self.style = style


class UnknownCaseStyleError(TextpadEngineError, ValueError):
    """Raised when a case style name does not map to a converter."""

    def __init__(self, style: object) -> None:
        super().__init__(f"Unknown case style: {style}")
        self.style = style


class ClipboardUnavailableError(TextpadEngineError):
    """Raised by clipboard backends when the system clipboard cannot be used."""


__all__ = [
    "TextpadEngineError",
    "DictionaryRequiredError",
    "UnknownCaseStyleError",
    "ClipboardUnavailableError",
]
