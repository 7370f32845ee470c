"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

MODIFIERS = ("alt", "ctrl", "meta", "shift")


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = (m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def make_token(key: str, modifiers: Iterable[str] = ()) -> str:
    """Canonical ``mod+mod+KEY`` token shared by bindings and key events."""

    normalized = normalize_modifiers(modifiers)
    if normalized:
        return "+".join(normalized) + "+" + key
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return make_token(self.key, self.modifiers)

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Parse ``"ctrl+z"`` / ``"alt+shift+UP"``; the last part is the key."""

        parts = spec.split("+")
        # a literal "+" key arrives as a trailing empty part
        if spec.endswith("+") and len(spec) > 1:
            parts = parts[:-2] + ["+"]
        key = parts[-1]
        modifiers = parts[:-1]
        unknown = [m for m in modifiers if m.strip().lower() not in MODIFIERS]
        if unknown:
            raise ValueError(f"Unknown modifier(s) {unknown} in '{spec}'")
        return cls(key=key, modifiers=tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable plus metadata invoked when a binding fires."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a keystroke in one mode with an action id."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def token(self) -> str:
        return self.stroke.token

    @classmethod
    def of(
        cls,
        binding_id: str,
        mode: str,
        keys: str,
        action_id: str,
        description: str = "",
    ) -> "Binding":
        return cls(
            id=binding_id,
            mode=mode,
            stroke=KeyStroke.parse(keys),
            action_id=action_id,
            description=description,
        )


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "MODIFIERS",
    "make_token",
    "normalize_modifiers",
]
