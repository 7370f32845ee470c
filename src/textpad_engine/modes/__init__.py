"""Mode manager and the linear/column dispatch modes."""

from .base_mode import CLIPBOARD_READ, KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .linear_mode import LinearMode
from .column_mode import ColumnMode
from .mode_manager import ModeManager

__all__ = [
    "CLIPBOARD_READ",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "LinearMode",
    "ColumnMode",
    "ModeManager",
]
