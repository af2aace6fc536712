"""Mode manager and the modes keys are dispatched to."""

from .base_mode import KeyInput, Mode, ModeContext, ModeResult, SessionSignals
from .keyed import KeyedMode
from .edit_mode import EditMode
from .prompt_mode import PromptMode

__all__ = [
    "KeyInput",
    "KeyedMode",
    "Mode",
    "ModeContext",
    "ModeResult",
    "SessionSignals",
    "EditMode",
    "PromptMode",
]
