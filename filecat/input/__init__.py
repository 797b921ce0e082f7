"""Input-layer public API for key decoding and the selector state machine.

Exports are split between low-level terminal decoding (``read_key``) and the
higher-level ``InputController`` used by the runtime loop.
"""

from .actions import BROWSING_KEYMAP, SEARCH_KEYMAP, Action, decode_action, is_typed_character
from .controller import InputController
from .key_registry import ActionBinding, ActionRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Action",
    "BROWSING_KEYMAP",
    "SEARCH_KEYMAP",
    "decode_action",
    "is_typed_character",
    "ActionBinding",
    "ActionRegistry",
    "InputController",
]
