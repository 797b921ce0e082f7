"""Logical selector actions and the key tables that produce them."""

from __future__ import annotations

from enum import Enum

from ..state import MODE_SEARCH


class Action(Enum):
    """Closed set of actions the selector understands."""

    QUIT = "quit"
    CONFIRM = "confirm"
    START_SEARCH = "start_search"
    CLEAR_QUERY = "clear_query"
    CYCLE_OUTPUT = "cycle_output"
    TOGGLE_HELP = "toggle_help"
    TOGGLE_IGNORED = "toggle_ignored"
    TOGGLE_SELECTION = "toggle_selection"
    TOGGLE_ALL = "toggle_all"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    COLLAPSE = "collapse"
    EXPAND = "expand"
    EXPAND_ALL = "expand_all"
    COLLAPSE_ALL = "collapse_all"
    NEXT_FOLDER = "next_folder"
    PREV_FOLDER = "prev_folder"
    END_SEARCH = "end_search"
    DELETE_CHAR = "delete_char"
    TYPE_CHARACTER = "type_character"


BROWSING_KEYMAP: dict[str, Action] = {
    "q": Action.QUIT,
    "CTRL_C": Action.QUIT,
    "ENTER": Action.CONFIRM,
    "/": Action.START_SEARCH,
    "ESC": Action.CLEAR_QUERY,
    "o": Action.CYCLE_OUTPUT,
    "?": Action.TOGGLE_HELP,
    "i": Action.TOGGLE_IGNORED,
    " ": Action.TOGGLE_SELECTION,
    "a": Action.TOGGLE_ALL,
    "UP": Action.MOVE_UP,
    "k": Action.MOVE_UP,
    "DOWN": Action.MOVE_DOWN,
    "j": Action.MOVE_DOWN,
    "LEFT": Action.COLLAPSE,
    "h": Action.COLLAPSE,
    "RIGHT": Action.EXPAND,
    "l": Action.EXPAND,
    "e": Action.EXPAND_ALL,
    "c": Action.COLLAPSE_ALL,
    "f": Action.NEXT_FOLDER,
    "F": Action.PREV_FOLDER,
}

SEARCH_KEYMAP: dict[str, Action] = {
    "ESC": Action.END_SEARCH,
    "ENTER": Action.END_SEARCH,
    "BACKSPACE": Action.DELETE_CHAR,
}


def is_typed_character(key: str) -> bool:
    """Return whether ``key`` is a single printable character.

    U+FFFD marks undecodable input bytes and is never typed text.
    """
    return len(key) == 1 and key != "\ufffd" and key.isprintable()


def decode_action(key: str, mode: str) -> Action | None:
    """Map a key token to an action for ``mode`` (``None`` when unbound).

    Printable characters fall back to ``TYPE_CHARACTER`` only while a search
    query is being typed.
    """
    if mode == MODE_SEARCH:
        action = SEARCH_KEYMAP.get(key)
        if action is None and is_typed_character(key):
            return Action.TYPE_CHARACTER
        return action
    return BROWSING_KEYMAP.get(key)
