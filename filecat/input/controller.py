"""Keyboard state machine for the selector (Browsing / SearchEntry).

Decodes key tokens into actions for the current mode and applies them to the
session state. This is the only place the live tree is mutated during a run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..state import MODE_BROWSING, MODE_SEARCH, SessionState, next_output_mode
from ..tree_model import (
    TreeNode,
    all_selected,
    next_directory_row_index,
    row_index_of,
    set_all_expanded,
    toggle_all,
    toggle_selection,
)
from .actions import Action, decode_action
from .key_registry import ActionBinding, ActionRegistry

logger = logging.getLogger(__name__)

TreeRebuilder = Callable[[bool], list[TreeNode]]


class InputController:
    """Apply decoded key actions to a ``SessionState``.

    ``rebuild_tree`` is called with the new ``show_ignored`` value and must
    return the freshly built tree; it runs to completion before the next key
    is handled.
    """

    def __init__(self, state: SessionState, rebuild_tree: TreeRebuilder) -> None:
        self.state = state
        self.rebuild_tree = rebuild_tree
        self._pending_char = ""
        self._browsing = ActionRegistry().register_bindings(
            ActionBinding((Action.QUIT,), self._quit),
            ActionBinding((Action.CONFIRM,), self._confirm),
            ActionBinding((Action.START_SEARCH,), self._start_search),
            ActionBinding((Action.CLEAR_QUERY,), self._clear_query),
            ActionBinding((Action.CYCLE_OUTPUT,), self._cycle_output),
            ActionBinding((Action.TOGGLE_HELP,), self._toggle_help),
            ActionBinding((Action.TOGGLE_IGNORED,), self._toggle_ignored),
            ActionBinding((Action.TOGGLE_SELECTION,), self._toggle_selection),
            ActionBinding((Action.TOGGLE_ALL,), self._toggle_all),
            ActionBinding((Action.MOVE_UP,), lambda: self._move_cursor(-1)),
            ActionBinding((Action.MOVE_DOWN,), lambda: self._move_cursor(1)),
            ActionBinding((Action.COLLAPSE,), self._collapse),
            ActionBinding((Action.EXPAND,), self._expand),
            ActionBinding((Action.EXPAND_ALL,), lambda: self._set_all_expanded(True)),
            ActionBinding((Action.COLLAPSE_ALL,), lambda: self._set_all_expanded(False)),
            ActionBinding((Action.NEXT_FOLDER,), lambda: self._jump_folder(1)),
            ActionBinding((Action.PREV_FOLDER,), lambda: self._jump_folder(-1)),
        )
        self._search = ActionRegistry().register_bindings(
            ActionBinding((Action.END_SEARCH,), self._end_search),
            ActionBinding((Action.DELETE_CHAR,), self._delete_char),
            ActionBinding((Action.TYPE_CHARACTER,), self._type_character),
        )

    def handle_key(self, key: str) -> bool:
        """Handle one key token and return ``True`` when the session should end."""
        state = self.state
        action = decode_action(key, state.mode)
        if action is None:
            return False
        registry = self._search if state.mode == MODE_SEARCH else self._browsing
        self._pending_char = key
        handled = registry.dispatch(action)
        return bool(handled)

    # Browsing actions

    def _quit(self) -> bool:
        self.state.confirmed = False
        return True

    def _confirm(self) -> bool:
        self.state.confirmed = True
        return True

    def _start_search(self) -> bool:
        self.state.mode = MODE_SEARCH
        return False

    def _clear_query(self) -> bool:
        state = self.state
        if state.search_query:
            state.search_query = ""
            state.reset_cursor()
        return False

    def _cycle_output(self) -> bool:
        self.state.output_mode = next_output_mode(self.state.output_mode)
        return False

    def _toggle_help(self) -> bool:
        self.state.show_help = not self.state.show_help
        return False

    def _toggle_ignored(self) -> bool:
        state = self.state
        state.show_ignored = not state.show_ignored
        logger.debug("rebuilding tree with show_ignored=%s", state.show_ignored)
        state.replace_tree(self.rebuild_tree(state.show_ignored))
        state.rows = []
        return False

    def _toggle_selection(self) -> bool:
        row = self.state.current_row()
        if row is not None:
            toggle_selection(row)
        return False

    def _toggle_all(self) -> bool:
        state = self.state
        if state.search_query:
            visible_selected = all(row.selected for row in state.rows)
            toggle_all(list(state.rows), not visible_selected)
        else:
            toggle_all(state.tree, not all_selected(state.tree))
        return False

    def _move_cursor(self, delta: int) -> bool:
        state = self.state
        if not state.rows:
            return False
        state.cursor_index = max(0, min(len(state.rows) - 1, state.cursor_index + delta))
        return False

    def _collapse(self) -> bool:
        state = self.state
        row = state.current_row()
        if row is None:
            return False
        if row.is_dir and row.expanded:
            row.expanded = False
            return False
        parent = row.parent
        if parent is not None:
            parent_idx = row_index_of(state.rows, parent)
            if parent_idx is not None:
                state.cursor_index = parent_idx
        return False

    def _expand(self) -> bool:
        row = self.state.current_row()
        if row is not None and row.is_dir and not row.expanded:
            row.expanded = True
        return False

    def _set_all_expanded(self, expanded: bool) -> bool:
        state = self.state
        set_all_expanded(state.tree, expanded)
        if state.search_query:
            # The search view keeps its own expand flags on the shadow rows.
            set_all_expanded(state.filtered_tree(), expanded)
        if not expanded:
            state.cursor_index = 0
        return False

    def _jump_folder(self, direction: int) -> bool:
        state = self.state
        state.cursor_index = next_directory_row_index(state.rows, state.cursor_index, direction)
        return False

    # Search-entry actions

    def _end_search(self) -> bool:
        self.state.mode = MODE_BROWSING
        return False

    def _delete_char(self) -> bool:
        state = self.state
        state.search_query = state.search_query[:-1]
        state.reset_cursor()
        return False

    def _type_character(self) -> bool:
        state = self.state
        state.search_query += self._pending_char
        state.reset_cursor()
        return False
