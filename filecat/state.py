"""Mutable session state for one interactive selection run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .render import OUTPUT_MODES, clamp_cursor, flatten_tree
from .tree_model import TreeNode, TreeRow, filter_tree

MODE_BROWSING = "browsing"
MODE_SEARCH = "search"
DEFAULT_OUTPUT_MODE = "clipboard"


def normalize_output_mode(mode: str | None) -> str:
    """Return ``mode`` when it names an output mode, else the default."""
    if mode in OUTPUT_MODES:
        return mode
    return DEFAULT_OUTPUT_MODE


def next_output_mode(current: str) -> str:
    """Return the output mode after ``current`` in the stdout → clipboard → file cycle."""
    idx = OUTPUT_MODES.index(normalize_output_mode(current))
    return OUTPUT_MODES[(idx + 1) % len(OUTPUT_MODES)]


@dataclass
class SessionState:
    root: Path
    working_dir: Path
    tree: list[TreeNode]
    output_mode: str = DEFAULT_OUTPUT_MODE
    show_help: bool = False
    show_ignored: bool = False
    mode: str = MODE_BROWSING
    search_query: str = ""
    cursor_index: int = 0
    scroll_offset: int = 0
    rows: list[TreeRow] = field(default_factory=list)
    confirmed: bool = False
    tree_generation: int = 0
    _filtered_key: tuple[str, int] | None = field(default=None, init=False, repr=False)
    _filtered_view: list[TreeRow] = field(default_factory=list, init=False, repr=False)

    def filtered_tree(self) -> list[TreeRow]:
        """Return the tree as seen through the current query.

        The shadow view is kept while neither the query nor the tree changes,
        so expand/collapse inside a filtered view survives re-renders.
        """
        if not self.search_query:
            self._filtered_key = None
            self._filtered_view = []
            return self.tree
        key = (self.search_query, self.tree_generation)
        if key != self._filtered_key:
            self._filtered_view = filter_tree(self.tree, self.search_query)
            self._filtered_key = key
        return self._filtered_view

    def refresh_rows(self) -> list[TreeRow]:
        """Recompute flattened rows and clamp the cursor onto them."""
        self.rows = flatten_tree(self.filtered_tree())
        self.cursor_index = clamp_cursor(self.cursor_index, len(self.rows))
        return self.rows

    def reset_cursor(self) -> None:
        self.cursor_index = 0
        self.scroll_offset = 0

    def replace_tree(self, tree: list[TreeNode]) -> None:
        """Swap in a freshly built tree, dropping any cached filtered view."""
        self.tree = tree
        self.tree_generation += 1
        self._filtered_key = None
        self._filtered_view = []
        self.reset_cursor()

    def current_row(self) -> TreeRow | None:
        if 0 <= self.cursor_index < len(self.rows):
            return self.rows[self.cursor_index]
        return None
