"""Row flattening and scroll-window arithmetic for the tree view."""

from __future__ import annotations

from collections.abc import Iterable

from ..tree_model.types import TreeRow


def flatten_tree(nodes: Iterable[TreeRow]) -> list[TreeRow]:
    """Return visible rows in depth-first pre-order.

    A directory's children are included only while that directory is
    expanded in the tree being flattened.
    """
    rows: list[TreeRow] = []

    def walk(items: Iterable[TreeRow]) -> None:
        for item in items:
            rows.append(item)
            if item.is_dir and item.expanded and item.children:
                walk(item.children)

    walk(nodes)
    return rows


def clamp_cursor(cursor_index: int, row_count: int) -> int:
    """Clamp ``cursor_index`` into ``[0, row_count - 1]`` (``0`` when empty)."""
    if row_count <= 0:
        return 0
    return max(0, min(cursor_index, row_count - 1))


def scroll_to_cursor(cursor_index: int, scroll_offset: int, visible_height: int, row_count: int) -> int:
    """Return a scroll offset keeping the cursor inside the visible window."""
    visible_height = max(1, visible_height)
    if cursor_index < scroll_offset:
        scroll_offset = cursor_index
    elif cursor_index >= scroll_offset + visible_height:
        scroll_offset = cursor_index - visible_height + 1
    max_offset = max(0, row_count - visible_height)
    return max(0, min(scroll_offset, max_offset))


def visible_slice(rows: list[TreeRow], scroll_offset: int, visible_height: int) -> list[TreeRow]:
    """Return rows currently inside the viewport."""
    return rows[scroll_offset : scroll_offset + max(1, visible_height)]
