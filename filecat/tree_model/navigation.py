"""Row-index navigation helpers over flattened tree rows."""

from __future__ import annotations

from .types import TreeNode, TreeRow, source_node


def next_directory_row_index(rows: list[TreeRow], current_idx: int, direction: int) -> int:
    """Return the next directory row in ``direction``, wrapping at either end.

    Returns ``current_idx`` when no other directory row exists (or when the
    only directory row is the current one).
    """
    count = len(rows)
    if count == 0 or direction == 0:
        return current_idx
    step = 1 if direction > 0 else -1
    for offset in range(1, count):
        idx = (current_idx + step * offset) % count
        if rows[idx].is_dir:
            return idx
    return current_idx


def row_index_of(rows: list[TreeRow], node: TreeNode) -> int | None:
    """Return the index of the row showing ``node`` (live or filtered)."""
    for idx, row in enumerate(rows):
        if source_node(row) is node:
            return idx
    return None
