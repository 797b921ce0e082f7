"""Cascading selection over the live tree.

A directory with children is selected exactly when all of its children are.
Every mutation here re-establishes that rule from the touched node up to the
top level, including mutations made through filtered (shadow) rows.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .types import FilteredNode, SelectedFile, TreeNode, TreeRow, file_extension


def _apply_selection(node: TreeRow, selected: bool) -> None:
    """Set ``selected`` on ``node`` and everything below it."""
    if isinstance(node, FilteredNode):
        if not node.children:
            _apply_selection(node.source, selected)
            return
        for child in node.children:
            _apply_selection(child, selected)
        # Only retained descendants changed; recompute the live directory.
        node.source.selected = all(child.selected for child in node.source.children)
        return

    node.selected = selected
    for child in node.children:
        _apply_selection(child, selected)


def refresh_ancestor_selection(parent: TreeNode | None) -> None:
    """Recompute each ancestor as the AND of its children, up to the top level."""
    current = parent
    while current is not None:
        current.selected = all(child.selected for child in current.children)
        current = current.parent


def toggle_selection(node: TreeRow, selected: bool | None = None) -> None:
    """Select or deselect ``node`` with its subtree and fix up ancestors.

    ``selected`` forces the final value; when omitted the node's current
    value is flipped.
    """
    value = (not node.selected) if selected is None else bool(selected)
    _apply_selection(node, value)
    refresh_ancestor_selection(node.parent)


def toggle_all(nodes: Iterable[TreeRow], selected: bool) -> None:
    """Apply ``toggle_selection`` with a fixed value to every node."""
    for node in nodes:
        toggle_selection(node, selected)


def all_selected(nodes: Iterable[TreeNode]) -> bool:
    """Return whether every node and every descendant is selected."""
    for node in nodes:
        if not node.selected:
            return False
        if node.children and not all_selected(node.children):
            return False
    return True


def set_all_expanded(nodes: Iterable[TreeRow], expanded: bool) -> None:
    """Set ``expanded`` on every directory of a live or filtered tree."""
    for node in nodes:
        if not node.is_dir:
            continue
        node.expanded = expanded
        set_all_expanded(node.children, expanded)


def _iter_selected_leaves(nodes: Iterable[TreeNode]):
    for node in nodes:
        if node.selected and not node.is_dir:
            yield node
        if node.children:
            yield from _iter_selected_leaves(node.children)


def collect_selected_files(nodes: Iterable[TreeNode], base: Path | None = None) -> list[SelectedFile]:
    """Return selected leaf files sorted by relative path.

    Relative paths are computed against ``base`` when given, otherwise the
    scan-root relative path recorded on each node is used.
    """
    files: list[SelectedFile] = []
    for node in _iter_selected_leaves(nodes):
        if base is None:
            relative_path = node.relative_path
        else:
            relative_path = Path(os.path.relpath(node.path, base)).as_posix()
        files.append(
            SelectedFile(
                absolute_path=node.path,
                relative_path=relative_path,
                extension=file_extension(node.name),
            )
        )
    files.sort(key=lambda item: item.relative_path)
    return files


def count_selected_files(nodes: Iterable[TreeNode]) -> int:
    """Return how many leaf files are currently selected."""
    return sum(1 for _node in _iter_selected_leaves(nodes))
