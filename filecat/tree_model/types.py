"""Tree node datatypes shared by the builder, selection model, and filter.

``TreeNode`` is the live, mutable tree owned by a selection session.
``FilteredNode`` is the shadow directory wrapper produced by query filtering.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(eq=False)
class TreeNode:
    """One file or directory in the selection tree.

    Nodes compare by identity. The parent link is a weak reference so a child
    never keeps its parent alive; the tree is owned top-down via ``children``.
    """

    path: Path
    relative_path: str
    name: str
    is_dir: bool
    depth: int
    selected: bool = False
    expanded: bool = False
    children: list[TreeNode] = field(default_factory=list)
    _parent_ref: weakref.ref[TreeNode] | None = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> TreeNode | None:
        """Return the containing directory node, or ``None`` for top-level nodes."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def add_child(self, child: TreeNode) -> None:
        """Append ``child`` and point its back-reference at this node."""
        child._parent_ref = weakref.ref(self)
        self.children.append(child)


@dataclass(eq=False)
class FilteredNode:
    """Shadow copy of a directory retained by a search query.

    Leaf children are the original ``TreeNode`` objects, so selecting a file
    through the filtered view selects it in the live tree. Directory state that
    only matters for display (``expanded``) lives on the wrapper.
    """

    source: TreeNode
    children: list[TreeRow] = field(default_factory=list)
    expanded: bool = True

    @property
    def path(self) -> Path:
        return self.source.path

    @property
    def relative_path(self) -> str:
        return self.source.relative_path

    @property
    def name(self) -> str:
        return self.source.name

    @property
    def depth(self) -> int:
        return self.source.depth

    @property
    def is_dir(self) -> bool:
        return True

    @property
    def parent(self) -> TreeNode | None:
        return self.source.parent

    @property
    def selected(self) -> bool:
        """Return whether every retained descendant is selected."""
        if not self.children:
            return self.source.selected
        return all(child.selected for child in self.children)


TreeRow = TreeNode | FilteredNode


def source_node(row: TreeRow) -> TreeNode:
    """Return the live tree node behind ``row``."""
    if isinstance(row, FilteredNode):
        return row.source
    return row


@dataclass(frozen=True)
class SelectedFile:
    """File chosen by the user, ready for bundling."""

    absolute_path: Path
    relative_path: str
    extension: str


def file_extension(name: str) -> str:
    """Return text after the last dot in ``name`` (``""`` when there is none)."""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


__all__ = [
    "TreeNode",
    "FilteredNode",
    "TreeRow",
    "SelectedFile",
    "source_node",
    "file_extension",
]
