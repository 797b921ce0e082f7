"""Selection-tree construction from a filesystem root."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .git_visibility import git_visible_paths, visible_directories
from .types import TreeNode
from .walk import MAX_WALK_DEPTH, SKIP_NAMES, WalkEntry, walk_entries

logger = logging.getLogger(__name__)

VisibilityLookup = Callable[[Path], frozenset[Path] | None]


def _is_visible(
    entry: WalkEntry,
    visible_files: frozenset[Path],
    visible_dirs: frozenset[Path],
) -> bool:
    """Return whether ``entry`` is a visible file or holds a visible descendant."""
    if entry.is_dir:
        return entry.path in visible_dirs
    return entry.path in visible_files


def build_tree(
    root: Path,
    working_dir: Path,
    show_ignored: bool,
    visibility_lookup: VisibilityLookup = git_visible_paths,
) -> list[TreeNode]:
    """Build the selection tree below ``root`` and return its top-level nodes.

    With ``show_ignored`` false the tree is pruned to git-visible paths of
    ``working_dir``; when git is unavailable no pruning happens. Returns an
    empty list when ``root`` cannot be read.
    """
    root = root.resolve()
    visible_files = None if show_ignored else visibility_lookup(working_dir)
    visible_dirs = visible_directories(visible_files) if visible_files is not None else frozenset()

    try:
        entries = [
            entry
            for entry in walk_entries(root, SKIP_NAMES, MAX_WALK_DEPTH)
            if visible_files is None or _is_visible(entry, visible_files, visible_dirs)
        ]
    except OSError as exc:
        logger.debug("cannot read scan root %s: %s", root, exc)
        return []

    entries.sort(key=lambda entry: str(entry.path))

    top_level: list[TreeNode] = []
    dir_nodes: dict[Path, TreeNode] = {}
    for entry in entries:
        rel = entry.path.relative_to(root)
        node = TreeNode(
            path=entry.path,
            relative_path=rel.as_posix(),
            name=entry.path.name,
            is_dir=entry.is_dir,
            depth=len(rel.parts) - 1,
        )
        if entry.is_dir:
            dir_nodes[entry.path] = node

        parent = dir_nodes.get(entry.path.parent)
        if parent is not None:
            parent.add_child(node)
        elif node.depth == 0:
            top_level.append(node)

    logger.debug(
        "built tree for %s: %d entries, git filter %s",
        root,
        len(entries),
        "off" if visible_files is None else "on",
    )
    return top_level
