"""Selection-tree model: construction, selection, filtering, navigation.

Defines ``TreeNode`` plus the shadow ``FilteredNode`` used by search views.
Nothing in this package touches the terminal.
"""

from __future__ import annotations

from .build import build_tree
from .filtering import filter_tree, node_matches
from .git_visibility import git_visible_paths, visible_directories
from .navigation import next_directory_row_index, row_index_of
from .selection import (
    all_selected,
    collect_selected_files,
    count_selected_files,
    refresh_ancestor_selection,
    set_all_expanded,
    toggle_all,
    toggle_selection,
)
from .types import FilteredNode, SelectedFile, TreeNode, TreeRow, file_extension, source_node
from .walk import MAX_WALK_DEPTH, SKIP_NAMES, WalkEntry, walk_entries

__all__ = [
    "TreeNode",
    "FilteredNode",
    "TreeRow",
    "SelectedFile",
    "source_node",
    "file_extension",
    "build_tree",
    "walk_entries",
    "WalkEntry",
    "SKIP_NAMES",
    "MAX_WALK_DEPTH",
    "git_visible_paths",
    "visible_directories",
    "toggle_selection",
    "toggle_all",
    "all_selected",
    "set_all_expanded",
    "refresh_ancestor_selection",
    "collect_selected_files",
    "count_selected_files",
    "filter_tree",
    "node_matches",
    "next_directory_row_index",
    "row_index_of",
]
