"""Filesystem enumeration with skip-lists and a depth cap."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_WALK_DEPTH = 10

SKIP_NAMES: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".hg",
        ".svn",
        "dist",
        "build",
        "out",
        ".next",
        ".nuxt",
        ".output",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        "venv",
        ".venv",
        "env",
        ".env",
        "target",
        "vendor",
        ".idea",
        ".vscode",
        "coverage",
        ".nyc_output",
        ".turbo",
        ".cache",
    }
)


@dataclass(frozen=True)
class WalkEntry:
    """One enumerated filesystem entry below the walk root."""

    path: Path
    is_dir: bool


def walk_entries(
    root: Path,
    skip_names: frozenset[str] = SKIP_NAMES,
    max_depth: int = MAX_WALK_DEPTH,
) -> Iterator[WalkEntry]:
    """Yield files and directories under ``root`` in scan order.

    Entries named in ``skip_names`` are dropped together with their subtree.
    Direct children of ``root`` are depth 1; nothing deeper than ``max_depth``
    is yielded. Symlinks are reported as non-directories and never followed.
    An unreadable ``root`` raises ``OSError``; unreadable subdirectories are
    skipped silently.
    """
    if max_depth < 1:
        return
    with os.scandir(root) as entries:
        children = list(entries)
    yield from _walk_children(children, 1, skip_names, max_depth)


def _walk_children(
    children: list[os.DirEntry[str]],
    depth: int,
    skip_names: frozenset[str],
    max_depth: int,
) -> Iterator[WalkEntry]:
    for child in children:
        if child.name in skip_names:
            continue
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        yield WalkEntry(Path(child.path), is_dir)
        if not is_dir or depth >= max_depth:
            continue
        try:
            with os.scandir(child.path) as entries:
                grandchildren = list(entries)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", child.path, exc)
            continue
        yield from _walk_children(grandchildren, depth + 1, skip_names, max_depth)
