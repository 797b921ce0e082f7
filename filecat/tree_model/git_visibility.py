"""Git visibility lookup for pruning the selection tree.

Asks git for every tracked file plus untracked files that are not ignored.
The tree builder uses this to hide ignored content; any failure means
"unavailable" and the tree is shown unfiltered.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

GIT_LOOKUP_TIMEOUT_SECONDS = 10.0


def git_visible_paths(working_dir: Path) -> frozenset[Path] | None:
    """Return resolved paths git considers visible under ``working_dir``.

    Returns ``None`` when git is not installed, ``working_dir`` is not inside
    a repository, or the command fails for any other reason.
    """
    if shutil.which("git") is None:
        logger.debug("git executable not found; showing all files")
        return None

    working_dir = working_dir.resolve()
    try:
        proc = subprocess.run(
            ["git", "ls-files", "-z", "--cached", "--others", "--exclude-standard"],
            cwd=str(working_dir),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
            timeout=GIT_LOOKUP_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git ls-files failed in %s: %s", working_dir, exc)
        return None
    if proc.returncode != 0:
        logger.debug("git ls-files exited with %s in %s", proc.returncode, working_dir)
        return None

    visible: set[Path] = set()
    for raw in proc.stdout.split(b"\x00"):
        if not raw:
            continue
        rel = raw.decode("utf-8", errors="replace")
        visible.add(working_dir / rel)
    return frozenset(visible)


def visible_directories(visible_files: frozenset[Path]) -> frozenset[Path]:
    """Return every ancestor directory of the given visible files."""
    dirs: set[Path] = set()
    for path in visible_files:
        parent = path.parent
        while parent not in dirs and parent.parent != parent:
            dirs.add(parent)
            parent = parent.parent
    return frozenset(dirs)
