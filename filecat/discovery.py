"""Non-interactive file discovery.

Collects files from filesystem roots or from git (tracked, staged or changed
files), then narrows them with extension, glob and regex filters and drops
binary content. The result feeds the bundler directly, without the selector.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .tree_model import SKIP_NAMES, SelectedFile, file_extension, walk_entries

logger = logging.getLogger(__name__)

DISCOVERY_MAX_DEPTH = 64
GIT_COMMAND_TIMEOUT_SECONDS = 30.0
BINARY_SNIFF_BYTES = 8192

SPECIAL_FILE_EXTENSIONS = {
    "makefile": "makefile",
    "dockerfile": "dockerfile",
    "jenkinsfile": "groovy",
    "vagrantfile": "ruby",
}

BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        # images
        "png", "jpg", "jpeg", "gif", "bmp", "ico", "webp", "svg", "tiff", "tif", "psd", "ai",
        # audio and video
        "mp3", "wav", "flac", "aac", "ogg", "wma", "m4a",
        "mp4", "avi", "mkv", "mov", "wmv", "flv", "webm", "m4v",
        # archives
        "zip", "tar", "gz", "bz2", "xz", "7z", "rar", "jar", "war",
        # executables and libraries
        "exe", "dll", "so", "dylib", "bin", "o", "a", "lib",
        # documents
        "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods", "odp",
        # fonts
        "ttf", "otf", "woff", "woff2", "eot",
        # databases
        "db", "sqlite", "sqlite3", "mdb",
        # other
        "iso", "dmg", "img", "class", "pyc", "pyo", "wasm",
    }
)

TEXT_EXTENSIONS: frozenset[str] = frozenset(
    {
        "ts", "tsx", "js", "jsx", "json", "md", "txt", "html", "css", "scss",
        "yaml", "yml", "toml", "xml", "sh", "bash", "zsh", "py", "rb", "go",
        "rs", "java", "c", "cpp", "h", "hpp", "cs", "swift", "kt", "scala",
    }
)


class DiscoveryError(Exception):
    """Raised when discovery options are invalid or a git query fails."""


@dataclass(frozen=True)
class DiscoveryOptions:
    """Sources and filters for one non-interactive run.

    ``staged`` wins over ``changed``, which wins over ``git_tracked``; with
    none of them set the ``roots`` are walked.
    """

    roots: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    match: str | None = None
    skip_binary: bool = True
    git_tracked: bool = False
    staged: bool = False
    changed: bool = False
    since: str | None = None

    @property
    def uses_git(self) -> bool:
        return self.git_tracked or self.staged or self.changed


def parse_extensions(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated ``--ext`` value into bare lowercase extensions."""
    if not raw:
        return ()
    extensions: list[str] = []
    for part in raw.split(","):
        ext = part.strip()
        if ext.startswith("."):
            ext = ext[1:]
        if ext:
            extensions.append(ext.lower())
    return tuple(extensions)


def filter_extension(name: str) -> str:
    """Return the extension ``--ext`` compares against.

    Extensionless build files map to a language name (``Makefile`` is
    ``makefile``, ``Jenkinsfile`` is ``groovy``).
    """
    return (file_extension(name) or SPECIAL_FILE_EXTENSIONS.get(name.lower(), "")).lower()


def matches_globs(relative_path: str, patterns: Iterable[str]) -> bool:
    """Return whether ``relative_path`` matches any glob in ``patterns``.

    A pattern starting with ``**/`` also matches on the file name alone, so
    ``**/*.test.*`` covers top-level files too.
    """
    name = relative_path.rsplit("/", 1)[-1]
    for pattern in patterns:
        if fnmatch.fnmatchcase(relative_path, pattern):
            return True
        if pattern.startswith("**/") and fnmatch.fnmatchcase(name, pattern[3:]):
            return True
    return False


def is_binary_file(path: Path) -> bool:
    """Return whether the first block of ``path`` contains a NUL byte."""
    try:
        with path.open("rb") as handle:
            chunk = handle.read(BINARY_SNIFF_BYTES)
    except OSError as exc:
        logger.debug("could not sniff %s: %s", path, exc)
        return False
    return b"\x00" in chunk


def discover_files(options: DiscoveryOptions, working_dir: Path) -> list[SelectedFile]:
    """Return the files selected by ``options``, sorted by relative path.

    Relative paths are taken from ``working_dir``. Raises ``DiscoveryError``
    for an invalid ``match`` pattern or a failing git command.
    """
    working_dir = working_dir.resolve()
    match_regex = _compile_match(options.match)

    if options.staged:
        args = ["diff", "--cached", "--name-only", "--relative", "--diff-filter=ACMR", "-z"]
        candidates = _git_paths(args, working_dir)
    elif options.changed:
        args = ["diff", "--name-only", "--relative", "--diff-filter=ACMR", "-z"]
        if options.since:
            args.append(options.since)
        candidates = _git_paths(args, working_dir)
    elif options.git_tracked:
        candidates = _git_paths(["ls-files", "-z"], working_dir)
    else:
        candidates = _filesystem_paths(options.roots or (".",), working_dir)

    files: dict[Path, SelectedFile] = {}
    for path in candidates:
        if path in files:
            continue
        relative_path = Path(os.path.relpath(path, working_dir)).as_posix()
        if _keep(path, relative_path, options, match_regex):
            files[path] = SelectedFile(
                absolute_path=path,
                relative_path=relative_path,
                extension=file_extension(path.name),
            )
    logger.debug("discovered %d of %d candidate files", len(files), len(candidates))
    return sorted(files.values(), key=lambda selected: selected.relative_path)


def _compile_match(pattern: str | None) -> re.Pattern[str] | None:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise DiscoveryError(f"Invalid regex pattern: {pattern}") from exc


def _keep(
    path: Path,
    relative_path: str,
    options: DiscoveryOptions,
    match_regex: re.Pattern[str] | None,
) -> bool:
    if any(part in SKIP_NAMES for part in relative_path.split("/")):
        return False
    extension = filter_extension(path.name)
    if options.extensions and extension not in options.extensions:
        return False
    if options.include and not matches_globs(relative_path, options.include):
        return False
    if options.exclude and matches_globs(relative_path, options.exclude):
        return False
    if match_regex is not None and not (match_regex.search(path.name) or match_regex.search(relative_path)):
        return False
    if options.skip_binary:
        if extension in BINARY_EXTENSIONS:
            return False
        if extension not in TEXT_EXTENSIONS and is_binary_file(path):
            return False
    return True


def _filesystem_paths(roots: Sequence[str], working_dir: Path) -> list[Path]:
    paths: list[Path] = []
    for root in roots:
        root_path = (working_dir / root).resolve()
        if root_path.is_file():
            paths.append(root_path)
            continue
        if not root_path.is_dir():
            logger.debug("skipping missing root %s", root_path)
            continue
        try:
            for entry in walk_entries(root_path, max_depth=DISCOVERY_MAX_DEPTH):
                if not entry.is_dir and entry.path.is_file():
                    paths.append(entry.path)
        except OSError as exc:
            logger.debug("skipping unreadable root %s: %s", root_path, exc)
    return paths


def _git_paths(args: list[str], working_dir: Path) -> list[Path]:
    if shutil.which("git") is None:
        raise DiscoveryError("git executable not found")
    command = ["git", *args]
    try:
        proc = subprocess.run(
            command,
            cwd=str(working_dir),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            timeout=GIT_COMMAND_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise DiscoveryError(f"git {args[0]} failed: {exc}") from exc
    if proc.returncode != 0:
        detail = proc.stderr.decode("utf-8", errors="replace").strip()
        raise DiscoveryError(f"git {args[0]} failed: {detail or f'exit status {proc.returncode}'}")

    paths: list[Path] = []
    for raw in proc.stdout.split(b"\x00"):
        if raw:
            paths.append(working_dir / raw.decode("utf-8", errors="replace"))
    return paths


__all__ = [
    "BINARY_EXTENSIONS",
    "DiscoveryError",
    "DiscoveryOptions",
    "discover_files",
    "filter_extension",
    "is_binary_file",
    "matches_globs",
    "parse_extensions",
]
