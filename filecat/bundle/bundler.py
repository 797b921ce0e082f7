"""Bundle assembly and output emission.

A bundle is one header line, the file text, and a blank separator per
selected file, joined with newlines. It goes to stdout, a file, or the
system clipboard.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import pyperclip

from ..tree_model import SelectedFile
from .comments import generate_header

logger = logging.getLogger(__name__)


class OutputError(Exception):
    """Raised when a bundle cannot be delivered to its output target."""


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def bundle_files(files: list[SelectedFile]) -> str:
    """Concatenate ``files`` into one string, each under its comment header."""
    parts: list[str] = []
    for selected in files:
        parts.append(generate_header(selected.relative_path, selected.extension))
        try:
            parts.append(read_text(selected.absolute_path))
        except OSError as exc:
            logger.debug("could not read %s: %s", selected.absolute_path, exc)
            parts.append(f"[Error reading file: {exc.strerror or exc}]")
        parts.append("")
    return "\n".join(parts)


def copy_to_clipboard(content: str) -> None:
    """Place ``content`` on the system clipboard."""
    try:
        pyperclip.copy(content)
    except pyperclip.PyperclipException as exc:
        raise OutputError(f"Failed to copy to clipboard: {exc}") from exc
    logger.debug("copied %d characters to the clipboard", len(content))


def output_bundle(
    content: str,
    output_mode: str,
    output_path: str | Path | None = None,
    stream: TextIO | None = None,
) -> None:
    """Deliver ``content`` to the target named by ``output_mode``."""
    logger.debug("emitting %d characters to %s", len(content), output_mode)
    if output_mode == "stdout":
        stream = sys.stdout if stream is None else stream
        stream.write(content + "\n")
        stream.flush()
    elif output_mode == "file":
        if not output_path:
            raise OutputError("Output path required when output is 'file'")
        try:
            Path(output_path).write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Could not write {output_path}: {exc.strerror or exc}") from exc
    elif output_mode == "clipboard":
        copy_to_clipboard(content)
    else:
        raise OutputError(f"Unknown output mode: {output_mode}")
