"""Bundle assembly, output emission, and the bundled-files report."""

from __future__ import annotations

from .bundler import OutputError, bundle_files, copy_to_clipboard, output_bundle, read_text
from .comments import COMMENT_STYLES, DEFAULT_COMMENT_STYLE, CommentStyle, generate_header, get_comment_style
from .report import generate_tree_report

__all__ = [
    "COMMENT_STYLES",
    "DEFAULT_COMMENT_STYLE",
    "CommentStyle",
    "OutputError",
    "bundle_files",
    "copy_to_clipboard",
    "generate_header",
    "generate_tree_report",
    "get_comment_style",
    "output_bundle",
    "read_text",
]
