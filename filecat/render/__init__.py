"""Viewport and frame rendering for the interactive selector."""

from __future__ import annotations

from .frame import (
    OUTPUT_MODES,
    FrameContext,
    chrome_height,
    format_output_modes,
    format_tree_row,
    render_frame,
    search_line_visible,
    viewport_height,
)
from .help import help_lines
from .viewport import clamp_cursor, flatten_tree, scroll_to_cursor, visible_slice

__all__ = [
    "OUTPUT_MODES",
    "FrameContext",
    "render_frame",
    "format_tree_row",
    "format_output_modes",
    "chrome_height",
    "viewport_height",
    "search_line_visible",
    "help_lines",
    "flatten_tree",
    "clamp_cursor",
    "scroll_to_cursor",
    "visible_slice",
]
