"""Full-frame text rendering for the selector screen.

``render_frame`` is a pure function of ``FrameContext``: the runtime redraws
the whole screen from current state every iteration.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width
from ..tree_model.types import TreeRow
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import HELP_LINE_COUNT, help_lines

OUTPUT_MODES: tuple[str, ...] = ("stdout", "clipboard", "file")

# Blank + title + blank + status, blank before rows, blank + footer after.
BASE_CHROME_LINES = 7
SEARCH_LINES = 2


@dataclass(frozen=True)
class FrameContext:
    """Inputs required to draw one selector frame."""

    rows: list[TreeRow]
    scroll_offset: int
    cursor_index: int
    output_mode: str
    show_help: bool
    show_ignored: bool
    search_editing: bool
    search_query: str
    selected_count: int
    width: int = 80
    theme: UITheme = DEFAULT_THEME


def search_line_visible(search_editing: bool, search_query: str) -> bool:
    """Return whether the frame shows a search line."""
    return search_editing or bool(search_query)


def chrome_height(show_help: bool, search_visible: bool) -> int:
    """Return the number of frame lines that are not tree rows."""
    height = BASE_CHROME_LINES
    if search_visible:
        height += SEARCH_LINES
    if show_help:
        height += HELP_LINE_COUNT
    return height


def viewport_height(terminal_rows: int, show_help: bool, search_visible: bool) -> int:
    """Return how many tree rows fit below the chrome (at least one)."""
    return max(1, terminal_rows - chrome_height(show_help, search_visible))


def format_output_modes(active: str, theme: UITheme) -> str:
    """Render the output-mode switcher with the active mode highlighted."""
    parts: list[str] = []
    for mode in OUTPUT_MODES:
        if mode == active:
            parts.append(theme.paint(theme.reverse, f" {mode} "))
        else:
            parts.append(theme.paint(theme.dim, mode))
    return " ".join(parts)


def format_tree_row(row: TreeRow, is_cursor: bool, theme: UITheme) -> str:
    """Render one tree row: checkbox, depth indent, chevron, and name."""
    indent = "  " * row.depth
    checkbox_text = "[✓]" if row.selected else "[ ]"
    if row.is_dir:
        icon = "▼ " if row.expanded else "▶ "
        name = row.name + "/"
    else:
        icon = "  "
        name = row.name

    if is_cursor:
        # Inner styles would reset the reverse-video attribute mid-line.
        return theme.paint(theme.reverse, f" {checkbox_text} {indent}{icon}{name}")

    checkbox = theme.paint(theme.checkbox_on if row.selected else theme.dim, checkbox_text)
    if row.is_dir:
        name = theme.paint(theme.tree_dir, name)
    return f" {checkbox} {indent}{icon}{name}"


def _indicator(enabled: bool, theme: UITheme) -> str:
    if enabled:
        return theme.paint(theme.indicator_on, "on")
    return theme.paint(theme.dim, "off")


def _clip(line: str, width: int, theme: UITheme) -> str:
    if display_width(line) <= width:
        return line
    clipped = clip_ansi_line(line, width)
    if ANSI_ESCAPE_RE.search(clipped):
        clipped += theme.reset
    return clipped


def render_frame(context: FrameContext) -> list[str]:
    """Return every line of the selector frame for ``context``."""
    theme = context.theme
    lines: list[str] = [
        "",
        theme.paint(theme.bold, " filecat ") + theme.paint(theme.dim, "- Select files to concatenate"),
        "",
        (
            " "
            + theme.paint(theme.dim, "o")
            + " "
            + format_output_modes(context.output_mode, theme)
            + "  "
            + theme.paint(theme.dim, "i")
            + " ignored "
            + _indicator(context.show_ignored, theme)
            + "  "
            + theme.paint(theme.dim, "?")
            + " help "
            + _indicator(context.show_help, theme)
        ),
    ]

    if context.search_editing:
        lines.append("")
        lines.append(
            " "
            + theme.paint(theme.reverse, " / ")
            + " "
            + context.search_query
            + theme.paint(theme.search_cursor, "_")
        )
    elif context.search_query:
        lines.append("")
        lines.append(
            " "
            + theme.paint(theme.dim, "/")
            + " "
            + theme.paint(theme.search_cursor, context.search_query)
            + "  "
            + theme.paint(theme.dim, "esc clear")
        )

    if context.show_help:
        lines.extend(help_lines(theme))

    lines.append("")
    for offset, row in enumerate(context.rows):
        is_cursor = context.scroll_offset + offset == context.cursor_index
        lines.append(format_tree_row(row, is_cursor, theme))

    lines.append("")
    noun = "file" if context.selected_count == 1 else "files"
    lines.append(theme.paint(theme.dim, f" {context.selected_count} {noun} selected"))

    width = max(1, context.width)
    return [_clip(line, width, theme) for line in lines]
