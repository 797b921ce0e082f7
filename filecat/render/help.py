"""Help block content for the selector screen.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_SEPARATOR = " " + "─" * 61

# (key label, description) pairs per help row; labels are dimmed.
HELP_ROWS: tuple[tuple[tuple[str, str], ...], ...] = (
    (("   space", " toggle selection    "), ("a", " select all    "), ("enter", " confirm    "), ("q", " quit")),
    (("   ↑ ↓", "   navigate          "), ("← →", " collapse/expand")),
    (("   e", "     expand all        "), ("c", " collapse all  "), ("f F", " jump to folder")),
    (("   /", "     search            "), ("esc", " clear search")),
    (("   o", "     output mode       "), ("i", " show ignored  "), ("?", " help")),
)


def help_lines(theme: UITheme) -> list[str]:
    """Return the help block lines, starting with a blank spacer."""
    lines = ["", theme.paint(theme.dim, HELP_SEPARATOR)]
    for row in HELP_ROWS:
        lines.append("".join(theme.paint(theme.help_key, key) + text for key, text in row))
    return lines


HELP_LINE_COUNT = 2 + len(HELP_ROWS)
