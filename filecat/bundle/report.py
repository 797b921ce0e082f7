"""Tree-style summary of the files in a bundle."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..tree_model import SelectedFile
from ..ui_theme import DEFAULT_THEME, UITheme

_PATH_SEPARATOR_RE = re.compile(r"[\\/]")


@dataclass
class _ReportNode:
    name: str
    is_dir: bool
    children: dict[str, _ReportNode] = field(default_factory=dict)


def _build_report_tree(files: list[SelectedFile]) -> _ReportNode:
    root = _ReportNode(name="", is_dir=True)
    for selected in files:
        parts = _PATH_SEPARATOR_RE.split(selected.relative_path)
        current = root
        for idx, part in enumerate(parts):
            child = current.children.get(part)
            if child is None:
                child = _ReportNode(name=part, is_dir=idx < len(parts) - 1)
                current.children[part] = child
            current = child
    return root


def _render_children(node: _ReportNode, prefix: str, lines: list[str], theme: UITheme) -> None:
    # Directories first, then files, each group by name.
    ordered = sorted(node.children.values(), key=lambda child: (not child.is_dir, child.name.casefold()))
    for idx, child in enumerate(ordered):
        is_last = idx == len(ordered) - 1
        connector = "└── " if is_last else "├── "
        label = theme.paint(theme.tree_dir, child.name + "/") if child.is_dir else child.name
        lines.append(theme.paint(theme.dim, prefix + connector) + label)
        if child.is_dir and child.children:
            _render_children(child, prefix + ("    " if is_last else "│   "), lines, theme)


def generate_tree_report(files: list[SelectedFile], theme: UITheme = DEFAULT_THEME) -> str:
    """Render ``Bundled N files:`` followed by a connector-drawn tree."""
    if not files:
        return theme.paint(theme.warning, "No files bundled.")

    count = len(files)
    noun = "file" if count == 1 else "files"
    lines = [f"Bundled {theme.paint(theme.report_count, str(count))} {noun}:", ""]
    _render_children(_build_report_tree(files), "", lines, theme)
    return "\n".join(lines)
