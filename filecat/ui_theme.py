"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the selector chrome, tree rows, and the bundle
report. ``plain`` keeps only reverse video for the cursor and backs ``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    bold: str
    dim: str
    checkbox_on: str
    tree_dir: str
    search_cursor: str
    indicator_on: str
    help_key: str
    report_count: str
    warning: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset, or return it bare when unstyled."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    bold="\033[1m",
    dim="\033[2m",
    checkbox_on="\033[32m",
    tree_dir="\033[34m",
    search_cursor="\033[36m",
    indicator_on="\033[32m",
    help_key="\033[2m",
    report_count="\033[1;32m",
    warning="\033[33m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    bold="\033[1;38;5;45m",
    dim="\033[2;38;5;110m",
    checkbox_on="\033[38;5;84m",
    tree_dir="\033[1;38;5;45m",
    search_cursor="\033[38;5;153m",
    indicator_on="\033[38;5;84m",
    help_key="\033[38;5;153m",
    report_count="\033[1;38;5;84m",
    warning="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    reverse="\033[7m",
    bold="",
    dim="",
    checkbox_on="",
    tree_dir="",
    search_cursor="",
    indicator_on="",
    help_key="",
    report_count="",
    warning="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
