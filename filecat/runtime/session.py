"""Interactive selection session: build, then render/read/dispatch until done.

The loop is single-threaded. Each iteration filters and flattens the tree,
redraws the full frame, blocks on exactly one key, and applies it through the
``InputController``. The terminal is restored on every exit path.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..input import InputController, read_key
from ..render import FrameContext, render_frame, scroll_to_cursor, search_line_visible, viewport_height, visible_slice
from ..state import DEFAULT_OUTPUT_MODE, MODE_SEARCH, SessionState, normalize_output_mode
from ..terminal import TerminalController, terminal_size
from ..tree_model import SelectedFile, build_tree, collect_selected_files, count_selected_files
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


class NoFilesFoundError(Exception):
    """Raised when the scan root yields no selectable entries."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"No files found in {root}")
        self.root = root


@dataclass(frozen=True)
class SelectionResult:
    """Files confirmed by the user and the output mode chosen at confirm time."""

    files: list[SelectedFile]
    output_mode: str


def run_selection_loop(
    state: SessionState,
    controller: InputController,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme = DEFAULT_THEME,
    size_provider: Callable[[], os.terminal_size] = terminal_size,
) -> bool:
    """Run the interactive loop until confirm, quit, or EOF.

    Returns ``True`` when the user confirmed the selection.
    """
    with terminal.raw_mode():
        while True:
            rows = state.refresh_rows()
            size = size_provider()
            search_editing = state.mode == MODE_SEARCH
            height = viewport_height(
                size.lines,
                state.show_help,
                search_line_visible(search_editing, state.search_query),
            )
            state.scroll_offset = scroll_to_cursor(state.cursor_index, state.scroll_offset, height, len(rows))
            frame = render_frame(
                FrameContext(
                    rows=visible_slice(rows, state.scroll_offset, height),
                    scroll_offset=state.scroll_offset,
                    cursor_index=state.cursor_index,
                    output_mode=state.output_mode,
                    show_help=state.show_help,
                    show_ignored=state.show_ignored,
                    search_editing=search_editing,
                    search_query=state.search_query,
                    selected_count=count_selected_files(state.tree),
                    width=size.columns,
                    theme=theme,
                )
            )
            terminal.draw_frame(frame)

            try:
                key = read_key(stdin_fd)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                logger.debug("input closed; cancelling selection")
                state.confirmed = False
                return False
            if controller.handle_key(key):
                return state.confirmed


def _default_output_fd() -> int:
    """Draw on stdout unless it is redirected, then fall back to stderr."""
    if sys.stdout.isatty():
        return sys.stdout.fileno()
    return sys.stderr.fileno()


def run_selector(
    root_path: str = ".",
    *,
    working_dir: Path | None = None,
    output_mode: str = DEFAULT_OUTPUT_MODE,
    show_ignored: bool = False,
    theme: UITheme = DEFAULT_THEME,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> SelectionResult | None:
    """Let the user pick files below ``root_path`` interactively.

    Returns ``None`` when the user cancels. Raises ``NoFilesFoundError`` when
    the root is unreadable or empty. Relative paths in the result are relative
    to ``working_dir`` (the current directory by default).
    """
    working_dir = (working_dir or Path.cwd()).resolve()
    root = (working_dir / root_path).resolve()

    def rebuild(show_ignored_files: bool):
        return build_tree(root, working_dir, show_ignored_files)

    tree = rebuild(show_ignored)
    if not tree:
        raise NoFilesFoundError(root)

    state = SessionState(
        root=root,
        working_dir=working_dir,
        tree=tree,
        output_mode=normalize_output_mode(output_mode),
        show_ignored=show_ignored,
    )
    controller = InputController(state, rebuild)
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = _default_output_fd()
    terminal = TerminalController(stdin_fd, stdout_fd)

    confirmed = run_selection_loop(state, controller, terminal, stdin_fd, theme=theme)
    if not confirmed:
        return None
    files = collect_selected_files(state.tree, base=working_dir)
    logger.debug("selection confirmed: %d files, output %s", len(files), state.output_mode)
    return SelectionResult(files=files, output_mode=state.output_mode)
