"""Terminal control helpers for the selector session.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

FALLBACK_COLUMNS = 80
FALLBACK_ROWS = 24

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI_SEQUENCE = b"\x1b[2J\x1b[H\x1b[?25h\x1b[?1049l"
CLEAR_HOME_SEQUENCE = "\x1b[H\x1b[2J"


def terminal_size() -> os.terminal_size:
    """Return current terminal size, falling back to 80x24 when unknown."""
    return shutil.get_terminal_size((FALLBACK_COLUMNS, FALLBACK_ROWS))


def terminal_rows() -> int:
    """Return current terminal row count."""
    return terminal_size().lines


class TerminalController:
    """Manage raw-mode transitions and full-frame redraws."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Clear the screen and restore the saved terminal state."""
        os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def draw_frame(self, lines: list[str]) -> None:
        """Replace the screen contents with ``lines``."""
        # Raw mode disables output post-processing, so rows need explicit CR.
        payload = CLEAR_HOME_SEQUENCE + "\r\n".join(lines)
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
