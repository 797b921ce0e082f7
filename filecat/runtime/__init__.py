"""Runtime entrypoints for the interactive selector."""

from __future__ import annotations

from .session import NoFilesFoundError, SelectionResult, run_selection_loop, run_selector

__all__ = [
    "NoFilesFoundError",
    "SelectionResult",
    "run_selection_loop",
    "run_selector",
]
