"""Bundled-files tree report tests."""

from __future__ import annotations

import unittest
from pathlib import Path

from filecat.bundle import generate_tree_report
from filecat.tree_model import SelectedFile
from filecat.ui_theme import PLAIN_THEME


def _selected(relative_path: str) -> SelectedFile:
    return SelectedFile(absolute_path=Path("/r") / relative_path, relative_path=relative_path, extension="")


class TreeReportTests(unittest.TestCase):
    def test_directories_first_with_connectors(self) -> None:
        files = [_selected(path) for path in ("a.ts", "src/main.ts", "src/lib/x.ts", "src/lib/y.ts")]

        report = generate_tree_report(files, PLAIN_THEME)

        self.assertEqual(
            report.splitlines(),
            [
                "Bundled 4 files:",
                "",
                "├── src/",
                "│   ├── lib/",
                "│   │   ├── x.ts",
                "│   │   └── y.ts",
                "│   └── main.ts",
                "└── a.ts",
            ],
        )

    def test_single_file_uses_singular_noun(self) -> None:
        report = generate_tree_report([_selected("only.py")], PLAIN_THEME)

        self.assertEqual(report.splitlines(), ["Bundled 1 file:", "", "└── only.py"])

    def test_empty_bundle_message(self) -> None:
        self.assertEqual(generate_tree_report([], PLAIN_THEME), "No files bundled.")


if __name__ == "__main__":
    unittest.main()
