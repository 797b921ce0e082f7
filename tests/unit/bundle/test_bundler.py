"""Bundle assembly and output emission tests.

The clipboard is mocked at the ``pyperclip.copy`` seam.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import pyperclip

from filecat.bundle import OutputError, bundle_files, copy_to_clipboard, output_bundle, read_text
from filecat.tree_model import SelectedFile


def _selected(root: Path, relative_path: str) -> SelectedFile:
    return SelectedFile(
        absolute_path=root / relative_path,
        relative_path=relative_path,
        extension=relative_path.rsplit(".", 1)[-1] if "." in relative_path else "",
    )


class BundleFilesTests(unittest.TestCase):
    def test_each_file_gets_header_content_and_blank_separator(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.ts").write_text("one", encoding="utf-8")
            (root / "b.py").write_text("two", encoding="utf-8")

            content = bundle_files([_selected(root, "a.ts"), _selected(root, "b.py")])

        self.assertEqual(content, "// FILE: a.ts\none\n\n# FILE: b.py\ntwo\n")

    def test_unreadable_file_is_bundled_as_error_marker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            content = bundle_files([_selected(Path(tmp), "gone.md")])

        self.assertEqual(content, "<!-- FILE: gone.md -->\n[Error reading file: No such file or directory]\n")

    def test_read_text_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "legacy.txt"
            path.write_bytes(b"caf\xe9")

            self.assertEqual(read_text(path), "café")


class OutputBundleTests(unittest.TestCase):
    def test_stdout_mode_writes_content_with_trailing_newline(self) -> None:
        stream = io.StringIO()

        output_bundle("body", "stdout", stream=stream)

        self.assertEqual(stream.getvalue(), "body\n")

    def test_file_mode_writes_exact_content(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out.txt"

            output_bundle("body", "file", target)

            self.assertEqual(target.read_text(encoding="utf-8"), "body")

    def test_file_mode_errors(self) -> None:
        with self.assertRaises(OutputError):
            output_bundle("body", "file", None)
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OutputError):
                output_bundle("body", "file", Path(tmp) / "missing" / "out.txt")

    def test_clipboard_mode_delegates_to_clipboard_helper(self) -> None:
        with mock.patch("filecat.bundle.bundler.copy_to_clipboard") as copy_mock:
            output_bundle("body", "clipboard")

        copy_mock.assert_called_once_with("body")


class ClipboardTests(unittest.TestCase):
    def test_copy_hands_content_to_pyperclip(self) -> None:
        with mock.patch("filecat.bundle.bundler.pyperclip.copy") as copy_mock:
            copy_to_clipboard("héllo")

        copy_mock.assert_called_once_with("héllo")

    def test_missing_clipboard_mechanism_becomes_output_error(self) -> None:
        failure = pyperclip.PyperclipException("could not find a copy/paste mechanism")
        with mock.patch("filecat.bundle.bundler.pyperclip.copy", side_effect=failure):
            with self.assertRaises(OutputError) as ctx:
                copy_to_clipboard("x")

        self.assertEqual(
            str(ctx.exception),
            "Failed to copy to clipboard: could not find a copy/paste mechanism",
        )

    def test_clipboard_mode_reaches_pyperclip(self) -> None:
        with mock.patch("filecat.bundle.bundler.pyperclip.copy") as copy_mock:
            output_bundle("body", "clipboard")

        copy_mock.assert_called_once_with("body")


if __name__ == "__main__":
    unittest.main()
