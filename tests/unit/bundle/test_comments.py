"""Comment-header tests across extension families."""

from __future__ import annotations

import unittest

from filecat.bundle import DEFAULT_COMMENT_STYLE, generate_header, get_comment_style


class CommentHeaderTests(unittest.TestCase):
    def test_headers_per_extension_family(self) -> None:
        cases = {
            "ts": "// FILE: src/a.ts",
            "py": "# FILE: src/a.ts",
            "html": "<!-- FILE: src/a.ts -->",
            "css": "/* FILE: src/a.ts */",
            "sql": "-- FILE: src/a.ts",
            "clj": ";; FILE: src/a.ts",
            "tex": "% FILE: src/a.ts",
            "rst": ".. FILE: src/a.ts",
        }
        for extension, expected in cases.items():
            with self.subTest(extension=extension):
                self.assertEqual(generate_header("src/a.ts", extension), expected)

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertEqual(get_comment_style("GO").prefix, "//")
        self.assertEqual(get_comment_style("R").prefix, "#")

    def test_unknown_or_missing_extension_uses_hash(self) -> None:
        self.assertIs(get_comment_style("weird"), DEFAULT_COMMENT_STYLE)
        self.assertEqual(generate_header("Makefile", ""), "# FILE: Makefile")


if __name__ == "__main__":
    unittest.main()
