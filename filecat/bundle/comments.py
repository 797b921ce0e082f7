"""Per-extension comment syntax for bundle file headers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommentStyle:
    """Line comment prefix, plus a suffix for block-only syntaxes."""

    prefix: str
    suffix: str = ""


SLASH = CommentStyle("//")
HASH = CommentStyle("#")
HTML = CommentStyle("<!--", "-->")
BLOCK = CommentStyle("/*", "*/")
DASH = CommentStyle("--")
LISP = CommentStyle(";;")
PERCENT = CommentStyle("%")
RST = CommentStyle("..")

DEFAULT_COMMENT_STYLE = HASH

_STYLE_GROUPS: tuple[tuple[CommentStyle, tuple[str, ...]], ...] = (
    (
        SLASH,
        (
            "ts", "tsx", "js", "jsx", "mjs", "cjs", "java", "kt", "kts", "go",
            "rs", "c", "cpp", "cc", "cxx", "h", "hpp", "cs", "swift", "scala",
            "dart", "v", "zig", "proto", "jsonc",
        ),
    ),
    (
        HASH,
        (
            "py", "pyw", "rb", "sh", "bash", "zsh", "fish", "yml", "yaml",
            "toml", "env", "ps1", "r", "pl", "pm", "tcl", "makefile", "mk",
            "dockerfile", "gitignore", "dockerignore", "editorconfig", "conf",
            "cfg", "ini", "tf", "tfvars", "hcl", "nix", "awk", "sed",
        ),
    ),
    (HTML, ("html", "htm", "xml", "svg", "vue", "svelte", "astro", "md", "mdx")),
    (BLOCK, ("css", "scss", "sass", "less", "styl", "stylus")),
    (DASH, ("sql", "pgsql", "mysql", "sqlite", "lua", "hs", "lhs", "elm", "ada")),
    (LISP, ("lisp", "cl", "el", "scm", "clj", "cljs", "cljc", "edn", "rkt")),
    (PERCENT, ("tex", "latex", "bib", "m", "erl", "hrl")),
    (RST, ("rst",)),
)

COMMENT_STYLES: dict[str, CommentStyle] = {
    extension: style for style, extensions in _STYLE_GROUPS for extension in extensions
}


def get_comment_style(extension: str) -> CommentStyle:
    """Return the comment style for ``extension`` (case-insensitive), ``#`` by default."""
    return COMMENT_STYLES.get(extension.lower(), DEFAULT_COMMENT_STYLE)


def generate_header(relative_path: str, extension: str) -> str:
    """Build the ``FILE: <path>`` header line for one bundled file."""
    style = get_comment_style(extension)
    content = f"FILE: {relative_path}"
    if style.suffix:
        return f"{style.prefix} {content} {style.suffix}"
    return f"{style.prefix} {content}"
