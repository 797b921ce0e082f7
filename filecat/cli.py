"""Command-line front door for filecat.

Parses CLI options, configures logging, and picks the files to bundle:
interactively through the selector (the default) or non-interactively
through discovery filters. The files are then bundled, emitted, and
summarized on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .bundle import OutputError, bundle_files, generate_tree_report, output_bundle
from .config import load_output_mode, load_theme_name, save_output_mode, save_theme_name
from .discovery import DiscoveryError, DiscoveryOptions, discover_files, parse_extensions
from .runtime import NoFilesFoundError, run_selector
from .state import DEFAULT_OUTPUT_MODE, OUTPUT_MODES
from .tree_model import SelectedFile
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"
NON_INTERACTIVE_OUTPUT_MODE = "stdout"


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``filecat`` command."""
    parser = argparse.ArgumentParser(
        prog="filecat",
        description="Select files interactively or by filter and concatenate them with path headers.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Directory to browse, or roots to collect with -n. Defaults to current directory.",
    )
    parser.add_argument(
        "-n",
        "--no-interactive",
        dest="interactive",
        action="store_false",
        help="Skip the selector and bundle every file that passes the filters.",
    )

    filters = parser.add_argument_group("non-interactive filters")
    filters.add_argument("--ext", metavar="EXTS", default=None, help="Comma-separated extensions, e.g. ts,tsx,md.")
    filters.add_argument(
        "--include",
        metavar="GLOB",
        action="append",
        default=[],
        help="Keep only files matching GLOB (repeatable).",
    )
    filters.add_argument(
        "--exclude",
        metavar="GLOB",
        action="append",
        default=[],
        help="Drop files matching GLOB (repeatable).",
    )
    filters.add_argument("--match", metavar="REGEX", default=None, help="Keep files whose name or path matches REGEX.")
    filters.add_argument("--include-binary", action="store_true", help="Keep binary files.")
    filters.add_argument("--git", action="store_true", help="Use git-tracked files (implies -n).")
    filters.add_argument("--staged", action="store_true", help="Use staged files (implies -n).")
    filters.add_argument("--changed", action="store_true", help="Use changed, unstaged files (implies -n).")
    filters.add_argument("--since", metavar="REF", default=None, help="Base ref for --changed.")

    parser.add_argument(
        "--out",
        choices=OUTPUT_MODES,
        default=None,
        help="Output target (interactive default: last used, else clipboard; with -n: stdout).",
    )
    parser.add_argument("-o", "--output", metavar="PATH", default=None, help="Output file path for --out file.")
    parser.add_argument(
        "--theme",
        choices=available_theme_names(),
        default=None,
        help="UI theme name (saved for later runs).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "-q",
        "--quiet",
        "--no-tree",
        dest="show_tree",
        action="store_false",
        help="Do not print the bundled-files tree to stderr.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write log output to PATH instead of stderr.")
    return parser


def configure_logging(verbose: bool, log_file: str | None) -> None:
    """Install the root handler used by every module logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def discovery_options(args: argparse.Namespace) -> DiscoveryOptions:
    """Translate parsed CLI flags into discovery options."""
    return DiscoveryOptions(
        roots=tuple(args.paths),
        extensions=parse_extensions(args.ext),
        include=tuple(args.include),
        exclude=tuple(args.exclude),
        match=args.match,
        skip_binary=not args.include_binary,
        git_tracked=args.git,
        staged=args.staged,
        changed=args.changed,
        since=args.since,
    )


def _prompt_output_path() -> str:
    try:
        return input("Output file path: ").strip()
    except EOFError:
        return ""


def _select_interactively(
    args: argparse.Namespace,
    theme_name: str | None,
) -> tuple[list[SelectedFile], str, str | None]:
    if not sys.stdin.isatty():
        raise SystemExit("filecat needs an interactive terminal on stdin.")

    theme = resolve_theme(theme_name, no_color=args.no_color)
    output_mode = args.out or load_output_mode() or DEFAULT_OUTPUT_MODE
    root = args.paths[0] if args.paths else "."
    try:
        result = run_selector(root, working_dir=Path.cwd(), output_mode=output_mode, theme=theme)
    except NoFilesFoundError as exc:
        logger.debug("%s", exc)
        raise SystemExit("No files found in the specified directory.") from exc

    if result is None or not result.files:
        raise SystemExit("No files selected.")
    save_output_mode(result.output_mode)

    output_path = args.output
    if result.output_mode == "file" and not output_path:
        output_path = _prompt_output_path()
        if not output_path:
            raise SystemExit("No output path provided.")
    return result.files, result.output_mode, output_path


def _select_by_filters(
    args: argparse.Namespace,
    options: DiscoveryOptions,
) -> tuple[list[SelectedFile], str, str | None]:
    output_mode = args.out or NON_INTERACTIVE_OUTPUT_MODE
    if output_mode == "file" and not args.output:
        raise SystemExit("Error: --output path required when --out is 'file'")

    try:
        files = discover_files(options, Path.cwd())
    except DiscoveryError as exc:
        logger.debug("discovery failed", exc_info=True)
        raise SystemExit(f"Error: {exc}") from exc
    if not files:
        raise SystemExit("No files found matching the specified criteria.")
    return files, output_mode, args.output


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, pick files, and emit the bundle.

    Git source flags imply ``--no-interactive``. Every failure exits with
    status 1 and a one-line message on stderr.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.log_file)

    if args.theme is not None:
        save_theme_name(args.theme)
    theme_name = args.theme if args.theme is not None else load_theme_name()

    options = discovery_options(args)
    if args.interactive and not options.uses_git:
        files, output_mode, output_path = _select_interactively(args, theme_name)
    else:
        files, output_mode, output_path = _select_by_filters(args, options)

    content = bundle_files(files)
    try:
        output_bundle(content, output_mode, output_path)
    except OutputError as exc:
        logger.debug("output failed", exc_info=True)
        raise SystemExit(f"Error: {exc}") from exc

    if args.show_tree:
        report_theme = resolve_theme(theme_name, no_color=args.no_color or not sys.stderr.isatty())
        sys.stderr.write("\n" + generate_tree_report(files, report_theme) + "\n")


if __name__ == "__main__":
    main()
