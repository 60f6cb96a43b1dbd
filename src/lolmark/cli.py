"""Command-line front end for lolmark.

Reads a ``.lol`` file, compiles it, writes the document next to it as
``.html`` and optionally opens the result in a browser.

Usage:
    lolmark page.lol [-o OUTPUT] [--stdout] [--open] [--strict] [-v]

Exit codes:
    0  success
    1  compile or I/O error (nothing is written)
    2  bad arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
import webbrowser
from collections.abc import Sequence
from pathlib import Path

from lolmark import Compiler, __version__
from lolmark.config import CompileConfig
from lolmark.errors import LolmarkError
from lolmark.utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_SUFFIX = ".lol"
OUTPUT_SUFFIX = ".html"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lolmark",
        description="Compile a .lol markup file into an HTML document",
    )
    parser.add_argument("input", type=Path, help="Source file (must end in .lol)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Where to write the document (default: INPUT with .html extension)",
    )
    parser.add_argument(
        "--stdout", action="store_true", help="Print the document instead of writing a file"
    )
    parser.add_argument(
        "--open", action="store_true", help="Open the written document in a web browser"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject stray #MKAY and anything after #KTHXBYE",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def open_in_browser(path: Path) -> bool:
    """Open ``path`` with the platform's default browser.

    Returns:
        Whether a browser could be launched
    """
    url = path.resolve().as_uri()
    logger.info("Opening %s", url)
    return webbrowser.open(url)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    source_path: Path = args.input
    if source_path.suffix.lower() != SOURCE_SUFFIX:
        parser.error(f"input must have a {SOURCE_SUFFIX} extension: {source_path}")

    try:
        source = source_path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: failed to read '{source_path}': {e}", file=sys.stderr)
        return 1

    config = CompileConfig()
    if args.strict:
        config = CompileConfig(strict_trailing=True, tolerate_stray_mkay=False)

    try:
        html = Compiler(config=config)(source, source_file=str(source_path))
    except LolmarkError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.stdout:
        sys.stdout.write(html + "\n")
        return 0

    output_path: Path = args.output or source_path.with_suffix(OUTPUT_SUFFIX)
    try:
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        print(f"error: failed to write '{output_path}': {e}", file=sys.stderr)
        return 1
    print(f"Wrote {output_path}")

    if args.open and not open_in_browser(output_path):
        logger.warning("No browser available to open %s", output_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
