# cli.py
#
# reverse-cat: write the lines of a text file in reverse order.
#
# Usage:
#   reverse-cat <source file>                      # reversed lines to the screen
#   reverse-cat <source file> <destination file>   # reversed lines to a new file
#
# Rules:
# - The source file must exist
# - The destination file must NOT exist (it is never overwritten)
# - An empty source is an error unless --allow-empty is given
# - Exit status 0 on success, 1 on any failure

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import (
    DestinationAlreadyExists,
    EmptySource,
    MissingArguments,
    ReverseCatError,
    SourceNotFound,
)
from .line_store import MAX_LINE_LEN
from .reader import read_lines
from .writer import write_lines

# Colour codes for the terminal
NORMAL_COLOR = "\x1b[0m"
GREEN = "\x1b[32m"
RED = "\x1b[31m"

PROG = "reverse-cat"


def paint(text: str, color: str, enabled: bool = True) -> str:
    return f"{color}{text}{NORMAL_COLOR}" if enabled else text


def usage_line(prog: str) -> str:
    return f"{prog} <source file> [<destination file>]"


def validate_arguments(prog: str, source: Optional[str], destination: Optional[str]) -> None:
    """Raise if there is no source, the source can't be opened, or the destination already exists."""
    if source is None:
        raise MissingArguments(usage_line(prog))

    try:
        open(source, "rb").close()
    except OSError:
        raise SourceNotFound(prog, source) from None

    if destination is not None and Path(destination).exists():
        raise DestinationAlreadyExists(prog, destination)


def reverse_file(source: str, destination: Optional[str] = None, allow_empty: bool = False, out=None) -> int:
    """
    Reverse `source` into `destination` (or standard output). Returns the number of lines written.
    `out` is where progress messages go (default: standard output).
    """
    store = read_lines(source, strict=True)

    if not store and not allow_empty:
        raise EmptySource(source)

    if store.truncated:
        print(f"[warn] {store.truncated} line(s) longer than {MAX_LINE_LEN} bytes were truncated", file=out)

    count = len(store)
    write_lines(store, destination, strict=True)
    if destination is not None:
        print(f"[ok] Reversed {count} line(s) -> {destination}", file=out)
    return count


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=PROG,
        description="Reverse the line order of a text file (last line first).",
    )
    ap.add_argument("source", nargs="?", default=None, help="Text file to reverse")
    ap.add_argument("destination", nargs="?", default=None,
                    help="New file to write (must not exist). Defaults to standard output.")
    ap.add_argument("--allow-empty", action="store_true",
                    help="Treat an empty source as success and write an empty result")
    ap.add_argument("--no-color", action="store_true", help="Plain diagnostics without ANSI colours")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    try:
        args = ap.parse_args(argv)
    except SystemExit as e:
        # bad flags / too many arguments (2), --help / --version (0)
        return e.code if isinstance(e.code, int) else 1
    color = not args.no_color

    # Reversed text on stdout -> keep messages off it. Usage still goes to stdout,
    # everything else follows `out`.
    out = sys.stdout if args.destination is not None else sys.stderr

    try:
        validate_arguments(ap.prog, args.source, args.destination)
        reverse_file(args.source, args.destination, allow_empty=args.allow_empty, out=out)
    except MissingArguments as e:
        print(paint("Usage:", GREEN, color), e)
        return 1
    except ReverseCatError as e:
        print(paint("[error]", RED, color), e, file=out)
        return 1
    except MemoryError:
        print(paint("[error]", RED, color), f"Out of memory while reading {args.source}", file=out)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
