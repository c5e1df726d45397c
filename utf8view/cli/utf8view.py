"""utf8view CLI entrypoint."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from utf8view.core import (
    Utf8View,
    code_point,
    count,
    make_cursor,
    make_lossy,
    make_view,
    nth,
    slice_view,
    validate,
)

log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_bytes()


def write_output(payload: bytes, destination: Optional[str] = None) -> None:
    if destination:
        Path(destination).write_bytes(payload)
        return
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()


def emit(args: argparse.Namespace, fields: Dict[str, Any]) -> None:
    if args.json:
        print(json.dumps(fields, ensure_ascii=False))
        return
    for key, value in fields.items():
        print(f"{key}: {value}")


def format_code_point(value: int) -> str:
    return f"U+{value:04X}"


def strict_view(args: argparse.Namespace) -> Optional[Utf8View]:
    data = read_input(args.path)
    view = make_view(data)
    if view is None:
        validity = validate(data)
        print(f"{args.path}: invalid UTF-8 at byte {validity.valid_upto}", file=sys.stderr)
    return view


def run_validate(args: argparse.Namespace) -> int:
    data = read_input(args.path)
    validity = validate(data)
    emit(args, {"valid": validity.valid, "valid_upto": validity.valid_upto, "length": len(data)})
    return 0 if validity.valid else 1


def run_repair(args: argparse.Namespace) -> int:
    data = read_input(args.path)
    with make_lossy(data) as owned:
        log.info("repaired %d input bytes into %d bytes", len(data), owned.length)
        write_output(bytes(owned), args.output)
    return 0


def run_count(args: argparse.Namespace) -> int:
    view = strict_view(args)
    if view is None:
        return 1
    emit(args, {"characters": count(view), "bytes": view.length})
    return 0


def run_chars(args: argparse.Namespace) -> int:
    view = strict_view(args)
    if view is None:
        return 1
    offset = 0
    rows = []
    for char in make_cursor(view):
        rows.append(
            {
                "offset": offset,
                "length": char.length,
                "code_point": format_code_point(code_point(char)),
                "char": str(char),
            }
        )
        offset += char.length
    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        for row in rows:
            print(f"{row['offset']:>8} {row['length']} {row['code_point']:<8} {row['char']!r}")
    return 0


def run_slice(args: argparse.Namespace) -> int:
    view = strict_view(args)
    if view is None:
        return 1
    piece = slice_view(view, args.start, args.length)
    if piece is None:
        print(
            f"{args.path}: range [{args.start}, {args.start + args.length}) splits a character",
            file=sys.stderr,
        )
        return 1
    write_output(bytes(piece), args.output)
    return 0


def run_nth(args: argparse.Namespace) -> int:
    view = strict_view(args)
    if view is None:
        return 1
    char = nth(view, args.index)
    if char is None:
        print(f"{args.path}: no character at index {args.index}", file=sys.stderr)
        return 1
    emit(
        args,
        {
            "index": args.index,
            "char": str(char),
            "length": char.length,
            "code_point": format_code_point(code_point(char)),
        },
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate, repair and inspect UTF-8 byte data")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Report how much of the input is valid")
    validate_parser.add_argument("path", help="Input file, or - for stdin")
    validate_parser.add_argument("--json", action="store_true", help="Emit JSON")
    validate_parser.set_defaults(func=run_validate)

    repair_parser = subparsers.add_parser(
        "repair", help="Replace every invalid byte with U+FFFD"
    )
    repair_parser.add_argument("path", help="Input file, or - for stdin")
    repair_parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    repair_parser.set_defaults(func=run_repair)

    count_parser = subparsers.add_parser("count", help="Count the characters of valid input")
    count_parser.add_argument("path", help="Input file, or - for stdin")
    count_parser.add_argument("--json", action="store_true", help="Emit JSON")
    count_parser.set_defaults(func=run_count)

    chars_parser = subparsers.add_parser("chars", help="List every character with its offset")
    chars_parser.add_argument("path", help="Input file, or - for stdin")
    chars_parser.add_argument("--json", action="store_true", help="Emit JSON")
    chars_parser.set_defaults(func=run_chars)

    slice_parser = subparsers.add_parser(
        "slice", help="Extract a byte range that starts and ends on character boundaries"
    )
    slice_parser.add_argument("path", help="Input file, or - for stdin")
    slice_parser.add_argument("start", type=int, help="Start byte offset")
    slice_parser.add_argument("length", type=int, help="Length in bytes")
    slice_parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    slice_parser.set_defaults(func=run_slice)

    nth_parser = subparsers.add_parser("nth", help="Show the character at a character index")
    nth_parser.add_argument("path", help="Input file, or - for stdin")
    nth_parser.add_argument("index", type=int, help="Zero-based character index")
    nth_parser.add_argument("--json", action="store_true", help="Emit JSON")
    nth_parser.set_defaults(func=run_nth)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except FileNotFoundError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
