"""Command-line interface for utf8gate."""

from __future__ import annotations

import argparse
import logging
import string
import sys
from pathlib import Path

import utf8gate

logger = logging.getLogger(__name__)

_HEX_PREFIXES = ("U+", "u+", "0x", "0X")
_HEX_DIGITS = frozenset(string.hexdigits)
_DEC_DIGITS = frozenset(string.digits)


def _parse_scalar(text: str) -> int:
    """Parse a code point written as decimal, ``0x...`` or ``U+...``."""
    if text.startswith(_HEX_PREFIXES):
        digits, allowed, base = text[2:], _HEX_DIGITS, 16
    else:
        digits, allowed, base = text, _DEC_DIGITS, 10
    # Plain digits only: no signs, underscores or nested prefixes.
    if not digits or not allowed.issuperset(digits):
        msg = f"invalid code point: {text!r}"
        raise argparse.ArgumentTypeError(msg)
    value = int(digits, base)
    if not 0 <= value <= 0x7FFFFFFF:
        msg = f"code point out of range: {text!r}"
        raise argparse.ArgumentTypeError(msg)
    return value


def _report(name: str, data: bytes, minimal: bool) -> bool:
    valid = utf8gate.is_valid_utf8(data)
    verdict = "valid" if valid else "invalid"
    if minimal:
        print(verdict)
    else:
        print(f"{name}: {verdict} UTF-8")
    return valid


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf8gate`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Check files for valid UTF-8 or upgrade them from Latin-1."
    )
    parser.add_argument("files", nargs="*", help="Files to check")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only valid or invalid"
    )
    parser.add_argument(
        "--upgrade",
        action="store_true",
        help="Write the input as UTF-8, upgrading invalid text from Latin-1",
    )
    parser.add_argument(
        "--encode",
        nargs="+",
        type=_parse_scalar,
        metavar="SCALAR",
        help="Write the UTF-8 encoding of code points (decimal, 0x... or U+...)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf8gate {utf8gate.__version__}"
    )

    args = parser.parse_args(argv)
    if args.encode and (args.files or args.upgrade):
        parser.error("--encode cannot be combined with files or --upgrade")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.encode:
        sys.stdout.buffer.write(utf8gate.encode_scalars(*args.encode))
        sys.stdout.flush()
        return

    inputs: list[tuple[str, bytes]] = []
    failed = False
    if args.files:
        for filepath in args.files:
            try:
                data = Path(filepath).read_bytes()
            except OSError as e:
                print(f"utf8gate: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            inputs.append((filepath, data))
    else:
        inputs.append(("stdin", sys.stdin.buffer.read()))

    for name, data in inputs:
        logger.debug("Read %d bytes from %s", len(data), name)
        if args.upgrade:
            # Latin-1 at most doubles in size, so whole files are never cut.
            limit = max(len(data) * 2, 1)
            sys.stdout.buffer.write(utf8gate.coerce_to_utf8(data, limit))
        elif not _report(name, data, args.minimal):
            failed = True
    sys.stdout.flush()

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
