#!/usr/bin/env python
"""Generate the leading-byte classification RST table from the classifier."""

from __future__ import annotations

from itertools import groupby

from utf8gate.codec.classify import TRAILING_BYTES

# Lead bytes that are never legal regardless of their structural length.
_ILLEGAL = frozenset(range(0x80, 0xC2)) | frozenset(range(0xF5, 0x100))


def main() -> None:
    """Print the leading-byte RST table to stdout."""
    print("Leading Bytes")
    print("=============")
    print()
    print(".. list-table::")
    print("   :header-rows: 1")
    print("   :widths: 25 20 15")
    print()
    print("   * - Range")
    print("     - Continuation bytes")
    print("     - Legal")

    rows = groupby(
        range(256), key=lambda b: (TRAILING_BYTES[b], b in _ILLEGAL, b < 0x80)
    )
    for (trailing, illegal, _), group in rows:
        members = list(group)
        span = f"0x{members[0]:02X}"
        if len(members) > 1:
            span += f"–0x{members[-1]:02X}"
        print(f"   * - {span}")
        print(f"     - {trailing}")
        print(f"     - {'No' if illegal else 'Yes'}")
    print()


if __name__ == "__main__":
    main()
