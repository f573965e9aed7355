"""Leading-byte sequence length classification."""

from __future__ import annotations

from utf8gate._utils import _validate_byte

# Continuation bytes expected after each possible leading byte.  Bare
# continuation bytes (0x80-0xBF) map to 0 like ASCII.  The 5- and 6-byte
# forms (0xF8-0xFF) are structurally possible but never legal.
TRAILING_BYTES: bytes = bytes(
    [0] * 0xC0 + [1] * 0x20 + [2] * 0x10 + [3] * 0x08 + [4] * 0x04 + [5] * 0x04
)


def classify_leading_byte(byte: int) -> int:
    """Return how many continuation bytes should follow *byte*.

    This only describes structure.  Whether the sequence is legal is
    decided by :func:`~utf8gate.is_valid_utf8`.

    :param byte: A leading byte, 0..255.
    :returns: The continuation byte count, 0..5.
    :raises ValueError: If *byte* is not an integer in 0..255.
    """
    _validate_byte(byte)
    return TRAILING_BYTES[byte]
