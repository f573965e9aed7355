"""UTF-8 well-formedness validation."""

from __future__ import annotations

from utf8gate._utils import _resolve_length
from utf8gate.codec.classify import TRAILING_BYTES

# Allowed range of the first continuation byte for leading bytes that would
# otherwise admit overlong forms, surrogates, or values above U+10FFFF.
_FIRST_CONTINUATION_RANGE: dict[int, tuple[int, int]] = {
    0xE0: (0xA0, 0xBF),  # overlong 3-byte (< U+0800)
    0xED: (0x80, 0x9F),  # surrogates U+D800-U+DFFF
    0xF0: (0x90, 0xBF),  # overlong 4-byte (< U+10000)
    0xF4: (0x80, 0x8F),  # above U+10FFFF
}


def is_valid_utf8(
    buffer: bytes | bytearray | memoryview, length: int | None = None
) -> bool:
    """Return True if the first *length* bytes of *buffer* are well-formed UTF-8.

    Every sequence must be complete, use the shortest form, and decode to a
    scalar value in range that is not a surrogate.  The empty buffer is
    valid.  Where the data goes wrong is deliberately not reported.

    :param buffer: The raw bytes to check.
    :param length: Number of leading bytes to check.  Defaults to the whole
        buffer.
    :returns: ``True`` for well-formed UTF-8, ``False`` otherwise.
    """
    data = memoryview(buffer).tobytes()
    end = _resolve_length(len(data), length)
    data = data[:end]
    if data.isascii():
        return True

    i = 0
    while i < end:
        byte = data[i]

        if byte < 0x80:
            i += 1
            continue

        # Bare continuation bytes, overlong 2-byte leads and anything that
        # would encode past U+10FFFF.
        if byte < 0xC2 or byte > 0xF4:
            return False

        seq_len = 1 + TRAILING_BYTES[byte]
        if i + seq_len > end:
            return False

        for j in range(i + 1, i + seq_len):
            if not 0x80 <= data[j] <= 0xBF:
                return False

        bounds = _FIRST_CONTINUATION_RANGE.get(byte)
        if bounds is not None and not bounds[0] <= data[i + 1] <= bounds[1]:
            return False

        i += seq_len

    return True
