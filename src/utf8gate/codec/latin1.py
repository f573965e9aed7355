"""Latin-1 to UTF-8 upgrading into caller-owned buffers."""

from __future__ import annotations

from utf8gate._utils import _resolve_capacity, _resolve_length
from utf8gate.codec import UpgradeResult


def upgrade_latin1_to_utf8(
    data: bytes | bytearray | memoryview,
    out: bytearray | memoryview,
    capacity: int | None = None,
    length: int | None = None,
) -> UpgradeResult:
    """Convert Latin-1 *data* to UTF-8, writing into *out*.

    Bytes below 0x80 are copied; every other byte becomes a two-byte
    sequence.  Writing stops at the first character that does not fit in
    *capacity*, but the full UTF-8 length is still counted, so a caller can
    compare ``needed`` with the capacity it offered and retry with a larger
    buffer.  If room remains after the text, a NUL byte is written at index
    ``needed``.  It is not included in ``needed``.

    :param data: Latin-1 encoded input.
    :param out: Writable output buffer.
    :param capacity: Number of bytes of *out* that may be written.  Defaults
        to ``len(out)``.
    :param length: Number of input bytes to convert.  Defaults to all of
        *data*.
    :returns: An :class:`~utf8gate.UpgradeResult`.
    :raises ValueError: If *out* is read-only, or *capacity* or *length* is
        out of range.
    """
    source = memoryview(data).tobytes()
    size = _resolve_length(len(source), length)
    target = memoryview(out)
    if target.ndim != 1 or target.format != "B":
        target = target.cast("B")
    if target.readonly:
        msg = "output buffer must be writable"
        raise ValueError(msg)
    capacity = _resolve_capacity(len(target), capacity)

    # Latin-1 maps each byte to the code point of the same value.
    encoded = source[:size].decode("latin-1").encode("utf-8")
    needed = len(encoded)

    written = min(needed, capacity)
    if written < needed and encoded[written] & 0xC0 == 0x80:
        # Never split a two-byte character.
        written -= 1
    target[:written] = encoded[:written]

    terminated = needed < capacity
    if terminated:
        target[needed] = 0
    return UpgradeResult(needed=needed, written=written, terminated=terminated)


def latin1_to_utf8(data: bytes | bytearray | memoryview) -> bytes:
    """Return *data* converted from Latin-1 to UTF-8 in full."""
    needed = upgrade_latin1_to_utf8(data, bytearray()).needed
    out = bytearray(needed)
    upgrade_latin1_to_utf8(data, out)
    return bytes(out)
