"""Scalar value to UTF-8 encoding."""

from __future__ import annotations

from utf8gate._utils import (
    MAX_LEGAL_SCALAR,
    REPLACEMENT_CHARACTER,
    SCALAR_BUFFER_SIZE,
    SENTINEL_BYTE,
    SURROGATE_END,
    SURROGATE_START,
    _resolve_capacity,
    _validate_mode,
    _validate_scalar,
)
from utf8gate.codec import EncodedScalar
from utf8gate.enums import ConversionMode

# Marker OR-ed into the leading byte, indexed by sequence length.
_FIRST_BYTE_MARK: tuple[int, ...] = (0x00, 0x00, 0xC0, 0xE0, 0xF0)

_EMPTY_OUTPUT: bytes = bytes([SENTINEL_BYTE]) * SCALAR_BUFFER_SIZE


def _sequence_length(scalar: int) -> int:
    if scalar < 0x80:
        return 1
    if scalar < 0x800:
        return 2
    if scalar < 0x10000:
        return 3
    return 4


def encode_scalar_to_utf8(
    scalar: int,
    mode: ConversionMode = ConversionMode.LENIENT,
    capacity: int = SCALAR_BUFFER_SIZE,
) -> EncodedScalar:
    """Encode one scalar value as UTF-8 into a fixed 4-byte output.

    Scalars above U+10FFFF are replaced by U+FFFD (three bytes) and flagged
    as illegal.  In :attr:`~utf8gate.ConversionMode.STRICT` mode a surrogate
    is rejected outright: the result has a zero count and four sentinel
    bytes.

    *capacity* limits how many output slots may be used.  When the encoding
    is longer, only its leading bytes are kept and the count says how many.

    :param scalar: The value to encode, 0..0x7FFFFFFF.
    :param mode: Surrogate handling.
    :param capacity: Usable output slots, 0..4.
    :returns: An :class:`~utf8gate.EncodedScalar`.
    :raises ValueError: If *scalar* or *capacity* is out of range,
        or *mode* is not a :class:`~utf8gate.ConversionMode`.
    """
    _validate_scalar(scalar)
    _validate_mode(mode)
    capacity = _resolve_capacity(SCALAR_BUFFER_SIZE, capacity)

    if mode is ConversionMode.STRICT and SURROGATE_START <= scalar <= SURROGATE_END:
        return EncodedScalar(count=0, output=_EMPTY_OUTPUT, illegal=True)

    illegal = False
    if scalar > MAX_LEGAL_SCALAR:
        scalar = REPLACEMENT_CHARACTER
        illegal = True
    seq_len = _sequence_length(scalar)

    out = bytearray(_EMPTY_OUTPUT)
    for i in range(seq_len - 1, 0, -1):
        out[i] = 0x80 | (scalar & 0x3F)
        scalar >>= 6
    out[0] = scalar | _FIRST_BYTE_MARK[seq_len]

    count = min(seq_len, capacity)
    if count == 0:
        return EncodedScalar(count=0, output=_EMPTY_OUTPUT, illegal=illegal)
    out[count:] = _EMPTY_OUTPUT[count:]
    return EncodedScalar(count=count, output=bytes(out), illegal=illegal)


def encode_scalars(
    *scalars: int, mode: ConversionMode = ConversionMode.LENIENT
) -> bytes:
    """Encode several scalar values and join their UTF-8 bytes.

    Scalars rejected in strict mode contribute nothing.
    """
    return b"".join(encode_scalar_to_utf8(s, mode).data for s in scalars)
