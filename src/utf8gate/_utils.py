"""Internal shared constants and argument checks for utf8gate."""

from __future__ import annotations

from utf8gate.enums import ConversionMode

#: Byte value marking an encoder output slot that holds no valid byte.
#: 0xFF can never appear in well-formed UTF-8.
SENTINEL_BYTE: int = 0xFF

#: Fixed size of a single-scalar encoder output buffer.
SCALAR_BUFFER_SIZE: int = 4

#: Largest value a scalar argument may take at all.
MAX_SCALAR: int = 0x7FFFFFFF

#: Largest legal Unicode scalar value.
MAX_LEGAL_SCALAR: int = 0x10FFFF

#: U+FFFD, substituted for scalars that cannot be encoded.
REPLACEMENT_CHARACTER: int = 0xFFFD

SURROGATE_START: int = 0xD800
SURROGATE_END: int = 0xDFFF

#: Default output capacity when coercing a received line to UTF-8.
DEFAULT_LINE_CAPACITY: int = 2048


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_byte(byte: int) -> None:
    """Raise ValueError if *byte* is not an int in 0..255."""
    if not _is_int(byte) or not 0 <= byte <= 0xFF:
        msg = "byte must be an integer in range 0..255"
        raise ValueError(msg)


def _validate_scalar(scalar: int) -> None:
    """Raise ValueError if *scalar* is not an int in 0..0x7FFFFFFF."""
    if not _is_int(scalar) or not 0 <= scalar <= MAX_SCALAR:
        msg = "scalar must be an integer in range 0..0x7FFFFFFF"
        raise ValueError(msg)


def _validate_mode(mode: ConversionMode) -> None:
    """Raise ValueError if *mode* is not a ConversionMode member."""
    if not isinstance(mode, ConversionMode):
        msg = "mode must be a ConversionMode"
        raise ValueError(msg)


def _resolve_length(size: int, length: int | None) -> int:
    """Return the number of bytes to process out of a buffer of *size* bytes."""
    if length is None:
        return size
    if not _is_int(length) or not 0 <= length <= size:
        msg = "length must be an integer between 0 and the buffer size"
        raise ValueError(msg)
    return length


def _resolve_capacity(size: int, capacity: int | None) -> int:
    """Return the usable capacity of an output buffer of *size* bytes."""
    if capacity is None:
        return size
    if not _is_int(capacity) or not 0 <= capacity <= size:
        msg = "capacity must be an integer between 0 and the buffer size"
        raise ValueError(msg)
    return capacity


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if not _is_int(max_bytes) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
