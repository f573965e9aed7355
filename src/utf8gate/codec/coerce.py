"""Coercion of received text lines to UTF-8."""

from __future__ import annotations

import logging

from utf8gate._utils import DEFAULT_LINE_CAPACITY, _validate_max_bytes
from utf8gate.codec.latin1 import upgrade_latin1_to_utf8
from utf8gate.codec.validate import is_valid_utf8

logger = logging.getLogger(__name__)


def coerce_to_utf8(
    data: bytes | bytearray | memoryview, max_bytes: int = DEFAULT_LINE_CAPACITY
) -> bytes:
    """Return *data* as UTF-8, assuming Latin-1 when it is not valid UTF-8.

    ASCII and well-formed UTF-8 pass through untouched, whatever their
    length.  Anything else is upgraded from Latin-1 into at most *max_bytes*
    bytes, cut at a character boundary if it does not fit.

    :param data: A raw line of text.
    :param max_bytes: Output limit for upgraded text.
    :returns: UTF-8 encoded bytes.
    :raises ValueError: If *max_bytes* is not a positive integer.
    """
    _validate_max_bytes(max_bytes)
    raw = memoryview(data).tobytes()
    if is_valid_utf8(raw):
        return raw

    out = bytearray(max_bytes)
    result = upgrade_latin1_to_utf8(raw, out)
    logger.debug(
        "Upgraded %d bytes of Latin-1 text to %d bytes of UTF-8",
        len(raw),
        result.needed,
    )
    if result.truncated:
        logger.debug(
            "UTF-8 output truncated from %d to %d bytes", result.needed, result.written
        )
    return bytes(out[: result.written])
