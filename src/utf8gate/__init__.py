"""UTF-8 validation, scalar encoding, and Latin-1 upgrading."""

from __future__ import annotations

from utf8gate._utils import (
    DEFAULT_LINE_CAPACITY,
    MAX_LEGAL_SCALAR,
    REPLACEMENT_CHARACTER,
    SENTINEL_BYTE,
)
from utf8gate.codec import EncodedScalar, UpgradeResult
from utf8gate.codec.classify import classify_leading_byte
from utf8gate.codec.coerce import coerce_to_utf8
from utf8gate.codec.encode import encode_scalar_to_utf8, encode_scalars
from utf8gate.codec.latin1 import latin1_to_utf8, upgrade_latin1_to_utf8
from utf8gate.codec.validate import is_valid_utf8
from utf8gate.enums import ConversionMode

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_LINE_CAPACITY",
    "MAX_LEGAL_SCALAR",
    "REPLACEMENT_CHARACTER",
    "SENTINEL_BYTE",
    "ConversionMode",
    "EncodedScalar",
    "UpgradeResult",
    "classify_leading_byte",
    "coerce_to_utf8",
    "encode_scalar_to_utf8",
    "encode_scalars",
    "is_valid_utf8",
    "latin1_to_utf8",
    "upgrade_latin1_to_utf8",
]
