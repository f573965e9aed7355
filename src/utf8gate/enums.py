"""Enumerations for utf8gate."""

import enum


class ConversionMode(enum.Enum):
    """How the scalar encoder treats UTF-16 surrogate values."""

    #: Surrogates are encoded like any other BMP value.
    LENIENT = 0
    #: Surrogates are rejected with the all-sentinel failure result.
    STRICT = 1
