"""Codec components and shared result types."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class EncodedScalar:
    """The UTF-8 encoding of a single scalar value.

    *output* is always four bytes long.  Slots past *count* hold
    :data:`~utf8gate.SENTINEL_BYTE`, so a zero *count* comes with four
    sentinels.  *illegal* is set when the scalar was not a legal Unicode
    scalar value, whether it was replaced or rejected.
    """

    count: int
    output: bytes
    illegal: bool = False

    @property
    def data(self) -> bytes:
        """The valid leading bytes of *output*."""
        return self.output[: self.count]

    def to_tuple(self) -> tuple[int, bytes]:
        """Return ``(count, output)``.

        :returns: The number of valid bytes and the padded 4-byte output.
        """
        return self.count, self.output


@dataclasses.dataclass(frozen=True, slots=True)
class UpgradeResult:
    """Outcome of upgrading Latin-1 text into a bounded output buffer.

    *needed* is the full UTF-8 length of the input whether or not it fit;
    *written* is how many bytes actually landed in the buffer.  *terminated*
    records whether a trailing NUL was placed after the text.
    """

    needed: int
    written: int
    terminated: bool

    @property
    def truncated(self) -> bool:
        return self.needed > self.written
