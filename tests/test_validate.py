# tests/test_validate.py
from __future__ import annotations

import random

import pytest

from utf8gate.codec.classify import classify_leading_byte
from utf8gate.codec.validate import is_valid_utf8


def _decodes(data: bytes) -> bool:
    try:
        data.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True


def test_empty_input():
    assert is_valid_utf8(b"")


def test_pure_ascii():
    assert is_valid_utf8(b"PRIVMSG #chan :Hello world\r\n")


def test_valid_utf8_with_multibyte():
    assert is_valid_utf8("Héllo wörld café".encode())


def test_valid_utf8_chinese():
    assert is_valid_utf8("你好世界".encode())


def test_valid_utf8_emoji():
    assert is_valid_utf8("Hello 🌍🌎🌏".encode())


@pytest.mark.parametrize(
    "data",
    [
        b"\xc2\x80",  # U+0080
        b"\xdf\xbf",  # U+07FF
        b"\xe0\xa0\x80",  # U+0800
        b"\xed\x9f\xbf",  # U+D7FF
        b"\xee\x80\x80",  # U+E000
        b"\xef\xbf\xbd",  # U+FFFD
        b"\xf0\x90\x80\x80",  # U+10000
        b"\xf4\x8f\xbf\xbf",  # U+10FFFF
    ],
)
def test_boundary_sequences_accepted(data: bytes):
    assert is_valid_utf8(data)


@pytest.mark.parametrize(
    "data",
    [
        b"\xc0\x80",  # overlong NUL
        b"\xc1\xbf",  # overlong 2-byte
        b"\xe0\x80\x80",  # overlong 3-byte
        b"\xe0\x9f\xbf",
        b"\xf0\x80\x80\x80",  # overlong 4-byte
        b"\xf0\x8f\xbf\xbf",
    ],
)
def test_overlong_encodings_rejected(data: bytes):
    assert not is_valid_utf8(data)


@pytest.mark.parametrize("data", [b"\xed\xa0\x80", b"\xed\xbf\xbf", b"\xed\xb0\x80"])
def test_surrogates_rejected(data: bytes):
    assert not is_valid_utf8(b"Hello " + data + b" World")


@pytest.mark.parametrize(
    "data",
    [
        b"\xf4\x90\x80\x80",  # U+110000
        b"\xf5\x80\x80\x80",
        b"\xf7\xbf\xbf\xbf",
        b"\xf8\x88\x80\x80\x80",  # 5-byte form
        b"\xfc\x84\x80\x80\x80\x80",  # 6-byte form
        b"\xfe",
        b"\xff",
    ],
)
def test_out_of_range_rejected(data: bytes):
    assert not is_valid_utf8(data)


@pytest.mark.parametrize(
    "data",
    [b"\xe2\x82", b"Hello \xc3", b"\xf0\x9f\x8c", b"ok \xe2"],
)
def test_truncated_sequence_rejected(data: bytes):
    assert not is_valid_utf8(data)


def test_bare_continuation_byte_rejected():
    assert not is_valid_utf8(b"abc\x80def")


def test_continuation_byte_out_of_range_rejected():
    assert not is_valid_utf8(b"\xc3\x28")
    assert not is_valid_utf8(b"\xe2\x82\xc0")
    assert not is_valid_utf8(b"\xf0\x9f\x8c\x7f")


def test_latin1_is_not_valid_utf8():
    assert not is_valid_utf8("Héllo".encode("latin-1"))


def test_length_limits_checked_prefix():
    data = b"abc\xe2\x82\xac"
    assert is_valid_utf8(data, 3)
    assert not is_valid_utf8(data, 5)
    assert is_valid_utf8(data, 6)
    assert is_valid_utf8(data, 0)


@pytest.mark.parametrize("length", [-1, 7, True])
def test_length_out_of_range(length: int):
    with pytest.raises(ValueError, match="length must be"):
        is_valid_utf8(b"abc\xe2\x82\xac", length)


def test_accepts_bytes_like_objects():
    data = "€uro".encode()
    assert is_valid_utf8(bytearray(data))
    assert is_valid_utf8(memoryview(data))
    assert not is_valid_utf8(memoryview(data)[1:])


def test_rejects_text():
    with pytest.raises(TypeError):
        is_valid_utf8("not bytes")  # type: ignore[arg-type]


def test_every_two_byte_buffer_agrees_with_python_codec():
    for first in range(256):
        for second in range(256):
            data = bytes((first, second))
            assert is_valid_utf8(data) == _decodes(data), data


def test_lead_and_first_continuation_agree_with_python_codec():
    # Fix the tail so only the lead/first-continuation pair decides validity.
    for lead in range(0xC0, 0x100):
        tail = b"\x80" * max(classify_leading_byte(lead) - 1, 0)
        for second in range(256):
            data = bytes((lead, second)) + tail
            assert is_valid_utf8(data) == _decodes(data), data


def test_random_buffers_agree_with_python_codec():
    rng = random.Random(0x5EED)
    alphabet = b"\x00A\x7f\x80\x8f\x90\x9f\xa0\xbf\xc0\xc2\xdf\xe0\xed\xef\xf0\xf4\xf5\xff"
    for _ in range(5000):
        data = bytes(rng.choice(alphabet) for _ in range(rng.randint(1, 8)))
        assert is_valid_utf8(data) == _decodes(data), data


def test_accepts_strided_memoryview():
    assert is_valid_utf8(memoryview(b"\xc3x\xa9y")[::2])
    assert not is_valid_utf8(memoryview(b"\xc3\x00\x28\x00")[::2])
    assert is_valid_utf8(memoryview(b"\xc3x\xa9y\xe2")[::2], 2)
