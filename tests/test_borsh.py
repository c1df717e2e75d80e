import pytest
from hypothesis import given, strategies as st

from authrules.borsh import BorshError, Reader, Writer


def test_u32_is_little_endian():
    writer = Writer()
    writer.write_u32(1)
    assert writer.getvalue() == b"\x01\x00\x00\x00"


def test_string_is_length_prefixed():
    writer = Writer()
    writer.write_string("abc")
    assert writer.getvalue() == b"\x03\x00\x00\x00abc"


def test_bool_encoding():
    writer = Writer()
    writer.write_bool(True)
    writer.write_bool(False)
    assert writer.getvalue() == b"\x01\x00"


@given(
    st.integers(0, 255),
    st.integers(0, 2**32 - 1),
    st.integers(0, 2**64 - 1),
    st.booleans(),
    st.binary(),
    st.text(),
    st.binary(min_size=32, max_size=32),
)
def test_round_trip(u8, u32, u64, flag, blob, text, fixed):
    writer = Writer()
    writer.write_u8(u8)
    writer.write_u32(u32)
    writer.write_u64(u64)
    writer.write_bool(flag)
    writer.write_bytes(blob)
    writer.write_string(text)
    writer.write_fixed(fixed)
    reader = Reader(writer.getvalue())
    assert reader.read_u8() == u8
    assert reader.read_u32() == u32
    assert reader.read_u64() == u64
    assert reader.read_bool() is flag
    assert reader.read_bytes() == blob
    assert reader.read_string() == text
    assert reader.read_fixed(32) == fixed
    reader.finish()


@pytest.mark.parametrize(
    "method,value",
    [("write_u8", 256), ("write_u32", 2**32), ("write_u64", 2**64), ("write_u64", -1)],
)
def test_out_of_range(method, value):
    with pytest.raises(BorshError):
        getattr(Writer(), method)(value)


def test_rejects_non_integer():
    with pytest.raises(BorshError):
        Writer().write_u64(True)


def test_read_past_end():
    with pytest.raises(BorshError):
        Reader(b"\x01\x00").read_u32()


def test_declared_length_past_end():
    with pytest.raises(BorshError):
        Reader(b"\x05\x00\x00\x00ab").read_bytes()


def test_invalid_bool():
    with pytest.raises(BorshError):
        Reader(b"\x02").read_bool()


def test_invalid_utf8():
    with pytest.raises(BorshError):
        Reader(b"\x01\x00\x00\x00\xff").read_string()


def test_finish_with_leftover():
    reader = Reader(b"\x07\x08")
    assert reader.read_u8() == 7
    with pytest.raises(BorshError):
        reader.finish()