"""Reading and writing the Borsh binary encoding."""

from __future__ import annotations

import struct

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


class BorshError(ValueError):
    """Raised when data cannot be encoded or decoded."""


def _check_range(value: int, bits: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BorshError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise BorshError(f"{value} does not fit in u{bits}")
    return value


class Writer:
    """Accumulates Borsh-encoded values."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        self._buffer.append(_check_range(value, 8))

    def write_u32(self, value: int) -> None:
        self._buffer += _U32.pack(_check_range(value, 32))

    def write_u64(self, value: int) -> None:
        self._buffer += _U64.pack(_check_range(value, 64))

    def write_bool(self, value: bool) -> None:
        self._buffer.append(1 if value else 0)

    def write_bytes(self, data: bytes) -> None:
        """Write a length-prefixed byte vector."""
        data = bytes(data)
        self.write_u32(len(data))
        self._buffer += data

    def write_fixed(self, data: bytes) -> None:
        """Write bytes with no length prefix."""
        self._buffer += bytes(data)

    def write_string(self, text: str) -> None:
        self.write_bytes(text.encode("utf-8"))

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class Reader:
    """Decodes Borsh values from a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read_fixed(self, size: int) -> bytes:
        end = self._pos + size
        if size < 0 or end > len(self._data):
            raise BorshError("unexpected end of data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_u8(self) -> int:
        return self.read_fixed(1)[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_fixed(4))[0]

    def read_u64(self) -> int:
        return _U64.unpack(self.read_fixed(8))[0]

    def read_bool(self) -> bool:
        value = self.read_u8()
        if value not in (0, 1):
            raise BorshError(f"invalid bool value {value}")
        return value == 1

    def read_bytes(self) -> bytes:
        return self.read_fixed(self.read_u32())

    def read_string(self) -> str:
        try:
            return self.read_bytes().decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BorshError("string is not valid UTF-8") from exc

    def finish(self) -> None:
        """Fail if any input remains unread."""
        if self._pos != len(self._data):
            raise BorshError("Not all bytes read")