from __future__ import annotations
import struct
from pathlib import Path
from typing import Union

from omfrec.errors import OpenError, ReadError

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class ByteCursorReader:
    """Sequential little-endian reader over a finite byte source.

    Reads past the end raise ReadError and leave the cursor where it was.
    `skip` is the one move that may overrun; the next read then fails.
    """
    __slots__ = ("buf", "pos", "eof", "last_error")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf: memoryview | None = memoryview(bytes(data))
        self.pos = 0
        self.eof = False
        self.last_error = ""

    @classmethod
    def open(cls, source: BytesLike) -> "ByteCursorReader":
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls(source)
        try:
            return cls(Path(str(source)).read_bytes())
        except OSError as e:
            raise OpenError(f"cannot open {source}: {e}") from e

    # lifecycle
    @property
    def closed(self) -> bool: return self.buf is None

    def close(self) -> None:
        if self.buf is not None:
            self.buf.release()
            self.buf = None

    def __enter__(self) -> "ByteCursorReader": return self
    def __exit__(self, *exc) -> None: self.close()

    def _data(self) -> memoryview:
        if self.buf is None: raise ReadError("reader is closed")
        return self.buf

    # position
    def __len__(self) -> int: return len(self._data())
    def position(self) -> int: return self.pos
    def remaining_length(self) -> int: return max(0, len(self._data()) - self.pos)
    def at_end(self) -> bool: return self.pos >= len(self._data())

    def seek(self, pos: int) -> None:
        if not (0 <= pos <= len(self._data())):
            self.last_error = f"seek to {pos} outside 0..{len(self._data())}"
            raise ReadError(self.last_error)
        self.pos, self.eof = pos, pos >= len(self._data())

    def skip(self, n: int) -> None:
        if n < 0:
            self.last_error = f"cannot skip backwards by {n}"
            raise ReadError(self.last_error)
        self.pos += n
        self.eof = self.pos >= len(self._data())

    # raw bytes
    def read_bytes(self, n: int) -> bytes:
        data = self._data()
        end = self.pos + n
        if n < 0 or end > len(data):
            self.last_error = f"underrun: need {n} at {self.pos}, have {self.remaining_length()}"
            raise ReadError(self.last_error)
        out = data[self.pos:end].tobytes()
        self.pos = end
        self.eof = end >= len(data)
        return out

    def peek_bytes(self, n: int) -> bytes:
        pos, eof = self.pos, self.eof
        try:
            return self.read_bytes(n)
        finally:
            self.pos, self.eof = pos, eof

    def match(self, expected: bytes) -> bool:
        try:
            return self.peek_bytes(len(expected)) == bytes(expected)
        except ReadError:
            return False

    # little-endian integers
    def _unpack(self, fmt: str, n: int) -> int:
        return struct.unpack(fmt, self.read_bytes(n))[0]
    def _peek(self, fmt: str, n: int) -> int:
        return struct.unpack(fmt, self.peek_bytes(n))[0]

    def read_u8(self) -> int:  return self._unpack("<B", 1)
    def read_i8(self) -> int:  return self._unpack("<b", 1)
    def read_u16(self) -> int: return self._unpack("<H", 2)
    def read_i16(self) -> int: return self._unpack("<h", 2)
    def read_u32(self) -> int: return self._unpack("<I", 4)
    def read_i32(self) -> int: return self._unpack("<i", 4)

    def peek_u8(self) -> int:  return self._peek("<B", 1)
    def peek_i8(self) -> int:  return self._peek("<b", 1)
    def peek_u16(self) -> int: return self._peek("<H", 2)
    def peek_i16(self) -> int: return self._peek("<h", 2)
    def peek_u32(self) -> int: return self._peek("<I", 4)
    def peek_i32(self) -> int: return self._peek("<i", 4)
