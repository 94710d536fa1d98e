from __future__ import annotations
import io
import struct
from pathlib import Path
from typing import BinaryIO, Optional, Union

from omfrec.errors import InvalidInput, IoError, OpenError

Destination = Union[str, Path, BinaryIO, None]


class ByteCursorWriter:
    """Sequential little-endian writer.

    The destination is a path (created or truncated), an already open binary
    stream, or None for an in-memory buffer read back with `getvalue()`.
    Only streams opened here are closed by `close()`.
    """
    __slots__ = ("stream", "length", "_owned")

    def __init__(self, stream: BinaryIO, *, owned: bool = False):
        self.stream: Optional[BinaryIO] = stream
        self.length = 0
        self._owned = owned

    @classmethod
    def open(cls, destination: Destination = None) -> "ByteCursorWriter":
        if destination is None:
            return cls(io.BytesIO(), owned=False)
        if hasattr(destination, "write"):
            return cls(destination, owned=False)  # type: ignore[arg-type]
        try:
            return cls(open(Path(str(destination)), "wb"), owned=True)
        except OSError as e:
            raise OpenError(f"cannot create {destination}: {e}") from e

    @property
    def closed(self) -> bool: return self.stream is None

    def close(self) -> None:
        stream, self.stream = self.stream, None
        if stream is not None and self._owned:
            try:
                stream.close()
            except OSError as e:
                raise IoError(f"close failed: {e}") from e

    def __enter__(self) -> "ByteCursorWriter": return self
    def __exit__(self, *exc) -> None: self.close()

    def position(self) -> int: return self.length

    def getvalue(self) -> bytes:
        if not isinstance(self.stream, io.BytesIO):
            raise InvalidInput("getvalue() needs an open in-memory writer")
        return self.stream.getvalue()

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        if self.stream is None: raise IoError("writer is closed")
        try:
            written = self.stream.write(bytes(data))
        except (OSError, ValueError) as e:
            raise IoError(f"write of {len(data)} bytes at {self.length} failed: {e}") from e
        if written is not None and written != len(data):
            raise IoError(f"short write at {self.length}: {written} of {len(data)}")
        self.length += len(data)

    def write_fill(self, value: int, n: int) -> None:
        if not (0 <= value <= 0xFF): raise InvalidInput(f"fill value {value} is not a byte")
        if n < 0: raise InvalidInput(f"negative fill length {n}")
        self.write_bytes(bytes([value]) * n)

    def _pack(self, fmt: str, value: int) -> None:
        try:
            data = struct.pack(fmt, value)
        except struct.error as e:
            raise InvalidInput(f"{value!r} does not fit {fmt}: {e}") from e
        self.write_bytes(data)

    def write_u8(self, v: int) -> None:  self._pack("<B", v)
    def write_i8(self, v: int) -> None:  self._pack("<b", v)
    def write_u16(self, v: int) -> None: self._pack("<H", v)
    def write_i16(self, v: int) -> None: self._pack("<h", v)
    def write_u32(self, v: int) -> None: self._pack("<I", v)
    def write_i32(self, v: int) -> None: self._pack("<i", v)
