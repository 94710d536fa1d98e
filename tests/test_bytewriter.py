import io

import pytest

from omfrec.binary.codecs.bytewriter import ByteCursorWriter
from omfrec.errors import InvalidInput, IoError, OpenError


def test_writes_little_endian_in_memory():
    with ByteCursorWriter.open(None) as w:
        w.write_u8(1)
        w.write_u16(0x0203)
        w.write_u32(0x04050607)
        w.write_i8(-1)
        w.write_i16(-2)
        w.write_i32(-3)
        w.write_fill(0xAA, 3)
        data = w.getvalue()
        assert w.position() == len(data)
    assert data == (
        b"\x01" + b"\x03\x02" + b"\x07\x06\x05\x04" + b"\xff" + b"\xfe\xff"
        + (-3).to_bytes(4, "little", signed=True) + b"\xaa\xaa\xaa"
    )


def test_out_of_range_value_is_invalid_input():
    w = ByteCursorWriter.open(None)
    with pytest.raises(InvalidInput):
        w.write_u8(256)
    with pytest.raises(InvalidInput):
        w.write_fill(300, 1)


def test_path_destination_is_closed(tmp_path):
    p = tmp_path / "out.bin"
    with ByteCursorWriter.open(p) as w:
        w.write_bytes(b"abc")
    assert w.closed
    assert p.read_bytes() == b"abc"


def test_open_error(tmp_path):
    with pytest.raises(OpenError):
        ByteCursorWriter.open(tmp_path / "no" / "such" / "dir.bin")


class _BrokenStream(io.RawIOBase):
    def writable(self):
        return True

    def write(self, b):
        raise OSError("disk full")


def test_write_failure_is_io_error():
    w = ByteCursorWriter.open(_BrokenStream())
    with pytest.raises(IoError):
        w.write_u32(1)
    assert w.position() == 0


def test_foreign_stream_left_open():
    buf = io.BytesIO()
    with ByteCursorWriter.open(buf) as w:
        w.write_bytes(b"x")
    assert not buf.closed
    assert buf.getvalue() == b"x"
