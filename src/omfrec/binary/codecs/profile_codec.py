from __future__ import annotations
from typing import Protocol, runtime_checkable

from omfrec.binary.layout import HACK_TIME_SIZE
from omfrec.models.profile import ProfileRecord
from .bytecursor import ByteCursorReader
from .bytewriter import ByteCursorWriter


@runtime_checkable
class ProfileCodec(Protocol):
    """Decoder/encoder for the profile sub-record embedded in each slot.

    `decode` must advance the reader by exactly the serialized size it
    consumed and `encode` must write exactly that many bytes back.
    """

    def decode(self, reader: ByteCursorReader) -> ProfileRecord: ...

    def encode(self, writer: ByteCursorWriter, profile: ProfileRecord) -> None: ...


class RawProfileCodec:
    """Keeps the profile as an uninterpreted fixed-size blob."""

    def __init__(self, size: int = HACK_TIME_SIZE):
        self.size = size

    def decode(self, reader: ByteCursorReader) -> ProfileRecord:
        return ProfileRecord(raw=reader.read_bytes(self.size))

    def encode(self, writer: ByteCursorWriter, profile: ProfileRecord) -> None:
        raw = profile.raw or bytes(self.size)
        writer.write_bytes(raw)
