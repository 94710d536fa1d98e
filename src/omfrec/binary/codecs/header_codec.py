from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from omfrec.models.header import RecHeader
from .bytecursor import ByteCursorReader
from .bytewriter import ByteCursorWriter


@dataclass(frozen=True)
class HeaderField:
    name: str
    read: Callable[[ByteCursorReader], int]
    write: Callable[[ByteCursorWriter, int], None]


_I8 = (ByteCursorReader.read_i8, ByteCursorWriter.write_i8)
_I16 = (ByteCursorReader.read_i16, ByteCursorWriter.write_i16)
_I32 = (ByteCursorReader.read_i32, ByteCursorWriter.write_i32)

# On-disk order of the scalars following the two scores.
HEADER_FIELD_PLAN: Tuple[HeaderField, ...] = (
    HeaderField("h1", *_I8),
    HeaderField("h2", *_I8),
    HeaderField("h3", *_I8),
    HeaderField("h4", *_I16),
    HeaderField("h5", *_I16),
    HeaderField("h6", *_I16),
    HeaderField("h7", *_I16),
    HeaderField("h8", *_I16),
    HeaderField("h9", *_I16),
    HeaderField("h10", *_I16),
    HeaderField("h11", *_I16),
    HeaderField("h12", *_I32),
    HeaderField("h13", *_I8),
)


def decode_scores(reader: ByteCursorReader) -> List[int]:
    return [reader.read_u32(), reader.read_u32()]


def encode_scores(writer: ByteCursorWriter, scores: List[int]) -> None:
    for score in scores:
        writer.write_u32(score)


def decode_header(reader: ByteCursorReader) -> RecHeader:
    """Read the thirteen header scalars, in order, without interpretation."""
    values: Dict[str, int] = {}
    for fld in HEADER_FIELD_PLAN:
        values[fld.name] = fld.read(reader)
    return RecHeader(**values)


def encode_header(writer: ByteCursorWriter, header: RecHeader) -> None:
    for fld in HEADER_FIELD_PLAN:
        fld.write(writer, getattr(header, fld.name))
