from __future__ import annotations
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, field_validator

from omfrec.binary.layout import HACK_TIME_SIZE, PROFILE_SLOTS
from .common import BYTES_AS_HEX
from .header import RecHeader
from .move_list import MoveList
from .profile import ProfileRecord


def _two(factory):
    return lambda: [factory() for _ in range(PROFILE_SLOTS)]


class RecFile(BaseModel):
    model_config = BYTES_AS_HEX

    profiles: List[ProfileRecord] = Field(default_factory=_two(ProfileRecord), min_length=2, max_length=2)
    hack_time: List[bytes] = Field(default_factory=_two(lambda: bytes(HACK_TIME_SIZE)), min_length=2, max_length=2)
    scores: List[int] = Field(default_factory=lambda: [0, 0], min_length=2, max_length=2)
    header: RecHeader = Field(default_factory=RecHeader)
    moves: MoveList = Field(default_factory=MoveList)
    trailer: bytes = b""

    @field_validator("hack_time")
    @classmethod
    def _check_hack_time(cls, v: List[bytes]) -> List[bytes]:
        for i, block in enumerate(v):
            if len(block) != HACK_TIME_SIZE:
                raise ValueError(f"hack_time[{i}] must be {HACK_TIME_SIZE} bytes, got {len(block)}")
        return v

    @field_validator("scores")
    @classmethod
    def _check_scores(cls, v: List[int]) -> List[int]:
        for s in v:
            if not (0 <= s <= 0xFFFFFFFF):
                raise ValueError(f"score {s} does not fit u32")
        return v

    # Convenience constructors
    @classmethod
    def from_binary(cls, data: Union[bytes, str, Path], **kwargs) -> "RecFile":
        from ..binary.reader import load_rec
        return load_rec(data, **kwargs)

    def to_binary(self) -> bytes:
        from ..binary.writer import dump_rec
        return dump_rec(self)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "RecFile":
        from ..jsonio.read import read_json_file
        return read_json_file(text)

    def to_json(self, *, pretty: bool = True) -> str:
        from ..jsonio.write import write_json_file
        return write_json_file(self, pretty=pretty)
