from __future__ import annotations
from pydantic import BaseModel, Field

_I8 = dict(ge=-0x80, le=0x7F)
_I16 = dict(ge=-0x8000, le=0x7FFF)
_I32 = dict(ge=-0x80000000, le=0x7FFFFFFF)


class RecHeader(BaseModel):
    # Meaning unknown; order and width are all that is known.
    h1: int = Field(0, **_I8)
    h2: int = Field(0, **_I8)
    h3: int = Field(0, **_I8)
    h4: int = Field(0, **_I16)
    h5: int = Field(0, **_I16)
    h6: int = Field(0, **_I16)
    h7: int = Field(0, **_I16)
    h8: int = Field(0, **_I16)
    h9: int = Field(0, **_I16)
    h10: int = Field(0, **_I16)
    h11: int = Field(0, **_I16)
    h12: int = Field(0, **_I32)
    h13: int = Field(0, **_I8)
