from __future__ import annotations
from pydantic import BaseModel, Field

from .common import BYTES_AS_HEX


class ProfileRecord(BaseModel):
    """Serialized player profile, held opaque and forwarded to its codec."""
    model_config = BYTES_AS_HEX

    raw: bytes = Field(default=b"")
