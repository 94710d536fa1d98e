from __future__ import annotations
from pydantic import BaseModel, Field, field_validator, model_validator

from .common import BYTES_AS_HEX, RecAction

EXTRA_DATA_SIZE = 7


class MoveRecord(BaseModel):
    """One timestamped input event.

    Records with `extra > 2` carry a 7-byte payload; for them `raw_action` is
    written back verbatim and `action` is informational only.
    """
    model_config = BYTES_AS_HEX

    tick: int = Field(..., ge=0, le=0xFFFFFFFF)
    extra: int = Field(0, ge=0, le=0xFF)
    player_id: int = Field(0, ge=0, le=0xFF)
    raw_action: int = Field(0, ge=0, le=0xFF)
    action: RecAction = RecAction.NONE
    extra_data: bytes | None = None

    @field_validator("action", mode="before")
    @classmethod
    def _coerce_action(cls, v):
        if isinstance(v, str):
            return RecAction.parse(v)
        if isinstance(v, int) and not isinstance(v, RecAction):
            return RecAction(v)
        return v

    @model_validator(mode="after")
    def _check_extra_data(self) -> "MoveRecord":
        if self.has_extra_data:
            if self.extra_data is None:
                self.extra_data = bytes(EXTRA_DATA_SIZE)
            elif len(self.extra_data) != EXTRA_DATA_SIZE:
                raise ValueError(f"extra_data must be {EXTRA_DATA_SIZE} bytes, got {len(self.extra_data)}")
        return self

    @property
    def has_extra_data(self) -> bool:
        return self.extra > 2
