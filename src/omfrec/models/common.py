from __future__ import annotations
from enum import IntFlag
from pydantic import ConfigDict

# bytes fields travel as hex in JSON
BYTES_AS_HEX = ConfigDict(ser_json_bytes="hex", val_json_bytes="hex")


class RecAction(IntFlag):
    NONE = 0
    PUNCH = 1
    KICK = 2
    UP = 4
    DOWN = 8
    LEFT = 16
    RIGHT = 32

    @classmethod
    def parse(cls, text: str) -> "RecAction":
        """Parse 'up+right+punch' style names; empty or 'none' is NONE."""
        action = cls.NONE
        for part in text.replace(",", "+").split("+"):
            name = part.strip().upper()
            if not name or name == "NONE":
                continue
            try:
                action |= cls[name]
            except KeyError:
                raise ValueError(f"unknown action {part.strip()!r}") from None
        return action

    def label(self) -> str:
        names = [m.name.lower() for m in RecAction if m and m in self]
        return "+".join(names) or "none"


MOVE_MASK = RecAction.UP | RecAction.DOWN | RecAction.LEFT | RecAction.RIGHT
BUTTON_MASK = RecAction.PUNCH | RecAction.KICK
