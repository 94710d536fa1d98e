from __future__ import annotations
from typing import Dict

from omfrec.binary.layout import MOVE_BASE_SIZE, MOVE_EXTRA_SIZE, MOVE_EXTRA_THRESHOLD
from omfrec.models.common import MOVE_MASK, RecAction
from omfrec.models.move import MoveRecord
from .bytecursor import ByteCursorReader
from .bytewriter import ByteCursorWriter

U, D, L, R = RecAction.UP, RecAction.DOWN, RecAction.LEFT, RecAction.RIGHT

# High nibble of the action byte -> direction. Clockwise from up, except
# 128 which closes the circle at up-left.
DIRECTION_BY_NIBBLE: Dict[int, RecAction] = {
    16: U,
    32: U | R,
    48: R,
    64: D | R,
    80: D,
    96: D | L,
    112: L,
    128: U | L,
}
NIBBLE_BY_DIRECTION: Dict[RecAction, int] = {v: k for k, v in DIRECTION_BY_NIBBLE.items()}


def decode_action(raw: int) -> RecAction:
    action = RecAction.NONE
    if raw & 1:
        action |= RecAction.PUNCH
    if raw & 2:
        action |= RecAction.KICK
    return action | DIRECTION_BY_NIBBLE.get(raw & 0xF0, RecAction.NONE)


def encode_action(action: RecAction) -> int:
    """Inverse of decode_action; direction combos outside the table give 0."""
    raw = NIBBLE_BY_DIRECTION.get(RecAction(action & MOVE_MASK), 0)
    if action & RecAction.PUNCH:
        raw |= 1
    if action & RecAction.KICK:
        raw |= 2
    return raw


def move_size_at(reader: ByteCursorReader) -> int:
    """Size of the record starting at the cursor, or 0 if it is incomplete.

    Does not move the cursor.
    """
    remaining = reader.remaining_length()
    if remaining < MOVE_BASE_SIZE:
        return 0
    extra = reader.peek_bytes(MOVE_BASE_SIZE)[4]
    if extra <= MOVE_EXTRA_THRESHOLD:
        return MOVE_BASE_SIZE
    if remaining < MOVE_BASE_SIZE + MOVE_EXTRA_SIZE:
        return 0
    return MOVE_BASE_SIZE + MOVE_EXTRA_SIZE


def decode_move(reader: ByteCursorReader) -> MoveRecord:
    tick = reader.read_u32()
    extra = reader.read_u8()
    player_id = reader.read_u8()
    raw_action = reader.read_u8()
    extra_data = None
    if extra > MOVE_EXTRA_THRESHOLD:
        extra_data = reader.read_bytes(MOVE_EXTRA_SIZE)
    return MoveRecord(
        tick=tick,
        extra=extra,
        player_id=player_id,
        raw_action=raw_action,
        action=decode_action(raw_action),
        extra_data=extra_data,
    )


def encode_move(writer: ByteCursorWriter, move: MoveRecord) -> None:
    writer.write_u32(move.tick)
    writer.write_u8(move.extra)
    writer.write_u8(move.player_id)
    if move.has_extra_data:
        writer.write_u8(move.raw_action)
        writer.write_bytes(move.extra_data or bytes(MOVE_EXTRA_SIZE))
        return
    writer.write_u8(encode_action(move.action))
