import pytest

from omfrec.binary.codecs.bytecursor import ByteCursorReader
from omfrec.binary.codecs.bytewriter import ByteCursorWriter
from omfrec.binary.codecs.move_codec import (
    DIRECTION_BY_NIBBLE,
    decode_action,
    decode_move,
    encode_action,
    encode_move,
    move_size_at,
)
from omfrec.models.common import RecAction
from omfrec.models.move import MoveRecord

from recdata import move_bytes

U, D, L, R = RecAction.UP, RecAction.DOWN, RecAction.LEFT, RecAction.RIGHT


@pytest.mark.parametrize("nibble,direction", sorted(DIRECTION_BY_NIBBLE.items()))
def test_direction_table_bijection(nibble, direction):
    assert decode_action(nibble) == direction
    assert encode_action(direction) == nibble


def test_table_values():
    assert decode_action(16) == U
    assert decode_action(32) == U | R
    assert decode_action(64) == D | R
    assert decode_action(96) == D | L
    assert decode_action(128) == U | L


@pytest.mark.parametrize("action", [RecAction.NONE, U | D, L | R, U | D | L, RecAction.PUNCH])
def test_unlisted_direction_encodes_to_zero(action):
    assert encode_action(action) & 0xF0 == 0


def test_buttons():
    assert decode_action(0x51) == D | RecAction.PUNCH
    assert decode_action(0x03) == RecAction.PUNCH | RecAction.KICK
    assert decode_action(0xF0) == RecAction.NONE
    assert encode_action(L | RecAction.KICK) == 112 | 2


def test_decode_short_move():
    cur = ByteCursorReader(move_bytes(100, 0, 1, 16 | 2))
    m = decode_move(cur)
    assert (m.tick, m.extra, m.player_id, m.raw_action) == (100, 0, 1, 18)
    assert m.action == U | RecAction.KICK
    assert m.extra_data is None
    assert cur.at_end()


def test_decode_and_encode_aux_move():
    raw = move_bytes(7, 3, 0, 0xF7, b"ABCDEFG")
    m = decode_move(ByteCursorReader(raw))
    assert m.extra_data == b"ABCDEFG"
    with ByteCursorWriter.open(None) as w:
        encode_move(w, m)
        assert w.getvalue() == raw


def test_aux_move_keeps_raw_action_verbatim():
    m = MoveRecord(tick=1, extra=5, raw_action=0x99, action=RecAction.UP)
    with ByteCursorWriter.open(None) as w:
        encode_move(w, m)
        out = w.getvalue()
    assert out[6] == 0x99
    assert out[7:] == bytes(7)


def test_move_size_at():
    assert move_size_at(ByteCursorReader(move_bytes(1, 0, 0, 0))) == 7
    assert move_size_at(ByteCursorReader(move_bytes(1, 3, 0, 0, bytes(7)))) == 14
    assert move_size_at(ByteCursorReader(move_bytes(1, 3, 0, 0, bytes(6)))) == 0
    cur = ByteCursorReader(b"\x00" * 6)
    assert move_size_at(cur) == 0
    assert cur.position() == 0
