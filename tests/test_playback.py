from omfrec.models.common import RecAction
from omfrec.models.file import RecFile
from omfrec.models.move import MoveRecord
from omfrec.playback import InputEvent, iter_inputs


def test_inputs_in_tick_order_and_stable():
    rec = RecFile(moves=[
        MoveRecord(tick=30, player_id=0, action=RecAction.UP),
        MoveRecord(tick=10, player_id=1, action=RecAction.LEFT),
        MoveRecord(tick=20, player_id=0, extra=3),
        MoveRecord(tick=10, player_id=0, action=RecAction.KICK),
    ])
    assert list(iter_inputs(rec)) == [
        InputEvent(10, 1, RecAction.LEFT),
        InputEvent(10, 0, RecAction.KICK),
        InputEvent(30, 0, RecAction.UP),
    ]
    assert [e.tick for e in iter_inputs(rec, include_aux=True)] == [10, 10, 20, 30]


def test_action_label():
    assert (RecAction.DOWN | RecAction.RIGHT | RecAction.PUNCH).label() == "punch+down+right"
    assert RecAction.NONE.label() == "none"
    assert RecAction.parse("Down+Right, punch") == RecAction.DOWN | RecAction.RIGHT | RecAction.PUNCH
