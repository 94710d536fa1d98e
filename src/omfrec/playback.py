from __future__ import annotations
from typing import Iterator, NamedTuple

from .models.common import RecAction
from .models.file import RecFile


class InputEvent(NamedTuple):
    tick: int
    player_id: int
    action: RecAction


def iter_inputs(rec: RecFile, *, include_aux: bool = False) -> Iterator[InputEvent]:
    """
    Feed for a playback/simulation consumer: (tick, player_id, action) in
    ascending tick order. Moves sharing a tick keep their file order.
    Aux records (extra > 2) carry no meaningful action and are skipped unless
    include_aux is set.
    """
    moves = [m for m in rec.moves if include_aux or not m.has_extra_data]
    for m in sorted(moves, key=lambda m: m.tick):
        yield InputEvent(m.tick, m.player_id, m.action)
