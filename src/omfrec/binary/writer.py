from __future__ import annotations

import logging
from typing import Optional

from .codecs.bytewriter import ByteCursorWriter, Destination
from .codecs.header_codec import encode_header, encode_scores
from .codecs.move_codec import encode_move
from .codecs.profile_codec import ProfileCodec, RawProfileCodec
from .layout import HACK_TIME_SIZE, PROFILE_SLOTS, PROFILE_TRAILER_SIZE

from omfrec.errors import InvalidInput
from omfrec.models.file import RecFile

logger = logging.getLogger(__name__)


def _check_slots(rec: RecFile) -> None:
    # Lists edited in place bypass the model validators.
    if len(rec.hack_time) != PROFILE_SLOTS or len(rec.scores) != PROFILE_SLOTS:
        raise InvalidInput(f"need {PROFILE_SLOTS} hack_time blocks and scores, got {len(rec.hack_time)} and {len(rec.scores)}")
    for slot, block in enumerate(rec.hack_time):
        if len(block) != HACK_TIME_SIZE:
            raise InvalidInput(f"hack_time[{slot}] is {len(block)} bytes, expected {HACK_TIME_SIZE}")


def _encode_rec(writer: ByteCursorWriter, rec: RecFile) -> None:
    # Profiles go out as their hack_time overlay; the trailer is never rebuilt.
    for slot in range(PROFILE_SLOTS):
        writer.write_bytes(rec.hack_time[slot])
        writer.write_fill(0, PROFILE_TRAILER_SIZE)

    encode_scores(writer, rec.scores)
    encode_header(writer, rec.header)

    for move in rec.moves:
        encode_move(writer, move)
    if rec.trailer:
        writer.write_bytes(rec.trailer)


def save_rec(rec: RecFile, destination: Destination) -> int:
    """Write `rec` to a path or binary stream; returns the byte count.

    `hack_time` is written as-is. After editing a profile call
    `refresh_hack_time` first or the change is lost.
    """
    if rec is None or destination is None:
        raise InvalidInput("save_rec needs a RecFile and a destination")
    _check_slots(rec)
    with ByteCursorWriter.open(destination) as writer:
        _encode_rec(writer, rec)
        size = writer.position()
    logger.debug(f"saved REC: {size} bytes, {len(rec.moves)} moves")
    return size


def dump_rec(rec: RecFile) -> bytes:
    _check_slots(rec)
    with ByteCursorWriter.open(None) as writer:
        _encode_rec(writer, rec)
        return writer.getvalue()


def refresh_hack_time(rec: RecFile, profile_codec: Optional[ProfileCodec] = None) -> None:
    """Re-serialize each profile into its hack_time block, zero padded."""
    codec = profile_codec or RawProfileCodec()
    for slot, profile in enumerate(rec.profiles):
        with ByteCursorWriter.open(None) as writer:
            codec.encode(writer, profile)
            raw = writer.getvalue()
        if len(raw) > HACK_TIME_SIZE:
            raise InvalidInput(f"profile {slot} encodes to {len(raw)} bytes, more than {HACK_TIME_SIZE}")
        rec.hack_time[slot] = raw + bytes(HACK_TIME_SIZE - len(raw))
