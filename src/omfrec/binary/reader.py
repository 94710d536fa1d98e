from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from .codecs.bytecursor import ByteCursorReader, BytesLike
from .codecs.header_codec import decode_header, decode_scores
from .codecs.move_codec import decode_move, move_size_at
from .codecs.profile_codec import ProfileCodec, RawProfileCodec
from .layout import (
    HACK_TIME_SIZE,
    MIN_REC_SIZE,
    MOVE_BASE_SIZE,
    MOVE_EXTRA_THRESHOLD,
    MOVE_SIZE_HINT,
    PROFILE_SLOTS,
    PROFILE_TRAILER_SIZE,
)

from omfrec.errors import FileParseError
from omfrec.models.file import RecFile
from omfrec.models.move import MoveRecord
from omfrec.models.move_list import MoveList

logger = logging.getLogger(__name__)


# -----------------------------
# Helpers
# -----------------------------

def _check_size(reader: ByteCursorReader) -> None:
    if len(reader) < MIN_REC_SIZE:
        raise FileParseError(f"REC file too small: {len(reader)} bytes, need at least {MIN_REC_SIZE}")


def _read_profile_slots(reader: ByteCursorReader, codec: ProfileCodec, rec: RecFile) -> None:
    for slot in range(PROFILE_SLOTS):
        start = reader.position()
        rec.hack_time[slot] = reader.read_bytes(HACK_TIME_SIZE)
        # The profile is serialized inside the very bytes just copied.
        reader.seek(start)
        rec.profiles[slot] = codec.decode(reader)
        consumed = reader.position() - start
        if consumed != HACK_TIME_SIZE:
            logger.warning(f"profile codec consumed {consumed} bytes in slot {slot}, expected {HACK_TIME_SIZE}")
        reader.skip(PROFILE_TRAILER_SIZE)


def _skip_to_moves(reader: ByteCursorReader, codec: ProfileCodec) -> None:
    """Position the cursor at the first move record without building models."""
    for _ in range(PROFILE_SLOTS):
        codec.decode(reader)
        reader.skip(PROFILE_TRAILER_SIZE)
    decode_scores(reader)
    decode_header(reader)


def _iter_complete_moves(reader: ByteCursorReader) -> Iterator[MoveRecord]:
    """Decode moves until no complete record is left at the cursor."""
    while move_size_at(reader):
        yield decode_move(reader)


# -----------------------------
# Full parse
# -----------------------------

def load_rec(source: BytesLike, *, profile_codec: Optional[ProfileCodec] = None) -> RecFile:
    """
    Decode a REC file from a path or a bytes-like object.
    Every decoded move is counted; leftover bytes that do not form a complete
    move are kept in `RecFile.trailer`.
    """
    codec = profile_codec or RawProfileCodec()

    with ByteCursorReader.open(source) as reader:
        _check_size(reader)

        rec = RecFile()
        _read_profile_slots(reader, codec, rec)
        rec.scores = decode_scores(reader)
        rec.header = decode_header(reader)

        hint = reader.remaining_length() // MOVE_SIZE_HINT
        moves = MoveList()
        moves.reserve(hint)
        for move in _iter_complete_moves(reader):
            moves.append(move)
        moves.shrink_to_fit()
        rec.moves = moves

        if not reader.at_end():
            rec.trailer = reader.read_bytes(reader.remaining_length())
            logger.warning(
                f"{len(rec.trailer)} trailing bytes at offset {reader.position() - len(rec.trailer)} "
                f"do not form a move record; kept verbatim"
            )

        logger.debug(f"loaded REC: {len(reader)} bytes, {len(moves)} moves (capacity hint {hint})")
    return rec


# -----------------------------
# Fast, low-memory summary
# -----------------------------

def summarize_rec(
    source: BytesLike,
    *,
    profile_codec: Optional[ProfileCodec] = None,
) -> Tuple[int, int]:
    """
    Returns (move_count, aux_move_count) where aux moves are the records
    carrying an extra payload. Move bodies are skipped, not decoded.
    """
    codec = profile_codec or RawProfileCodec()
    moves = 0
    aux = 0
    with ByteCursorReader.open(source) as reader:
        _check_size(reader)
        _skip_to_moves(reader, codec)
        while True:
            size = move_size_at(reader)
            if not size:
                break
            moves += 1
            if size > MOVE_BASE_SIZE:
                aux += 1
            reader.skip(size)
    return moves, aux


# -----------------------------
# Streaming iterator
# -----------------------------

def iter_moves(
    source: BytesLike,
    *,
    max_moves: Optional[int] = None,
    include_aux: bool = True,
    profile_codec: Optional[ProfileCodec] = None,
) -> Iterator[MoveRecord]:
    """
    Stream move records without building a RecFile.
      - include_aux=False drops records with extra > 2.
      - max_moves caps the number of records yielded.
    """
    codec = profile_codec or RawProfileCodec()
    emitted = 0
    with ByteCursorReader.open(source) as reader:
        _check_size(reader)
        _skip_to_moves(reader, codec)
        for move in _iter_complete_moves(reader):
            if max_moves is not None and emitted >= max_moves:
                return
            if not include_aux and move.extra > MOVE_EXTRA_THRESHOLD:
                continue
            emitted += 1
            yield move
