#!/usr/bin/env python3
"""
Hex-dump the move area of a REC file, one record per line, next to the
decoded fields. Handy when a file decodes to an odd move count.

Usage:
  python tools/dump_moves.py path/to/file.rec [max_moves]
"""
from pathlib import Path

from omfrec.binary.codecs.bytecursor import ByteCursorReader
from omfrec.binary.codecs.move_codec import decode_move, move_size_at
from omfrec.binary.codecs.profile_codec import RawProfileCodec
from omfrec.binary.layout import PROFILE_SLOTS, PROFILE_TRAILER_SIZE, SCORES_SIZE, HEADER_SCALARS_SIZE


def main(path: Path, max_moves: int = 50):
    codec = RawProfileCodec()
    with ByteCursorReader.open(path) as cur:
        for _ in range(PROFILE_SLOTS):
            codec.decode(cur)
            cur.skip(PROFILE_TRAILER_SIZE)
        print(f"scores+header @ {cur.position()}: {cur.peek_bytes(SCORES_SIZE + HEADER_SCALARS_SIZE).hex()}")
        cur.skip(SCORES_SIZE + HEADER_SCALARS_SIZE)

        i = 0
        while i < max_moves:
            size = move_size_at(cur)
            if not size:
                break
            off = cur.position()
            raw = cur.peek_bytes(size)
            m = decode_move(cur)
            print(f"  M[{i:04d}] @{off:6d} {raw.hex():28s} tick={m.tick:6d} extra={m.extra:3d} "
                  f"player={m.player_id} action={m.action.label()}")
            i += 1

        if cur.remaining_length() and not move_size_at(cur):
            print(f"trailer ({cur.remaining_length()} bytes): {cur.peek_bytes(cur.remaining_length()).hex()}")


if __name__ == "__main__":
    import sys
    if len(sys.argv) < 2:
        raise SystemExit(__doc__)
    main(Path(sys.argv[1]), int(sys.argv[2]) if len(sys.argv) > 2 else 50)
