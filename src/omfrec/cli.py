from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from .errors import RecError
from .models.common import RecAction
from .models.file import RecFile
from .models.move import MoveRecord
from .viz import plot_inputs

logger = logging.getLogger(__name__)


def cmd_info(args):
    # Fast path: counts only
    if args.summary:
        from .binary.reader import summarize_rec
        moves, aux = summarize_rec(args.input)
        print(f"moves={moves}, aux_moves={aux}")
        return 0

    # Sample mode: stream the first N moves
    if args.sample:
        from .binary.reader import iter_moves
        out = [m.model_dump(mode="json") for m in iter_moves(args.input, max_moves=args.sample)]
        print(json.dumps(out, indent=2))
        return 0

    f = RecFile.from_binary(args.input)
    print(f.to_json())
    return 0


def cmd_to_json(args):
    f = RecFile.from_binary(args.input)
    with open(args.output, "w", encoding="utf-8") as out:
        out.write(f.to_json())
    return 0


def cmd_from_json(args):
    from .binary.writer import save_rec
    f = RecFile.from_json(Path(args.input))
    save_rec(f, args.output)
    return 0


def _write_edited(f: RecFile, path: str) -> None:
    # Encode first so a failure never truncates the input file.
    from .binary.writer import dump_rec
    data = dump_rec(f)
    Path(path).write_bytes(data)


def cmd_delete_move(args):
    f = RecFile.from_binary(args.input)
    removed = f.moves.delete_action(args.index)
    logger.info(f"deleted move {args.index}: tick={removed.tick} player={removed.player_id}")
    _write_edited(f, args.output or args.input)
    return 0


def cmd_insert_move(args):
    f = RecFile.from_binary(args.input)
    move = MoveRecord(tick=args.tick, player_id=args.player, action=RecAction.parse(args.action))
    at = f.moves.insert_action(args.index, move)
    logger.info(f"inserted move at {at}: tick={move.tick} action={move.action.label()}")
    _write_edited(f, args.output or args.input)
    return 0


def cmd_plot(args):
    f = RecFile.from_binary(args.input)
    plot_inputs(f)
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="omfrec", description="REC replay file utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="print parsed file as JSON or a fast summary")
    sp.add_argument("input", help="Path to .rec file")
    sp.add_argument("--summary", action="store_true", help="Print move counts without a full parse")
    sp.add_argument("--sample", type=int, default=None, help="Decode and print only the first N moves")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("to-json", help="convert binary to JSON")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_to_json)

    sp = sub.add_parser("from-json", help="convert JSON to binary")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_from_json)

    sp = sub.add_parser("delete-move", help="remove one move record")
    sp.add_argument("input")
    sp.add_argument("index", type=int)
    sp.add_argument("-o", "--output", default=None, help="write here instead of in place")
    sp.set_defaults(func=cmd_delete_move)

    sp = sub.add_parser("insert-move", help="insert one move record (past the end appends)")
    sp.add_argument("input")
    sp.add_argument("index", type=int)
    sp.add_argument("--tick", type=int, required=True)
    sp.add_argument("--player", type=int, default=0)
    sp.add_argument("--action", default="none", help="e.g. up+right+punch")
    sp.add_argument("-o", "--output", default=None, help="write here instead of in place")
    sp.set_defaults(func=cmd_insert_move)

    sp = sub.add_parser("plot", help="minimal input timeline plot")
    sp.add_argument("input")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except (RecError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
