import json

from omfrec.cli import main
from omfrec.binary.reader import load_rec
from omfrec.models.common import RecAction

from recdata import move_bytes, rec_prefix


def _write_rec(path):
    path.write_bytes(rec_prefix() + move_bytes(5, 0, 0, 16) + move_bytes(9, 3, 1, 0, bytes(7)))
    return path


def test_info_summary(tmp_path, capsys):
    p = _write_rec(tmp_path / "a.rec")
    assert main(["info", str(p), "--summary"]) == 0
    assert capsys.readouterr().out.strip() == "moves=2, aux_moves=1"


def test_info_sample(tmp_path, capsys):
    p = _write_rec(tmp_path / "a.rec")
    assert main(["info", str(p), "--sample", "1"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [m["tick"] for m in out] == [5]


def test_json_roundtrip_via_cli(tmp_path):
    p = _write_rec(tmp_path / "a.rec")
    j = tmp_path / "a.json"
    back = tmp_path / "b.rec"
    assert main(["to-json", str(p), str(j)]) == 0
    assert main(["from-json", str(j), str(back)]) == 0
    assert back.read_bytes() == p.read_bytes()


def test_insert_and_delete_move(tmp_path):
    p = _write_rec(tmp_path / "a.rec")
    out = tmp_path / "b.rec"
    assert main(["insert-move", str(p), "0", "--tick", "1", "--player", "1", "--action", "down+punch", "-o", str(out)]) == 0
    rec = load_rec(out)
    assert [m.tick for m in rec.moves] == [1, 5, 9]
    assert rec.moves[0].action == RecAction.DOWN | RecAction.PUNCH

    assert main(["delete-move", str(out), "2"]) == 0
    assert [m.tick for m in load_rec(out).moves] == [1, 5]


def test_errors_exit_nonzero(tmp_path, capsys):
    p = tmp_path / "short.rec"
    p.write_bytes(b"\x00" * 10)
    assert main(["info", str(p)]) == 1
    assert "too small" in capsys.readouterr().err
    assert main(["delete-move", str(_write_rec(tmp_path / "a.rec")), "9"]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 2


def test_in_place_edit_keeps_input_when_encoding_fails(tmp_path, monkeypatch):
    import omfrec.binary.writer as writer
    from omfrec.errors import IoError

    p = _write_rec(tmp_path / "a.rec")
    before = p.read_bytes()

    def fail(rec):
        raise IoError("encode failed")

    monkeypatch.setattr(writer, "dump_rec", fail)
    assert main(["delete-move", str(p), "0"]) == 1
    assert p.read_bytes() == before
