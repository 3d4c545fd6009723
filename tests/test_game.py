import io
import re
import sys

import pytest

from torres.game import main, manual, solve
from torres.hanoi import INVALID_COUNT, minimum_moves, moves

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
PEG = {"A": 1, "B": 2, "C": 3}


def _plain(text):
    return _ANSI.sub("", text)


def _solution(count):
    return "".join(f"{PEG[m.source]} {PEG[m.target]}\n" for m in moves(count))


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, _plain(capsys.readouterr().out)


@pytest.mark.parametrize("count", [3, 4])
def test_solve_lists_every_move(count):
    stream = io.StringIO()
    solve(count, stream)
    text = _plain(stream.getvalue())
    listed = [line for line in text.splitlines() if line.startswith("Mover disco")]
    assert listed == [str(m) for m in moves(count)]
    assert f"Se necesitaron {minimum_moves(count)} movimientos para resolverlo" in text


def test_manual_solution_wins():
    out = io.StringIO()
    assert manual(3, io.StringIO(_solution(3)), out) is True
    assert "¡FELICIDADES! HAS GANADO" in _plain(out.getvalue())


def test_manual_reports_illegal_move_and_stops_at_end_of_input():
    out = io.StringIO()
    assert manual(3, io.StringIO("1 2\n1 2\n"), out) is False
    assert "No puedes colocar un disco más grande" in _plain(out.getvalue())


def test_main_solves_and_quits(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "3\n2\n")
    assert code == 0
    assert "Mover disco 3 de A a C" in text


def test_main_rejects_bad_counts(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "9\nabc\n3\n2\n")
    assert code == 0
    assert text.count(INVALID_COUNT) == 2


def test_main_unknown_option_restarts(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "3\n5\n4\n2\n")
    assert code == 0
    assert "Pon un numero del 1 al 3 estimado" in text
    assert "Mover disco 4 de" in text


def test_main_manual_then_quit(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "3\n3\n" + _solution(3) + "2\n")
    assert code == 0
    assert "HAS GANADO" in text
    assert "¿Quieres volver a intentarlo?" in text


def test_main_manual_then_play_again(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "3\n3\n" + _solution(3) + "1\n4\n2\n")
    assert code == 0
    assert "Mover disco 4 de" in text


def test_main_wrong_answer_after_victory(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "3\n3\n" + _solution(3) + "9\n")
    assert code == 0
    assert "NO SABES LEER O QUE!?" in text


def test_main_ends_on_empty_input(monkeypatch, capsys):
    code, text = _run(monkeypatch, capsys, "")
    assert code == 0
    assert "Ingresa la cantidad de discos (3-7): " in text