import io

import pytest

from cfsolvers import advanced, basic, constructive, intermediate
from cfsolvers.cli import main, problem_names, solve_text


def test_problem_names_cover_every_module():
    names = problem_names()
    expected = (
        set(basic.PROBLEMS)
        | set(constructive.PROBLEMS)
        | set(intermediate.PROBLEMS)
        | set(advanced.PROBLEMS)
    )
    assert set(names) == expected
    assert names == sorted(names)
    assert len(names) == len(expected)


@pytest.mark.parametrize(
    ("module", "problem", "text"),
    [
        (basic, "coins", "2\n5 3\n4 2\n"),
        (constructive, "we-need-the-zero", "1\n3\n1 2 5\n"),
        (intermediate, "make-it-alternating", "1\n0011\n"),
        (advanced, "chat-ban", "1\n4 6\n"),
    ],
)
def test_solve_text_dispatches_to_module(module, problem, text):
    assert solve_text(problem, text) == module.run(problem, text)


def test_solve_text_rejects_unknown_problem():
    with pytest.raises(ValueError):
        solve_text("no-such-problem", "1\n")


def test_main_reads_standard_input(monkeypatch, capsys):
    text = "1\n3 2\n1 2 4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["maximal-and"]) == 0
    assert capsys.readouterr().out == advanced.run("maximal-and", text)


def test_main_reads_input_file(tmp_path, capsys):
    text = "1\n4\n1 2 3 4\n"
    path = tmp_path / "input.txt"
    path.write_text(text)
    assert main(["romantic-glasses", str(path)]) == 0
    assert capsys.readouterr().out == advanced.run("romantic-glasses", text)


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nabc\n"))
    assert main(["chat-ban"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err


def test_main_rejects_unknown_problem(capsys):
    with pytest.raises(SystemExit) as info:
        main(["no-such-problem"])
    assert info.value.code == 2