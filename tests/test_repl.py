import pytest

from repl import calculate, main


def test_calculate_closes_brackets_and_formats() -> None:
    assert calculate("2*(3+4") == "14"
    assert calculate("sqrt(2") == "1.414213562"


def test_main_one_shot(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1+1", "2^10"]) == 0
    assert capsys.readouterr().out.splitlines() == ["2", "1024"]


def test_main_one_shot_reports_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["5/0", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["3"]
    assert "Division by zero" in captured.err


def test_main_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    lines = iter(["2+3*4", "", "asin(2)"])

    def fake_input(prompt: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "14" in out.splitlines()
    assert "[Domain error] asin is not defined for 2.0" in out
