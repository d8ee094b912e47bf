from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from vs import cli, errors


EXAMPLE = "London to Dublin = 464\nLondon to Belfast = 518\nDublin to Belfast = 141\n"


def test_default_input(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "input.txt").write_text(EXAMPLE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    cli.main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["MIN: 605", "MAX: 982"]
    assert "Cities:" in lines


def test_quiet(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    problem = tmp_path / "cities.txt"
    problem.write_text(EXAMPLE, encoding="utf-8")

    cli.main([str(problem), "--quiet", "--no-prune"])
    assert capsys.readouterr().out.splitlines() == ["MIN: 605", "MAX: 982"]


def test_missing_input(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(errors.ProblemNotFound):
        cli.main([])


@patch("matplotlib.pyplot.show")
def test_plot(mock: MagicMock, tmp_path: Path) -> None:
    problem = tmp_path / "cities.txt"
    problem.write_text(EXAMPLE, encoding="utf-8")

    cli.main([str(problem), "-q", "-p"])
    mock.assert_called_once()
