import io

import pytest

from stockdash.main import main


def test_main_prints_banner_and_waits(monkeypatch, capsys):
    stdin = io.StringIO("\nleftover\n")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "=== MINIMAL TEST PROGRAM ===",
        "If you see this message, your environment is working.",
        "Press Enter to exit...",
    ]
    assert stdin.read() == "leftover\n"


def test_main_handles_closed_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Press Enter to exit..." in capsys.readouterr().out


def test_main_rejects_unknown_arguments(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2