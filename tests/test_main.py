import sys
from unittest.mock import ANY, patch

import pytest

from iowalk import __version__, main


def test_main_normal_run():
    """Test main() hands async_main to uvloop.run."""

    def fake_run(coro):
        coro.close()

    with patch("iowalk.main.uvloop.run", side_effect=fake_run) as mock_run:
        main.main()
        mock_run.assert_called_once_with(ANY)


def test_main_keyboard_interrupt(monkeypatch):
    """Test main() exits with status 1 when cancelled."""
    called = {}

    def fake_run(coro):
        coro.close()
        raise KeyboardInterrupt

    def fake_exit(code):
        called["exit"] = code
        raise SystemExit(code)

    monkeypatch.setattr("iowalk.main.uvloop.run", fake_run)
    monkeypatch.setattr(sys, "exit", fake_exit)

    with pytest.raises(SystemExit):
        main.main()
    assert called["exit"] == 1


def test_main_unexpected_error(monkeypatch):
    """Test main() logs unexpected errors and exits with status 1."""
    called = {}

    def fake_run(coro):
        coro.close()
        raise RuntimeError("boom")

    def fake_exit(code):
        called["exit"] = code
        raise SystemExit(code)

    monkeypatch.setattr("iowalk.main.uvloop.run", fake_run)
    monkeypatch.setattr(sys, "exit", fake_exit)

    with pytest.raises(SystemExit):
        main.main()
    assert called["exit"] == 1


@pytest.mark.asyncio
async def test_async_main_runs_cli(capsys):
    """Test async_main drives the CLI runner."""
    await main.async_main(["--version"])

    assert capsys.readouterr().out.strip() == __version__
