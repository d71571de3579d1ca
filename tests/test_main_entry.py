"""Tests for the console script entry points."""

import asyncio
import os
import signal
import sys
from unittest.mock import AsyncMock, patch

import pytest

from cc_switch_tools import main as main_module


def test_main_exits_with_command_code() -> None:
    with patch.object(main_module, "CLIRunner") as runner_cls:
        runner_cls.return_value.run = AsyncMock(return_value=0)
        with pytest.raises(SystemExit) as exc_info:
            main_module.main(["install"])

    assert exc_info.value.code == 0
    runner_cls.return_value.run.assert_awaited_once_with(["install"])


def test_main_propagates_failure_code() -> None:
    with patch.object(main_module, "CLIRunner") as runner_cls:
        runner_cls.return_value.run = AsyncMock(return_value=1)
        with pytest.raises(SystemExit) as exc_info:
            main_module.main(["update-readme"])

    assert exc_info.value.code == 1


def test_keyboard_interrupt(caplog) -> None:
    def interrupted(coro):
        coro.close()
        raise KeyboardInterrupt

    with (
        patch.object(main_module.uvloop, "run", side_effect=interrupted),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main(["install"])

    assert exc_info.value.code == 1
    assert "cancelled by user" in caplog.text


@pytest.mark.parametrize(
    ("entry_point", "command"),
    [
        ("install_main", "install"),
        ("update_readme_main", "update-readme"),
    ],
)
def test_alias_entry_points(monkeypatch, entry_point, command) -> None:
    """Test the single-purpose scripts prepend their subcommand."""
    monkeypatch.setattr(sys, "argv", ["alias", "--verbose"])

    with patch.object(main_module, "main") as mock_main:
        getattr(main_module, entry_point)()

    mock_main.assert_called_once_with([command, "--verbose"])


@pytest.mark.asyncio
async def test_async_main_registers_sigterm_handler() -> None:
    """Test SIGTERM is routed to cancelling the running command."""
    loop = asyncio.get_running_loop()

    with (
        patch.object(main_module, "CLIRunner") as runner_cls,
        patch.object(loop, "add_signal_handler") as mock_add,
    ):
        runner_cls.return_value.run = AsyncMock(return_value=0)
        assert await main_module.async_main(["install"]) == 0

    mock_add.assert_called_once()
    signum, callback = mock_add.call_args.args
    assert signum == signal.SIGTERM
    assert callback == asyncio.current_task().cancel


@pytest.mark.asyncio
async def test_sigterm_cancels_running_command() -> None:
    loop = asyncio.get_running_loop()
    started = asyncio.Event()

    async def hang(argv):
        started.set()
        await asyncio.Event().wait()

    with patch.object(main_module, "CLIRunner") as runner_cls:
        runner_cls.return_value.run = hang
        task = asyncio.create_task(main_module.async_main(["install"]))
        await asyncio.wait_for(started.wait(), timeout=5)
        try:
            os.kill(os.getpid(), signal.SIGTERM)
            with pytest.raises(asyncio.CancelledError):
                await asyncio.wait_for(task, timeout=5)
        finally:
            loop.remove_signal_handler(signal.SIGTERM)
