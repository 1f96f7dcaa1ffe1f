# tests/core/test_shell_loop.py
from unittest.mock import MagicMock

import pytest

from eafitos_shell.core.command_registry import CommandRegistry
from eafitos_shell.core.context.shell_context import ShellContext
from eafitos_shell.core.dispatcher import Dispatcher
from eafitos_shell.core.line_reader import PROMPT
from eafitos_shell.core.managers.history_manager import HistoryManager
from eafitos_shell.core.shell_loop import ShellLoop
from eafitos_shell.model import CommandEntry


class FakeReader:
    """Feeds scripted lines to the loop, then signals end of input."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def read_line(self, prompt=PROMPT):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError()
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


@pytest.fixture
def shell():
    """A loop wired to a two-command registry: 'ayuda' and 'salir'."""
    calls = []

    def ayuda(args, ctx):
        calls.append(list(args))
        return 0

    def salir(args, ctx):
        calls.append(list(args))
        raise SystemExit(0)

    history = HistoryManager(max_entries=5)
    ctx = ShellContext(history)
    ctx.registry = CommandRegistry([
        CommandEntry(name="ayuda", handler=ayuda),
        CommandEntry(name="salir", handler=salir),
    ])

    def make(lines):
        reader = FakeReader(lines)
        return ShellLoop(reader, history, Dispatcher(ctx.registry, ctx)), reader

    return make, history, calls


def test_scenario_help_unknown_help(shell, capsys):
    make, history, calls = shell
    loop, _ = make(["ayuda", "foo", "ayuda"])

    with pytest.raises(SystemExit):
        loop.run()

    assert history.entries == ["ayuda", "foo", "ayuda"]
    assert calls == [["ayuda"], ["ayuda"], ["salir"]]
    assert capsys.readouterr().out.count("Unknown command: foo") == 1


def test_prompt_is_shown_before_every_read(shell):
    make, _, _ = shell
    loop, reader = make(["ayuda", ""])

    with pytest.raises(SystemExit):
        loop.run()

    assert reader.prompts == [PROMPT, PROMPT, PROMPT]


def test_empty_line_is_a_silent_no_op(shell, capsys):
    make, history, calls = shell
    loop, _ = make([""])

    loop.step()

    assert history.entries == []
    assert calls == []
    assert capsys.readouterr().out == ""


def test_blank_line_is_recorded_but_not_dispatched(shell):
    make, history, calls = shell
    loop, _ = make(["   "])

    loop.step()

    assert history.entries == ["   "]
    assert calls == []


def test_history_is_recorded_before_dispatch(shell):
    make, history, _ = shell
    seen = []
    loop, _ = make(["ayuda extra"])
    loop.dispatcher = MagicMock()
    loop.dispatcher.dispatch.side_effect = lambda args: seen.append(history.entries)

    loop.step()

    assert seen == [["ayuda extra"]]
    loop.dispatcher.dispatch.assert_called_once_with(["ayuda", "extra"])


def test_trailing_newline_is_stripped(shell):
    make, history, calls = shell
    loop, _ = make(["ayuda\n"])

    loop.step()

    assert history.entries == ["ayuda"]
    assert calls == [["ayuda"]]


def test_keyboard_interrupt_drops_the_line(shell):
    make, history, calls = shell
    loop, _ = make([KeyboardInterrupt(), "ayuda"])

    loop.step()
    assert history.entries == []
    assert calls == []

    loop.step()
    assert calls == [["ayuda"]]


def test_end_of_input_runs_exit_command(shell):
    make, history, calls = shell
    loop, _ = make([])

    with pytest.raises(SystemExit):
        loop.step()

    assert calls == [["salir"]]
    assert history.entries == []


def test_capacity_two_scenario():
    history = HistoryManager(max_entries=2)
    ctx = ShellContext(history)
    ctx.registry = CommandRegistry([])
    loop = ShellLoop(FakeReader(["a", "b", "c"]), history, Dispatcher(ctx.registry, ctx))

    for _ in range(3):
        loop.step()

    assert history.entries == ["b", "c"]


def test_line_reader_uses_prompt_session():
    from eafitos_shell.core.line_reader import LineReader

    session = MagicMock()
    session.prompt.return_value = "tiempo"

    assert LineReader(session).read_line() == "tiempo"
    session.prompt.assert_called_once_with(PROMPT)


def test_end_of_input_terminates_without_exit_command(capsys):
    history = HistoryManager(max_entries=2)
    ctx = ShellContext(history)
    ctx.registry = CommandRegistry([])
    loop = ShellLoop(FakeReader([]), history, Dispatcher(ctx.registry, ctx))

    with pytest.raises(SystemExit) as exc_info:
        loop.run()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.count("Unknown command: salir") == 1
