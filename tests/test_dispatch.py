from io import StringIO

import pytest
from rich.console import Console

from tempest import CommandKind, CommandLine, Dispatcher
from tempest.dispatch import EXIT_INVALID, EXIT_NO_HANDLER, EXIT_OK
from tempest.exceptions import HandlerNotFoundError, InvalidHandlerError


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def error_output():
    return StringIO()


@pytest.fixture
def dispatcher(output, error_output):
    return Dispatcher(
        console=Console(file=output, width=120),
        error_console=Console(file=error_output, width=120),
    )


def test_dispatch_invalid_prints_usage_to_stderr(dispatcher, output, error_output):
    code = dispatcher.dispatch(CommandLine(["tempest", "--bogus"]))
    assert code == EXIT_INVALID
    assert error_output.getvalue().startswith("Usage:")
    assert output.getvalue() == ""


@pytest.mark.parametrize("argv", [["tempest"], ["tempest", "--help"]])
def test_dispatch_usage(dispatcher, output, error_output, argv):
    assert dispatcher.dispatch(CommandLine(argv)) == EXIT_OK
    assert "Options:" in output.getvalue()
    assert error_output.getvalue() == ""


def test_dispatch_version(dispatcher, output):
    assert dispatcher.dispatch(CommandLine(["tempest", "--version"])) == EXIT_OK
    assert output.getvalue() == CommandLine.render_version() + "\n"


def test_dispatch_relay_handler(dispatcher):
    received = []
    dispatcher.register(CommandKind.RELAY, received.append)
    code = dispatcher.dispatch(CommandLine(["tempest", "--url=http://h", "-d"]))
    assert code == EXIT_OK
    assert len(received) == 1
    assert received[0].url == "http://h"
    assert received[0].daemon is True


def test_dispatch_returns_handler_exit_code(dispatcher):
    dispatcher.register(CommandKind.STOP, lambda payload: 3)
    assert dispatcher.dispatch(CommandLine(["tempest", "--stop"])) == 3


def test_dispatch_trace_handler_from_constructor(output, error_output):
    received = []
    dispatcher = Dispatcher(
        handlers={CommandKind.TRACE: received.append},
        console=Console(file=output),
        error_console=Console(file=error_output),
    )
    assert dispatcher.dispatch(CommandLine(["tempest", "--trace"])) == EXIT_OK
    assert received[0].raw is True


def test_dispatch_without_handler(dispatcher):
    assert dispatcher.dispatch(CommandLine(["tempest", "--stop"])) == EXIT_NO_HANDLER


def test_dispatch_logs_canonical_command(dispatcher, caplog):
    dispatcher.register(CommandKind.STOP, lambda payload: None)
    with caplog.at_level("INFO", logger="tempest"):
        dispatcher.dispatch(CommandLine(["tempest", "-s"]))
    assert "Command: tempest --stop" in caplog.text


def test_handler_errors_propagate(dispatcher):
    def broken(payload):
        raise RuntimeError("relay failed")

    dispatcher.register(CommandKind.RELAY, broken)
    with pytest.raises(RuntimeError, match="relay failed"):
        dispatcher.dispatch(CommandLine(["tempest", "--url=http://h"]))


@pytest.mark.parametrize(
    "kind", [CommandKind.HELP, CommandKind.VERSION, CommandKind.EMPTY, CommandKind.INVALID]
)
def test_register_rejects_builtin_commands(dispatcher, kind):
    with pytest.raises(InvalidHandlerError):
        dispatcher.register(kind, lambda payload: None)


def test_register_rejects_non_callable(dispatcher):
    with pytest.raises(InvalidHandlerError):
        dispatcher.register(CommandKind.RELAY, "start")


def test_get_handler_missing(dispatcher):
    with pytest.raises(HandlerNotFoundError):
        dispatcher.get_handler(CommandKind.RELAY)
