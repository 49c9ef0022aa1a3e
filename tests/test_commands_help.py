import io

from s3al.commands.base import CommandRegistry
from s3al.commands.files import PwdCommand
from s3al.commands.help import HelpCommand
from s3al.commands.misc import EchoCommand


def _registry():
    registry = CommandRegistry()
    registry.add(EchoCommand())
    registry.add(PwdCommand())
    help_command = HelpCommand(registry)
    registry.add(help_command)
    return registry, help_command


def _run(command, args):
    out, err = io.StringIO(), io.StringIO()
    rc = command.execute(args, "", out, err, None)
    return rc, out.getvalue(), err.getvalue()


def test_help_for_one_command():
    _, help_command = _registry()
    rc, out, _ = _run(help_command, ["echo"])
    assert rc == 0
    assert out == (
        "Command: echo\n"
        "Description: Print text to output\n"
        "Usage: echo <text>\n"
    )


def test_help_for_unknown_command():
    _, help_command = _registry()
    rc, out, _ = _run(help_command, ["nope"])
    assert rc == 0
    assert out == "Unknown command: nope\n"


def test_help_without_registry_fails():
    rc, out, _ = _run(HelpCommand(), [])
    assert rc == 1
    assert out == "Error: Registry not available\n"


def test_table_lists_commands_sorted_with_equal_widths():
    _, help_command = _registry()
    rc, out, _ = _run(help_command, [])
    assert rc == 0
    table, footer = out.split("\n\n")
    assert footer == "Type 'help <command>' for more information.\n"
    lines = table.splitlines()
    assert len({len(line) for line in lines}) == 1
    assert lines[0].startswith("+") and lines[0] == lines[2] == lines[-1]
    body = [line.split("|")[1].strip() for line in lines[3:-1]]
    assert body == ["echo", "help", "pwd"]
    assert "Print text to output" in lines[3]


def test_table_header_is_at_least_header_width():
    registry = CommandRegistry()
    help_command = HelpCommand(registry)
    rc, out, _ = _run(help_command, [])
    assert rc == 0
    assert out.splitlines()[1] == "| Name | Description |"