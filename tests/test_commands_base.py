import io

import pytest

from s3al.commands.base import Command, CommandRegistry, interrupt_requested


class GreetCommand(Command):
    name = "greet"
    description = "Say hello"
    usage = "greet <name>"

    def execute(self, args, stdin, out, err, system):
        if not self.require_args(args, 1, err, 1):
            return 1
        out.write(f"hello {args[0]}\n")
        return 0


class ScriptedSystem:
    def __init__(self, *lines):
        self.lines = list(lines)

    def read_line(self):
        return self.lines.pop(0)


def test_require_args_accepts_right_count():
    err = io.StringIO()
    assert Command.require_args(GreetCommand(), ["bob"], 1, err, 1) is True
    assert err.getvalue() == ""


@pytest.mark.parametrize("args", [[], ["a", "b"]])
def test_require_args_prints_usage(args):
    err = io.StringIO()
    assert Command.require_args(GreetCommand(), args, 1, err, 1) is False
    assert err.getvalue() == "Usage: greet <name>\n"


def test_require_args_without_limit_accepts_many():
    err = io.StringIO()
    assert Command.require_args(GreetCommand(), ["a"] * 10, 1, err) is True
    assert err.getvalue() == ""


def test_require_args_zero_minimum_accepts_empty():
    err = io.StringIO()
    assert Command.require_args(GreetCommand(), [], 0, err, 1) is True
    assert err.getvalue() == ""


@pytest.mark.parametrize("answer", ["yes", "y"])
def test_confirm_action_accepts(answer):
    out = io.StringIO()
    result = Command.confirm_action(GreetCommand(), "Really?", ScriptedSystem(answer), out)
    assert result is True
    assert out.getvalue() == "Really? (yes/no): "


@pytest.mark.parametrize("answer", ["no", "", "YES"])
def test_confirm_action_rejects(answer):
    out = io.StringIO()
    result = Command.confirm_action(GreetCommand(), "Really?", ScriptedSystem(answer), out)
    assert result is False
    assert out.getvalue().endswith("Action aborted.\n")


def test_registry_add_and_find():
    registry = CommandRegistry()
    command = GreetCommand()
    registry.add(command)
    assert registry.find("greet") is command
    assert registry.find("missing") is None
    assert registry.names() == ["greet"]


def test_registry_alias_points_to_command():
    registry = CommandRegistry()
    command = GreetCommand()
    registry.add(command)
    registry.register("hi", command)
    assert registry.find("hi") is command
    assert sorted(registry.names()) == ["greet", "hi"]
    assert len(registry) == 2
    assert "hi" in registry


def test_registry_add_replaces_same_name():
    registry = CommandRegistry()
    first, second = GreetCommand(), GreetCommand()
    registry.add(first)
    registry.add(second)
    assert registry.find("greet") is second
    assert len(registry) == 1


def test_interrupt_flag_toggles():
    interrupt_requested.set()
    try:
        assert interrupt_requested.is_set()
    finally:
        interrupt_requested.clear()
    assert not interrupt_requested.is_set()