"""The ``help`` command: a table of all commands, or details of one."""

from __future__ import annotations

from typing import Optional

from .base import Command, CommandRegistry

_NAME_HEADER = "Name"
_DESC_HEADER = "Description"


class HelpCommand(Command):
    name = "help"
    description = "Display help information"
    usage = "help [command]"

    def __init__(self, registry: Optional[CommandRegistry] = None) -> None:
        self.registry = registry

    def execute(self, args, stdin, out, err, system) -> int:
        if self.registry is None:
            out.write("Error: Registry not available\n")
            return 1

        if args:
            command = self.registry.find(args[0])
            if command is None:
                out.write(f"Unknown command: {args[0]}\n")
            else:
                out.write(f"Command: {command.name}\n")
                out.write(f"Description: {command.description}\n")
                out.write(f"Usage: {command.usage}\n")
            return 0

        rows = []
        for command_name in sorted(self.registry.names()):
            command = self.registry.find(command_name)
            rows.append((command_name, command.description if command is not None else ""))

        name_width = max([len(_NAME_HEADER), *(len(n) for n, _ in rows)])
        desc_width = max([len(_DESC_HEADER), *(len(d or "") for _, d in rows)])
        rule = f"+{'-' * (name_width + 2)}+{'-' * (desc_width + 2)}+\n"

        lines = [rule, f"| {_NAME_HEADER:<{name_width}} | {_DESC_HEADER:<{desc_width}} |\n", rule]
        lines.extend(
            f"| {command_name:<{name_width}} | {desc or '':<{desc_width}} |\n"
            for command_name, desc in rows
        )
        lines.append(rule)
        lines.append("\nType 'help <command>' for more information.\n")
        out.write("".join(lines))
        return 0