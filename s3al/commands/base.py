"""The command interface shared by every shell command, and the registry of commands."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar, Optional, TextIO

# Set when the user presses Ctrl+C; long-running commands poll it and stop early.
interrupt_requested = threading.Event()


class Command(ABC):
    """A shell command: metadata plus an ``execute`` that returns an exit code."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    usage: ClassVar[str] = ""
    cpu_cost: ClassVar[int] = 1

    @abstractmethod
    def execute(
        self,
        args: Sequence[str],
        stdin: str,
        out: TextIO,
        err: TextIO,
        system: Any,
    ) -> int:
        """Run the command; output goes to ``out`` and ``err``, returns the exit code."""

    def require_args(
        self,
        args: Sequence[str],
        min_count: int,
        err: TextIO,
        max_count: Optional[int] = None,
    ) -> bool:
        """Check the argument count, printing the usage line to ``err`` if it is wrong."""
        too_few = min_count > 0 and len(args) < min_count
        too_many = max_count is not None and max_count >= 0 and len(args) > max_count
        if too_few or too_many:
            err.write(f"Usage: {self.usage}\n")
            return False
        return True

    def confirm_action(self, prompt: str, system: Any, out: TextIO) -> bool:
        """Ask a yes/no question; only "yes" or "y" confirms."""
        out.write(f"{prompt} (yes/no): ")
        out.flush()
        response = system.read_line()
        if response not in ("yes", "y"):
            out.write("Action aborted.\n")
            return False
        return True


class CommandRegistry:
    """Commands looked up by name."""

    def __init__(self) -> None:
        self.commands: dict[str, Command] = {}

    def add(self, command: Command) -> None:
        """Register ``command`` under its own name, replacing any earlier one."""
        self.commands[command.name] = command

    def register(self, name: str, command: Command) -> None:
        """Register ``command`` under ``name``, e.g. as an alias."""
        self.commands[name] = command

    def find(self, name: str) -> Optional[Command]:
        return self.commands.get(name)

    def names(self) -> list[str]:
        return list(self.commands)

    def __contains__(self, name: object) -> bool:
        return name in self.commands

    def __len__(self) -> int:
        return len(self.commands)