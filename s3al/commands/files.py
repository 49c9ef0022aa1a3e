"""Commands that work on files and directories of the in-memory file system."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TextIO

from ..storage.core import StorageError, StorageStatus
from .base import Command

_OK = str(StorageStatus.OK)


def _two_path(
    command: Command,
    args: Sequence[str],
    out: TextIO,
    err: TextIO,
    operation: Any,
    done: str,
) -> int:
    if not command.require_args(args, 2, err, 2):
        return 1
    src, dest = args[0], args[1]
    try:
        operation(src, dest)
    except StorageError as exc:
        err.write(f"{command.name}: {src} -> {dest}: {exc.status}\n")
        return 1
    out.write(f"{done}: {src} -> {dest}\n")
    return 0


class CatCommand(Command):
    name = "cat"
    description = "Display file contents"
    usage = "cat <fileName> [fileName...]"
    cpu_cost = 3

    def execute(self, args, stdin, out, err, system) -> int:
        if not args and stdin:
            out.write(stdin)
            return 0
        if not self.require_args(args, 1, err):
            return 1
        rc = 0
        for name in args:
            try:
                content = system.read_file(name)
            except StorageError as exc:
                err.write(f"cat: {name}: {exc.status}\n")
                rc = 1
                continue
            out.write(f"=== contents of {name} ===\n")
            out.write(content if content else "(empty)\n")
            out.write("=============================\n")
        return rc


class CdCommand(Command):
    name = "cd"
    description = "Change current directory"
    usage = "cd <dirName|..>"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err, 1):
            return 1
        try:
            system.change_dir(args[0])
        except StorageError as exc:
            err.write(f"cd: {args[0]}: {exc.status}\n")
            return 1
        out.write(f"{system.working_dir()}\n")
        return 0


class CpCommand(Command):
    name = "cp"
    description = "Copy a file from source to destination"
    usage = "cp <srcFile> <destFile>"
    cpu_cost = 5

    def execute(self, args, stdin, out, err, system) -> int:
        return _two_path(self, args, out, err, system.copy_file, "Copied file")


class CpdirCommand(Command):
    name = "cpdir"
    description = "Copy a directory and its contents to a new location"
    usage = "cpdir <srcDir> <destDir>"

    def execute(self, args, stdin, out, err, system) -> int:
        return _two_path(self, args, out, err, system.copy_dir, "Copied directory")


class LsCommand(Command):
    name = "ls"
    description = "List contents of directory"
    usage = "ls [dirName|..]"
    cpu_cost = 2

    def execute(self, args, stdin, out, err, system) -> int:
        path = args[0] if args else "."
        try:
            entries = system.list_dir(path)
        except StorageError as exc:
            err.write(f"ls: {path}: {exc.status}\n")
            return 1
        if not entries:
            out.write("(empty)\n")
        else:
            out.writelines(f"{entry}\n" for entry in entries)
        return 0


class MkdirCommand(Command):
    name = "mkdir"
    description = "Create a new directory"
    usage = "mkdir <dirName>"
    cpu_cost = 2

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err, 1):
            return 1
        try:
            system.make_dir(args[0])
        except StorageError as exc:
            err.write(f"mkdir: {args[0]}: {exc.status}\n")
            return 1
        out.write(f"mkdir: {args[0]}: {_OK}\n")
        return 0


class MvCommand(Command):
    name = "mv"
    description = "Move or rename a file"
    usage = "mv <oldFile> <newFile>"
    cpu_cost = 3

    def execute(self, args, stdin, out, err, system) -> int:
        return _two_path(self, args, out, err, system.move_file, "Moved/Renamed file")


class MvdirCommand(Command):
    name = "mvdir"
    description = "Move or rename a directory"
    usage = "mvdir <oldDir> <newDir>"

    def execute(self, args, stdin, out, err, system) -> int:
        return _two_path(self, args, out, err, system.move_dir, "Moved/Renamed directory")


class PwdCommand(Command):
    name = "pwd"
    description = "Print working directory"
    usage = "pwd"

    def execute(self, args, stdin, out, err, system) -> int:
        out.write(f"{system.working_dir()}\n")
        return 0


class RmCommand(Command):
    name = "rm"
    description = "Delete a file"
    usage = "rm <fileName> [fileName...]"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err):
            return 1
        rc = 0
        for name in args:
            try:
                system.delete_file(name)
            except StorageError as exc:
                err.write(f"rm: {name}: {exc.status}\n")
                rc = 1
            else:
                out.write(f"rm: {name}: {_OK}\n")
        return rc


class RmdirCommand(Command):
    name = "rmdir"
    description = "Remove a directory"
    usage = "rmdir <dirName>"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err, 1):
            return 1
        try:
            system.remove_dir(args[0])
        except StorageError as exc:
            err.write(f"rmdir: {args[0]}: {exc.status}\n")
            return 1
        out.write(f"rmdir: {args[0]}: {_OK}\n")
        return 0


class TouchCommand(Command):
    name = "touch"
    description = (
        "Update the modification timestamp of the provided file, "
        "if file doesn't exist, it will be created"
    )
    usage = "touch <fileName> [fileName...]"
    cpu_cost = 2

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err):
            return 1
        rc = 0
        for name in args:
            try:
                system.create_file(name)
            except StorageError as exc:
                err.write(f"touch: {name}: {exc.status}\n")
                rc = 1
            else:
                out.write(f"touch: {name}: {_OK}\n")
        return rc


class WriteCommand(Command):
    name = "write"
    description = "Write content to a file (overwrite)"
    usage = "write <fileName> <content>"
    cpu_cost = 4

    def execute(self, args, stdin, out, err, system) -> int:
        if stdin:
            if not self.require_args(args, 1, err, 1):
                return 1
            content = stdin[:-1] if stdin.endswith("\n") else stdin
        else:
            if not self.require_args(args, 2, err):
                return 1
            content = " ".join(args[1:])

        target = args[0]
        try:
            exists = system.file_exists(target)
        except StorageError as exc:
            err.write(f"write: {target}: {exc.status}\n")
            return 1
        if not exists:
            err.write(f"write: {target}: {StorageStatus.NOT_FOUND}\n")
            return 1
        try:
            system.write_file(target, content)
        except StorageError as exc:
            out.write(f"write: {target}: {exc.status}\n")
            return 1
        out.write(f"write: {target}: {_OK}\n")
        return 0


class EditCommand(Command):
    name = "edit"
    description = "Open an editor to append text to a file"
    usage = "edit <fileName>"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err):
            return 1
        file_name = args[0]
        try:
            content = system.read_file(file_name)
        except StorageError as exc:
            err.write(f"edit: {file_name}: {exc.status}\n")
            return 1

        out.write(f"=== contents of {file_name} ===\n")
        out.write(content if content else "(empty)\n")
        out.write("--------------------------------------\n")
        out.write("Type new content below to ADD to the file.\n")
        out.write("Type ':wq' on a new line to save and exit.\n")
        out.write("--------------------------------------\n")

        added = []
        while True:
            line = system.read_line()
            if line is None or line == ":wq":
                break
            added.append(line + "\n")

        try:
            system.edit_file(file_name, "".join(added))
        except StorageError as exc:
            out.write(f"edit: {file_name}: {exc.status}\n")
            return 1
        out.write(f"edit: {file_name}: {_OK}\n")
        return 0