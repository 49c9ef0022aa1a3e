"""In-memory file tree: node types, status codes and path resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

logger = logging.getLogger("s3al.storage")

_C_SPACE = " \t\n\v\f\r"


class StorageStatus(Enum):
    OK = "OK"
    ALREADY_EXISTS = "Already Exists"
    NOT_FOUND = "Not Found"
    AT_ROOT = "Already at Root"
    INVALID_ARGUMENT = "Invalid Argument"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


class StorageError(Exception):
    """A storage operation failed; ``status`` tells why."""

    def __init__(self, status: StorageStatus, message: str = "") -> None:
        super().__init__(message or str(status))
        self.status = status
        self.message = message or str(status)


def is_name_invalid(name: str) -> bool:
    """True for an empty name or one made only of whitespace."""
    return all(ch in _C_SPACE for ch in name)


def format_time(moment: datetime) -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM:SS``."""
    return moment.strftime("%Y-%m-%d %H:%M:%S")


@dataclass(eq=False)
class File:
    name: str
    content: str = ""
    created_at: datetime = field(default_factory=datetime.now)
    modified_at: datetime = field(default_factory=datetime.now)

    @property
    def size(self) -> int:
        """Size of the content in bytes."""
        return len(self.content.encode("utf-8"))

    def read(self) -> str:
        return self.content


@dataclass(eq=False)
class Folder:
    name: str
    parent: Optional["Folder"] = field(default=None, repr=False)
    files: list[File] = field(default_factory=list)
    subfolders: list["Folder"] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    modified_at: datetime = field(default_factory=datetime.now)

    def find_file(self, name: str) -> Optional[File]:
        return next((f for f in self.files if f.name == name), None)

    def find_subfolder(self, name: str) -> Optional["Folder"]:
        return next((s for s in self.subfolders if s.name == name), None)


@dataclass
class PathInfo:
    """Folder a path leads to, and the final name in it ("" for the folder itself)."""

    folder: Optional[Folder]
    name: str


class StorageCore:
    """The tree root, the working folder and path resolution."""

    def __init__(self) -> None:
        self.root = Folder("/")
        self.current_folder = self.root

    def parse_path(self, path: str) -> PathInfo:
        """Resolve all but the last component of ``path``.

        ``folder`` is None when an intermediate directory does not exist.
        """
        if not path:
            return PathInfo(None, "")
        absolute = path.startswith("/")
        current = self.root if absolute else self.current_folder
        parts = [part for part in path.split("/") if part]

        if not parts:
            return PathInfo(self.root, "") if absolute else PathInfo(None, "")

        for name in parts[:-1]:
            if name == ".":
                continue
            if name == "..":
                if current.parent is not None:
                    current = current.parent
                continue
            sub = current.find_subfolder(name)
            if sub is None:
                return PathInfo(None, "")
            current = sub

        last = parts[-1]
        if last == "..":
            return PathInfo(current.parent if current.parent is not None else current, "")
        if last == ".":
            return PathInfo(current, "")
        return PathInfo(current, last)

    def reset(self) -> None:
        """Drop every file and folder and return to an empty root."""
        self.root = Folder("/")
        self.current_folder = self.root
        logger.info("Storage reset to empty state")