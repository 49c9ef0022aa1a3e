"""Directory operations on the in-memory file tree."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from .core import (
    File,
    Folder,
    PathInfo,
    StorageError,
    StorageStatus,
    format_time,
    is_name_invalid,
)

logger = logging.getLogger("s3al.storage")


def is_descendant_or_same(ancestor: Optional[Folder], descendant: Optional[Folder]) -> bool:
    """True if ``descendant`` is ``ancestor`` or lies somewhere beneath it."""
    if ancestor is None or descendant is None:
        return False
    node: Optional[Folder] = descendant
    while node is not None:
        if node is ancestor:
            return True
        node = node.parent
    return False


def _clear_tree(folder: Folder) -> None:
    folder.files.clear()
    for sub in folder.subfolders:
        _clear_tree(sub)
    folder.subfolders.clear()


def _copy_tree(src: Folder, dest_parent: Folder, name: Optional[str] = None) -> Folder:
    now = datetime.now()
    target = Folder(
        name if name is not None else src.name,
        parent=dest_parent,
        created_at=now,
        modified_at=now,
    )
    files = list(src.files)
    subfolders = list(src.subfolders)
    for original in files:
        stamp = datetime.now()
        target.files.append(File(original.name, original.content, stamp, stamp))
    for sub in subfolders:
        _copy_tree(sub, target)
    dest_parent.subfolders.append(target)
    return target


class FolderOperationsMixin:
    """Directory commands; expects ``root``, ``current_folder`` and ``parse_path``."""

    root: Folder
    current_folder: Folder

    def parse_path(self, path: str) -> PathInfo:  # supplied by the storage core
        raise NotImplementedError

    def _locate(self, path: str, role: str) -> tuple[Folder, str]:
        info = self.parse_path(path)
        if info.folder is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Invalid {role} path: {path}")
        if is_name_invalid(info.name):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid {role} path: {path}")
        return info.folder, info.name

    def _locate_named(self, path: str) -> tuple[Folder, str]:
        if not path or is_name_invalid(path):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid path: {path!r}")
        info = self.parse_path(path)
        if info.folder is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Path not found: {path}")
        if is_name_invalid(info.name):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid path: {path!r}")
        return info.folder, info.name

    def make_dir(self, path: str) -> None:
        """Create a directory; its parent must already exist."""
        parent, name = self._locate_named(path)
        if parent.find_subfolder(name) is not None:
            raise StorageError(StorageStatus.ALREADY_EXISTS, f"Directory already exists: {path}")
        now = datetime.now()
        parent.subfolders.append(Folder(name, parent=parent, created_at=now, modified_at=now))
        parent.modified_at = datetime.now()
        logger.info("Created directory: %s", path)

    def remove_dir(self, path: str) -> None:
        """Remove a directory and everything in it.

        If the working folder lies inside it, the working folder moves to the
        removed directory's parent.
        """
        parent, name = self._locate_named(path)
        doomed = parent.find_subfolder(name)
        if doomed is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Directory not found: {path}")
        if is_descendant_or_same(doomed, self.current_folder):
            self.current_folder = parent
        _clear_tree(doomed)
        parent.subfolders.remove(doomed)
        parent.modified_at = datetime.now()
        logger.info("Removed directory: %s", path)

    def change_dir(self, path: str) -> None:
        """Change the working folder; ``..`` past the root raises AT_ROOT."""
        if is_name_invalid(path):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid path: {path!r}")
        if path == "/":
            self.current_folder = self.root
            logger.info("Changed directory to: /")
            return
        if path == "..":
            if self.current_folder.parent is None:
                raise StorageError(StorageStatus.AT_ROOT)
            self.current_folder = self.current_folder.parent
            logger.info("Changed directory to: %s", self.current_folder.name)
            return
        if path == ".":
            return

        if "/" in path:
            current = self.root if path.startswith("/") else self.current_folder
            for part in (p for p in path.split("/") if p):
                if part == ".":
                    continue
                if part == "..":
                    if current.parent is None:
                        raise StorageError(StorageStatus.AT_ROOT)
                    current = current.parent
                    continue
                sub = current.find_subfolder(part)
                if sub is None:
                    raise StorageError(StorageStatus.NOT_FOUND, f"Directory not found: {path}")
                current = sub
            self.current_folder = current
        else:
            sub = self.current_folder.find_subfolder(path)
            if sub is None:
                raise StorageError(StorageStatus.NOT_FOUND, f"Directory not found: {path}")
            self.current_folder = sub
        logger.info("Changed directory to: %s", self.current_folder.name)

    def list_dir(self, path: str = ".") -> list[str]:
        """Describe a folder's entries: directories first, then files."""
        if path in (".", ""):
            target = self.current_folder
        elif path == "..":
            target = self.current_folder.parent or self.current_folder
        else:
            info = self.parse_path(path)
            if info.folder is None:
                raise StorageError(StorageStatus.NOT_FOUND, f"Not found: {path}")
            if not info.name:
                target = info.folder
            else:
                found = info.folder.find_subfolder(info.name)
                if found is None:
                    raise StorageError(StorageStatus.NOT_FOUND, f"Not found: {path}")
                target = found

        entries = [
            f"[D] {sub.name} | created: {format_time(sub.created_at)}"
            f" | modified: {format_time(sub.modified_at)}"
            for sub in target.subfolders
        ]
        entries.extend(
            f"[F] {f.name} | created: {format_time(f.created_at)}"
            f" | modified: {format_time(f.modified_at)} | size: {f.size} bytes"
            for f in target.files
        )
        return entries

    def working_dir(self) -> str:
        """Absolute path of the working folder."""
        parts = []
        node: Optional[Folder] = self.current_folder
        while node is not None:
            if node.name != "/":
                parts.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(parts))

    def copy_dir(self, src_path: str, dest_path: str) -> None:
        """Copy a directory tree into an existing directory, or to a new name."""
        if not src_path or not dest_path:
            raise StorageError(StorageStatus.INVALID_ARGUMENT, "Source and destination required")
        src_parent, src_name = self._locate(src_path, "source")
        source = src_parent.find_subfolder(src_name)
        if source is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Source directory not found: {src_path}")
        dest_parent, dest_name = self._locate(dest_path, "destination")

        target = dest_parent.find_subfolder(dest_name)
        if target is not None:
            if target.find_subfolder(src_name) is not None:
                raise StorageError(
                    StorageStatus.ALREADY_EXISTS, f"Directory already exists: {src_name}"
                )
            _copy_tree(source, target)
            target.modified_at = datetime.now()
            logger.info("Copied directory '%s' into '%s'", src_path, dest_path)
            return

        _copy_tree(source, dest_parent, dest_name)
        dest_parent.modified_at = datetime.now()
        logger.info("Copied directory '%s' to '%s'", src_path, dest_path)

    def move_dir(self, src_path: str, dest_path: str) -> None:
        """Move a directory into an existing directory, or rename it."""
        if not src_path or not dest_path:
            raise StorageError(StorageStatus.INVALID_ARGUMENT, "Source and destination required")
        src_parent, src_name = self._locate(src_path, "source")
        source = src_parent.find_subfolder(src_name)
        if source is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Source directory not found: {src_path}")
        dest_parent, dest_name = self._locate(dest_path, "destination")

        target = dest_parent.find_subfolder(dest_name)
        landing = target if target is not None else dest_parent
        if is_descendant_or_same(source, landing):
            raise StorageError(
                StorageStatus.INVALID_ARGUMENT,
                f"cannot move '{src_name}' to a subdirectory of itself, '{dest_path}'",
            )

        if target is not None:
            if target.find_subfolder(src_name) is not None:
                raise StorageError(
                    StorageStatus.ALREADY_EXISTS, f"Directory already exists: {src_name}"
                )
            src_parent.subfolders.remove(source)
            source.parent = target
            target.subfolders.append(source)
            src_parent.modified_at = datetime.now()
            target.modified_at = datetime.now()
            logger.info("Moved directory '%s' into '%s'", src_path, dest_path)
            return

        src_parent.subfolders.remove(source)
        source.name = dest_name
        source.parent = dest_parent
        source.modified_at = datetime.now()
        dest_parent.subfolders.append(source)
        src_parent.modified_at = datetime.now()
        dest_parent.modified_at = datetime.now()
        logger.info("Moved directory '%s' to '%s'", src_path, dest_path)