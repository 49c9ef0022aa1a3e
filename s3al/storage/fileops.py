"""File operations on the in-memory file tree."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from .core import File, Folder, PathInfo, StorageError, StorageStatus, is_name_invalid

logger = logging.getLogger("s3al.storage")


class FileOperationsMixin:
    """File commands; expects ``root``, ``current_folder`` and ``parse_path``."""

    root: Folder
    current_folder: Folder
    parse_path: Callable[[str], PathInfo]

    def _file_target(self, path: str) -> tuple[Folder, str]:
        if not path or is_name_invalid(path):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid path: {path!r}")
        info = self.parse_path(path)
        if info.folder is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Path not found: {path}")
        if is_name_invalid(info.name):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid path: {path!r}")
        return info.folder, info.name

    def _endpoint(self, path: str, role: str) -> tuple[Folder, str]:
        info = self.parse_path(path)
        if info.folder is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Invalid {role} path: {path}")
        if is_name_invalid(info.name):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid {role} path: {path}")
        return info.folder, info.name

    def _existing_file(self, path: str) -> tuple[Folder, File]:
        folder, name = self._file_target(path)
        found = folder.find_file(name)
        if found is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"File not found: {path}")
        return folder, found

    def file_exists(self, path: str) -> bool:
        """True if a file exists at ``path``."""
        info = self.parse_path(path)
        if info.folder is None:
            return False
        if is_name_invalid(info.name):
            raise StorageError(StorageStatus.INVALID_ARGUMENT, f"Invalid path: {path!r}")
        return info.folder.find_file(info.name) is not None

    def create_file(self, path: str) -> None:
        """Create an empty file; its folder must exist and the name be free."""
        folder, name = self._file_target(path)
        if folder.find_file(name) is not None:
            raise StorageError(StorageStatus.ALREADY_EXISTS, f"File already exists: {path}")
        now = datetime.now()
        folder.files.append(File(name, "", now, now))
        folder.modified_at = datetime.now()
        logger.info("Created file: %s", path)

    def touch_file(self, path: str) -> None:
        """Refresh a file's modification time, creating the file if needed."""
        folder, name = self._file_target(path)
        existing = folder.find_file(name)
        if existing is not None:
            existing.modified_at = datetime.now()
            folder.modified_at = datetime.now()
            logger.info("File already exists, timestamp updated: %s", path)
            return
        logger.info("File does not exist, will be created: %s", path)
        self.create_file(path)

    def delete_file(self, path: str) -> None:
        """Remove a file."""
        folder, name = self._file_target(path)
        found = folder.find_file(name)
        if found is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"File not found: {name}")
        folder.files.remove(found)
        folder.modified_at = datetime.now()
        logger.info("Deleted file: %s", name)

    def write_file(self, path: str, content: str) -> None:
        """Replace a file's content with ``content`` followed by a newline."""
        folder, found = self._existing_file(path)
        found.content = content + "\n"
        found.modified_at = datetime.now()
        folder.modified_at = datetime.now()
        logger.info("Wrote to file: %s", path)

    def read_file(self, path: str) -> str:
        """Return a file's content."""
        _, found = self._existing_file(path)
        return found.read()

    def edit_file(self, path: str, new_content: str) -> None:
        """Append ``new_content`` to a file as it is."""
        folder, found = self._existing_file(path)
        found.content = found.content + new_content
        found.modified_at = datetime.now()
        folder.modified_at = datetime.now()
        logger.info("Edited file: %s", path)

    def copy_file(self, src_path: str, dest_path: str) -> None:
        """Copy a file into an existing directory, or to a new name."""
        if not src_path or not dest_path:
            raise StorageError(StorageStatus.INVALID_ARGUMENT, "Source and destination required")
        src_folder, src_name = self._endpoint(src_path, "source")
        source = src_folder.find_file(src_name)
        if source is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Source file not found: {src_path}")
        dest_folder, dest_name = self._endpoint(dest_path, "destination")

        target_dir = dest_folder.find_subfolder(dest_name)
        if target_dir is not None:
            if target_dir.find_file(src_name) is not None:
                raise StorageError(StorageStatus.ALREADY_EXISTS, f"File already exists: {src_name}")
            now = datetime.now()
            target_dir.files.append(File(source.name, source.content, now, now))
            target_dir.modified_at = datetime.now()
            logger.info("Copied file '%s' into directory '%s'", src_path, dest_path)
            return

        if dest_folder.find_file(dest_name) is not None:
            raise StorageError(
                StorageStatus.ALREADY_EXISTS, f"Destination file already exists: {dest_path}"
            )
        now = datetime.now()
        dest_folder.files.append(File(dest_name, source.content, now, now))
        dest_folder.modified_at = datetime.now()
        logger.info("Copied file '%s' to '%s'", src_path, dest_path)

    def move_file(self, src_path: str, dest_path: str) -> None:
        """Move a file into an existing directory, or rename it."""
        if not src_path or not dest_path:
            raise StorageError(StorageStatus.INVALID_ARGUMENT, "Source and destination required")
        src_folder, src_name = self._endpoint(src_path, "source")
        source = src_folder.find_file(src_name)
        if source is None:
            raise StorageError(StorageStatus.NOT_FOUND, f"Source file not found: {src_path}")
        dest_folder, dest_name = self._endpoint(dest_path, "destination")

        target_dir = dest_folder.find_subfolder(dest_name)
        if target_dir is not None:
            if target_dir.find_file(src_name) is not None:
                raise StorageError(StorageStatus.ALREADY_EXISTS, f"File already exists: {src_name}")
            src_folder.files.remove(source)
            target_dir.files.append(source)
            src_folder.modified_at = datetime.now()
            target_dir.modified_at = datetime.now()
            logger.info("Moved file '%s' into directory '%s'", src_path, dest_path)
            return

        if dest_folder.find_file(dest_name) is not None:
            raise StorageError(
                StorageStatus.ALREADY_EXISTS, f"Destination file already exists: {dest_path}"
            )
        src_folder.files.remove(source)
        source.name = dest_name
        source.modified_at = datetime.now()
        dest_folder.files.append(source)
        src_folder.modified_at = datetime.now()
        dest_folder.modified_at = datetime.now()
        logger.info("Moved file '%s' to '%s'", src_path, dest_path)