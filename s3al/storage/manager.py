"""The storage manager: the in-memory file tree with all its operations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .core import StorageCore
from .fileops import FileOperationsMixin
from .folderops import FolderOperationsMixin
from .persistence import PersistenceMixin


class StorageManager(StorageCore, FileOperationsMixin, FolderOperationsMixin, PersistenceMixin):
    """An in-memory file system that can be saved to and loaded from ``data_dir``."""

    def __init__(self, data_dir: Union[str, os.PathLike] = "data") -> None:
        super().__init__()
        self.data_dir = Path(data_dir)