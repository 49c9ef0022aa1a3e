"""Saving and loading the file tree as JSON on the host disk."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from .core import File, Folder, StorageError, StorageStatus

# Extra host folders searched for relative names, before the data folder.
_HOST_SEARCH_DIRS = (Path("/app/data"),)


def _seconds(moment: datetime) -> int:
    return int(moment.timestamp())


def _moment(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds)


def serialize_folder(folder: Folder) -> dict[str, Any]:
    """Turn a folder tree into JSON-ready data; times are epoch seconds."""
    return {
        "name": folder.name,
        "createdAt": _seconds(folder.created_at),
        "modifiedAt": _seconds(folder.modified_at),
        "files": [
            {
                "name": f.name,
                "content": f.content,
                "createdAt": _seconds(f.created_at),
                "modifiedAt": _seconds(f.modified_at),
            }
            for f in folder.files
        ],
        "subfolders": [serialize_folder(sub) for sub in folder.subfolders],
    }


def deserialize_folder(data: dict[str, Any], parent: Optional[Folder] = None) -> Folder:
    """Rebuild a folder tree from data made by :func:`serialize_folder`."""
    folder = Folder(
        data["name"],
        parent=parent,
        created_at=_moment(data.get("createdAt", 0)),
        modified_at=_moment(data.get("modifiedAt", 0)),
    )
    for entry in data.get("files", []):
        folder.files.append(
            File(
                entry["name"],
                entry["content"],
                _moment(entry.get("createdAt", 0)),
                _moment(entry.get("modifiedAt", 0)),
            )
        )
    for sub in data.get("subfolders", []):
        folder.subfolders.append(deserialize_folder(sub, folder))
    return folder


class PersistenceMixin:
    """Disk snapshots; expects ``root``, ``current_folder`` and ``data_dir``."""

    root: Folder
    current_folder: Folder
    data_dir: Path

    def save_to_disk(self, file_name: str) -> Path:
        """Write the whole tree to the data folder; returns the file written."""
        target = str(Path(self.data_dir) / file_name)
        if ".json" not in target:
            target += ".json"
        try:
            Path(self.data_dir).mkdir(parents=True, exist_ok=True)
            text = json.dumps(
                serialize_folder(self.root), indent=4, sort_keys=True, ensure_ascii=False
            )
            Path(target).write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(StorageStatus.ERROR, f"Cannot save {target}: {exc}") from exc
        return Path(target)

    def load_from_disk(self, file_name: str) -> None:
        """Replace the tree with a saved snapshot and return to its root."""
        name = file_name if ".json" in file_name else file_name + ".json"
        content = self.read_file_from_host(name)
        try:
            root = deserialize_folder(json.loads(content))
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise StorageError(StorageStatus.ERROR, f"Cannot load {name}: {exc}") from exc
        self.root = root
        self.current_folder = root

    def read_file_from_host(self, host_file_name: str) -> str:
        """Read a host file; relative names are also looked for in the data folders."""
        path = Path(host_file_name)
        if path.is_absolute():
            candidates = [path]
        else:
            candidates = [path, *(d / path for d in _HOST_SEARCH_DIRS), Path(self.data_dir) / path]
        for candidate in candidates:
            try:
                content = candidate.read_text(encoding="utf-8", errors="replace")
            except OSError:
                continue
            if not content:
                raise StorageError(StorageStatus.INVALID_ARGUMENT, f"File is empty: {candidate}")
            return content
        raise StorageError(StorageStatus.NOT_FOUND, f"Host file not found: {host_file_name}")

    def list_data_files(self) -> list[str]:
        """Names (without extension) of the snapshots in the data folder."""
        data_dir = Path(self.data_dir)
        try:
            if not data_dir.exists():
                raise StorageError(StorageStatus.NOT_FOUND, f"No data folder: {data_dir}")
            names = sorted(
                entry.stem
                for entry in data_dir.iterdir()
                if entry.is_file() and entry.suffix == ".json"
            )
        except OSError as exc:
            raise StorageError(StorageStatus.ERROR, str(exc)) from exc
        if not names:
            raise StorageError(StorageStatus.NOT_FOUND, "No saved data files")
        return names