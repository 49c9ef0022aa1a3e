import json
from datetime import datetime

import pytest

from s3al.storage.core import File, Folder, StorageError, StorageStatus
from s3al.storage.manager import StorageManager
from s3al.storage.persistence import deserialize_folder, serialize_folder


def _sample_tree():
    root = Folder("/")
    docs = Folder("docs", parent=root)
    root.subfolders.append(docs)
    root.files.append(File("top.txt", "top content\n"))
    docs.files.append(File("inner.txt", "inner\n"))
    return root


def test_serialize_structure():
    data = serialize_folder(_sample_tree())
    assert sorted(data) == ["createdAt", "files", "modifiedAt", "name", "subfolders"]
    assert data["files"][0]["content"] == "top content\n"
    assert data["subfolders"][0]["name"] == "docs"
    assert isinstance(data["createdAt"], int)


def test_round_trip_and_parent_links():
    data = serialize_folder(_sample_tree())
    rebuilt = deserialize_folder(data)
    assert serialize_folder(rebuilt) == data
    docs = rebuilt.find_subfolder("docs")
    assert docs.parent is rebuilt
    assert rebuilt.parent is None


def test_missing_timestamps_default_to_epoch():
    rebuilt = deserialize_folder({"name": "x", "files": [{"name": "f", "content": ""}]})
    assert rebuilt.created_at == datetime.fromtimestamp(0)
    assert rebuilt.files[0].modified_at == datetime.fromtimestamp(0)


def test_save_and_load(tmp_path):
    store = StorageManager(tmp_path / "data")
    store.root = _sample_tree()
    written = store.save_to_disk("snap")
    assert written.name == "snap.json"
    assert json.loads(written.read_text())["name"] == "/"

    other = StorageManager(tmp_path / "data")
    other.load_from_disk("snap")
    assert other.current_folder is other.root
    assert serialize_folder(other.root) == serialize_folder(store.root)
    assert other.root.find_file("top.txt").content == "top content\n"
    assert other.root.find_subfolder("docs").find_file("inner.txt") is not None


def test_save_keeps_existing_extension(tmp_path):
    store = StorageManager(tmp_path)
    written = store.save_to_disk("snap.json")
    assert written == tmp_path / "snap.json"


def test_load_missing(tmp_path):
    store = StorageManager(tmp_path)
    with pytest.raises(StorageError) as info:
        store.load_from_disk(str(tmp_path / "nothing"))
    assert info.value.status is StorageStatus.NOT_FOUND


def test_load_bad_json(tmp_path):
    (tmp_path / "bad.json").write_text("{not json")
    store = StorageManager(tmp_path)
    with pytest.raises(StorageError) as info:
        store.load_from_disk(str(tmp_path / "bad"))
    assert info.value.status is StorageStatus.ERROR


def test_read_empty_host_file(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("")
    store = StorageManager(tmp_path)
    with pytest.raises(StorageError) as info:
        store.read_file_from_host(str(empty))
    assert info.value.status is StorageStatus.INVALID_ARGUMENT


def test_read_host_absolute(tmp_path):
    source = tmp_path / "note.txt"
    source.write_text("abc")
    assert StorageManager(tmp_path).read_file_from_host(str(source)) == "abc"


def test_read_host_relative_falls_back_to_data_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    (data / "note.txt").write_text("from data")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert StorageManager(data).read_file_from_host("note.txt") == "from data"


def test_list_data_files(tmp_path):
    store = StorageManager(tmp_path / "data")
    with pytest.raises(StorageError) as info:
        store.list_data_files()
    assert info.value.status is StorageStatus.NOT_FOUND

    (tmp_path / "data").mkdir(exist_ok=True)
    with pytest.raises(StorageError) as info:
        store.list_data_files()
    assert info.value.status is StorageStatus.NOT_FOUND

    store.save_to_disk("beta")
    store.save_to_disk("alpha")
    (tmp_path / "data" / "notes.txt").write_text("x")
    assert store.list_data_files() == ["alpha", "beta"]