from pathlib import Path

import pytest

from awkit.remotes import find_remotes, find_remotes_nonlocal, get_remotes


def _make_db(root: Path, host: str, device: str, name: str = "test.db") -> Path:
    directory = root / host / device
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(b"")
    return path


@pytest.fixture
def sync_root(tmp_path, monkeypatch):
    root = tmp_path / "sync"
    monkeypatch.setenv("AW_SYNC_DIR", str(root))
    return root


def test_get_remotes_creates_empty_dir(sync_root):
    assert get_remotes() == []
    assert sync_root.is_dir()


def test_get_remotes_lists_hosts_with_dbs(sync_root):
    _make_db(sync_root, "host-alpha", "dev-a")
    _make_db(sync_root, "host-beta", "dev-b")
    (sync_root / "host-empty" / "dev-c").mkdir(parents=True)
    (sync_root / "stray.db").write_bytes(b"")
    assert get_remotes() == ["host-alpha", "host-beta"]


def test_get_remotes_ignores_db_directly_in_host(sync_root):
    host = sync_root / "host-flat"
    host.mkdir(parents=True)
    (host / "direct.db").write_bytes(b"")
    assert get_remotes() == []


def test_find_remotes(tmp_path):
    a = _make_db(tmp_path, "dev-a", ".", "one.db")
    b = _make_db(tmp_path, "dev-b", ".", "two.db")
    (tmp_path / "dev-b" / "notes.txt").write_text("x")
    found = find_remotes(tmp_path)
    assert sorted(p.resolve() for p in found) == sorted([a.resolve(), b.resolve()])
    assert all(p.suffix == ".db" for p in found)


def test_find_remotes_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_remotes(tmp_path / "missing")


def test_find_remotes_nonlocal_excludes_own_device(tmp_path):
    (tmp_path / "device-local").mkdir()
    (tmp_path / "device-local" / "test.db").write_bytes(b"")
    (tmp_path / "device-remote").mkdir()
    remote = tmp_path / "device-remote" / "test.db"
    remote.write_bytes(b"")
    assert find_remotes_nonlocal(tmp_path, "device-local") == [remote]


def test_find_remotes_nonlocal_with_sync_db(tmp_path):
    for name in ("device-x", "device-y"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "test.db").write_bytes(b"")
    chosen = tmp_path / "device-y" / "test.db"
    assert find_remotes_nonlocal(tmp_path, "device-local", chosen) == [chosen]


def test_find_remotes_nonlocal_sync_db_directory(tmp_path):
    for name in ("device-x", "device-y"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "test.db").write_bytes(b"")
    result = find_remotes_nonlocal(tmp_path, "device-local", tmp_path / "device-x")
    assert result == [tmp_path / "device-x" / "test.db"]