"""
Unit tests for contact_saver/store/persistence.py

Coverage plan
─────────────
InMemoryPersistence  → get miss, set/get, initial data
JsonFilePersistence  → dir auto-create, get miss, set/get, overwrite,
                       no temp files left, read/write errors wrapped
"""

import pytest


class TestInMemoryPersistence:

    def test_get_missing_key_returns_none(self):
        from contact_saver.store.persistence import InMemoryPersistence
        assert InMemoryPersistence().get("contacts") is None

    def test_set_then_get(self):
        from contact_saver.store.persistence import InMemoryPersistence
        port = InMemoryPersistence()
        port.set("contacts", "[]")
        assert port.get("contacts") == "[]"

    def test_initial_blobs_are_copied(self):
        from contact_saver.store.persistence import InMemoryPersistence
        seed = {"contacts": "[]"}
        port = InMemoryPersistence(seed)
        port.set("contacts", "[1]")
        assert seed["contacts"] == "[]"


class TestJsonFilePersistence:

    def test_data_dir_created_on_open(self, tmp_path):
        from contact_saver.store.persistence import JsonFilePersistence
        target = tmp_path / "nested" / "dir"
        JsonFilePersistence(str(target))
        assert target.is_dir()

    def test_get_missing_key_returns_none(self, tmp_path):
        from contact_saver.store.persistence import JsonFilePersistence
        assert JsonFilePersistence(str(tmp_path)).get("contacts") is None

    def test_set_writes_key_file(self, tmp_path):
        from contact_saver.store.persistence import JsonFilePersistence
        port = JsonFilePersistence(str(tmp_path))
        port.set("contacts", '[{"name": "Zoë"}]')
        assert (tmp_path / "contacts.json").read_text(encoding="utf-8") == '[{"name": "Zoë"}]'
        assert port.get("contacts") == '[{"name": "Zoë"}]'

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        from contact_saver.store.persistence import JsonFilePersistence
        port = JsonFilePersistence(str(tmp_path))
        port.set("contacts", "[]")
        port.set("contacts", "[1]")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["contacts.json"]
        assert port.get("contacts") == "[1]"

    def test_read_error_wrapped_as_persistence_error(self, tmp_path):
        from contact_saver.exceptions import PersistenceError
        from contact_saver.store.persistence import JsonFilePersistence
        port = JsonFilePersistence(str(tmp_path))
        port.path_for("contacts").mkdir()      # a directory cannot be read as text
        with pytest.raises(PersistenceError):
            port.get("contacts")

    def test_write_error_wrapped_as_persistence_error(self, tmp_path, monkeypatch):
        import os
        from contact_saver.exceptions import PersistenceError
        from contact_saver.store.persistence import JsonFilePersistence
        port = JsonFilePersistence(str(tmp_path))

        def _boom(src, dst):
            raise OSError("read-only filesystem")

        monkeypatch.setattr(os, "replace", _boom)
        with pytest.raises(PersistenceError):
            port.set("contacts", "[]")
        assert list(tmp_path.iterdir()) == []

    def test_failed_cleanup_still_raises_persistence_error(self, tmp_path, monkeypatch):
        import os
        from contact_saver.exceptions import PersistenceError
        from contact_saver.store.persistence import JsonFilePersistence
        port = JsonFilePersistence(str(tmp_path))

        def _boom(*args):
            raise OSError("read-only filesystem")

        monkeypatch.setattr(os, "replace", _boom)
        monkeypatch.setattr(os, "unlink", _boom)
        with pytest.raises(PersistenceError):
            port.set("contacts", "[]")
