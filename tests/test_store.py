"""Tests for the JSON and in-memory record stores."""

import json

import pytest

from service_request_api.app.core import store as store_module
from service_request_api.app.core.store import InMemoryRecordStore, JsonRecordStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "requests.json"


class TestJsonRecordStore:
    def test_missing_file_is_created_empty(self, data_file):
        store = JsonRecordStore(str(data_file))

        assert store.load_all() == []
        assert data_file.exists()
        assert json.loads(data_file.read_text(encoding="utf-8")) == []

    def test_save_then_load_preserves_order(self, data_file):
        store = JsonRecordStore(str(data_file))
        records = [{"id": "b", "status": "pending"}, {"id": "a", "status": "cancelled"}]

        store.save_all(records)

        assert store.load_all() == records
        assert json.loads(data_file.read_text(encoding="utf-8")) == records

    def test_save_replaces_previous_content(self, data_file):
        store = JsonRecordStore(str(data_file))
        store.save_all([{"id": "1"}, {"id": "2"}])
        store.save_all([{"id": "3"}])

        assert store.load_all() == [{"id": "3"}]

    def test_save_leaves_no_temporary_files(self, data_file):
        store = JsonRecordStore(str(data_file))
        store.save_all([{"id": "1"}])

        assert [p.name for p in data_file.parent.iterdir()] == ["requests.json"]

    def test_non_ascii_text_round_trips(self, data_file):
        store = JsonRecordStore(str(data_file))
        store.save_all([{"fullName": "Zoë Ångström"}])

        assert store.load_all()[0]["fullName"] == "Zoë Ångström"

    @pytest.mark.parametrize("content", ["", "   \n"])
    def test_blank_file_reads_as_empty(self, data_file, content):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(content, encoding="utf-8")

        assert JsonRecordStore(str(data_file)).load_all() == []

    @pytest.mark.parametrize(
        "content",
        ["{not json", '{"id": "x"}', '"text"', "42", '[1, "x", null]', '[{"id": "a"}, 2]'],
    )
    def test_corrupt_content_is_reset(self, data_file, content, caplog):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(content, encoding="utf-8")
        store = JsonRecordStore(str(data_file))

        with caplog.at_level("WARNING", logger=store_module.__name__):
            assert store.load_all() == []

        assert data_file.read_text(encoding="utf-8") == "[]"
        assert "Resetting corrupt record store" in caplog.text

    def test_invalid_utf8_is_reset(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_bytes(b"\xff\xfe\x00garbage")

        assert JsonRecordStore(str(data_file)).load_all() == []
        assert data_file.read_text(encoding="utf-8") == "[]"

    def test_load_returns_independent_copies(self, data_file):
        store = JsonRecordStore(str(data_file))
        store.save_all([{"id": "1", "status": "pending"}])

        first = store.load_all()
        first[0]["status"] = "cancelled"

        assert store.load_all()[0]["status"] == "pending"


class TestInMemoryRecordStore:
    def test_initial_records_are_copied(self):
        seed = [{"id": "1", "status": "pending"}]
        store = InMemoryRecordStore(seed)
        seed[0]["status"] = "cancelled"

        assert store.load_all() == [{"id": "1", "status": "pending"}]

    def test_callers_get_their_own_copy(self):
        store = InMemoryRecordStore()
        store.save_all([{"id": "1", "status": "pending"}])

        records = store.load_all()
        records[0]["status"] = "confirmed"
        records.append({"id": "2"})

        assert store.load_all() == [{"id": "1", "status": "pending"}]


class TestGetDataPath:
    def test_absolute_path_is_used_as_is(self, monkeypatch, tmp_path):
        target = tmp_path / "custom.json"
        monkeypatch.setattr(store_module.settings, "data_file", str(target))

        assert store_module.get_data_path() == str(target)

    def test_relative_path_is_resolved_against_project_root(self, monkeypatch):
        monkeypatch.setattr(store_module.settings, "data_file", "data/requests.json")

        path = store_module.get_data_path()

        assert path.endswith("data/requests.json") or path.endswith("data\\requests.json")
        assert not path.startswith("data")
