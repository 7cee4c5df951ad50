"""Tests for the JSON contacts file and atomic writes."""

import json
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

import pytest

from contact_manager.domain.errors import (
    PersistenceReadError,
    PersistenceWriteError,
    StorageNotFoundError,
)
from contact_manager.domain.models import Contact
from contact_manager.infrastructure.persistence.atomic import write_json_atomic
from contact_manager.infrastructure.persistence.json_repository import JsonContactRepository

# ─── Helpers ─────────────────────────────────────────────────────────────────


def _contacts() -> list[Contact]:
    return [
        Contact(id=uuid4(), name="Ann", phone_number="123", email="a@x", address="Addr1"),
        Contact(id=uuid4(), name="Bob", phone_number="456", email="b@x", address="Addr2"),
    ]


@pytest.fixture()
def repo(tmp_path: Path) -> JsonContactRepository:
    return JsonContactRepository(tmp_path / "data" / "contacts.json")


# ═══════════════════════════════════════════════════════════════════════════════
# Atomic writes
# ═══════════════════════════════════════════════════════════════════════════════


class TestWriteJsonAtomic:
    def test_writes_json(self, tmp_path: Path):
        dest = tmp_path / "out.json"
        write_json_atomic(dest, {"a": 1})
        assert json.loads(dest.read_text(encoding="utf-8")) == {"a": 1}

    def test_creates_parent_dirs(self, tmp_path: Path):
        dest = tmp_path / "sub" / "deep" / "out.json"
        write_json_atomic(dest, [])
        assert dest.exists()

    def test_failed_write_keeps_previous_file(self, tmp_path: Path):
        dest = tmp_path / "out.json"
        write_json_atomic(dest, {"version": 1})
        with pytest.raises(TypeError):
            write_json_atomic(dest, {"bad": object()})
        assert json.loads(dest.read_text(encoding="utf-8")) == {"version": 1}

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_numbers(self, tmp_path: Path, value: float):
        dest = tmp_path / "out.json"
        write_json_atomic(dest, {"fontSize": 14.0})
        with pytest.raises(ValueError):
            write_json_atomic(dest, {"fontSize": value})
        assert json.loads(dest.read_text(encoding="utf-8")) == {"fontSize": 14.0}
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_failed_write_leaves_no_temp_files(self, tmp_path: Path):
        dest = tmp_path / "out.json"
        with pytest.raises(TypeError):
            write_json_atomic(dest, {"bad": object()})
        assert list(tmp_path.iterdir()) == []


# ═══════════════════════════════════════════════════════════════════════════════
# JsonContactRepository
# ═══════════════════════════════════════════════════════════════════════════════


class TestJsonContactRepository:
    """Tests for save / load against a temp directory."""

    def test_save_and_load(self, repo: JsonContactRepository):
        contacts = _contacts()
        repo.save(contacts)
        assert repo.load() == contacts

    def test_save_creates_parent_dirs(self, repo: JsonContactRepository):
        repo.save([])
        assert repo.path.exists()

    def test_file_format(self, repo: JsonContactRepository):
        contacts = _contacts()
        repo.save(contacts)
        data = json.loads(repo.path.read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert data[0] == {
            "id": str(contacts[0].id),
            "name": "Ann",
            "phoneNumber": "123",
            "email": "a@x",
            "address": "Addr1",
        }

    def test_save_overwrites_whole_file(self, repo: JsonContactRepository):
        repo.save(_contacts())
        repo.save(_contacts()[:1])
        assert len(repo.load()) == 1

    def test_loads_file_written_elsewhere(self, repo: JsonContactRepository):
        raw_id = uuid4()
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text(
            json.dumps(
                [
                    {
                        "id": str(raw_id).upper(),
                        "name": "Ann",
                        "phoneNumber": "1",
                        "email": "",
                        "address": "",
                    }
                ]
            ),
            encoding="utf-8",
        )
        (contact,) = repo.load()
        assert contact.id == raw_id
        assert contact.phone_number == "1"

    def test_missing_file(self, repo: JsonContactRepository):
        with pytest.raises(StorageNotFoundError, match="not found"):
            repo.load()

    def test_corrupt_json(self, repo: JsonContactRepository):
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text("{{invalid json", encoding="utf-8")
        with pytest.raises(PersistenceReadError):
            repo.load()

    def test_not_a_list(self, repo: JsonContactRepository):
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text('{"contacts": []}', encoding="utf-8")
        with pytest.raises(PersistenceReadError, match="Unexpected JSON format"):
            repo.load()

    def test_invalid_record(self, repo: JsonContactRepository):
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text('[{"id": "not-a-uuid", "name": "Ann"}]', encoding="utf-8")
        with pytest.raises(PersistenceReadError):
            repo.load()

    @pytest.mark.parametrize("missing", ["id", "name", "phoneNumber", "email", "address"])
    def test_record_missing_field(self, repo: JsonContactRepository, missing: str):
        record = _contacts()[0].to_record()
        del record[missing]
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text(json.dumps([record]), encoding="utf-8")
        with pytest.raises(PersistenceReadError, match="Invalid contact records"):
            repo.load()

    def test_record_without_id_is_not_given_a_new_one(self, repo: JsonContactRepository):
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text(
            json.dumps([{"name": "Ann", "phoneNumber": "", "email": "", "address": ""}]),
            encoding="utf-8",
        )
        for _ in range(2):
            with pytest.raises(PersistenceReadError):
                repo.load()

    def test_duplicate_ids(self, repo: JsonContactRepository):
        contact = _contacts()[0]
        repo.path.parent.mkdir(parents=True)
        repo.path.write_text(
            json.dumps([contact.to_record(), contact.to_record()]), encoding="utf-8"
        )
        with pytest.raises(PersistenceReadError):
            repo.load()

    def test_write_failure_is_wrapped(self, repo: JsonContactRepository):
        with patch(
            "contact_manager.infrastructure.persistence.json_repository.write_json_atomic",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(PersistenceWriteError, match="denied"):
                repo.save(_contacts())
