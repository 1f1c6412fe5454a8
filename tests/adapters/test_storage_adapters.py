# tests/adapters/test_storage_adapters.py
import pytest

from programhub.adapters.persistence.key_value import (
    FileSystemKeyValueStorage,
    InMemoryKeyValueStorage,
    build_key_value_storage,
)
from programhub.adapters.persistence.prototype_store import PrototypeRecordStore
from programhub.adapters.session.static_session import StaticSessionProvider
from programhub.core.domain.database import TableName
from programhub.core.domain.models import UserSession


class TestInMemoryKeyValueStorage:

    def test_get_set_remove(self):
        storage = InMemoryKeyValueStorage({"seed": "{}"})

        storage.set_item("doc", '{"a": 1}')
        storage.remove_item("seed")
        storage.remove_item("seed")

        assert storage.get_item("doc") == '{"a": 1}'
        assert storage.get_item("seed") is None
        assert storage.health_check() is True


class TestFileSystemKeyValueStorage:

    def test_round_trip_through_a_file(self, tmp_path):
        storage = FileSystemKeyValueStorage(str(tmp_path / "store"))

        storage.set_item("class2class_prototype_db_v1", '{"partners": []}')

        assert storage.get_item("class2class_prototype_db_v1") == '{"partners": []}'
        assert (tmp_path / "store" / "class2class_prototype_db_v1.json").exists()

    def test_missing_key_reads_as_none(self, tmp_path):
        assert FileSystemKeyValueStorage(str(tmp_path)).get_item("absent") is None

    def test_keys_cannot_escape_the_base_path(self, tmp_path):
        storage = FileSystemKeyValueStorage(str(tmp_path / "store"))

        storage.set_item("../../etc/passwd", "x")

        written = list((tmp_path / "store").iterdir())
        assert len(written) == 1
        assert written[0].parent == tmp_path / "store"

    def test_remove_item_is_idempotent(self, tmp_path):
        storage = FileSystemKeyValueStorage(str(tmp_path))
        storage.set_item("k", "v")

        storage.remove_item("k")
        storage.remove_item("k")

        assert storage.get_item("k") is None

    def test_no_temporary_files_are_left_behind(self, tmp_path):
        storage = FileSystemKeyValueStorage(str(tmp_path))

        storage.set_item("k", "one")
        storage.set_item("k", "two")

        assert [p.name for p in tmp_path.iterdir()] == ["k.json"]
        assert storage.get_item("k") == "two"

    def test_health_check_creates_the_directory(self, tmp_path):
        storage = FileSystemKeyValueStorage(str(tmp_path / "nested" / "store"))

        assert storage.health_check() is True
        assert (tmp_path / "nested" / "store").is_dir()

    def test_record_store_persists_across_instances(self, tmp_path):
        """
        Scenario: Two record stores point at the same directory.
        Expected: A record written through one is visible through the other.
        """
        # Arrange
        first = PrototypeRecordStore(FileSystemKeyValueStorage(str(tmp_path)))
        second = PrototypeRecordStore(FileSystemKeyValueStorage(str(tmp_path)))

        # Act
        partner = first.create_record(TableName.PARTNERS, {"organization_name": "Durable"})

        # Assert
        assert second.get_by_id(TableName.PARTNERS, partner.id).organization_name == "Durable"


class TestBuildKeyValueStorage:

    def test_memory_backend(self, tmp_path):
        assert isinstance(build_key_value_storage("memory", str(tmp_path)), InMemoryKeyValueStorage)

    def test_filesystem_backend(self, tmp_path):
        storage = build_key_value_storage("filesystem", str(tmp_path))

        assert isinstance(storage, FileSystemKeyValueStorage)
        assert storage.base_path == tmp_path

    def test_unknown_backend(self, tmp_path):
        with pytest.raises(ValueError):
            build_key_value_storage("redis", str(tmp_path))


class TestStaticSessionProvider:

    def test_starts_without_session(self):
        assert StaticSessionProvider().get_current_session() is None

    def test_accepts_a_mapping(self):
        provider = StaticSessionProvider({"email": "a@b.example", "role": "partner", "organization": "Acme"})

        session = provider.get_current_session()

        assert isinstance(session, UserSession)
        assert session.organization == "Acme"

    def test_returned_session_is_a_copy(self):
        provider = StaticSessionProvider(UserSession(email="a@b.example", role="partner"))

        provider.get_current_session().email = "changed@b.example"

        assert provider.get_current_session().email == "a@b.example"

    def test_clear(self):
        provider = StaticSessionProvider({"email": "a@b.example", "role": "partner"})

        provider.clear()

        assert provider.get_current_session() is None
