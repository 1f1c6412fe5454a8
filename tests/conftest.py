# tests/conftest.py
import itertools
from datetime import datetime, timedelta, timezone

import pytest

from programhub.shared.container import Container
from programhub.adapters.persistence.key_value import InMemoryKeyValueStorage
from programhub.adapters.persistence.prototype_store import PrototypeRecordStore
from programhub.adapters.session.static_session import StaticSessionProvider
from programhub.core.domain.database import TableName
from programhub.core.use_cases.seed_database import SeedPrototypeDatabase


class StepClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


@pytest.fixture(scope="function")
def storage():
    """Returns a fresh in-memory key-value storage."""
    return InMemoryKeyValueStorage()


@pytest.fixture(scope="function")
def clock():
    return StepClock(datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture(scope="function")
def store(storage, clock):
    """A record store with predictable ids (rec-1, rec-2, ...) and timestamps."""
    counter = itertools.count(1)
    return PrototypeRecordStore(
        storage,
        clock=clock,
        id_factory=lambda: f"rec-{next(counter)}",
    )


@pytest.fixture(scope="function")
def session_provider():
    return StaticSessionProvider()


@pytest.fixture(scope="function")
def container(store, session_provider):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the real storage providers with the isolated fixtures above.
    """
    container = Container()

    container.record_store.override(store)
    container.session_provider.override(session_provider)

    yield container

    # Clean up overrides after test
    container.reset_override()


@pytest.fixture
def seeded_store(store):
    """The store filled with the demo data."""
    SeedPrototypeDatabase(store).execute()
    return store


@pytest.fixture
def host_partner(store):
    return store.create_record(
        TableName.PARTNERS,
        {"id": "partner-a", "organization_name": "Partner A", "logo": "https://img.example/a.png"},
    )


@pytest.fixture
def program_x(store, host_partner):
    """Program X owned by Partner A, scoped to Denmark."""
    return store.create_record(
        TableName.PROGRAMS,
        {
            "id": "program-x",
            "partner_id": host_partner.id,
            "name": "Program X",
            "countries_in_scope": ["DK"],
            "status": "active",
            "is_public": True,
        },
    )
