# programhub/shared/container.py
from dependency_injector import containers, providers

from programhub.shared.config import settings
from programhub.adapters.persistence.key_value import build_key_value_storage
from programhub.adapters.persistence.prototype_store import PrototypeRecordStore
from programhub.adapters.session.static_session import StaticSessionProvider

from programhub.core.use_cases.delete_program import DeleteProgram
from programhub.core.use_cases.program_queries import (
    BrowseProgramCatalog,
    GetProgramSummary,
    LoadPartnerOverview,
)
from programhub.core.use_cases.seed_database import SeedPrototypeDatabase


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # Wrapping the settings lets tests and the CLI override single values.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Raw key-value storage (Singleton: one handle per process)
    key_value_storage = providers.Singleton(
        build_key_value_storage,
        backend=config.STORAGE_BACKEND,
        base_path=config.FILESYSTEM_STORE_PATH,
    )

    # Record store over the single prototype document
    record_store = providers.Singleton(
        PrototypeRecordStore,
        storage=key_value_storage,
        storage_key=config.STORAGE_KEY,
        schema_version=config.SCHEMA_VERSION,
    )

    # Session (Singleton: the embedding caller sets it once)
    session_provider = providers.Singleton(
        StaticSessionProvider
    )

    # 3. Use Cases (Application Logic)

    # Factory: new instance per call, sharing the singleton gateways.

    get_program_summary = providers.Factory(
        GetProgramSummary,
        store=record_store,
    )

    load_partner_overview = providers.Factory(
        LoadPartnerOverview,
        store=record_store,
        session_provider=session_provider,
    )

    browse_program_catalog = providers.Factory(
        BrowseProgramCatalog,
        store=record_store,
    )

    delete_program = providers.Factory(
        DeleteProgram,
        store=record_store,
    )

    seed_prototype_database = providers.Factory(
        SeedPrototypeDatabase,
        store=record_store,
    )


# Instantiate the container for global access (e.g. by the CLI)
container = Container()
