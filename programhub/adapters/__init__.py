# programhub/adapters/__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in
`programhub.core.ports`:
- `persistence`: Secondary Adapter (Driven) - key-value storages and the record store.
- `session`: Secondary Adapter (Driven) - the current-user provider.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on
`programhub.core`, but `programhub.core` never imports from here.
"""
