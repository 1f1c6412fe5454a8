# programhub/core/__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the system.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- No dependencies on infrastructure (files, in-memory storages, sessions).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
- Selectors are pure functions over a loaded document; use cases tie them to the ports.
"""
