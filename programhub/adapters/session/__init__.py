# programhub/adapters/session/__init__.py
from .static_session import StaticSessionProvider

__all__ = ["StaticSessionProvider"]
