# programhub/adapters/session/static_session.py
from typing import Any, Mapping, Optional, Union

from programhub.core.domain.models import UserSession


class StaticSessionProvider:
    """
    ISessionProvider holding whatever session the embedding application
    hands it (the CLI, a test, a web layer that already authenticated).
    """

    def __init__(self, session: Optional[Union[UserSession, Mapping[str, Any]]] = None):
        self._session: Optional[UserSession] = None
        if session is not None:
            self.set_session(session)

    def set_session(self, session: Union[UserSession, Mapping[str, Any]]) -> None:
        self._session = (
            session if isinstance(session, UserSession) else UserSession.model_validate(session)
        )

    def clear(self) -> None:
        self._session = None

    def get_current_session(self) -> Optional[UserSession]:
        return self._session.model_copy() if self._session is not None else None
