# programhub/core/ports/session_provider.py
from typing import Optional, Protocol

from programhub.core.domain.models import UserSession


class ISessionProvider(Protocol):
    """
    Port for the signed-in user. The core only reads the session; logging
    in, expiry and logout belong to whoever implements this.
    """

    def get_current_session(self) -> Optional[UserSession]:
        ...
