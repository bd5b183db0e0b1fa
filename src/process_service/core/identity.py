"""Acting-user identity.

The service does not authenticate anyone. In live mode the API gateway
validates tokens and forwards X-User-* headers; in demo mode a fixed set of
demo users stands in for the identity backend.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class UserRole(str, Enum):
    ADMIN = "admin"
    RESEARCHER = "researcher"
    VOLUNTEER = "volunteer"


class UserIdentity(BaseModel):
    """Who is acting: stamped onto processes as ``created_by``."""

    id: str
    name: str
    email: str
    role: UserRole = UserRole.VOLUNTEER


class IdentityProvider(ABC):
    """Supplies the acting user and the demo/live mode flag."""

    @abstractmethod
    def current_user(self) -> Optional[UserIdentity]:
        """Return the acting user, or None when nobody is identified."""
        pass

    @abstractmethod
    def is_live_mode(self) -> bool:
        pass


DEMO_USERS: List[UserIdentity] = [
    UserIdentity(id="1", name="Dr. María González", email="admin@florafauna.com", role=UserRole.ADMIN),
    UserIdentity(id="2", name="Carlos Mendoza", email="researcher@florafauna.com", role=UserRole.RESEARCHER),
    UserIdentity(id="3", name="Ana Rodríguez", email="volunteer@florafauna.com", role=UserRole.VOLUNTEER),
    UserIdentity(id="4", name="Usuario Demo", email="demo@florafauna.com", role=UserRole.VOLUNTEER),
]


class DemoIdentityProvider(IdentityProvider):
    """Always acts as one of the demo users."""

    def __init__(self, user: Optional[UserIdentity] = None):
        self._user = user or DEMO_USERS[-1]

    def current_user(self) -> Optional[UserIdentity]:
        return self._user

    def is_live_mode(self) -> bool:
        return False


class HeaderIdentityProvider(IdentityProvider):
    """Identity taken from gateway headers.

    In demo mode a request without X-User-ID acts as ``fallback``.
    """

    def __init__(
        self,
        user_id: Optional[str],
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[str] = None,
        live_mode: bool = True,
        fallback: Optional[UserIdentity] = None,
    ):
        self._user_id = user_id
        self._name = name
        self._email = email
        self._role = role
        self._live_mode = live_mode
        self._fallback = fallback

    def current_user(self) -> Optional[UserIdentity]:
        if not self._user_id:
            return None if self._live_mode else self._fallback

        try:
            role = UserRole(self._role) if self._role else UserRole.VOLUNTEER
        except ValueError:
            role = UserRole.VOLUNTEER

        return UserIdentity(
            id=self._user_id,
            name=self._name or self._user_id,
            email=self._email or "",
            role=role,
        )

    def is_live_mode(self) -> bool:
        return self._live_mode
