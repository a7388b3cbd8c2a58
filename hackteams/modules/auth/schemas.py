from pydantic import BaseModel
from typing import Optional, Dict, Any


class SessionUser(BaseModel):
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = {}


class Session(BaseModel):
    """Explicit identity context handed to services instead of ambient auth state."""
    user: Optional[SessionUser] = None
    loading: bool = False

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user else None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
