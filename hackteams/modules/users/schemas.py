from pydantic import BaseModel
from typing import Optional, Dict, Any
from datetime import datetime


class UserProfileResponse(BaseModel):
    id: str
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    discord: Optional[Dict[str, Any]] = None
    github: Optional[Dict[str, Any]] = None
    visibility: Optional[Dict[str, Any]] = None
    updated_at: Optional[datetime] = None

    @property
    def is_public(self) -> bool:
        return bool((self.visibility or {}).get("is_public"))

    class Config:
        from_attributes = True
