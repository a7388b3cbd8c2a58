from enum import Enum
from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime


class JoinRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class TeamResponse(BaseModel):
    id: str
    hackathon_id: str
    member_ids: List[str] = []
    name: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    wins: int = 0

    @field_validator("member_ids", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return value if value is not None else []

    @field_validator("wins", mode="before")
    @classmethod
    def none_as_zero(cls, value):
        return value if value is not None else 0

    class Config:
        from_attributes = True


class TeamSlot(BaseModel):
    """One team as rendered in the open or full list"""
    id: str
    display_name: str
    member_count: int
    open_slots: int
    is_my_team: bool = False
    can_request: bool = False


class RosterResponse(BaseModel):
    hackathon_id: str
    loading: bool = False
    teams: List[TeamResponse] = []
    my_team_id: Optional[str] = None
    is_in_pool: bool = False
    open_teams: List[TeamSlot] = []
    full_teams: List[TeamSlot] = []


class JoinRequestResponse(BaseModel):
    id: str
    from_user_id: str
    team_id: str
    status: JoinRequestStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
