from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class PoolEntryResponse(BaseModel):
    id: str
    user_id: str
    hackathon_id: str
    joined_at: Optional[datetime] = None

    class Config:
        from_attributes = True
