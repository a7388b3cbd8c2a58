from pydantic import BaseModel
from datetime import datetime


class HackathonResponse(BaseModel):
    hackathon_id: str
    cutoff_at: datetime
