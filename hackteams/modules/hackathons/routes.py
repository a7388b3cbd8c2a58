from fastapi import APIRouter, HTTPException
from hackteams.modules.hackathons.identity import (
    InvalidEventIdError, current_event_id, event_cutoff
)
from hackteams.modules.hackathons.schemas import HackathonResponse

router = APIRouter(prefix="/hackathons", tags=["hackathons"])


@router.get("/current", response_model=HackathonResponse)
async def get_current_hackathon():
    """Hackathon id and cutoff for the current virtual month"""
    hackathon_id = current_event_id()
    return HackathonResponse(hackathon_id=hackathon_id, cutoff_at=event_cutoff(hackathon_id))


@router.get("/{hackathon_id}", response_model=HackathonResponse)
async def get_hackathon(hackathon_id: str):
    """Validate a hackathon id and return its cutoff"""
    try:
        cutoff_at = event_cutoff(hackathon_id)
    except InvalidEventIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return HackathonResponse(hackathon_id=hackathon_id, cutoff_at=cutoff_at)
