from fastapi import APIRouter, Depends, Request
from hackteams.config import settings
from hackteams.core.dependencies import get_optional_store, get_session, require_session
from hackteams.core.rate_limit import limiter
from hackteams.database.document_store import DocumentStore
from hackteams.modules.auth.schemas import Session
from hackteams.modules.hackathons.identity import current_event_id
from hackteams.modules.teams.schemas import RosterResponse, JoinRequestResponse
from hackteams.modules.teams.service import TeamRosterService
from typing import List, Optional

router = APIRouter(prefix="/hackathons/teams", tags=["teams"])


def get_roster_service(store: Optional[DocumentStore] = Depends(get_optional_store)) -> TeamRosterService:
    return TeamRosterService(store)


@router.get("", response_model=RosterResponse)
async def get_roster(
    hackathon_id: Optional[str] = None,
    session: Session = Depends(get_session),
    service: TeamRosterService = Depends(get_roster_service)
):
    """Teams for a hackathon (defaults to the current one), split into open and full"""
    return service.load_roster(hackathon_id or current_event_id(), session)


@router.post("/{team_id}/join-requests", response_model=RosterResponse, status_code=201)
@limiter.limit(settings.join_request_rate_limit)
async def request_to_join(
    request: Request,
    team_id: str,
    hackathon_id: Optional[str] = None,
    session: Session = Depends(require_session),
    service: TeamRosterService = Depends(get_roster_service)
):
    """Ask to join a team; returns the refreshed roster"""
    return service.request_join(session, team_id, hackathon_id or current_event_id())


@router.get("/{team_id}/join-requests", response_model=List[JoinRequestResponse])
async def list_join_requests(
    team_id: str,
    session: Session = Depends(require_session),
    service: TeamRosterService = Depends(get_roster_service)
):
    """Join requests sent to a team (team members only)"""
    return service.list_join_requests(session, team_id)
