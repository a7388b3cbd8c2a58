from hackteams.database.document_store import DocumentStore, DocumentStoreError
from hackteams.modules.auth.schemas import Session
from hackteams.modules.pool.service import PoolService
from hackteams.modules.teams.models import (
    TEAMS_COLLECTION, JOIN_REQUESTS_COLLECTION, TEAM_CAPACITY, MIN_TEAM_SIZE
)
from hackteams.modules.teams.schemas import (
    TeamResponse, TeamSlot, RosterResponse, JoinRequestResponse, JoinRequestStatus
)
from pydantic import ValidationError
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

JOIN_REQUEST_FAILED = "Failed to send request"


def is_open_team(team: TeamResponse) -> bool:
    return MIN_TEAM_SIZE <= len(team.member_ids) < TEAM_CAPACITY


def is_full_team(team: TeamResponse) -> bool:
    # FIXME: a team over capacity is neither open nor full, so it is hidden
    # from both lists. Left as is until the intended handling is confirmed.
    return len(team.member_ids) == TEAM_CAPACITY


def team_display_name(team: TeamResponse) -> str:
    return team.name or f"Team {team.id[:8]}"


def can_request_join(team: TeamResponse, session: Session, is_in_pool: bool, my_team_id: Optional[str]) -> bool:
    """Whether the join control is offered. Not enforced by the store."""
    if not session.is_authenticated or not is_in_pool:
        return False
    if len(team.member_ids) >= TEAM_CAPACITY or team.id == my_team_id:
        return False
    return session.user_id not in team.member_ids


def build_roster(
    hackathon_id: str,
    teams: List[TeamResponse],
    session: Session,
    my_team_id: Optional[str] = None,
    is_in_pool: bool = False,
) -> RosterResponse:
    """Partition teams into the open and full lists with per-viewer flags"""
    def to_slot(team: TeamResponse) -> TeamSlot:
        return TeamSlot(
            id=team.id,
            display_name=team_display_name(team),
            member_count=len(team.member_ids),
            open_slots=TEAM_CAPACITY - len(team.member_ids),
            is_my_team=team.id == my_team_id,
            can_request=can_request_join(team, session, is_in_pool, my_team_id),
        )

    return RosterResponse(
        hackathon_id=hackathon_id,
        teams=teams,
        my_team_id=my_team_id,
        is_in_pool=is_in_pool,
        open_teams=[to_slot(t) for t in teams if is_open_team(t)],
        full_teams=[to_slot(t) for t in teams if is_full_team(t)],
    )


class TeamRosterService:
    def __init__(self, store: Optional[DocumentStore]):
        self.store = store

    def list_teams(self, hackathon_id: str) -> List[TeamResponse]:
        """All teams registered for a hackathon, in store order"""
        docs = self.store.query(TEAMS_COLLECTION, "hackathon_id", hackathon_id)
        return [TeamResponse(**doc) for doc in docs]

    def load_roster(self, hackathon_id: str, session: Session) -> RosterResponse:
        """
        Teams for a hackathon plus the viewer's team and pool status.

        Read failures are logged and yield an empty roster. While the session
        is still resolving nothing is read.
        """
        if session.loading:
            return RosterResponse(hackathon_id=hackathon_id, loading=True)
        if self.store is None:
            logger.warning(f"No document store; rendering empty roster for hackathon {hackathon_id}")
            return build_roster(hackathon_id, [], session)

        try:
            teams = self.list_teams(hackathon_id)
            my_team_id = None
            is_in_pool = False
            if session.is_authenticated:
                # First match wins; a user listed on two teams is not detected here
                my_team = next((t for t in teams if session.user_id in t.member_ids), None)
                my_team_id = my_team.id if my_team else None
                is_in_pool = PoolService(self.store).is_in_pool(session.user_id, hackathon_id)
        except (DocumentStoreError, ValidationError) as e:
            logger.error(f"Failed to load roster for hackathon {hackathon_id}: {e}")
            return build_roster(hackathon_id, [], session)

        return build_roster(hackathon_id, teams, session, my_team_id=my_team_id, is_in_pool=is_in_pool)

    def request_join(self, session: Session, team_id: str, hackathon_id: str) -> RosterResponse:
        """Record a pending join request, then reload the roster. Repeated calls add repeated requests."""
        if self.store is None:
            logger.error("No document store; cannot record join request")
            raise HTTPException(status_code=503, detail=JOIN_REQUEST_FAILED)
        try:
            request_id = self.store.insert(JOIN_REQUESTS_COLLECTION, {
                "from_user_id": session.user_id,
                "team_id": team_id,
                "status": JoinRequestStatus.PENDING.value,
                "created_at": self.store.server_timestamp(),
            })
        except DocumentStoreError as e:
            logger.error(f"Failed to record join request from {session.user_id} to team {team_id}: {e}")
            raise HTTPException(status_code=502, detail=JOIN_REQUEST_FAILED)

        logger.info(f"Join request {request_id} from {session.user_id} to team {team_id}")
        return self.load_roster(hackathon_id, session)

    def list_join_requests(self, session: Session, team_id: str) -> List[JoinRequestResponse]:
        """Join requests addressed to a team; only its members may see them"""
        if self.store is None:
            raise HTTPException(status_code=503, detail="Document store unavailable")
        try:
            team_doc = self.store.get(TEAMS_COLLECTION, team_id)
            if team_doc is None:
                raise HTTPException(status_code=404, detail="Team not found")
            team = TeamResponse(**team_doc)
            if session.user_id not in team.member_ids:
                raise HTTPException(status_code=403, detail="Only team members can view join requests")
            docs = self.store.query(JOIN_REQUESTS_COLLECTION, "team_id", team_id)
            return [JoinRequestResponse(**doc) for doc in docs]
        except HTTPException:
            raise
        except (DocumentStoreError, ValidationError) as e:
            logger.error(f"Failed to list join requests for team {team_id}: {e}")
            raise HTTPException(status_code=502, detail="Failed to load join requests")
