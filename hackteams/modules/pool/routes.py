from fastapi import APIRouter, Depends
from hackteams.core.dependencies import get_optional_store, require_session
from hackteams.database.document_store import DocumentStore
from hackteams.modules.auth.schemas import Session
from hackteams.modules.hackathons.identity import current_event_id
from hackteams.modules.pool.schemas import PoolEntryResponse
from hackteams.modules.pool.service import PoolService
from typing import List, Optional

router = APIRouter(prefix="/hackathons/pool", tags=["pool"])


def get_pool_service(store: Optional[DocumentStore] = Depends(get_optional_store)) -> PoolService:
    return PoolService(store)


@router.get("", response_model=List[PoolEntryResponse])
async def list_pool(
    hackathon_id: Optional[str] = None,
    service: PoolService = Depends(get_pool_service)
):
    """Users available to be recruited for a hackathon (defaults to the current one)"""
    return service.list_pool(hackathon_id or current_event_id())


@router.post("", response_model=PoolEntryResponse, status_code=201)
async def join_pool(
    hackathon_id: Optional[str] = None,
    session: Session = Depends(require_session),
    service: PoolService = Depends(get_pool_service)
):
    """Opt the current user into the hackathon pool"""
    return service.join_pool(session.user_id, hackathon_id or current_event_id())
