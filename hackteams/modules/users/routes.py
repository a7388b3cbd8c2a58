from fastapi import APIRouter, Depends
from hackteams.core.dependencies import get_optional_store, get_session
from hackteams.database.document_store import DocumentStore
from hackteams.modules.auth.schemas import Session
from hackteams.modules.users.schemas import UserProfileResponse
from hackteams.modules.users.service import UserService
from typing import Optional

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(store: Optional[DocumentStore] = Depends(get_optional_store)) -> UserService:
    return UserService(store)


@router.get("/{user_id}/profile", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: str,
    session: Session = Depends(get_session),
    service: UserService = Depends(get_user_service)
):
    """Public profile of a user, or the caller's own profile"""
    return service.get_profile(user_id, viewer_id=session.user_id)
