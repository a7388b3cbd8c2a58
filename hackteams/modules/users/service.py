from hackteams.database.document_store import DocumentStore, DocumentStoreError
from hackteams.modules.users.models import USER_PROFILES_COLLECTION
from hackteams.modules.users.schemas import UserProfileResponse
from typing import Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: Optional[DocumentStore]):
        self.store = store

    def get_profile(self, user_id: str, viewer_id: Optional[str] = None) -> UserProfileResponse:
        """Get a user profile. Private profiles are only visible to their owner."""
        if self.store is None:
            raise HTTPException(status_code=503, detail="Document store unavailable")
        try:
            doc = self.store.get(USER_PROFILES_COLLECTION, user_id)
        except DocumentStoreError as e:
            logger.error(f"Failed to read profile {user_id}: {e}")
            raise HTTPException(status_code=502, detail="Failed to load profile")

        if not doc:
            raise HTTPException(status_code=404, detail="User not found")
        profile = UserProfileResponse(**doc)
        if not profile.is_public and viewer_id != user_id:
            raise HTTPException(status_code=404, detail="User not found")
        return profile
