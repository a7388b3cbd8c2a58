from hackteams.database.document_store import DocumentStore, DocumentStoreError
from hackteams.modules.pool.models import POOL_COLLECTION
from hackteams.modules.pool.schemas import PoolEntryResponse
from pydantic import ValidationError
from typing import List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def pool_entry_id(user_id: str, hackathon_id: str) -> str:
    return f"{user_id}_{hackathon_id}"


class PoolService:
    def __init__(self, store: Optional[DocumentStore]):
        self.store = store

    def is_in_pool(self, user_id: str, hackathon_id: str) -> bool:
        return self.store.get(POOL_COLLECTION, pool_entry_id(user_id, hackathon_id)) is not None

    def list_pool(self, hackathon_id: str) -> List[PoolEntryResponse]:
        """Pool entries for a hackathon; empty when the store cannot be read"""
        if self.store is None:
            logger.warning(f"No document store; rendering empty pool for hackathon {hackathon_id}")
            return []
        try:
            docs = self.store.query(POOL_COLLECTION, "hackathon_id", hackathon_id)
            return [PoolEntryResponse(**doc) for doc in docs]
        except (DocumentStoreError, ValidationError) as e:
            logger.error(f"Failed to list pool for hackathon {hackathon_id}: {e}")
            return []

    def join_pool(self, user_id: str, hackathon_id: str) -> PoolEntryResponse:
        """Put a user in the hackathon pool. Joining again rewrites the same entry."""
        if self.store is None:
            logger.error("No document store; cannot join pool")
            raise HTTPException(status_code=503, detail="Failed to join pool")
        entry_id = pool_entry_id(user_id, hackathon_id)
        try:
            self.store.set(POOL_COLLECTION, entry_id, {
                "user_id": user_id,
                "hackathon_id": hackathon_id,
                "joined_at": self.store.server_timestamp(),
            })
            stored = self.store.get(POOL_COLLECTION, entry_id)
        except DocumentStoreError as e:
            logger.error(f"Failed to add {user_id} to pool for hackathon {hackathon_id}: {e}")
            raise HTTPException(status_code=502, detail="Failed to join pool")

        logger.info(f"Added {user_id} to pool for hackathon {hackathon_id}")
        if stored is None:
            return PoolEntryResponse(id=entry_id, user_id=user_id, hackathon_id=hackathon_id)
        return PoolEntryResponse(**stored)
