"""
Core dependencies: store handles and the request session
"""

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from hackteams.database.document_store import DocumentStore, get_document_store
from hackteams.database.supabase_client import StoreUnavailableError, get_supabase
from hackteams.modules.auth.schemas import Session
from hackteams.modules.auth.service import AuthService
from typing import Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_optional_store() -> Optional[DocumentStore]:
    """Document store, or None when Supabase is not configured"""
    try:
        return get_document_store()
    except StoreUnavailableError as e:
        logger.warning(f"Document store unavailable: {e}")
        return None


def get_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> Session:
    """Session for the caller; anonymous when no bearer token is sent"""
    if credentials is None:
        return Session()
    try:
        auth_service = AuthService(get_supabase())
    except StoreUnavailableError as e:
        logger.warning(f"Cannot resolve session, treating caller as anonymous: {e}")
        return Session()
    return Session(user=auth_service.get_current_user(credentials.credentials))


def require_session(
    session: Session = Depends(get_session),
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> Session:
    if not session.is_authenticated:
        if credentials is not None:
            raise HTTPException(status_code=503, detail="Authentication unavailable")
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session
