import hashlib
import time
from supabase import Client
from hackteams.modules.auth.schemas import SessionUser
from fastapi import HTTPException
from typing import Dict

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. roster reload right after a join request)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500


def _prune_expired(now: float):
    for key in [k for k, (_, expiry) in _AUTH_USER_CACHE.items() if expiry <= now]:
        del _AUTH_USER_CACHE[key]


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_current_user(self, token: str) -> SessionUser:
        """Resolve a Supabase Auth access token to its user. Uses short TTL cache to reduce auth API calls."""
        try:
            cache_key = hashlib.sha256(token.encode()).hexdigest()
            now = time.monotonic()
            if cache_key in _AUTH_USER_CACHE:
                user, expiry = _AUTH_USER_CACHE[cache_key]
                if now < expiry:
                    return user
                del _AUTH_USER_CACHE[cache_key]
            user_response = self.supabase.auth.get_user(jwt=token)
            if not user_response or not user_response.user:
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            user = SessionUser(
                id=user_response.user.id,
                email=user_response.user.email,
                user_metadata=user_response.user.user_metadata or {},
            )
            if len(_AUTH_USER_CACHE) >= _AUTH_CACHE_MAX_SIZE:
                _prune_expired(now)
            if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
                _AUTH_USER_CACHE[cache_key] = (user, now + _AUTH_CACHE_TTL_SEC)
            return user
        except HTTPException:
            raise
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")


def clear_auth_cache():
    _AUTH_USER_CACHE.clear()
