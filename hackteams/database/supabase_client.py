from supabase import create_client, Client
from hackteams.config import settings


class StoreUnavailableError(RuntimeError):
    """Raised when the hosted database has no credentials configured."""


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            if not settings.is_store_configured:
                raise StoreUnavailableError(
                    "Supabase is not configured. Set SUPABASE_URL and SUPABASE_KEY."
                )
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Use in admin scripts."""
        if cls._service_client is None and settings.supabase_service_role_key:
            if not settings.supabase_url:
                raise StoreUnavailableError(
                    "Supabase is not configured. Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY."
                )
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()
