from functools import lru_cache
from supabase import Client, create_client
from .config import get_settings


@lru_cache
def get_supabase_client() -> Client:
    """
    Returns a singleton Supabase client using the anon key for sign-up, sign-in
    and profile table access.
    """
    settings = get_settings()
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)


@lru_cache
def get_supabase_admin_client() -> Client | None:
    """
    Returns a Supabase client with service role credentials when identity rollback
    is enabled, otherwise None.
    """
    settings = get_settings()
    if not settings.ROLLBACK_ORPHANED_IDENTITIES:
        return None
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
