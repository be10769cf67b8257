import logging

from supabase import Client, create_client

from app import config

logger = logging.getLogger(__name__)


class SupabaseConfigError(RuntimeError):
    pass


def create_supabase_client(access_token: str = None) -> Client:
    """
    Build a Supabase client for a single request.

    When an access token is given, PostgREST calls carry it so row-level
    security sees the signed-in user instead of the anon role.
    """
    if not config.SUPABASE_URL or not config.SUPABASE_KEY:
        logger.error("Supabase URL or Key not found in environment variables")
        raise SupabaseConfigError("SUPABASE_URL and SUPABASE_KEY must be set")

    supabase = create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
    if access_token:
        supabase.postgrest.auth(access_token)
    return supabase
