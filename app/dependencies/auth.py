from fastapi import Header, HTTPException
from typing import Optional
import time
import logging

from app.config import SIGNIN_PATH
from app.services.supabase import SupabaseConfigError, create_supabase_client

logger = logging.getLogger(__name__)

REAUTH_HEADERS = {"WWW-Authenticate": "Bearer", "X-Redirect-To": SIGNIN_PATH}


def _unauthenticated(detail: str) -> HTTPException:
    # Clients send the user back through sign-in on any 401
    return HTTPException(status_code=401, detail=detail, headers=REAUTH_HEADERS)


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise _unauthenticated("Not authenticated")
    if not authorization.startswith("Bearer "):
        raise _unauthenticated("Invalid token format")
    return authorization.split(" ")[1]


def _client_or_500(token: Optional[str] = None):
    try:
        return create_supabase_client(token)
    except SupabaseConfigError:
        raise HTTPException(status_code=500, detail="Server configuration error")


def user_supabase_client(authorization: Optional[str] = Header(None)):
    token = _bearer_token(authorization)
    supabase = _client_or_500(token)

    try:
        start_time = time.time()
        logger.info("Validating token with Supabase")
        user_res = supabase.auth.get_user(token)
        end_time = time.time()
        logger.info(f"Token validation completed in {end_time - start_time:.2f} seconds")
    except Exception as e:
        logger.error(f"Supabase token validation error: {str(e)}")
        if "timed out" in str(e).lower():
            raise HTTPException(
                status_code=504,
                detail="Connection to authentication service timed out. Please try again later."
            )
        raise _unauthenticated("Session expired or invalid")

    if not user_res or not user_res.user:
        logger.warning("User not found after successful token validation")
        raise _unauthenticated("User not found")

    logger.info(f"Successfully authenticated user: {user_res.user.id}")
    return {
        "supabase": supabase,
        "user_id": user_res.user.id,
        "user": user_res.user,
        "token": token,
    }


def public_supabase_client():
    """Anonymous client; row-level security only exposes published posts."""
    return _client_or_500()


def optional_user_context(authorization: Optional[str] = Header(None)):
    """Like user_supabase_client, but anonymous visitors get None instead of a 401."""
    if not authorization:
        return None
    try:
        return user_supabase_client(authorization)
    except HTTPException as e:
        if e.status_code != 401:
            raise
        return None
