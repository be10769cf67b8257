import logging
from functools import wraps

import httpx
from postgrest.exceptions import APIError

from app.services.errors import StoreError

logger = logging.getLogger(__name__)


def store_call(func):
    """Turn Supabase/PostgREST and transport failures into StoreError, logging the cause."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except APIError as e:
            logger.error(f"Supabase rejected {func.__name__}: {e.message} (code={e.code})")
            raise StoreError(e.message or "Store error") from e
        except httpx.HTTPError as e:
            logger.error(f"Supabase request failed in {func.__name__}: {str(e)}")
            raise StoreError("Store unavailable") from e
    return wrapper
