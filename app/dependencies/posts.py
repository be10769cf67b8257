from fastapi import Depends

from app.dependencies.auth import public_supabase_client, user_supabase_client
from app.repositories.posts import SupabasePostRepository


def public_post_repository(supabase=Depends(public_supabase_client)):
    return SupabasePostRepository(supabase)


def author_post_context(context=Depends(user_supabase_client)):
    """Repository bound to the signed-in user's client, plus that user's id."""
    return {
        "posts": SupabasePostRepository(context["supabase"]),
        "user_id": context["user_id"],
    }
