from fastapi import APIRouter, Depends
from supabase import AuthError
import logging

from app.dependencies.auth import user_supabase_client
from app.repositories.profiles import fetch_profile
from app.schemas.auth import CurrentUser, Profile
from app.schemas.post import ANONYMOUS_AUTHOR
from app.services.errors import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=CurrentUser)
def get_me(context=Depends(user_supabase_client)):
    user = context["user"]
    row = fetch_profile(context["supabase"], context["user_id"])
    profile = Profile(**row) if row else None
    return CurrentUser(
        id=context["user_id"],
        email=getattr(user, "email", None),
        display_name=profile.display_name if profile else ANONYMOUS_AUTHOR,
        profile=profile,
    )


@router.post("/signout")
def sign_out(context=Depends(user_supabase_client)):
    supabase = context["supabase"]
    # Revokes the refresh tokens behind this access token
    try:
        supabase.auth.admin.sign_out(context["token"])
    except AuthError as e:
        logger.error(f"Sign out failed for user {context['user_id']}: {str(e)}")
        raise StoreError("Sign out failed") from e
    logger.info(f"Signed out user: {context['user_id']}")
    return {"message": "Signed out", "redirect_to": "/"}
