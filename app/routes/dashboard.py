from fastapi import APIRouter, Depends

from app.dependencies.posts import author_post_context
from app.schemas.post import Dashboard
from app.services.posts import get_dashboard

router = APIRouter()


# Drafts and published posts of the logged in user, newest first
@router.get("", response_model=Dashboard)
def get_author_dashboard(context=Depends(author_post_context)):
    return get_dashboard(context["posts"], context["user_id"])
