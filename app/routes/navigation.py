from fastapi import APIRouter, Depends

from app.dependencies.auth import optional_user_context
from app.schemas.navigation import Navigation
from app.services.navigation import build_navigation

router = APIRouter()


@router.get("", response_model=Navigation)
def get_navigation(context=Depends(optional_user_context)):
    if context is None:
        return build_navigation()
    return build_navigation(getattr(context["user"], "email", None), signed_in=True)
