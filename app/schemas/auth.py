from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.schemas.post import ANONYMOUS_AUTHOR

# --- Profiles (auth.users.id -> profiles.id) ---
class Profile(BaseModel):
    id: str  # auth.users.id
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        return self.full_name or ANONYMOUS_AUTHOR


class CurrentUser(BaseModel):
    id: str
    email: Optional[str] = None
    display_name: str = ANONYMOUS_AUTHOR
    profile: Optional[Profile] = None
