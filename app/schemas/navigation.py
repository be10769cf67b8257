from pydantic import BaseModel
from typing import List, Literal, Optional


class NavItem(BaseModel):
    label: str
    href: str
    method: Literal["GET", "POST"] = "GET"


class Navigation(BaseModel):
    signed_in: bool
    avatar_initial: Optional[str] = None
    items: List[NavItem]
