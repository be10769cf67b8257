from typing import Optional

from app.config import SIGNIN_PATH, SIGNUP_PATH
from app.schemas.navigation import Navigation, NavItem


def build_navigation(user_email: Optional[str] = None, signed_in: bool = False) -> Navigation:
    """Links shown in the site navigation bar for a signed-in user or an anonymous visitor."""
    items = [NavItem(label="Home", href="/")]

    if not signed_in:
        items.append(NavItem(label="Sign in", href=SIGNIN_PATH))
        items.append(NavItem(label="Get started", href=SIGNUP_PATH))
        return Navigation(signed_in=False, items=items)

    items.append(NavItem(label="Dashboard", href="/dashboard"))
    items.append(NavItem(label="Write", href="/posts/new"))
    items.append(NavItem(label="Sign out", href="/auth/signout", method="POST"))
    return Navigation(
        signed_in=True,
        avatar_initial=user_email[0].upper() if user_email else None,
        items=items,
    )
