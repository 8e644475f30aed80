"""Admin session guard — the signed session cookie must hold the allow-listed email."""

import logging

from fastapi import Depends, HTTPException, Request, status

from blog.application.schemas import SessionUser
from blog.config import Settings, get_settings

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user"


def is_admin_email(email: str | None, settings: Settings) -> bool:
    """Case-insensitive match against ADMIN_EMAIL; an unset ADMIN_EMAIL matches nobody."""
    admin = settings.admin_email.strip().lower()
    return bool(admin) and bool(email) and email.strip().lower() == admin


def store_session_user(request: Request, user: SessionUser) -> None:
    request.session[SESSION_USER_KEY] = user.model_dump()


def clear_session(request: Request) -> None:
    request.session.clear()


async def get_session_user(request: Request) -> SessionUser | None:
    """Current session user, or None when there is no (valid) session."""
    data = request.session.get(SESSION_USER_KEY)
    if not isinstance(data, dict) or not data.get("email"):
        return None
    return SessionUser(email=data["email"], name=data.get("name"))


async def require_admin(
    request: Request,
    user: SessionUser | None = Depends(get_session_user),
    settings: Settings = Depends(get_settings),
) -> SessionUser:
    """FastAPI dependency for every admin route — 401 for anyone but the admin."""
    if user is None or not is_admin_email(user.email, settings):
        logger.warning(
            "Rejected admin request %s %s (session email=%s)",
            request.method,
            request.url.path,
            user.email if user else None,
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user
