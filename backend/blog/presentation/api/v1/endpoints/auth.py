"""Admin login with Google OAuth; the session lives in a signed cookie."""

import logging

from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from blog.application.schemas import SessionStatusResponse, SessionUser
from blog.config import Settings, get_settings
from blog.infrastructure.auth import (
    clear_session,
    get_google_oauth,
    get_session_user,
    is_admin_email,
    store_session_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get("/login")
async def login(request: Request, settings: Settings = Depends(get_settings)):
    """Redirect to the Google consent screen."""
    if not settings.google_client_id:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Google login is not configured.",
        )
    redirect_uri = settings.google_redirect_uri or str(request.url_for("auth_callback"))
    return await get_google_oauth().authorize_redirect(request, redirect_uri)


@router.get("/callback", name="auth_callback")
async def auth_callback(request: Request, settings: Settings = Depends(get_settings)):
    """Exchange the code, admit only ADMIN_EMAIL, then redirect to the dashboard."""
    try:
        token = await get_google_oauth().authorize_access_token(request)
    except OAuthError as e:
        logger.warning("OAuth callback failed: %s", e.error)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Authentication failed.")

    user_info = token.get("userinfo") or {}
    email = user_info.get("email")
    if not email or not user_info.get("email_verified", True):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user info from Google.")

    if not is_admin_email(email, settings):
        logger.warning("Unauthorized sign-in attempt by %s", email)
        clear_session(request)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied.")

    store_session_user(request, SessionUser(email=email, name=user_info.get("name")))
    logger.info("Admin signed in: %s", email)
    return RedirectResponse(url=settings.admin_redirect_url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/logout")
async def logout(request: Request):
    """Clear the session and go back to the home page."""
    clear_session(request)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/session", response_model=SessionStatusResponse)
async def session_status(
    user: SessionUser | None = Depends(get_session_user),
    settings: Settings = Depends(get_settings),
) -> SessionStatusResponse:
    """Who is signed in, if anyone. Only the admin counts as authenticated."""
    if user is None or not is_admin_email(user.email, settings):
        return SessionStatusResponse(authenticated=False, user=None)
    return SessionStatusResponse(authenticated=True, user=user)
