"""Pydantic DTOs for the admin session."""

from pydantic import BaseModel


class SessionUser(BaseModel):
    """The identity stored in the signed session cookie after OAuth login."""

    email: str
    name: str | None = None


class SessionStatusResponse(BaseModel):
    authenticated: bool
    user: SessionUser | None = None
