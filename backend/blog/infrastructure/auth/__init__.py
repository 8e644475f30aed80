from .admin_session import (
    clear_session,
    get_session_user,
    is_admin_email,
    require_admin,
    store_session_user,
)
from .google_oauth import get_google_oauth

__all__ = [
    "clear_session",
    "get_session_user",
    "is_admin_email",
    "require_admin",
    "store_session_user",
    "get_google_oauth",
]
