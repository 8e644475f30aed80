"""Google OAuth configuration (OpenID Connect via authlib)."""

from functools import lru_cache

from authlib.integrations.starlette_client import OAuth, StarletteOAuth2App

from blog.config import get_settings

GOOGLE_DISCOVERY_URL = "https://accounts.google.com/.well-known/openid-configuration"


@lru_cache
def get_oauth() -> OAuth:
    """OAuth registry with the ``google`` client registered from settings."""
    settings = get_settings()
    oauth = OAuth()
    oauth.register(
        name="google",
        client_id=settings.google_client_id,
        client_secret=settings.google_client_secret,
        server_metadata_url=GOOGLE_DISCOVERY_URL,
        client_kwargs={"scope": "openid email profile"},
    )
    return oauth


def get_google_oauth() -> StarletteOAuth2App:
    """Get the configured Google OAuth client."""
    return get_oauth().google
