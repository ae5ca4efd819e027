"""
Supabase client for the Taskdesk repositories.

Every repository shares one service-role client. Row ownership and role
checks are enforced by JwtAuthMiddleware and the services, so the client
never runs under a user session.
"""

from functools import lru_cache

from supabase import Client, create_client

from .config import Settings, get_settings


def create_service_client(settings: Settings) -> Client:
    """
    Build a service-role client from settings.

    Raises:
        RuntimeError: If the Supabase URL or service role key is unset
    """
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(
            f"Supabase configuration missing. Set {', '.join(missing)} "
            "before serving users, todos or comments."
        )

    return create_client(settings.supabase_url, settings.supabase_service_role_key)


@lru_cache
def get_supabase_client() -> Client:
    """Get the shared service-role client, created on first use."""
    return create_service_client(get_settings())


def reset_client_cache() -> None:
    """Drop the cached client so the next call rebuilds it from settings."""
    get_supabase_client.cache_clear()
