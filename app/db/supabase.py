"""Supabase client factories.

``get_supabase()`` returns a lazily-initialized, process-wide client bound to
the anon key.  ``get_supabase_admin()`` returns the service-role client used
by the admin gate; it never persists a session or refreshes tokens.
``create_user_client()`` builds a per-request client that forwards the
caller's JWT so row-level security applies to board reads and writes.
"""

from supabase import Client, ClientOptions, create_client

from app.core.config import settings
from app.core.exceptions import ServerMisconfiguration

_client: Client | None = None
_admin_client: Client | None = None


def get_supabase() -> Client:
    """Return the singleton anon Supabase client, creating it on first call."""
    global _client
    if _client is None:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client


def get_supabase_admin() -> Client:
    """Return the singleton service-role client.

    Raises ``ServerMisconfiguration`` when no service-role key is configured.
    """
    global _admin_client
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise ServerMisconfiguration()
    if _admin_client is None:
        _admin_client = create_client(
            settings.SUPABASE_URL,
            settings.SUPABASE_SERVICE_ROLE_KEY,
            options=ClientOptions(
                auto_refresh_token=False,
                persist_session=False,
            ),
        )
    return _admin_client


def create_user_client(access_token: str) -> Client:
    """Return a fresh anon client whose PostgREST requests carry *access_token*."""
    client = create_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_KEY,
        options=ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        ),
    )
    client.postgrest.auth(access_token)
    return client
