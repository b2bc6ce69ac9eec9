"""Error taxonomy shared by the authorization gate, the store and the board.

Every error carries the HTTP status the API boundary answers with and a
short, client-safe message.  Routers convert them into ``HTTPException``.
"""


class GateError(Exception):
    """Base class for failures that map onto an HTTP status."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationMissing(GateError):
    """No ``Authorization: Bearer <token>`` header was supplied."""

    status_code = 401
    default_message = "Unauthorized"


class AuthenticationInvalid(GateError):
    """The bearer token did not resolve to a user."""

    status_code = 401
    default_message = "Invalid token"


class AuthorizationDenied(GateError):
    """The caller is authenticated but lacks the required role."""

    status_code = 403
    default_message = "Forbidden"


class ValidationFailed(GateError):
    status_code = 400
    default_message = "Missing candidate ID"


class ServerMisconfiguration(GateError):
    status_code = 500
    default_message = "Server misconfiguration"


class StoreError(GateError):
    """A Supabase operation failed; ``message`` is the backend's diagnostic."""

    status_code = 500
    default_message = "Store operation failed"
