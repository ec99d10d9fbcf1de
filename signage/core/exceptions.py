class SignageException(Exception):
    """
    Base exception for the signage control plane.

    Every subclass carries a stable `kind` (the envelope's `error` field)
    and the HTTP status the exception handler responds with.
    """

    kind = "InternalError"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class NoTenantIdentityException(SignageException):
    """Raised when no verified tenant identity can be established"""

    kind = "NoTenantIdentity"
    status_code = 401
    default_message = "Authentication required"


class ForbiddenException(SignageException):
    """Raised when the resolved caller may not run the requested operation"""

    kind = "Forbidden"
    status_code = 403
    default_message = "Operation not permitted"


class MalformedInputException(SignageException):
    """Raised for unparseable bodies and invalid field values"""

    kind = "MalformedInput"
    status_code = 400
    default_message = "Malformed request body"


class UnknownActionException(SignageException):
    """Raised when (resource, action) is not registered"""

    kind = "UnknownAction"
    status_code = 400
    default_message = "Unknown action"


class MissingFieldException(SignageException):
    """Raised when a required input field is absent"""

    kind = "MissingField"
    status_code = 400

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required field: {name}")


class NotFoundException(SignageException):
    """
    Raised when a resource is absent or owned by another tenant.

    Both cases share one message so callers cannot probe for other
    tenants' rows.
    """

    kind = "NotFound"
    status_code = 200
    default_message = "Resource not found"


class NotConfiguredException(SignageException):
    """Raised when the tenant has no credential for an integration"""

    kind = "NotConfigured"
    status_code = 200
    default_message = "Integration is not configured"


class AuthExpiredException(SignageException):
    """Upstream rejected the bearer token. Recovered by the gateway, never rendered."""

    kind = "AuthExpired"
    status_code = 500
    default_message = "Upstream credential expired"


class NoRefreshTokenException(SignageException):
    """Raised when a token refresh is needed but none is stored"""

    kind = "NoRefreshToken"
    status_code = 200
    default_message = "Integration has no refresh token, please set it up again"


class RefreshDeniedException(SignageException):
    """Raised when the token endpoint refuses the refresh token"""

    kind = "RefreshDenied"
    status_code = 200
    default_message = "Integration token refresh was denied, please set it up again"


class UpstreamException(SignageException):
    """Raised for upstream failures a retry cannot fix (and for timeouts)"""

    kind = "UpstreamError"
    status_code = 200

    def __init__(self, status: int | None, body: str = "", message: str | None = None):
        self.status = status
        self.body = body
        if message is None:
            label = f"status {status}" if status is not None else "no response"
            message = f"Upstream request failed ({label})"
            if body:
                message = f"{message}: {body[:200]}"
        super().__init__(message)


class InternalErrorException(SignageException):
    """Raised at the dispatcher boundary for unexpected faults"""
