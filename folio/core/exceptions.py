from typing import Any, Optional


class PortfolioError(Exception):
    """Base for every failure that maps onto the error envelope."""

    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"
    message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Any = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details
        super().__init__(self.message)


class ValidationError(PortfolioError):
    """Malformed or missing input"""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    message = "Invalid request data"


class CredentialMissing(PortfolioError):
    """No bearer credential on a protected request"""

    status_code = 401
    error_code = "AUTH_TOKEN_MISSING"
    message = "Access token required"


class CredentialInvalid(PortfolioError):
    """Bad signature, malformed, expired or revoked token, or unknown subject"""

    status_code = 403
    error_code = "AUTH_TOKEN_INVALID"
    message = "Invalid or expired token"


class InvalidCredentials(PortfolioError):
    """Login with an unknown email or a wrong password"""

    status_code = 400
    error_code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class Forbidden(PortfolioError):
    """Authenticated, but not the owner of the resource"""

    status_code = 403
    error_code = "FORBIDDEN"
    message = "Forbidden"


class NotFound(PortfolioError):
    status_code = 404
    error_code = "NOT_FOUND"
    message = "Resource not found"


class Conflict(PortfolioError):
    """Duplicate value for a unique field"""

    status_code = 400
    error_code = "CONFLICT"
    message = "Resource already exists"


class UploadRejected(PortfolioError):
    """File upload policy violation"""

    status_code = 400
    error_code = "UPLOAD_REJECTED"
    message = "File rejected"


class RateLimited(PortfolioError):
    status_code = 429
    error_code = "TOO_MANY_ATTEMPTS"
    message = "Too many attempts. Try again later"


class InternalError(PortfolioError):
    pass
