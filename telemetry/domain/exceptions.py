"""
Error taxonomy shared by the domain, application and infrastructure layers.

Every error raised across a layer boundary is a TelemetryError subclass. The
API layer maps each class to one HTTP status; messages are written to be safe
to show to a caller and never carry storage driver text.
"""


class TelemetryError(Exception):
    """Base exception for all telemetry backend errors."""

    default_message = "An error occurred"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(TelemetryError):
    """Malformed input. Reported as a client error and never retried."""

    default_message = "Invalid request"


class UnauthorizedError(TelemetryError):
    """Missing or invalid session token."""

    default_message = "Not authenticated"


class TokenExpiredError(UnauthorizedError):
    """Session token is past its expiry instant."""

    default_message = "Token has expired"


class MalformedTokenError(UnauthorizedError):
    """Session token signature or structure is invalid."""

    default_message = "Invalid token"


class ForbiddenError(TelemetryError):
    """Missing or invalid ingestion secret."""

    default_message = "Forbidden"


class NotFoundError(TelemetryError):
    """Unknown resource, or a device the caller does not own."""

    default_message = "Not found"


class ConflictError(TelemetryError):
    """A unique key (email, serial number) is already taken."""

    default_message = "Resource already exists"


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class StorageError(TelemetryError):
    """The storage collaborator failed."""

    default_message = "Storage operation failed"


class HashingError(TelemetryError):
    """The password hashing primitive failed."""

    default_message = "Password hashing failed"
