"""Error taxonomy shared by the core, the web layer and the CLI."""


class FitJourneyError(Exception):
    """Base error carrying an HTTP-equivalent status code."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert to the JSON error body."""
        return {
            "success": False,
            "status": self.status_code,
            "message": self.message,
        }


class ValidationError(FitJourneyError):
    """Request data is missing or malformed."""

    status_code = 400


class MalformedLogError(ValidationError):
    """A workout shorthand submission does not follow the grammar."""

    def __init__(self, message: str, position: int | None = None, field: str | None = None):
        super().__init__(message)
        self.position = position
        self.field = field


class AuthenticationError(FitJourneyError):
    """Missing or invalid credentials."""

    status_code = 401


class NotFoundError(FitJourneyError):
    """A referenced entity does not exist."""

    status_code = 404


class ConflictError(FitJourneyError):
    """The entity already exists."""

    status_code = 409


class PersistenceError(FitJourneyError):
    """The storage layer rejected or failed an operation.

    Constraint violations are the caller's fault (400); everything else
    is an infrastructure fault (500).
    """

    def __init__(self, message: str, constraint: bool = False):
        super().__init__(message, status_code=400 if constraint else 500)
        self.constraint = constraint


class InternalError(FitJourneyError):
    """Unanticipated failure. The message is always generic."""

    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)


class ConfigurationError(FitJourneyError):
    """Required settings are missing."""

    status_code = 500
