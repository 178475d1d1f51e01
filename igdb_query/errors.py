"""Exception hierarchy for igdb-query."""

from typing import Any, Optional

_BODY_SNIPPET = 200


class IGDBError(Exception):
    """Base class for every error raised by igdb-query."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


# --- Validation errors (raised before any I/O) ---


class QueryValidationError(IGDBError):
    """A query, option or argument was rejected locally."""

    def __init__(
        self,
        detail: str,
        field: Optional[str] = None,
        operator: Optional[str] = None,
        value: Any = None,
    ):
        super().__init__(detail)
        self.field = field
        self.operator = operator
        self.value = value


class InvalidLimit(QueryValidationError):
    pass


class InvalidOffset(QueryValidationError):
    pass


class InvalidOperator(QueryValidationError):
    pass


class InvalidOperandCount(QueryValidationError):
    pass


class IncompatibleOption(QueryValidationError):
    """An option is not allowed for the requested operation kind."""


class EmptySearchTerm(QueryValidationError):
    pass


class EmptyField(QueryValidationError):
    pass


class InvalidIdentifier(QueryValidationError):
    pass


class UnknownSizePreset(QueryValidationError):
    pass


class InvalidRatio(QueryValidationError):
    pass


class MissingCredentials(QueryValidationError):
    pass


# --- Protocol errors (derived from the HTTP response) ---


class NotFound(IGDBError):
    """Common base for a 404 response and an empty get-by-id result."""


class ProtocolError(IGDBError):
    """The server answered with an error status or an unusable body."""

    def __init__(self, detail: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(detail)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        snippet = self.body[:_BODY_SNIPPET]
        if self.status_code is None:
            return f"{self.detail}: {snippet}" if snippet else self.detail
        return f"Status {self.status_code} - {self.detail}: {snippet}"


class Unauthorized(ProtocolError):
    pass


class ResourceNotFound(ProtocolError, NotFound):
    pass


class RateLimited(ProtocolError):
    pass


class ServerError(ProtocolError):
    pass


class MalformedResponse(ProtocolError):
    pass


# --- Result-shape errors ---


class ResultShapeError(IGDBError):
    """A well-formed response did not have the number of results required."""

    def __init__(self, detail: str, resource: str, identifier: Any = None, count: int = 0):
        super().__init__(detail)
        self.resource = resource
        self.identifier = identifier
        self.count = count


class EntityNotFound(ResultShapeError, NotFound):
    pass


class AmbiguousResult(ResultShapeError):
    pass
