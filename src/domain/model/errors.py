"""Domain-level errors.

Errors never cross a component boundary as raised exceptions: adapters and
services wrap them in a ``Failure`` (see ``domain.model.result``).
Route handlers unwrap the failure and map it to an HTTP status code.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidWordError(DomainError):
    """Caller supplied an empty or missing word."""


class ApplicationError(DomainError):
    """Unexpected failure behind the service boundary.

    ``message`` is safe to show to callers; ``cause`` keeps the internal
    error for logging only.
    """


class ProviderError(DomainError):
    """External dictionary failed to produce an entry."""


class CacheError(DomainError):
    """Dictionary cache backend failed."""


class EntryDecodeError(DomainError):
    """Serialized dictionary entry could not be reconstructed."""
