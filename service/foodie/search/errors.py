"""Failure taxonomy for restaurant searches."""


class SearchError(RuntimeError):
    """Base class for errors surfaced by a search."""


class InvalidRequest(SearchError, ValueError):
    """Raised when search criteria cannot be turned into a well-formed upstream request."""


class TransportFailure(SearchError):
    """Raised when the upstream call fails at the network level or answers with a non-2xx status."""


class EmptyResponseBody(SearchError):
    """Raised when upstream answers without a body."""


class DecodeFailure(SearchError):
    """Raised when the response body does not match the expected envelope."""
