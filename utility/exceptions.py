# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: exceptions.py
# -----------------------------------------------------------------------------
"""
Error taxonomy for the word vector server.

Build-time errors (ParseError, VectorFileIOError, IndexBuildError) are fatal
and abort startup. Query-time errors (NotFoundError, DimensionMismatch) are
recoverable and mapped to HTTP status codes by the routers
(InvalidVectorError, like DimensionMismatch, becomes a 400).
"""


class W2VError(Exception):
    """Base exception for all word vector server errors."""
    pass


class ParseError(W2VError):
    """
    The embedding dump could not be parsed.

    Raised when:
    - the header is malformed
    - a record is truncated
    - a record's vector length disagrees with the declared dimension
    - a vector cannot be normalized under the configured policy
    """

    def __init__(self, message: str, record: int | None = None):
        if record is not None:
            message = f"record {record}: {message}"
        super().__init__(message)
        self.record = record


class VectorFileIOError(W2VError, OSError):
    """The embedding file could not be opened or read."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class IndexBuildError(W2VError):
    """
    The ANN index rejected an insert.

    Raised when:
    - an id is inserted twice
    - a vector's dimension disagrees with the index dimension
    - the index is inserted into after it was sealed
    """
    pass


class NotFoundError(W2VError, KeyError):
    """The requested word is not in the store."""

    def __init__(self, word: str):
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"word not found: {self.word!r}"


class DimensionMismatch(W2VError, ValueError):
    """A query vector's length differs from the store dimension."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"expected vector of dimension {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class ModelNotLoadedError(W2VError):
    """The application container has not been initialised."""
    pass


class InvalidVectorError(W2VError, ValueError):
    """A query vector holds a NaN or infinite component."""

    def __init__(self, message: str = "query vector contains non-finite values"):
        super().__init__(message)
