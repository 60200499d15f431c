"""Exception hierarchy for s3-explorer."""

from typing import Optional


class S3ExplorerError(Exception):
    """Base exception for all s3-explorer errors."""

    pass


class ValidationError(S3ExplorerError):
    """Raised when inputs are rejected before any network call."""

    pass


class SessionError(S3ExplorerError):
    """Raised when a session identifier is unknown to the registry."""

    def __init__(self, session_id: str):
        super().__init__(f"Invalid session '{session_id}'. Please re-enter credentials.")
        self.session_id = session_id


class StorageError(S3ExplorerError):
    """Raised when the object store fails while listing or reading.

    The provider's message is kept verbatim in ``details`` and the original
    exception in ``cause``.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        bucket: Optional[str] = None,
        prefix: Optional[str] = None,
    ):
        self.details = str(cause) if cause is not None else message
        super().__init__(f"{message}: {self.details}" if cause is not None else message)
        self.cause = cause
        self.bucket = bucket
        self.prefix = prefix
