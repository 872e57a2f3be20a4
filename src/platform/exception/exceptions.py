from typing import Any, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int, details: Optional[list[dict[str, Any]]] = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConfigurationError(CustomBaseError):
    """Server misconfiguration (missing or under-privileged credentials). Never degrades silently."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class UnexpectedError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


# ============================ Infrastructure errors ============================


class ContentStoreError(Exception):
    """Raised by content store clients when the store rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_permission_error(self) -> bool:
        return self.status_code in (401, 403) or 'permission' in self.message.lower()


class RevisionConflictError(ContentStoreError):
    """The document changed since it was read (ifRevisionID mismatch)."""

    def __init__(self, document_id: str) -> None:
        super().__init__(f'Revision conflict on document {document_id}', 409)
        self.document_id = document_id


class EmailDeliveryError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
