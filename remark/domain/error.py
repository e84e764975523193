"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ClientInputError(DomainError):
    """Raised when a request is rejected because of what the client sent.

    These are reported back with a human-readable reason and never retried.
    """

    pass


class GateFailureError(ClientInputError):
    """Raised when the verification token does not match."""

    def __init__(self) -> None:
        super().__init__("CAPTCHA verification failed")


class UnsupportedAttachmentError(ClientInputError):
    """Raised when an attachment has a content type that is not accepted."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(f"Unsupported attachment type: {content_type}")


class AttachmentTooLargeError(ClientInputError):
    """Raised when an attachment exceeds the size ceiling."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Attachment size {size} bytes exceeds the limit of {limit}")


class InvalidSortParameterError(ClientInputError):
    """Raised when a listing is requested with an unknown sort field or order."""

    def __init__(self, parameter: str, value: str):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid {parameter}: {value}")


class ParentNotFoundError(ClientInputError):
    """Raised when a reply references a comment that does not exist."""

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Parent comment not found: {parent_id}")


class EmptyContentError(ClientInputError):
    """Raised when a required field is empty once sanitized."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is empty after sanitization")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AttachmentProcessingError(DomainError):
    """Raised when an attachment cannot be normalized or stored."""

    pass


class StoreError(DomainError):
    """Raised when the record store fails."""

    pass


class ThreadTooDeepError(StoreError):
    """Raised when a reply chain is deeper than the assembler allows."""

    def __init__(self, comment_id: int, max_depth: int):
        self.comment_id = comment_id
        self.max_depth = max_depth
        super().__init__(
            f"Thread below comment {comment_id} exceeds maximum depth {max_depth}"
        )
