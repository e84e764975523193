"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class MalformedRequestError(InterfaceError):
    """Raised when a request body cannot be read or has invalid fields."""

    pass
