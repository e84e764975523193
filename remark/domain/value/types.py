"""Domain value types."""

from enum import Enum


class SortField(str, Enum):
    """Fields top-level comments can be ordered by.

    Values are the names clients use in the ``sortBy`` query parameter.
    """

    USER_NAME = "userName"
    EMAIL = "email"
    DATE = "date"


class SortOrder(str, Enum):
    """Direction of a listing."""

    ASC = "asc"
    DESC = "desc"
