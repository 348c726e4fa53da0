"""
Exceptions raised by the service layer.
"""


class TodoApiError(Exception):
    """Base class for errors raised by the todo services."""
    pass


class DataNotFoundError(TodoApiError):
    """An identifier supplied by the caller does not resolve in its store."""
    pass
