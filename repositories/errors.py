"""
repositories/errors.py
----------------------
Errors raised by the data access layer.

A missing row is never an error: single-row lookups return None and
collection queries return an empty list. Anything the driver rejects
surfaces as QueryFailedError with the driver exception attached.
"""


class QueryFailedError(Exception):
    """
    A statement could not be executed.

    Attributes:
        operation: Short description of what was attempted.
        cause: The underlying psycopg2 exception.
    """

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause
