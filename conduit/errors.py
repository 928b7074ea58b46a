class UserStoreError(RuntimeError):
    """Raised when the user table cannot be read or written.

    The original SQLAlchemy exception is always chained so it can be logged,
    but it never reaches a response body.
    """


class UserConflictError(UserStoreError):
    """A username or email is already registered."""
