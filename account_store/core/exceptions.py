"""
Store Exceptions

Errors raised by the store itself. Database engine errors
(IntegrityError, OperationalError) are not wrapped and reach
the caller as SQLAlchemy raised them.
"""


class StoreError(Exception):
    """Base class for store errors."""


class NotInitializedError(StoreError):
    """Raised when the store is used before initialize()."""

    def __init__(self, message: str = "Database not initialized"):
        super().__init__(message)


class UserAlreadyExistsError(StoreError):
    """Raised when creating a user whose email is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class RequiredFieldMissingError(StoreError, ValueError):
    """Raised when a required argument is missing or empty."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class TokenAccountNotFoundError(StoreError):
    """Raised when a user has no token account."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Token account not found for user {user_id}")


class InsufficientTokensError(StoreError):
    """Raised when a debit exceeds the available balance."""

    def __init__(self, user_id: str, requested: int, available: int):
        self.user_id = user_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"User {user_id} requested {requested} tokens but only {available} are available"
        )
