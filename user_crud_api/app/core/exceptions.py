"""
Exceptions raised by the data-access layer.

Handlers translate these into HTTP responses; the store never raises
``HTTPException`` itself.
"""


class UserStoreError(Exception):
    """Base class for every error raised by a user store."""


class StoreError(UserStoreError):
    """The backend failed: connectivity, constraint or unexpected fault."""


class DuplicateEmailError(StoreError):
    """A write would give two records the same email."""

    def __init__(self, email: str):
        super().__init__(f"Email {email!r} is already in use")
        self.email = email


class UserNotFoundError(UserStoreError):
    """No record matches the requested id."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id
