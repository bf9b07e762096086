"""
Domain errors raised by the service layer.

These are expected, recoverable outcomes of business rules. The API layer turns
every subclass of ``DomainError`` into a 400 response carrying ``message``;
anything else is treated as an infrastructure failure.
"""


class DomainError(Exception):
    """Base class for business-rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Referenced item or user id does not exist."""


class AlreadyExistsError(DomainError):
    """Username is taken."""


class InsufficientStockError(DomainError):
    """A stock adjustment would leave the amount negative."""

    def __init__(self, current: int, delta: int):
        super().__init__(f"Insufficient stock amount. Current: {current}, requested: {delta}")
        self.current = current
        self.delta = delta


class InvalidCredentialsError(DomainError):
    """Login failed. Deliberately the same for unknown user and wrong password."""

    def __init__(self):
        super().__init__("Username or password is incorrect")
