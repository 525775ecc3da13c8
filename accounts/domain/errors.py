"""Domain errors for the accounts module."""

from common.errors import DomainError, ErrorCode


class UserNotFoundError(DomainError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message="User not found")
        self.user_id = user_id


class EmailTakenError(DomainError):
    """Raised when registering an email that already has an account."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EMAIL_TAKEN, message="User already exists")


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid credentials")


class CannotDeleteSelfError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CANNOT_DELETE_SELF,
            message="Admins cannot delete their own account",
        )
