"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthorizedError(DomainError):
    """Raised when an operation requires a signed-in user."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class FormError(DomainError):
    """Domain error that belongs to a submitted form as a whole."""

    pass


class UsernameTakenError(FormError):
    """Raised when signing up with a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username already used")


class InvalidCredentialsError(FormError):
    """Raised when a login does not match any user/password pair."""

    def __init__(self) -> None:
        super().__init__("Incorrect username or password")


class EmptyPostError(FormError):
    """Raised when a post has neither a url nor a text body."""

    def __init__(self) -> None:
        super().__init__("Either URL or content must be provided")
