class UserNotFoundException(Exception):
    """Raised when a requested API user does not exist."""


class MalformedUserException(Exception):
    """Raised when user input fails validation."""


class DuplicateUserException(Exception):
    """Raised when a user with the same username already exists."""


class UserStoreException(Exception):
    """Raised when the users file cannot be read."""
