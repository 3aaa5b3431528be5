"""GitHub username validation."""

from __future__ import annotations

MAX_USERNAME_LENGTH = 39


class InvalidUsernameError(ValueError):
    """Raised when a username cannot be a GitHub login."""

    @classmethod
    def empty(cls) -> InvalidUsernameError:
        """Return an error for an empty username."""
        return cls("Invalid username: username cannot be empty")

    @classmethod
    def contains_whitespace(cls, username: str) -> InvalidUsernameError:
        """Return an error for a username containing whitespace."""
        return cls(f"Invalid username {username!r}: username cannot contain spaces")

    @classmethod
    def too_long(cls, username: str) -> InvalidUsernameError:
        """Return an error for a username over the GitHub length limit."""
        return cls(
            f"Invalid username {username!r}: username is too long "
            f"(max {MAX_USERNAME_LENGTH} characters)"
        )


def validate_username(username: str) -> str:
    """Return ``username`` unchanged if it is shaped like a GitHub login.

    Raises
    ------
    InvalidUsernameError
        If the name is empty, contains whitespace, or is longer than
        39 characters.

    Examples
    --------
    >>> validate_username("octocat")
    'octocat'

    """
    if not username:
        raise InvalidUsernameError.empty()
    if any(char.isspace() for char in username):
        raise InvalidUsernameError.contains_whitespace(username)
    if len(username) > MAX_USERNAME_LENGTH:
        raise InvalidUsernameError.too_long(username)
    return username
