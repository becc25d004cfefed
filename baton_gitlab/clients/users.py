"""Users resource client."""

from typing import TYPE_CHECKING

from baton_gitlab.types.gitlab import User

if TYPE_CHECKING:
    from baton_gitlab.transport import HTTPTransport


class UsersClient:
    """Client for user account lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(self, user_id: int) -> User:
        """
        Get a user account.

        Raises:
            NotFoundError: If the user does not exist
            RemoteRequestFailed: On other API errors
        """
        response = self.transport.request("GET", f"/users/{int(user_id)}")
        return User.from_json(response.data)

    def current(self) -> User:
        """Get the account the access token belongs to."""
        response = self.transport.request("GET", "/user")
        return User.from_json(response.data)
