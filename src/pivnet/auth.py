"""Authentication endpoints."""

import logging

from .exceptions import AuthenticationError, PivnetError

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client):
        self.client = client

    def check(self) -> bool:
        """Return True when the configured token is accepted by the API."""
        self.client.make_request("GET", "/authentication", expected_status=200)
        return True

    def get_access_token(self, refresh_token: str) -> str:
        """
        Exchange a UAA refresh token for a short-lived access token.

        Args:
            refresh_token: The refresh token issued by Pivotal Network

        Returns:
            The access token

        Raises:
            AuthenticationError: If the exchange is rejected or returns no token
        """
        logger.debug("Exchanging refresh token for access token")
        try:
            body = self.client.request_json(
                "POST",
                "/authentication/access_tokens",
                expected_status=200,
                data={"refresh_token": refresh_token},
                authenticated=False,
            )
        except AuthenticationError:
            raise
        except PivnetError as e:
            raise AuthenticationError(
                f"Failed to get access token: {e}", status_code=e.status_code
            )

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token:
            raise AuthenticationError("Failed to get access token: empty response")
        return access_token
