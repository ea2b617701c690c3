"""
Pivotal Network API client.

This module provides the shared HTTP client used by every resource
service. It builds request URLs, attaches the API token, marshals JSON
bodies and turns unexpected status codes into exceptions.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import jwt
import requests
from ratelimit import limits, sleep_and_retry

from .auth import AuthService
from .eulas import EULAsService
from .exceptions import AuthenticationError, PivnetError, ValidationError, error_for_status
from .product_files import ProductFilesService
from .products import ProductsService
from .release_dependencies import ReleaseDependenciesService
from .release_upgrade_paths import ReleaseUpgradePathsService
from .releases import ReleasesService, ReleaseTypesService
from .user_groups import UserGroupsService
from .utils import is_legacy_token

logger = logging.getLogger(__name__)


class PivnetClient:
    """
    Pivotal Network API client.

    Holds the connection settings and exposes one service object per API
    resource (``client.products``, ``client.releases`` and so on).

    Args:
        token: Legacy API token or UAA refresh token
        host: Base URL of the Pivotal Network installation
        user_agent: Value sent in the User-Agent header
        skip_ssl_validation: Disable TLS certificate verification
        timeout: Per-request timeout in seconds
        session: Optional pre-configured requests session
    """

    DEFAULT_HOST = "https://network.pivotal.io"
    API_PREFIX = "/api/v2"
    DEFAULT_USER_AGENT = "pivnet-client"

    # Access tokens without a readable expiry are kept this long
    ACCESS_TOKEN_LIFETIME = 3600
    ACCESS_TOKEN_REFRESH_MARGIN = 60

    def __init__(
        self,
        token: str,
        host: str = DEFAULT_HOST,
        user_agent: str = DEFAULT_USER_AGENT,
        skip_ssl_validation: bool = False,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the Pivotal Network API client."""
        if not token:
            raise ValidationError("API token cannot be empty")
        if not host:
            raise ValidationError("Host cannot be empty")

        self.token = token
        self.host = host.rstrip("/")
        self.base_url = f"{self.host}{self.API_PREFIX}"
        self.user_agent = user_agent
        self.skip_ssl_validation = skip_ssl_validation
        self.timeout = timeout
        self.session = session or requests.Session()
        self._access_token: Optional[str] = None
        self._access_token_expiry: Optional[int] = None

        self.auth = AuthService(self)
        self.products = ProductsService(self)
        self.releases = ReleasesService(self)
        self.release_types = ReleaseTypesService(self)
        self.eulas = EULAsService(self)
        self.product_files = ProductFilesService(self)
        self.user_groups = UserGroupsService(self)
        self.release_dependencies = ReleaseDependenciesService(self)
        self.release_upgrade_paths = ReleaseUpgradePathsService(self)

    def _get_access_token(self) -> str:
        """Exchange the refresh token for an access token, reusing a cached one."""
        current_time = int(datetime.now(timezone.utc).timestamp())

        if (
            self._access_token
            and self._access_token_expiry
            and current_time < self._access_token_expiry
        ):
            return self._access_token

        access_token = self.auth.get_access_token(self.token)

        try:
            claims = jwt.decode(access_token, options={"verify_signature": False})
            expiry = int(claims["exp"])
        except (jwt.PyJWTError, KeyError, TypeError, ValueError):
            logger.debug("Access token has no readable expiry, using default lifetime")
            expiry = current_time + self.ACCESS_TOKEN_LIFETIME

        self._access_token = access_token
        self._access_token_expiry = expiry - self.ACCESS_TOKEN_REFRESH_MARGIN
        return self._access_token

    def _get_headers(self, authenticated: bool = True) -> Dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if not authenticated:
            return headers

        if is_legacy_token(self.token):
            headers["Authorization"] = f"Token {self.token}"
        else:
            headers["Authorization"] = f"Bearer {self._get_access_token()}"
        return headers

    @staticmethod
    def _extract_error(response: requests.Response):
        """Pull the message (and error list, if any) out of an error body."""
        errors = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            errors = body.get("errors")
            if body.get("message"):
                return str(body["message"]), errors

        text = (response.text or "").strip()
        if text:
            return text, errors
        return f"Pivnet returned status code {response.status_code}", errors

    def _make_request_raw(
        self,
        method: str,
        endpoint: str,
        expected_status: Optional[int] = 200,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> requests.Response:
        """Issue one request and check its status code."""
        url = f"{self.base_url}{endpoint}"
        headers = self._get_headers(authenticated=authenticated)

        logger.debug(f"make_request: {method} {url}")
        if data is not None:
            logger.debug(f"make_request: body={data}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=data,
                timeout=self.timeout,
                verify=not self.skip_ssl_validation,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"make_request: {method} {url} failed: {e}")
            raise PivnetError(f"Request failed: {e}")

        logger.debug(f"make_request: response status={response.status_code}")

        if expected_status is not None and response.status_code != expected_status:
            message, errors = self._extract_error(response)
            logger.info(
                f"make_request: {method} {url} returned {response.status_code}, "
                f"expected {expected_status}: {message}"
            )
            raise error_for_status(response.status_code, message, errors)

        return response

    @sleep_and_retry
    @limits(calls=600, period=60)
    def make_request(self, *args, **kwargs) -> requests.Response:
        """Rate-limited wrapper for _make_request_raw."""
        return self._make_request_raw(*args, **kwargs)

    @staticmethod
    def decode(response: requests.Response) -> Any:
        """
        Decode a JSON response body.

        Returns:
            The decoded body, or an empty dict for an empty or ``null`` body

        Raises:
            PivnetError: If the body is not valid JSON
        """
        content = (response.content or b"").strip()
        if not content or content == b"null":
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise PivnetError(f"Failed to decode response from {response.url}: {e}")

    def request_json(
        self,
        method: str,
        endpoint: str,
        expected_status: Optional[int] = 200,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> Any:
        """Make a request and decode its JSON body."""
        response = self.make_request(
            method,
            endpoint,
            expected_status=expected_status,
            data=data,
            params=params,
            authenticated=authenticated,
        )
        return self.decode(response)


def create_client(
    token: str, host: str = PivnetClient.DEFAULT_HOST, **kwargs: Any
) -> PivnetClient:
    """
    Convenience function to create a client and verify the token.

    Args:
        token: Legacy API token or UAA refresh token
        host: Base URL of the Pivotal Network installation
        **kwargs: Passed through to PivnetClient

    Returns:
        Configured PivnetClient instance

    Raises:
        AuthenticationError: If the token is rejected
    """
    client = PivnetClient(token=token, host=host, **kwargs)
    if not client.auth.check():
        raise AuthenticationError("Token was rejected by Pivotal Network")
    return client
