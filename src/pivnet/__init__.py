"""
pivnet-client

A Python client and command-line interface for the Pivotal Network API,
covering products, releases, EULAs, product files, user groups, release
dependencies and release upgrade paths.
"""

from .client import PivnetClient, create_client
from .models import (
    EULA,
    DependentRelease,
    EULAAcceptanceResponse,
    Product,
    ProductFile,
    Release,
    ReleaseDependency,
    ReleaseUpgradePath,
    UpgradePathRelease,
    UserGroup,
)
from .exceptions import (
    PivnetError,
    AuthenticationError,
    PermissionError,
    NotFoundError,
    RateLimitError,
    EULANotAcceptedError,
    ServerError,
    ValidationError,
)
from . import utils

__version__ = "dev"

__all__ = [
    "PivnetClient",
    "create_client",
    "Product",
    "Release",
    "EULA",
    "EULAAcceptanceResponse",
    "ProductFile",
    "UserGroup",
    "ReleaseDependency",
    "DependentRelease",
    "ReleaseUpgradePath",
    "UpgradePathRelease",
    "PivnetError",
    "AuthenticationError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "EULANotAcceptedError",
    "ServerError",
    "ValidationError",
    "utils",
]
