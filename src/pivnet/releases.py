"""
Releases endpoints.

Releases are addressed by product slug and integer ID. The command-line
interface works with release versions instead, so this module also offers
``get_by_version`` to resolve a version against the product's release list.
"""

import logging
from typing import List

from .exceptions import NotFoundError, ValidationError
from .models import Release
from .utils import validate_id, validate_slug

logger = logging.getLogger(__name__)


class ReleasesService:
    def __init__(self, client):
        self.client = client

    def list(self, product_slug: str) -> List[Release]:
        """List all releases of a product."""
        product_slug = validate_slug(product_slug)
        body = self.client.request_json("GET", f"/products/{product_slug}/releases")
        return Release.from_list(body.get("releases"))

    def get(self, product_slug: str, release_id: int) -> Release:
        """Fetch a single release."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        body = self.client.request_json(
            "GET", f"/products/{product_slug}/releases/{release_id}"
        )
        return Release.from_dict(body)

    def get_by_version(self, product_slug: str, version: str) -> Release:
        """
        Find a release by its version string.

        Args:
            product_slug: Product the release belongs to
            version: Exact release version, e.g. ``1.2.3``

        Returns:
            The matching release

        Raises:
            NotFoundError: If the product has no release with that version
        """
        if not version:
            raise ValidationError("Release version cannot be empty")

        for release in self.list(product_slug):
            if release.version == version:
                return release

        raise NotFoundError(
            f"Release for product '{product_slug}' with version '{version}' not found",
            status_code=404,
        )

    def create(
        self, product_slug: str, release: Release, copy_metadata: bool = False
    ) -> Release:
        """
        Create a new release.

        Args:
            product_slug: Product to create the release under
            release: Release to create; version, release type and EULA are required
            copy_metadata: Copy metadata from the previous release

        Returns:
            The created release as returned by the API

        Raises:
            ValidationError: If a required field is missing
        """
        product_slug = validate_slug(product_slug)

        if not release.version:
            raise ValidationError("Release version cannot be empty")
        if not release.release_type:
            raise ValidationError("Release type cannot be empty")
        if release.eula is None or not release.eula.slug:
            raise ValidationError("Release EULA slug cannot be empty")

        body = self.client.request_json(
            "POST",
            f"/products/{product_slug}/releases",
            expected_status=201,
            data={"release": release.to_dict(), "copy_metadata": copy_metadata},
        )
        created = Release.from_dict(body.get("release"))
        logger.info(f"Created release {created.id} ({created.version}) of {product_slug}")
        return created

    def update(self, product_slug: str, release: Release) -> Release:
        """Update an existing release; the release ID selects which one."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release.id, "Release ID")

        payload = release.to_dict()
        payload.pop("id", None)

        body = self.client.request_json(
            "PATCH",
            f"/products/{product_slug}/releases/{release_id}",
            data={"release": payload},
        )
        return Release.from_dict(body.get("release"))

    def delete(self, product_slug: str, release: Release) -> None:
        """Delete a release."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release.id, "Release ID")
        self.client.make_request(
            "DELETE",
            f"/products/{product_slug}/releases/{release_id}",
            expected_status=204,
        )
        logger.info(f"Deleted release {release_id} of {product_slug}")


class ReleaseTypesService:
    def __init__(self, client):
        self.client = client

    def list(self) -> List[str]:
        """List the release types a release may be created with."""
        body = self.client.request_json("GET", "/releases/release_types")
        return list(body.get("release_types") or [])
