"""Release upgrade paths endpoints."""

from typing import List

from .models import ReleaseUpgradePath
from .utils import validate_id, validate_slug


class ReleaseUpgradePathsService:
    def __init__(self, client):
        self.client = client

    def get(self, product_slug: str, release_id: int) -> List[ReleaseUpgradePath]:
        """List the releases that can be upgraded to the given release."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        body = self.client.request_json(
            "GET", f"/products/{product_slug}/releases/{release_id}/upgrade_paths"
        )
        return ReleaseUpgradePath.from_list(body.get("upgrade_paths"))

    def add(
        self, product_slug: str, release_id: int, previous_release_id: int
    ) -> None:
        self._patch(product_slug, release_id, previous_release_id, "add_upgrade_path")

    def remove(
        self, product_slug: str, release_id: int, previous_release_id: int
    ) -> None:
        self._patch(
            product_slug, release_id, previous_release_id, "remove_upgrade_path"
        )

    def _patch(
        self,
        product_slug: str,
        release_id: int,
        previous_release_id: int,
        action: str,
    ) -> None:
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        previous_release_id = validate_id(previous_release_id, "Previous release ID")
        self.client.make_request(
            "PATCH",
            f"/products/{product_slug}/releases/{release_id}/{action}",
            expected_status=204,
            data={"upgrade_path": {"release_id": previous_release_id}},
        )
