"""Release dependencies endpoints."""

from typing import List

from .models import ReleaseDependency
from .utils import validate_id, validate_slug


class ReleaseDependenciesService:
    def __init__(self, client):
        self.client = client

    def list(self, product_slug: str, release_id: int) -> List[ReleaseDependency]:
        """List the releases a release depends on."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        body = self.client.request_json(
            "GET", f"/products/{product_slug}/releases/{release_id}/dependencies"
        )
        return ReleaseDependency.from_list(body.get("dependencies"))

    def add(
        self, product_slug: str, release_id: int, dependent_release_id: int
    ) -> None:
        self._patch(product_slug, release_id, dependent_release_id, "add_dependency")

    def remove(
        self, product_slug: str, release_id: int, dependent_release_id: int
    ) -> None:
        self._patch(product_slug, release_id, dependent_release_id, "remove_dependency")

    def _patch(
        self,
        product_slug: str,
        release_id: int,
        dependent_release_id: int,
        action: str,
    ) -> None:
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        dependent_release_id = validate_id(dependent_release_id, "Dependent release ID")
        self.client.make_request(
            "PATCH",
            f"/products/{product_slug}/releases/{release_id}/{action}",
            expected_status=204,
            data={"dependency": {"release_id": dependent_release_id}},
        )
