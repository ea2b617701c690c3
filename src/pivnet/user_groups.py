"""User groups endpoints."""

import logging
from typing import List, Optional

from .exceptions import ValidationError
from .models import UserGroup
from .utils import validate_id, validate_slug

logger = logging.getLogger(__name__)


class UserGroupsService:
    def __init__(self, client):
        self.client = client

    def list(self) -> List[UserGroup]:
        body = self.client.request_json("GET", "/user_groups")
        return UserGroup.from_list(body.get("user_groups"))

    def list_for_release(self, product_slug: str, release_id: int) -> List[UserGroup]:
        """List the user groups allowed to see a release."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        body = self.client.request_json(
            "GET", f"/products/{product_slug}/releases/{release_id}/user_groups"
        )
        return UserGroup.from_list(body.get("user_groups"))

    def get(self, user_group_id: int) -> UserGroup:
        user_group_id = validate_id(user_group_id, "User group ID")
        body = self.client.request_json("GET", f"/user_groups/{user_group_id}")
        return UserGroup.from_dict(body)

    def create(
        self, name: str, description: str, members: Optional[List[str]] = None
    ) -> UserGroup:
        """
        Create a user group.

        Args:
            name: Group name
            description: Group description
            members: Optional list of member email addresses

        Returns:
            The created user group
        """
        if not name:
            raise ValidationError("User group name cannot be empty")
        if not description:
            raise ValidationError("User group description cannot be empty")

        group = UserGroup(name=name, description=description, members=members or [])
        body = self.client.request_json(
            "POST",
            "/user_groups",
            expected_status=201,
            data={"user_group": group.to_dict()},
        )
        created = UserGroup.from_dict(body.get("user_group") or body)
        logger.info(f"Created user group {created.id} ({created.name})")
        return created

    def delete(self, user_group_id: int) -> None:
        user_group_id = validate_id(user_group_id, "User group ID")
        self.client.make_request(
            "DELETE", f"/user_groups/{user_group_id}", expected_status=204
        )

    def add_to_release(
        self, product_slug: str, release_id: int, user_group_id: int
    ) -> None:
        self._patch_release(product_slug, release_id, user_group_id, "add_user_group")

    def remove_from_release(
        self, product_slug: str, release_id: int, user_group_id: int
    ) -> None:
        self._patch_release(product_slug, release_id, user_group_id, "remove_user_group")

    def _patch_release(
        self, product_slug: str, release_id: int, user_group_id: int, action: str
    ) -> None:
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        user_group_id = validate_id(user_group_id, "User group ID")
        self.client.make_request(
            "PATCH",
            f"/products/{product_slug}/releases/{release_id}/{action}",
            expected_status=204,
            data={"user_group": {"id": user_group_id}},
        )
