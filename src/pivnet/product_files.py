"""Product files endpoints."""

import logging
from typing import List

from .exceptions import ValidationError
from .models import ProductFile
from .utils import validate_id, validate_slug

logger = logging.getLogger(__name__)


class ProductFilesService:
    def __init__(self, client):
        self.client = client

    def list(self, product_slug: str) -> List[ProductFile]:
        """List every product file of a product."""
        product_slug = validate_slug(product_slug)
        body = self.client.request_json("GET", f"/products/{product_slug}/product_files")
        return ProductFile.from_list(body.get("product_files"))

    def list_for_release(self, product_slug: str, release_id: int) -> List[ProductFile]:
        """List the product files attached to one release."""
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        body = self.client.request_json(
            "GET", f"/products/{product_slug}/releases/{release_id}/product_files"
        )
        return ProductFile.from_list(body.get("product_files"))

    def get(self, product_slug: str, product_file_id: int) -> ProductFile:
        product_slug = validate_slug(product_slug)
        product_file_id = validate_id(product_file_id, "Product file ID")
        body = self.client.request_json(
            "GET", f"/products/{product_slug}/product_files/{product_file_id}"
        )
        return ProductFile.from_dict(body.get("product_file"))

    def get_for_release(
        self, product_slug: str, release_id: int, product_file_id: int
    ) -> ProductFile:
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        product_file_id = validate_id(product_file_id, "Product file ID")
        body = self.client.request_json(
            "GET",
            f"/products/{product_slug}/releases/{release_id}"
            f"/product_files/{product_file_id}",
        )
        return ProductFile.from_dict(body.get("product_file"))

    def create(self, product_slug: str, product_file: ProductFile) -> ProductFile:
        """
        Create a product file record for an object already uploaded to S3.

        Raises:
            ValidationError: If ``aws_object_key`` is empty
        """
        product_slug = validate_slug(product_slug)
        if not product_file.aws_object_key:
            raise ValidationError("AWS object key must not be empty")

        body = self.client.request_json(
            "POST",
            f"/products/{product_slug}/product_files",
            expected_status=201,
            data={"product_file": product_file.to_dict()},
        )
        created = ProductFile.from_dict(body.get("product_file"))
        logger.info(f"Created product file {created.id} for {product_slug}")
        return created

    def delete(self, product_slug: str, product_file_id: int) -> ProductFile:
        """Delete a product file and return the deleted record."""
        product_slug = validate_slug(product_slug)
        product_file_id = validate_id(product_file_id, "Product file ID")
        body = self.client.request_json(
            "DELETE", f"/products/{product_slug}/product_files/{product_file_id}"
        )
        return ProductFile.from_dict(body.get("product_file"))

    def add_to_release(
        self, product_slug: str, release_id: int, product_file_id: int
    ) -> None:
        self._patch_release(product_slug, release_id, product_file_id, "add_product_file")

    def remove_from_release(
        self, product_slug: str, release_id: int, product_file_id: int
    ) -> None:
        self._patch_release(
            product_slug, release_id, product_file_id, "remove_product_file"
        )

    def _patch_release(
        self, product_slug: str, release_id: int, product_file_id: int, action: str
    ) -> None:
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        product_file_id = validate_id(product_file_id, "Product file ID")
        self.client.make_request(
            "PATCH",
            f"/products/{product_slug}/releases/{release_id}/{action}",
            expected_status=204,
            data={"product_file": {"id": product_file_id}},
        )
