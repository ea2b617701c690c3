"""Products endpoints."""

from typing import List

from .models import Product
from .utils import validate_slug


class ProductsService:
    def __init__(self, client):
        self.client = client

    def list(self) -> List[Product]:
        """List every product visible to the token."""
        body = self.client.request_json("GET", "/products")
        return Product.from_list(body.get("products"))

    def get(self, slug: str) -> Product:
        """Fetch a single product by slug."""
        slug = validate_slug(slug)
        body = self.client.request_json("GET", f"/products/{slug}")
        return Product.from_dict(body)
