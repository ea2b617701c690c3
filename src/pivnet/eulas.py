"""EULA endpoints."""

import logging
from typing import List

from .models import EULA, EULAAcceptanceResponse
from .utils import validate_id, validate_slug

logger = logging.getLogger(__name__)


class EULAsService:
    def __init__(self, client):
        self.client = client

    def list(self) -> List[EULA]:
        body = self.client.request_json("GET", "/eulas")
        return EULA.from_list(body.get("eulas"))

    def get(self, eula_slug: str) -> EULA:
        eula_slug = validate_slug(eula_slug, "EULA slug")
        body = self.client.request_json("GET", f"/eulas/{eula_slug}")
        return EULA.from_dict(body)

    def accept(self, product_slug: str, release_id: int) -> EULAAcceptanceResponse:
        """
        Accept the EULA attached to a release.

        Downloads of a release's product files are refused with HTTP 451
        until its EULA has been accepted by the token's user.
        """
        product_slug = validate_slug(product_slug)
        release_id = validate_id(release_id, "Release ID")
        body = self.client.request_json(
            "POST",
            f"/products/{product_slug}/releases/{release_id}/eula_acceptance",
        )
        logger.info(f"Accepted EULA for release {release_id} of {product_slug}")
        return EULAAcceptanceResponse.from_dict(body)
