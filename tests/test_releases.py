"""
Tests for the releases and release types services.
"""

import pytest

from pivnet.exceptions import NotFoundError, PivnetError, ValidationError
from pivnet.models import EULA, Release

from .helpers import build_response, request_kwargs, url_for

PRODUCT_SLUG = "some-product-slug"

RELEASES_BODY = {
    "releases": [
        {"id": 1234, "version": "some-release-version"},
        {"id": 2345, "version": "another-release-version"},
    ]
}


class TestReleasesList:
    def test_list(self, client, session):
        session.request.return_value = build_response(200, RELEASES_BODY)

        releases = client.releases.list(PRODUCT_SLUG)

        assert request_kwargs(session)["url"] == url_for(f"/products/{PRODUCT_SLUG}/releases")
        assert [r.id for r in releases] == [1234, 2345]

    def test_get(self, client, session):
        session.request.return_value = build_response(
            200,
            {
                "id": 1234,
                "version": "1.0.0",
                "eula": {"slug": "some-eula", "id": 3},
                "controlled": True,
                "_links": {"self": {"href": "https://example.com"}},
            },
        )

        release = client.releases.get(PRODUCT_SLUG, 1234)

        assert request_kwargs(session)["url"] == url_for(
            f"/products/{PRODUCT_SLUG}/releases/1234"
        )
        assert release.eula == EULA(id=3, slug="some-eula")
        assert release.controlled is True
        assert release.links["self"]["href"] == "https://example.com"

    def test_get_by_version(self, client, session):
        session.request.return_value = build_response(200, RELEASES_BODY)

        release = client.releases.get_by_version(PRODUCT_SLUG, "another-release-version")

        assert release.id == 2345

    def test_get_by_version_missing(self, client, session):
        session.request.return_value = build_response(200, RELEASES_BODY)

        with pytest.raises(NotFoundError, match="not-a-version"):
            client.releases.get_by_version(PRODUCT_SLUG, "not-a-version")

    def test_get_by_version_list_error(self, client, session):
        session.request.return_value = build_response(418, {"message": "foo message"})

        with pytest.raises(PivnetError, match="foo message"):
            client.releases.get_by_version(PRODUCT_SLUG, "1.0.0")


class TestReleasesWrite:
    def test_create(self, client, session):
        session.request.return_value = build_response(
            201, {"release": {"id": 99, "version": "2.0.0"}}
        )
        release = Release(
            version="2.0.0",
            release_type="Major Release",
            eula=EULA(slug="some-eula"),
        )

        created = client.releases.create(PRODUCT_SLUG, release, copy_metadata=True)

        kwargs = request_kwargs(session)
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == url_for(f"/products/{PRODUCT_SLUG}/releases")
        assert kwargs["json"] == {
            "release": {
                "version": "2.0.0",
                "release_type": "Major Release",
                "eula": {"slug": "some-eula"},
            },
            "copy_metadata": True,
        }
        assert created.id == 99

    @pytest.mark.parametrize(
        "release, message",
        [
            (Release(release_type="Major Release", eula=EULA(slug="e")), "version"),
            (Release(version="1.0", eula=EULA(slug="e")), "type"),
            (Release(version="1.0", release_type="Major Release"), "EULA"),
        ],
    )
    def test_create_requires_fields(self, client, session, release, message):
        with pytest.raises(ValidationError, match=message):
            client.releases.create(PRODUCT_SLUG, release)
        session.request.assert_not_called()

    def test_create_unexpected_status(self, client, session):
        session.request.return_value = build_response(200, {"release": {}})
        release = Release(version="1", release_type="Major Release", eula=EULA(slug="e"))

        with pytest.raises(PivnetError):
            client.releases.create(PRODUCT_SLUG, release)

    def test_update(self, client, session):
        session.request.return_value = build_response(
            200, {"release": {"id": 1234, "version": "1.0.1"}}
        )

        updated = client.releases.update(
            PRODUCT_SLUG, Release(id=1234, version="1.0.1", description="patched")
        )

        kwargs = request_kwargs(session)
        assert kwargs["method"] == "PATCH"
        assert kwargs["url"] == url_for(f"/products/{PRODUCT_SLUG}/releases/1234")
        assert kwargs["json"] == {"release": {"version": "1.0.1", "description": "patched"}}
        assert updated.version == "1.0.1"

    def test_update_requires_id(self, client):
        with pytest.raises(ValidationError):
            client.releases.update(PRODUCT_SLUG, Release(version="1.0.1"))

    def test_delete(self, client, session):
        session.request.return_value = build_response(204)

        client.releases.delete(PRODUCT_SLUG, Release(id=1234))

        kwargs = request_kwargs(session)
        assert kwargs["method"] == "DELETE"
        assert kwargs["url"] == url_for(f"/products/{PRODUCT_SLUG}/releases/1234")


class TestReleaseTypes:
    def test_list(self, client, session):
        session.request.return_value = build_response(
            200, {"release_types": ["Major Release", "Minor Release"]}
        )

        assert client.release_types.list() == ["Major Release", "Minor Release"]
        assert request_kwargs(session)["url"] == url_for("/releases/release_types")
