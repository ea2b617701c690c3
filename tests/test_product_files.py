"""
Tests for the product files service.
"""

import pytest

from pivnet.exceptions import PivnetError, ValidationError
from pivnet.models import ProductFile

from .helpers import build_response, request_kwargs, url_for

PRODUCT_SLUG = "some-product"


class TestProductFilesRead:
    def test_list(self, client, session):
        session.request.return_value = build_response(
            200,
            {"product_files": [{"id": 3, "name": "File 3"}, {"id": 4, "name": "File 4"}]},
        )

        files = client.product_files.list(PRODUCT_SLUG)

        assert request_kwargs(session)["url"] == url_for(f"/products/{PRODUCT_SLUG}/product_files")
        assert [f.id for f in files] == [3, 4]

    def test_list_for_release(self, client, session):
        session.request.return_value = build_response(200, {"product_files": [{"id": 3}]})

        files = client.product_files.list_for_release(PRODUCT_SLUG, 1234)

        assert request_kwargs(session)["url"] == url_for(
            f"/products/{PRODUCT_SLUG}/releases/1234/product_files"
        )
        assert files == [ProductFile(id=3)]

    def test_get(self, client, session):
        session.request.return_value = build_response(
            200,
            {
                "product_file": {
                    "id": 3,
                    "aws_object_key": "product-files/some-file.zip",
                    "sha256": "abc",
                    "_links": {"download": {"href": "https://example.com/download"}},
                }
            },
        )

        pf = client.product_files.get(PRODUCT_SLUG, 3)

        assert request_kwargs(session)["url"] == url_for(
            f"/products/{PRODUCT_SLUG}/product_files/3"
        )
        assert pf.sha256 == "abc"
        assert pf.download_link() == "https://example.com/download"

    def test_get_for_release(self, client, session):
        session.request.return_value = build_response(200, {"product_file": {"id": 3}})

        client.product_files.get_for_release(PRODUCT_SLUG, 1234, 3)

        assert request_kwargs(session)["url"] == url_for(
            f"/products/{PRODUCT_SLUG}/releases/1234/product_files/3"
        )


class TestProductFilesWrite:
    def test_create(self, client, session):
        session.request.return_value = build_response(
            201, {"product_file": {"id": 10, "aws_object_key": "key"}}
        )

        created = client.product_files.create(
            PRODUCT_SLUG,
            ProductFile(aws_object_key="key", name="Some File", file_version="1.0"),
        )

        kwargs = request_kwargs(session)
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {
            "product_file": {"aws_object_key": "key", "name": "Some File", "file_version": "1.0"}
        }
        assert created.id == 10

    def test_create_requires_object_key(self, client, session):
        with pytest.raises(ValidationError, match="AWS object key"):
            client.product_files.create(PRODUCT_SLUG, ProductFile(name="x"))
        session.request.assert_not_called()

    def test_delete(self, client, session):
        session.request.return_value = build_response(200, {"product_file": {"id": 3}})

        deleted = client.product_files.delete(PRODUCT_SLUG, 3)

        assert request_kwargs(session)["method"] == "DELETE"
        assert deleted.id == 3

    @pytest.mark.parametrize(
        "method_name, action",
        [("add_to_release", "add_product_file"), ("remove_from_release", "remove_product_file")],
    )
    def test_attach_detach(self, client, session, method_name, action):
        session.request.return_value = build_response(204)

        getattr(client.product_files, method_name)(PRODUCT_SLUG, 1234, 3)

        kwargs = request_kwargs(session)
        assert kwargs["method"] == "PATCH"
        assert kwargs["url"] == url_for(f"/products/{PRODUCT_SLUG}/releases/1234/{action}")
        assert kwargs["json"] == {"product_file": {"id": 3}}

    def test_attach_error(self, client, session):
        session.request.return_value = build_response(418, {"message": "foo message"})

        with pytest.raises(PivnetError, match="foo message"):
            client.product_files.add_to_release(PRODUCT_SLUG, 1234, 3)
