import io

import pytest

from .client import Client
from .repos_releases import RepositoryRelease, UploadOptions


def describe_ReleasesMixin():
    def it_lists_releases(client: Client, mux):
        mux.route("/repos/o/r/releases", method="GET", json=[{"id": 1, "assets": [{"id": 5}]}])

        releases, _ = client.repositories.list_releases("o", "r")

        assert releases[0].assets[0].id == 5

    def it_gets_releases_by_id_latest_and_tag(client: Client, mux):
        mux.route("/repos/o/r/releases/1", json={"id": 1})
        mux.route("/repos/o/r/releases/latest", json={"id": 2})
        mux.route("/repos/o/r/releases/tags/v1.0", json={"id": 3})

        assert client.repositories.get_release("o", "r", 1)[0].id == 1
        assert client.repositories.get_latest_release("o", "r")[0].id == 2
        assert client.repositories.get_release_by_tag("o", "r", "v1.0")[0].id == 3

    def it_creates_a_release_without_read_only_fields(client: Client, mux):
        mux.route("/repos/o/r/releases", method="POST", status=201, json={"id": 1, "tag_name": "v1"})

        release, _ = client.repositories.create_release(
            "o", "r", RepositoryRelease(id=99, tag_name="v1", draft=True, html_url="https://x", make_latest="legacy")
        )

        assert mux.last_json() == {"tag_name": "v1", "draft": True, "make_latest": "legacy"}
        assert release.id == 1

    def it_edits_a_release(client: Client, mux):
        mux.route("/repos/o/r/releases/1", method="PATCH", json={"id": 1, "name": "n"})

        client.repositories.edit_release("o", "r", 1, RepositoryRelease(name="n", upload_url="ignored"))

        assert mux.last_json() == {"name": "n"}

    def it_deletes_a_release(client: Client, mux):
        mux.route("/repos/o/r/releases/1", method="DELETE", status=204)

        assert client.repositories.delete_release("o", "r", 1).status_code == 204

    def describe_assets():
        def it_lists_gets_and_deletes_assets(client: Client, mux):
            mux.route("/repos/o/r/releases/1/assets", method="GET", json=[{"id": 5}])
            mux.route("/repos/o/r/releases/assets/5", json={"id": 5, "name": "a.zip"})

            assets, _ = client.repositories.list_release_assets("o", "r", 1)
            asset, _ = client.repositories.get_release_asset("o", "r", 5)

            assert assets[0].id == asset.id == 5
            assert asset.name == "a.zip"

        def it_deletes_an_asset(client: Client, mux):
            mux.route("/repos/o/r/releases/assets/5", method="DELETE", status=204)

            assert client.repositories.delete_release_asset("o", "r", 5).status_code == 204

    def describe_upload_release_asset():
        def it_uploads_to_the_upload_host(client: Client, mux):
            mux.route("/repos/o/r/releases/1/assets", method="POST", status=201, json={"id": 7, "name": "a.zip"})

            asset, _ = client.repositories.upload_release_asset(
                "o", "r", 1, io.BytesIO(b"PK\x03\x04"), UploadOptions(name="a.zip", label="Archive")
            )

            request = mux.last
            assert request.url.host == "github.test"
            assert request.url.path == "/api-uploads/repos/o/r/releases/1/assets"
            assert mux.last_params() == {"name": "a.zip", "label": "Archive"}
            assert request.headers["Content-Type"] == "application/zip"
            assert request.content == b"PK\x03\x04"
            assert asset.id == 7

        def it_prefers_an_explicit_media_type(client: Client, mux):
            mux.route("/repos/o/r/releases/1/assets", method="POST", json={"id": 7})

            client.repositories.upload_release_asset(
                "o", "r", 1, io.BytesIO(b"data"), UploadOptions(name="a.zip", media_type="application/x-custom")
            )

            assert mux.last.headers["Content-Type"] == "application/x-custom"
            assert "media_type" not in mux.last_params()

        def it_falls_back_to_octet_stream(client: Client, mux):
            mux.route("/repos/o/r/releases/1/assets", method="POST", json={"id": 7})

            client.repositories.upload_release_asset("o", "r", 1, io.BytesIO(b"data"), UploadOptions(name="blob"))

            assert mux.last.headers["Content-Type"] == "application/octet-stream"

        def it_requires_a_name(client: Client):
            with pytest.raises(ValueError, match="name is required"):
                client.repositories.upload_release_asset("o", "r", 1, io.BytesIO(b"data"), UploadOptions())

        def it_rejects_empty_files(client: Client):
            with pytest.raises(ValueError, match="can't be empty"):
                client.repositories.upload_release_asset("o", "r", 1, io.BytesIO(b""), UploadOptions(name="a.zip"))
