"""Repository releases and release assets.

GitHub API docs: https://docs.github.com/rest/releases
"""

import mimetypes
import os
from datetime import datetime
from typing import BinaryIO

from .models import GitHubModel, Response
from .options import ListOptions, Options, add_options
from .users import User


class ReleaseAsset(GitHubModel):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    label: str | None = None
    state: str | None = None
    content_type: str | None = None
    size: int | None = None
    download_count: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    browser_download_url: str | None = None
    uploader: User | None = None
    node_id: str | None = None


class RepositoryRelease(GitHubModel):
    """A release, also used as the body when creating or editing one."""

    tag_name: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    # true, false or legacy
    make_latest: str | None = None
    discussion_category_name: str | None = None
    generate_release_notes: bool | None = None

    # Read-only fields
    id: int | None = None
    created_at: datetime | None = None
    published_at: datetime | None = None
    url: str | None = None
    html_url: str | None = None
    assets_url: str | None = None
    assets: list[ReleaseAsset] | None = None
    upload_url: str | None = None
    zipball_url: str | None = None
    tarball_url: str | None = None
    author: User | None = None
    node_id: str | None = None


# Fields GitHub accepts when creating or editing a release
_RELEASE_REQUEST_FIELDS = {
    "tag_name",
    "target_commitish",
    "name",
    "body",
    "draft",
    "prerelease",
    "make_latest",
    "discussion_category_name",
    "generate_release_notes",
}


class UploadOptions(Options):
    name: str | None = None
    label: str | None = None
    media_type: str | None = None

    def to_query(self) -> list[tuple[str, str]]:
        return [(k, v) for k, v in super().to_query() if k != "media_type"]


class ReleasesMixin:
    """Release methods of RepositoriesService."""

    def list_releases(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[RepositoryRelease], Response]:
        u = add_options(f"repos/{owner}/{repo}/releases", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[RepositoryRelease])

    def get_release(self, owner: str, repo: str, release_id: int) -> tuple[RepositoryRelease, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/releases/{release_id}")
        return self._client.do(req, RepositoryRelease)

    def get_latest_release(self, owner: str, repo: str) -> tuple[RepositoryRelease, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/releases/latest")
        return self._client.do(req, RepositoryRelease)

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> tuple[RepositoryRelease, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/releases/tags/{tag}")
        return self._client.do(req, RepositoryRelease)

    def create_release(
        self, owner: str, repo: str, release: RepositoryRelease
    ) -> tuple[RepositoryRelease, Response]:
        """Create a release. Read-only fields of release are not sent.

        GitHub API docs: https://docs.github.com/rest/releases/releases#create-a-release
        """
        body = release.model_dump(mode="json", include=_RELEASE_REQUEST_FIELDS, exclude_none=True)
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/releases", body)
        return self._client.do(req, RepositoryRelease)

    def edit_release(
        self, owner: str, repo: str, release_id: int, release: RepositoryRelease
    ) -> tuple[RepositoryRelease, Response]:
        body = release.model_dump(mode="json", include=_RELEASE_REQUEST_FIELDS, exclude_none=True)
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/releases/{release_id}", body)
        return self._client.do(req, RepositoryRelease)

    def delete_release(self, owner: str, repo: str, release_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/releases/{release_id}")
        return self._client.bare_do(req)

    def list_release_assets(
        self, owner: str, repo: str, release_id: int, opts: ListOptions | None = None
    ) -> tuple[list[ReleaseAsset], Response]:
        u = add_options(f"repos/{owner}/{repo}/releases/{release_id}/assets", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[ReleaseAsset])

    def get_release_asset(self, owner: str, repo: str, asset_id: int) -> tuple[ReleaseAsset, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/releases/assets/{asset_id}")
        return self._client.do(req, ReleaseAsset)

    def delete_release_asset(self, owner: str, repo: str, asset_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/releases/assets/{asset_id}")
        return self._client.bare_do(req)

    def upload_release_asset(
        self, owner: str, repo: str, release_id: int, file: BinaryIO, opts: UploadOptions
    ) -> tuple[ReleaseAsset, Response]:
        """Upload a file as an asset of a release.

        The media type comes from opts.media_type, else from the extension of
        opts.name, else application/octet-stream.

        GitHub API docs: https://docs.github.com/rest/releases/assets#upload-a-release-asset
        """
        if opts.name is None:
            raise ValueError("opts.name is required")
        content = file.read()
        if not content:
            raise ValueError("the asset to upload can't be empty")
        u = add_options(f"repos/{owner}/{repo}/releases/{release_id}/assets", opts)
        media_type = opts.media_type
        if not media_type:
            media_type = mimetypes.guess_type(os.path.basename(opts.name))[0] or "application/octet-stream"
        req = self._client.new_upload_request(u, content, media_type)
        return self._client.do(req, ReleaseAsset)
