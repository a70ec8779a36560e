"""Repository contents methods.

GitHub API docs: https://docs.github.com/rest/repos/contents
"""

import base64
import json
from urllib.parse import quote

from pydantic import field_serializer

from .git import Commit, CommitAuthor
from .models import GitHubModel, Response
from .options import Options, add_options


class RepositoryContent(GitHubModel):
    """A file, directory, symlink or submodule in a repository."""

    # file, dir, symlink or submodule
    type: str | None = None
    # Target of a symlink
    target: str | None = None
    encoding: str | None = None
    size: int | None = None
    name: str | None = None
    path: str | None = None
    # Encoded file content; use decoded_content() for the bytes
    content: str | None = None
    sha: str | None = None
    url: str | None = None
    git_url: str | None = None
    html_url: str | None = None
    download_url: str | None = None
    submodule_git_url: str | None = None

    def decoded_content(self) -> bytes:
        """Return the file content, decoding base64 when GitHub encoded it."""
        if self.encoding == "base64":
            if self.content is None:
                raise ValueError("malformed response: base64 encoding of null content")
            return base64.b64decode(self.content)
        if self.encoding in (None, ""):
            return (self.content or "").encode()
        if self.encoding == "none":
            raise ValueError("unsupported content encoding: none, this may occur when file size > 1 MB")
        raise ValueError(f"unsupported content encoding: {self.encoding}")


class RepositoryContentResponse(GitHubModel):
    """The result of creating, updating or deleting a file."""

    content: RepositoryContent | None = None
    commit: Commit | None = None


class RepositoryContentFileOptions(GitHubModel):
    """Body for create_file, update_file and delete_file."""

    message: str | None = None
    # Raw file content; base64 encoded on the wire
    content: bytes | None = None
    # Blob SHA of the file being replaced or deleted
    sha: str | None = None
    branch: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None

    @field_serializer("content")
    def _encode_content(self, content: bytes | None):
        if content is None:
            return None
        return base64.b64encode(content).decode()


class RepositoryContentGetOptions(Options):
    # Branch, tag or commit; defaults to the default branch
    ref: str | None = None


class ArchiveFormat:
    TARBALL = "tarball"
    ZIPBALL = "zipball"


def _contents_path(owner: str, repo: str, path: str) -> str:
    escaped = quote(path.strip("/"), safe="/")
    return f"repos/{owner}/{repo}/contents/{escaped}"


class ContentsMixin:
    """Contents methods of RepositoriesService."""

    def get_readme(
        self, owner: str, repo: str, opts: RepositoryContentGetOptions | None = None
    ) -> tuple[RepositoryContent, Response]:
        """Get the preferred README for a repository.

        GitHub API docs: https://docs.github.com/rest/repos/contents#get-a-repository-readme
        """
        u = add_options(f"repos/{owner}/{repo}/readme", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, RepositoryContent)

    def get_contents(
        self, owner: str, repo: str, path: str, opts: RepositoryContentGetOptions | None = None
    ) -> tuple[RepositoryContent | None, list[RepositoryContent] | None, Response]:
        """Get the contents of a file or directory.

        Returns (file, None, resp) for a file and (None, entries, resp) for a
        directory.

        GitHub API docs: https://docs.github.com/rest/repos/contents#get-repository-content
        """
        if ".." in path.split("/"):
            raise ValueError("path must not contain '..' due to auth vulnerability issue")
        u = add_options(_contents_path(owner, repo, path), opts)
        req = self._client.new_request("GET", u)
        resp = self._client.bare_do(req)

        data = json.loads(resp.http_response.content)
        if isinstance(data, list):
            return None, [RepositoryContent.model_validate(item) for item in data], resp
        if isinstance(data, dict):
            return RepositoryContent.model_validate(data), None, resp
        raise ValueError(f"unmarshalling failed for both file and directory content: {data!r}")

    def create_file(
        self, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse, Response]:
        """Create a new file in a repository at the given path."""
        req = self._client.new_request("PUT", _contents_path(owner, repo, path), opts)
        return self._client.do(req, RepositoryContentResponse)

    def update_file(
        self, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse, Response]:
        """Update a file; opts.sha must name the blob being replaced."""
        req = self._client.new_request("PUT", _contents_path(owner, repo, path), opts)
        return self._client.do(req, RepositoryContentResponse)

    def delete_file(
        self, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse, Response]:
        req = self._client.new_request("DELETE", _contents_path(owner, repo, path), opts)
        return self._client.do(req, RepositoryContentResponse)

    def get_archive_link(
        self,
        owner: str,
        repo: str,
        archive_format: str,
        opts: RepositoryContentGetOptions | None = None,
        max_redirects: int = 0,
    ) -> tuple[str, Response]:
        """Return the temporary download URL of a tarball or zipball archive.

        GitHub API docs: https://docs.github.com/rest/repos/contents#download-a-repository-archive-tar
        """
        u = f"repos/{owner}/{repo}/{archive_format}"
        if opts is not None and opts.ref:
            u += f"/{opts.ref}"
        return self._client.get_redirect_url(u, max_redirects)
