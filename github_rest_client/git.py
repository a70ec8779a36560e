"""Git database API: blobs, commits, references and trees.

GitHub API docs: https://docs.github.com/rest/git
"""

from datetime import datetime
from urllib.parse import quote

from pydantic import Field, SerializationInfo, SerializerFunctionWrapHandler, model_serializer

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .service import Service

MEDIA_TYPE_RAW = "application/vnd.github.v3.raw"


class Blob(GitHubModel):
    content: str | None = None
    # utf-8 or base64
    encoding: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    node_id: str | None = None


class CommitAuthor(GitHubModel):
    """Author or committer of a commit."""

    date: datetime | None = None
    name: str | None = None
    email: str | None = None
    # Only set in some webhook payloads
    login: str | None = Field(default=None, alias="username")


class TreeEntry(GitHubModel):
    """An entry of a git tree.

    An entry without sha and content serializes with an explicit
    ``"sha": null``, which makes create_tree delete the path.
    """

    sha: str | None = None
    path: str | None = None
    # 100644 file, 100755 executable, 040000 subdirectory, 160000 submodule, 120000 symlink
    mode: str | None = None
    # blob, tree or commit
    type: str | None = None
    size: int | None = None
    content: str | None = None
    url: str | None = None

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
        data = handler(self)
        if self.sha is None and self.content is None and info.exclude_none:
            data["sha"] = None
        return data

    def is_delete(self) -> bool:
        return self.sha is None and self.content is None


class Tree(GitHubModel):
    sha: str | None = None
    entries: list[TreeEntry] | None = Field(default=None, alias="tree")
    # True when the API truncated the entries
    truncated: bool | None = None


class SignatureVerification(GitHubModel):
    verified: bool | None = None
    reason: str | None = None
    signature: str | None = None
    payload: str | None = None


class Commit(GitHubModel):
    """A git commit object."""

    sha: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    message: str | None = None
    tree: Tree | None = None
    parents: list["Commit"] | None = None
    html_url: str | None = None
    url: str | None = None
    verification: SignatureVerification | None = None
    node_id: str | None = None
    comment_count: int | None = None


class GitObject(GitHubModel):
    type: str | None = None
    sha: str | None = None
    url: str | None = None


class Reference(GitHubModel):
    ref: str | None = None
    url: str | None = None
    object: GitObject | None = None
    node_id: str | None = None


class ReferenceListOptions(ListOptions):
    # Returned by list_matching_refs only; part of the path, not the query
    ref: str | None = None

    def to_query(self) -> list[tuple[str, str]]:
        return [(k, v) for k, v in super().to_query() if k != "ref"]


class CreateCommitOptions(GitHubModel):
    """Extra options for create_commit."""

    # Armored detached signature of the commit
    signature: str | None = None


def _ref_path(ref: str) -> str:
    return quote(ref.removeprefix("refs/"), safe="/")


class GitService(Service):
    """Methods for the git database API."""

    # Blobs

    def get_blob(self, owner: str, repo: str, sha: str) -> tuple[Blob, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/git/blobs/{sha}")
        return self._client.do(req, Blob)

    def get_blob_raw(self, owner: str, repo: str, sha: str) -> tuple[bytes, Response]:
        """Fetch a blob's raw bytes instead of its base64 JSON representation."""
        req = self._client.new_request(
            "GET", f"repos/{owner}/{repo}/git/blobs/{sha}", headers={"Accept": MEDIA_TYPE_RAW}
        )
        resp = self._client.bare_do(req)
        return resp.http_response.content, resp

    def create_blob(self, owner: str, repo: str, blob: Blob) -> tuple[Blob, Response]:
        """Create a blob.

        GitHub API docs: https://docs.github.com/rest/git/blobs#create-a-blob
        """
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/git/blobs", blob)
        return self._client.do(req, Blob)

    # Commits

    def get_commit(self, owner: str, repo: str, sha: str) -> tuple[Commit, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/git/commits/{sha}")
        return self._client.do(req, Commit)

    def create_commit(
        self, owner: str, repo: str, commit: Commit, opts: CreateCommitOptions | None = None
    ) -> tuple[Commit, Response]:
        """Create a commit.

        Only message, tree, parents, author, committer and the optional
        signature are sent; tree and parents are sent as SHAs.

        GitHub API docs: https://docs.github.com/rest/git/commits#create-a-commit
        """
        body = {
            "message": commit.message,
            "tree": commit.tree.sha if commit.tree else None,
            "parents": [p.sha for p in commit.parents or []],
        }
        if commit.author is not None:
            body["author"] = commit.author.to_payload()
        if commit.committer is not None:
            body["committer"] = commit.committer.to_payload()
        if opts is not None and opts.signature:
            body["signature"] = opts.signature
        body = {k: v for k, v in body.items() if v is not None}
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/git/commits", body)
        return self._client.do(req, Commit)

    # References

    def get_ref(self, owner: str, repo: str, ref: str) -> tuple[Reference, Response]:
        """Fetch a single reference, e.g. "heads/main" or "refs/tags/v1"."""
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/git/ref/{_ref_path(ref)}")
        return self._client.do(req, Reference)

    def list_matching_refs(
        self, owner: str, repo: str, opts: ReferenceListOptions | None = None
    ) -> tuple[list[Reference], Response]:
        """List references whose names start with opts.ref; all refs when unset.

        GitHub API docs: https://docs.github.com/rest/git/refs#list-matching-references
        """
        ref = _ref_path(opts.ref) if opts is not None and opts.ref else ""
        u = add_options(f"repos/{owner}/{repo}/git/matching-refs/{ref}", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Reference])

    def create_ref(self, owner: str, repo: str, ref: Reference) -> tuple[Reference, Response]:
        """Create a reference; ref.ref must be fully qualified ("refs/heads/x")."""
        body = {"ref": ref.ref, "sha": ref.object.sha if ref.object else None}
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/git/refs", body)
        return self._client.do(req, Reference)

    def update_ref(self, owner: str, repo: str, ref: Reference, force: bool = False) -> tuple[Reference, Response]:
        body = {"sha": ref.object.sha if ref.object else None, "force": force}
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/git/refs/{_ref_path(ref.ref or '')}", body)
        return self._client.do(req, Reference)

    def delete_ref(self, owner: str, repo: str, ref: str) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/git/refs/{_ref_path(ref)}")
        return self._client.bare_do(req)

    # Trees

    def get_tree(self, owner: str, repo: str, sha: str, recursive: bool = False) -> tuple[Tree, Response]:
        """Fetch a tree, optionally with all nested entries.

        GitHub API docs: https://docs.github.com/rest/git/trees#get-a-tree
        """
        u = f"repos/{owner}/{repo}/git/trees/{sha}"
        if recursive:
            u += "?recursive=1"
        req = self._client.new_request("GET", u)
        return self._client.do(req, Tree)

    def create_tree(
        self, owner: str, repo: str, base_tree: str, entries: list[TreeEntry]
    ) -> tuple[Tree, Response]:
        """Create a tree from entries on top of base_tree.

        Entries that carry content create a blob on the fly; entries with
        neither sha nor content delete their path.

        GitHub API docs: https://docs.github.com/rest/git/trees#create-a-tree
        """
        body = {
            "base_tree": base_tree or None,
            "tree": [entry.model_dump(mode="json", exclude={"size", "url"}, exclude_none=True) for entry in entries],
        }
        if body["base_tree"] is None:
            del body["base_tree"]
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/git/trees", body)
        return self._client.do(req, Tree)
