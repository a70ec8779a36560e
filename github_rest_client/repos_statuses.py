"""Commit statuses.

GitHub API docs: https://docs.github.com/rest/commits/statuses
"""

from datetime import datetime
from urllib.parse import quote

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .users import User


class RepoStatus(GitHubModel):
    """The status of a commit, also the body of create_status."""

    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    # pending, success, error or failure
    state: str | None = None
    target_url: str | None = None
    description: str | None = None
    context: str | None = None
    avatar_url: str | None = None
    creator: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CombinedStatus(GitHubModel):
    """The combined state of all statuses of a ref."""

    state: str | None = None
    name: str | None = None
    sha: str | None = None
    total_count: int | None = None
    statuses: list[RepoStatus] | None = None
    commit_url: str | None = None
    repository_url: str | None = None


class StatusesMixin:
    """Status methods of RepositoriesService."""

    def list_statuses(
        self, owner: str, repo: str, ref: str, opts: ListOptions | None = None
    ) -> tuple[list[RepoStatus], Response]:
        u = add_options(f"repos/{owner}/{repo}/commits/{quote(ref, safe='')}/statuses", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[RepoStatus])

    def create_status(self, owner: str, repo: str, ref: str, status: RepoStatus) -> tuple[RepoStatus, Response]:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/statuses/{quote(ref, safe='')}", status)
        return self._client.do(req, RepoStatus)

    def get_combined_status(
        self, owner: str, repo: str, ref: str, opts: ListOptions | None = None
    ) -> tuple[CombinedStatus, Response]:
        """Get the combined status for a ref (SHA, branch or tag name)."""
        u = add_options(f"repos/{owner}/{repo}/commits/{quote(ref, safe='')}/status", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, CombinedStatus)
