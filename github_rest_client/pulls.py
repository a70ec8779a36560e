"""Pull requests API.

GitHub API docs: https://docs.github.com/rest/pulls
"""

from datetime import datetime

from .issues_labels import Label
from .issues_milestones import Milestone
from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .repositories import Repository
from .service import Service
from .users import User


class PullRequestBranch(GitHubModel):
    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    repo: Repository | None = None
    user: User | None = None


class PullRequest(GitHubModel):
    """A pull request."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None
    labels: list[Label] | None = None
    user: User | None = None
    draft: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    mergeable_state: str | None = None
    merged_by: User | None = None
    merge_commit_sha: str | None = None
    rebaseable: bool | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    maintainer_can_modify: bool | None = None
    author_association: str | None = None
    node_id: str | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    requested_reviewers: list[User] | None = None
    milestone: Milestone | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None
    active_lock_reason: str | None = None

    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None
    statuses_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    commits_url: str | None = None
    comments_url: str | None = None
    review_comments_url: str | None = None


class NewPullRequest(GitHubModel):
    """Body for create."""

    title: str | None = None
    # "branch" or "user:branch" for cross-repository pull requests
    head: str | None = None
    head_repo: str | None = None
    base: str | None = None
    body: str | None = None
    issue: int | None = None
    maintainer_can_modify: bool | None = None
    draft: bool | None = None


class PullRequestUpdate(GitHubModel):
    """Body for edit; base is the name of the new base branch."""

    title: str | None = None
    body: str | None = None
    state: str | None = None
    base: str | None = None
    maintainer_can_modify: bool | None = None


class PullRequestListOptions(ListOptions):
    # open, closed or all
    state: str | None = None
    # "user:ref-name" or "organization:ref-name"
    head: str | None = None
    base: str | None = None
    # created, updated, popularity or long-running
    sort: str | None = None
    direction: str | None = None


class CommitFile(GitHubModel):
    sha: str | None = None
    filename: str | None = None
    additions: int | None = None
    deletions: int | None = None
    changes: int | None = None
    # added, removed, modified, renamed, copied, changed, unchanged
    status: str | None = None
    patch: str | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None
    previous_filename: str | None = None


class PullRequestMergeResult(GitHubModel):
    sha: str | None = None
    merged: bool | None = None
    message: str | None = None


class PullRequestOptions(GitHubModel):
    """Options for merge."""

    commit_title: str | None = None
    # SHA that the pull request head must match to allow the merge
    sha: str | None = None
    # merge, squash or rebase
    merge_method: str | None = None


class PullRequestsService(Service):
    """Methods for the pull requests API."""

    def get(self, owner: str, repo: str, number: int) -> tuple[PullRequest, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/pulls/{number}")
        return self._client.do(req, PullRequest)

    def create(self, owner: str, repo: str, pull: NewPullRequest) -> tuple[PullRequest, Response]:
        """Open a pull request.

        GitHub API docs: https://docs.github.com/rest/pulls/pulls#create-a-pull-request
        """
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/pulls", pull)
        return self._client.do(req, PullRequest)

    def edit(self, owner: str, repo: str, number: int, pull: PullRequestUpdate) -> tuple[PullRequest, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/pulls/{number}", pull)
        return self._client.do(req, PullRequest)

    def list_files(
        self, owner: str, repo: str, number: int, opts: ListOptions | None = None
    ) -> tuple[list[CommitFile], Response]:
        u = add_options(f"repos/{owner}/{repo}/pulls/{number}/files", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[CommitFile])

    def is_merged(self, owner: str, repo: str, number: int) -> tuple[bool, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/pulls/{number}/merge")
        return self._client.do_bool(req)

    def merge(
        self, owner: str, repo: str, number: int, commit_message: str, opts: PullRequestOptions | None = None
    ) -> tuple[PullRequestMergeResult, Response]:
        """Merge a pull request.

        An empty commit_message keeps GitHub's default message.

        GitHub API docs: https://docs.github.com/rest/pulls/pulls#merge-a-pull-request
        """
        body = opts.to_payload() if opts is not None else {}
        if commit_message:
            body["commit_message"] = commit_message
        req = self._client.new_request("PUT", f"repos/{owner}/{repo}/pulls/{number}/merge", body)
        return self._client.do(req, PullRequestMergeResult)

    def list(
        self, owner: str, repo: str, opts: PullRequestListOptions | None = None
    ) -> tuple[list[PullRequest], Response]:
        """List the pull requests of a repository.

        GitHub API docs: https://docs.github.com/rest/pulls/pulls#list-pull-requests
        """
        u = add_options(f"repos/{owner}/{repo}/pulls", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[PullRequest])
