"""Issues API.

GitHub API docs: https://docs.github.com/rest/issues
"""

from datetime import datetime

from pydantic import Field

from .issues_comments import CommentsMixin, Reactions
from .issues_labels import Label, LabelsMixin
from .issues_milestones import Milestone, MilestonesMixin
from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .service import Service
from .users import User


class PullRequestLinks(GitHubModel):
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: datetime | None = None


class Issue(GitHubModel):
    """An issue or a pull request seen through the issues API.

    pull_request_links is set when the issue is a pull request.
    """

    id: int | None = None
    number: int | None = None
    # open or closed
    state: str | None = None
    # completed, not_planned or reopened
    state_reason: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    author_association: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    comments: int | None = None
    closed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_by: User | None = None
    url: str | None = None
    html_url: str | None = None
    comments_url: str | None = None
    events_url: str | None = None
    labels_url: str | None = None
    repository_url: str | None = None
    milestone: Milestone | None = None
    pull_request_links: PullRequestLinks | None = Field(default=None, alias="pull_request")
    reactions: Reactions | None = None
    node_id: str | None = None
    draft: bool | None = None
    active_lock_reason: str | None = None

    def is_pull_request(self) -> bool:
        return self.pull_request_links is not None


class IssueRequest(GitHubModel):
    """Body for creating or editing an issue.

    milestone 0 is not the same as None; use IssuesService.remove_milestone
    to clear it.
    """

    title: str | None = None
    body: str | None = None
    labels: list[str] | None = None
    assignee: str | None = None
    assignees: list[str] | None = None
    state: str | None = None
    state_reason: str | None = None
    milestone: int | None = None


class IssueListOptions(ListOptions):
    """Options for listing issues across repositories."""

    # assigned, created, mentioned, subscribed or all
    filter: str | None = None
    # open, closed or all
    state: str | None = None
    labels: list[str] | None = None
    # created, updated or comments
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class IssueListByRepoOptions(ListOptions):
    # Milestone number, "none" or "*"
    milestone: str | None = None
    state: str | None = None
    # Login, "none" or "*"
    assignee: str | None = None
    creator: str | None = None
    mentioned: str | None = None
    labels: list[str] | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class LockIssueOptions(GitHubModel):
    # off-topic, too heated, resolved or spam
    lock_reason: str | None = None


class IssuesService(CommentsMixin, LabelsMixin, MilestonesMixin, Service):
    """Methods for the issues API."""

    def list_by_org(self, org: str, opts: IssueListOptions | None = None) -> tuple[list[Issue], Response]:
        return self._list_issues(f"orgs/{org}/issues", opts)

    def _list_issues(self, u: str, opts) -> tuple[list[Issue], Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Issue])

    def list_by_repo(
        self, owner: str, repo: str, opts: IssueListByRepoOptions | None = None
    ) -> tuple[list[Issue], Response]:
        """List the issues of a repository.

        GitHub API docs: https://docs.github.com/rest/issues/issues#list-repository-issues
        """
        return self._list_issues(f"repos/{owner}/{repo}/issues", opts)

    def get(self, owner: str, repo: str, number: int) -> tuple[Issue, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/issues/{number}")
        return self._client.do(req, Issue)

    def create(self, owner: str, repo: str, issue: IssueRequest) -> tuple[Issue, Response]:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/issues", issue)
        return self._client.do(req, Issue)

    def edit(self, owner: str, repo: str, number: int, issue: IssueRequest) -> tuple[Issue, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/issues/{number}", issue)
        return self._client.do(req, Issue)

    def remove_milestone(self, owner: str, repo: str, number: int) -> tuple[Issue, Response]:
        """Clear the milestone of an issue by sending an explicit null."""
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/issues/{number}", {"milestone": None})
        return self._client.do(req, Issue)

    def lock(self, owner: str, repo: str, number: int, opts: LockIssueOptions | None = None) -> Response:
        """Lock an issue's conversation.

        GitHub API docs: https://docs.github.com/rest/issues/issues#lock-an-issue
        """
        req = self._client.new_request("PUT", f"repos/{owner}/{repo}/issues/{number}/lock", opts)
        return self._client.bare_do(req)

    def unlock(self, owner: str, repo: str, number: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/issues/{number}/lock")
        return self._client.bare_do(req)

    def list(self, all: bool, opts: IssueListOptions | None = None) -> tuple[list[Issue], Response]:
        """List issues assigned to the authenticated user.

        With all set, issues across owned, member and organization
        repositories are listed; otherwise only owned and member ones.

        GitHub API docs: https://docs.github.com/rest/issues/issues#list-issues-assigned-to-the-authenticated-user
        """
        return self._list_issues("issues" if all else "user/issues", opts)
