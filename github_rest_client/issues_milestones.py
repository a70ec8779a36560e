"""Issue milestones.

GitHub API docs: https://docs.github.com/rest/issues/milestones
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .users import User


class Milestone(GitHubModel):
    url: str | None = None
    html_url: str | None = None
    labels_url: str | None = None
    id: int | None = None
    number: int | None = None
    # open or closed
    state: str | None = None
    title: str | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    due_on: datetime | None = None
    node_id: str | None = None


class MilestoneListOptions(ListOptions):
    # open, closed or all
    state: str | None = None
    # due_on or completeness
    sort: str | None = None
    direction: str | None = None


class MilestonesMixin:
    """Milestone methods of IssuesService."""

    def list_milestones(
        self, owner: str, repo: str, opts: MilestoneListOptions | None = None
    ) -> tuple[list[Milestone], Response]:
        u = add_options(f"repos/{owner}/{repo}/milestones", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Milestone])

    def get_milestone(self, owner: str, repo: str, number: int) -> tuple[Milestone, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/milestones/{number}")
        return self._client.do(req, Milestone)

    def create_milestone(self, owner: str, repo: str, milestone: Milestone) -> tuple[Milestone, Response]:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/milestones", milestone)
        return self._client.do(req, Milestone)

    def edit_milestone(
        self, owner: str, repo: str, number: int, milestone: Milestone
    ) -> tuple[Milestone, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/milestones/{number}", milestone)
        return self._client.do(req, Milestone)

    def delete_milestone(self, owner: str, repo: str, number: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/milestones/{number}")
        return self._client.bare_do(req)
