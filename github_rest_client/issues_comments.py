"""Issue comments.

GitHub API docs: https://docs.github.com/rest/issues/comments
"""

from datetime import datetime

from pydantic import Field

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .users import User


class Reactions(GitHubModel):
    total_count: int | None = None
    plus_one: int | None = Field(default=None, alias="+1")
    minus_one: int | None = Field(default=None, alias="-1")
    laugh: int | None = None
    confused: int | None = None
    heart: int | None = None
    hooray: int | None = None
    rocket: int | None = None
    eyes: int | None = None
    url: str | None = None


class IssueComment(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    body: str | None = None
    user: User | None = None
    reactions: Reactions | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # OWNER, MEMBER, CONTRIBUTOR, NONE, ...
    author_association: str | None = None
    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None


class IssueListCommentsOptions(ListOptions):
    # created or updated; only honored when listing a whole repository
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class CommentsMixin:
    """Comment methods of IssuesService."""

    def list_comments(
        self, owner: str, repo: str, number: int, opts: IssueListCommentsOptions | None = None
    ) -> tuple[list[IssueComment], Response]:
        """List comments on an issue, or on every issue of the repository when number is 0.

        GitHub API docs: https://docs.github.com/rest/issues/comments#list-issue-comments
        """
        if number == 0:
            u = f"repos/{owner}/{repo}/issues/comments"
        else:
            u = f"repos/{owner}/{repo}/issues/{number}/comments"
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[IssueComment])

    def get_comment(self, owner: str, repo: str, comment_id: int) -> tuple[IssueComment, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/issues/comments/{comment_id}")
        return self._client.do(req, IssueComment)

    def create_comment(
        self, owner: str, repo: str, number: int, comment: IssueComment
    ) -> tuple[IssueComment, Response]:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/issues/{number}/comments", comment)
        return self._client.do(req, IssueComment)

    def edit_comment(
        self, owner: str, repo: str, comment_id: int, comment: IssueComment
    ) -> tuple[IssueComment, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/issues/comments/{comment_id}", comment)
        return self._client.do(req, IssueComment)

    def delete_comment(self, owner: str, repo: str, comment_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/issues/comments/{comment_id}")
        return self._client.bare_do(req)
