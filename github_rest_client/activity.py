"""Activity API: event feeds and starring.

GitHub API docs: https://docs.github.com/rest/activity
"""

from datetime import datetime

from pydantic import Field

from .events import Event
from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .repositories import Repository
from .service import Service
from .users import User

# Media type that adds starred_at to stargazer and starred listings
MEDIA_TYPE_STARRING_PREVIEW = "application/vnd.github.star+json"


class Stargazer(GitHubModel):
    starred_at: datetime | None = None
    user: User | None = None


class StarredRepository(GitHubModel):
    starred_at: datetime | None = None
    repository: Repository | None = Field(default=None, alias="repo")


class ActivityListStarredOptions(ListOptions):
    # created or updated
    sort: str | None = None
    direction: str | None = None


class ActivityService(Service):
    """Methods for the activity API."""

    def _list_events(self, u: str, opts) -> tuple[list[Event], Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Event])

    def list_events(self, opts: ListOptions | None = None) -> tuple[list[Event], Response]:
        """List public events.

        GitHub API docs: https://docs.github.com/rest/activity/events#list-public-events
        """
        return self._list_events("events", opts)

    def list_repository_events(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        return self._list_events(f"repos/{owner}/{repo}/events", opts)

    def list_events_for_repo_network(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        return self._list_events(f"networks/{owner}/{repo}/events", opts)

    def list_events_for_organization(self, org: str, opts: ListOptions | None = None) -> tuple[list[Event], Response]:
        return self._list_events(f"orgs/{org}/events", opts)

    def list_events_performed_by_user(
        self, user: str, public_only: bool = False, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """List events performed by a user, optionally only the public ones."""
        u = f"users/{user}/events/public" if public_only else f"users/{user}/events"
        return self._list_events(u, opts)

    def list_events_received_by_user(
        self, user: str, public_only: bool = False, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        u = f"users/{user}/received_events/public" if public_only else f"users/{user}/received_events"
        return self._list_events(u, opts)

    def list_user_events_for_organization(
        self, org: str, user: str, opts: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        return self._list_events(f"users/{user}/events/orgs/{org}", opts)

    # Starring

    def list_stargazers(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Stargazer], Response]:
        """List the people who starred a repository, with the time they did.

        GitHub API docs: https://docs.github.com/rest/activity/starring#list-stargazers
        """
        u = add_options(f"repos/{owner}/{repo}/stargazers", opts)
        req = self._client.new_request("GET", u, headers={"Accept": MEDIA_TYPE_STARRING_PREVIEW})
        return self._client.do(req, list[Stargazer])

    def list_starred(
        self, user: str = "", opts: ActivityListStarredOptions | None = None
    ) -> tuple[list[StarredRepository], Response]:
        """List repositories starred by a user; an empty user means the authenticated user."""
        u = f"users/{user}/starred" if user else "user/starred"
        u = add_options(u, opts)
        req = self._client.new_request("GET", u, headers={"Accept": MEDIA_TYPE_STARRING_PREVIEW})
        return self._client.do(req, list[StarredRepository])

    def is_starred(self, owner: str, repo: str) -> tuple[bool, Response]:
        req = self._client.new_request("GET", f"user/starred/{owner}/{repo}")
        return self._client.do_bool(req)

    def star(self, owner: str, repo: str) -> Response:
        req = self._client.new_request("PUT", f"user/starred/{owner}/{repo}")
        return self._client.bare_do(req)

    def unstar(self, owner: str, repo: str) -> Response:
        req = self._client.new_request("DELETE", f"user/starred/{owner}/{repo}")
        return self._client.bare_do(req)
