"""Users API.

GitHub API docs: https://docs.github.com/rest/users
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .service import Service


class Plan(GitHubModel):
    name: str | None = None
    space: int | None = None
    collaborators: int | None = None
    private_repos: int | None = None
    filled_seats: int | None = None
    seats: int | None = None


class User(GitHubModel):
    """A GitHub user or organization account."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    gravatar_id: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    twitter_username: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    suspended_at: datetime | None = None
    type: str | None = None
    site_admin: bool | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    two_factor_authentication: bool | None = None
    plan: Plan | None = None
    ldap_dn: str | None = None

    # API URLs
    url: str | None = None
    events_url: str | None = None
    following_url: str | None = None
    followers_url: str | None = None
    gists_url: str | None = None
    organizations_url: str | None = None
    received_events_url: str | None = None
    repos_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None

    # Only populated in some responses, e.g. team membership or collaborator lists
    role_name: str | None = None
    permissions: dict[str, bool] | None = None


class UserListOptions(ListOptions):
    # ID of the last user seen
    since: int | None = None


class UsersService(Service):
    """Methods for the users API."""

    def get(self, user: str = "") -> tuple[User, Response]:
        """Fetch a user. An empty user fetches the authenticated user.

        GitHub API docs: https://docs.github.com/rest/users/users#get-a-user
        """
        u = f"users/{user}" if user else "user"
        req = self._client.new_request("GET", u)
        return self._client.do(req, User)

    def get_by_id(self, user_id: int) -> tuple[User, Response]:
        req = self._client.new_request("GET", f"user/{user_id}")
        return self._client.do(req, User)

    def edit(self, user: User) -> tuple[User, Response]:
        """Edit the authenticated user.

        GitHub API docs: https://docs.github.com/rest/users/users#update-the-authenticated-user
        """
        req = self._client.new_request("PATCH", "user", user)
        return self._client.do(req, User)

    def list_all(self, opts: UserListOptions | None = None) -> tuple[list[User], Response]:
        """List all GitHub users in the order they signed up.

        Pagination is driven by ``since``; Response.next_page carries the
        next value.

        GitHub API docs: https://docs.github.com/rest/users/users#list-users
        """
        u = add_options("users", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[User])

    def list_followers(self, user: str = "", opts: ListOptions | None = None) -> tuple[list[User], Response]:
        u = f"users/{user}/followers" if user else "user/followers"
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[User])

    def list_following(self, user: str = "", opts: ListOptions | None = None) -> tuple[list[User], Response]:
        u = f"users/{user}/following" if user else "user/following"
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[User])
