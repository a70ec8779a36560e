"""Organizations API.

GitHub API docs: https://docs.github.com/rest/orgs
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .orgs_hooks import OrgHooksMixin
from .orgs_members import MembersMixin
from .service import Service
from .users import Plan, User


class Organization(GitHubModel):
    """A GitHub organization."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    twitter_username: str | None = None
    description: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    billing_email: str | None = None
    type: str | None = None
    plan: Plan | None = None
    two_factor_requirement_enabled: bool | None = None
    is_verified: bool | None = None
    has_organization_projects: bool | None = None
    has_repository_projects: bool | None = None

    default_repository_permission: str | None = None
    default_repository_settings: str | None = None
    members_can_create_repositories: bool | None = None
    members_can_create_public_repositories: bool | None = None
    members_can_create_private_repositories: bool | None = None
    members_can_create_internal_repositories: bool | None = None
    members_can_fork_private_repositories: bool | None = None
    members_allowed_repository_creation_type: str | None = None
    members_can_create_pages: bool | None = None
    members_can_create_public_pages: bool | None = None
    members_can_create_private_pages: bool | None = None
    web_commit_signoff_required: bool | None = None

    advanced_security_enabled_for_new_repositories: bool | None = None
    dependabot_alerts_enabled_for_new_repositories: bool | None = None
    dependabot_security_updates_enabled_for_new_repositories: bool | None = None
    dependency_graph_enabled_for_new_repositories: bool | None = None
    secret_scanning_enabled_for_new_repositories: bool | None = None
    secret_scanning_push_protection_enabled_for_new_repositories: bool | None = None

    # API URLs
    url: str | None = None
    events_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    members_url: str | None = None
    public_members_url: str | None = None
    repos_url: str | None = None


class Installation(GitHubModel):
    """A GitHub App installation."""

    id: int | None = None
    node_id: str | None = None
    app_id: int | None = None
    app_slug: str | None = None
    target_id: int | None = None
    target_type: str | None = None
    account: User | None = None
    access_tokens_url: str | None = None
    repositories_url: str | None = None
    html_url: str | None = None
    events: list[str] | None = None
    single_file_name: str | None = None
    repository_selection: str | None = None
    permissions: dict[str, str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    suspended_at: datetime | None = None
    suspended_by: User | None = None


class OrganizationInstallations(GitHubModel):
    total_count: int | None = None
    installations: list[Installation] | None = None


class OrganizationsListOptions(ListOptions):
    # Integer ID of the last organization seen
    since: int | None = None


class OrganizationsService(MembersMixin, OrgHooksMixin, Service):
    """Methods for the organizations API."""

    def list_all(self, opts: OrganizationsListOptions | None = None) -> tuple[list[Organization], Response]:
        """List all organizations in the order they were created.

        GitHub API docs: https://docs.github.com/rest/orgs/orgs#list-organizations
        """
        u = add_options("organizations", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Organization])

    def get(self, org: str) -> tuple[Organization, Response]:
        req = self._client.new_request("GET", f"orgs/{org}")
        return self._client.do(req, Organization)

    def get_by_id(self, org_id: int) -> tuple[Organization, Response]:
        req = self._client.new_request("GET", f"organizations/{org_id}")
        return self._client.do(req, Organization)

    def edit(self, name: str, org: Organization) -> tuple[Organization, Response]:
        """Edit an organization.

        GitHub API docs: https://docs.github.com/rest/orgs/orgs#update-an-organization
        """
        req = self._client.new_request("PATCH", f"orgs/{name}", org)
        return self._client.do(req, Organization)

    def delete(self, org: str) -> Response:
        """Delete an organization. GitHub queues the deletion and answers 202."""
        req = self._client.new_request("DELETE", f"orgs/{org}")
        _, resp = self._client.do_accepted(req)
        return resp

    def list_installations(
        self, org: str, opts: ListOptions | None = None
    ) -> tuple[OrganizationInstallations, Response]:
        """List GitHub App installations in an organization.

        GitHub API docs: https://docs.github.com/rest/orgs/orgs#list-app-installations-for-an-organization
        """
        u = add_options(f"orgs/{org}/installations", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, OrganizationInstallations)

    def list(self, user: str = "", opts: ListOptions | None = None) -> tuple[list[Organization], Response]:
        """List the organizations for a user. An empty user lists the authenticated user's."""
        u = f"users/{user}/orgs" if user else "user/orgs"
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Organization])
