"""Organization membership methods."""

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .users import User


class MembershipOrganization(GitHubModel):
    login: str | None = None
    id: int | None = None
    url: str | None = None


class Membership(GitHubModel):
    """A user's membership in an organization."""

    url: str | None = None
    # active or pending
    state: str | None = None
    # admin, member or billing_manager
    role: str | None = None
    organization_url: str | None = None
    organization: MembershipOrganization | None = None
    user: User | None = None


class ListMembersOptions(ListOptions):
    # List only publicized members; sent as a different URL, not a parameter
    public_only: bool = False
    # 2fa_disabled or all
    filter: str | None = None
    # all, admin or member
    role: str | None = None

    def to_query(self) -> list[tuple[str, str]]:
        return [(k, v) for k, v in super().to_query() if k != "public_only"]


class ListOrgMembershipsOptions(ListOptions):
    state: str | None = None


class MembersMixin:
    """Member methods of OrganizationsService."""

    def list_members(self, org: str, opts: ListMembersOptions | None = None) -> tuple[list[User], Response]:
        """List the members of an organization.

        Public members are listed when opts.public_only is set or the caller
        is not a member of the organization.

        GitHub API docs: https://docs.github.com/rest/orgs/members#list-organization-members
        """
        if opts is not None and opts.public_only:
            u = f"orgs/{org}/public_members"
        else:
            u = f"orgs/{org}/members"
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[User])

    def is_member(self, org: str, user: str) -> tuple[bool, Response]:
        """Check whether user is a member of org."""
        req = self._client.new_request("GET", f"orgs/{org}/members/{user}")
        return self._client.do_bool(req)

    def is_public_member(self, org: str, user: str) -> tuple[bool, Response]:
        """Check whether user is a public member of org."""
        req = self._client.new_request("GET", f"orgs/{org}/public_members/{user}")
        return self._client.do_bool(req)

    def remove_member(self, org: str, user: str) -> Response:
        req = self._client.new_request("DELETE", f"orgs/{org}/members/{user}")
        return self._client.bare_do(req)

    def get_org_membership(self, user: str, org: str) -> tuple[Membership, Response]:
        """Get a user's membership in an organization.

        An empty user fetches the authenticated user's membership.

        GitHub API docs: https://docs.github.com/rest/orgs/members#get-organization-membership-for-a-user
        """
        if user:
            u = f"orgs/{org}/memberships/{user}"
        else:
            u = f"user/memberships/orgs/{org}"
        req = self._client.new_request("GET", u)
        return self._client.do(req, Membership)

    def edit_org_membership(self, user: str, org: str, membership: Membership) -> tuple[Membership, Response]:
        """Edit a membership; an empty user edits the authenticated user's.

        The authenticated user may only change the state, other users the role.
        """
        if user:
            method, u = "PUT", f"orgs/{org}/memberships/{user}"
        else:
            method, u = "PATCH", f"user/memberships/orgs/{org}"
        req = self._client.new_request(method, u, membership)
        return self._client.do(req, Membership)

    def list_org_memberships(
        self, opts: ListOrgMembershipsOptions | None = None
    ) -> tuple[list[Membership], Response]:
        u = add_options("user/memberships/orgs", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Membership])
