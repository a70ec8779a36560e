"""Self-hosted runner groups of an enterprise.

GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/actions/self-hosted-runner-groups
"""

from pydantic import Field

from .actions_runners import Runners
from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .organizations import Organization


class EnterpriseRunnerGroup(GitHubModel):
    id: int | None = None
    name: str | None = None
    # all or selected
    visibility: str | None = None
    default: bool | None = None
    selected_organizations_url: str | None = None
    runners_url: str | None = None
    inherited: bool | None = None
    allows_public_repositories: bool | None = None
    restricted_to_workflows: bool | None = None
    selected_workflows: list[str] | None = None
    workflow_restrictions_read_only: bool | None = None


class EnterpriseRunnerGroups(GitHubModel):
    total_count: int | None = None
    runner_groups: list[EnterpriseRunnerGroup] | None = None


class CreateEnterpriseRunnerGroupRequest(GitHubModel):
    name: str | None = None
    visibility: str | None = None
    # Organizations that may use the group when visibility is "selected"
    selected_organization_ids: list[int] | None = None
    # Runner IDs to add to the group
    runners: list[int] | None = None
    allows_public_repositories: bool | None = None
    restricted_to_workflows: bool | None = None
    selected_workflows: list[str] | None = None


class UpdateEnterpriseRunnerGroupRequest(GitHubModel):
    name: str | None = None
    visibility: str | None = None
    allows_public_repositories: bool | None = None
    restricted_to_workflows: bool | None = None
    selected_workflows: list[str] | None = None


class ListOrganizations(GitHubModel):
    total_count: int | None = None
    organizations: list[Organization] = Field(default_factory=list)


class ListEnterpriseRunnerGroupOptions(ListOptions):
    # Only groups the organization is allowed to use
    visible_to_organization: str | None = None


def _group_path(enterprise: str, group_id: int) -> str:
    return f"enterprises/{enterprise}/actions/runner-groups/{group_id}"


class RunnerGroupsMixin:
    """Runner group methods of EnterpriseService."""

    def list_runner_groups(
        self, enterprise: str, opts: ListEnterpriseRunnerGroupOptions | None = None
    ) -> tuple[EnterpriseRunnerGroups, Response]:
        u = add_options(f"enterprises/{enterprise}/actions/runner-groups", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, EnterpriseRunnerGroups)

    def get_runner_group(self, enterprise: str, group_id: int) -> tuple[EnterpriseRunnerGroup, Response]:
        req = self._client.new_request("GET", _group_path(enterprise, group_id))
        return self._client.do(req, EnterpriseRunnerGroup)

    def create_runner_group(
        self, enterprise: str, create_req: CreateEnterpriseRunnerGroupRequest
    ) -> tuple[EnterpriseRunnerGroup, Response]:
        """Create a runner group for an enterprise.

        GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/actions/self-hosted-runner-groups#create-a-self-hosted-runner-group-for-an-enterprise
        """
        req = self._client.new_request("POST", f"enterprises/{enterprise}/actions/runner-groups", create_req)
        return self._client.do(req, EnterpriseRunnerGroup)

    def update_runner_group(
        self, enterprise: str, group_id: int, update_req: UpdateEnterpriseRunnerGroupRequest
    ) -> tuple[EnterpriseRunnerGroup, Response]:
        req = self._client.new_request("PATCH", _group_path(enterprise, group_id), update_req)
        return self._client.do(req, EnterpriseRunnerGroup)

    def delete_runner_group(self, enterprise: str, group_id: int) -> Response:
        req = self._client.new_request("DELETE", _group_path(enterprise, group_id))
        return self._client.bare_do(req)

    def list_organization_access_runner_group(
        self, enterprise: str, group_id: int, opts: ListOptions | None = None
    ) -> tuple[ListOrganizations, Response]:
        u = add_options(f"{_group_path(enterprise, group_id)}/organizations", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ListOrganizations)

    def set_organization_access_runner_group(self, enterprise: str, group_id: int, org_ids: list[int]) -> Response:
        """Replace the organizations that may use a "selected" visibility group.

        An empty list is sent as [], revoking every organization.
        """
        body = {"selected_organization_ids": list(org_ids)}
        req = self._client.new_request("PUT", f"{_group_path(enterprise, group_id)}/organizations", body)
        return self._client.bare_do(req)

    def add_organization_access_runner_group(self, enterprise: str, group_id: int, org_id: int) -> Response:
        req = self._client.new_request("PUT", f"{_group_path(enterprise, group_id)}/organizations/{org_id}")
        return self._client.bare_do(req)

    def remove_organization_access_runner_group(self, enterprise: str, group_id: int, org_id: int) -> Response:
        req = self._client.new_request("DELETE", f"{_group_path(enterprise, group_id)}/organizations/{org_id}")
        return self._client.bare_do(req)

    def list_runner_group_runners(
        self, enterprise: str, group_id: int, opts: ListOptions | None = None
    ) -> tuple[Runners, Response]:
        u = add_options(f"{_group_path(enterprise, group_id)}/runners", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Runners)

    def set_runner_group_runners(self, enterprise: str, group_id: int, runner_ids: list[int]) -> Response:
        body = {"runners": list(runner_ids)}
        req = self._client.new_request("PUT", f"{_group_path(enterprise, group_id)}/runners", body)
        return self._client.bare_do(req)

    def add_runner_group_runner(self, enterprise: str, group_id: int, runner_id: int) -> Response:
        req = self._client.new_request("PUT", f"{_group_path(enterprise, group_id)}/runners/{runner_id}")
        return self._client.bare_do(req)

    def remove_runner_group_runner(self, enterprise: str, group_id: int, runner_id: int) -> Response:
        req = self._client.new_request("DELETE", f"{_group_path(enterprise, group_id)}/runners/{runner_id}")
        return self._client.bare_do(req)
