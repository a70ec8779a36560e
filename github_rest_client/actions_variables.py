"""Actions variables for repositories and organizations.

GitHub API docs: https://docs.github.com/rest/actions/variables
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class ActionsVariable(GitHubModel):
    name: str | None = None
    value: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # all, private or selected; organization variables only
    visibility: str | None = None
    selected_repositories_url: str | None = None
    selected_repository_ids: list[int] | None = None


class ActionsVariables(GitHubModel):
    total_count: int | None = None
    variables: list[ActionsVariable] | None = None


_VARIABLE_BODY_FIELDS = {"name", "value", "visibility", "selected_repository_ids"}


class VariablesMixin:
    """Variable methods of ActionsService."""

    def list_repo_variables(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[ActionsVariables, Response]:
        u = add_options(f"repos/{owner}/{repo}/actions/variables", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ActionsVariables)

    def get_repo_variable(self, owner: str, repo: str, name: str) -> tuple[ActionsVariable, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/actions/variables/{name}")
        return self._client.do(req, ActionsVariable)

    def create_repo_variable(self, owner: str, repo: str, variable: ActionsVariable) -> Response:
        """Create a repository variable.

        GitHub API docs: https://docs.github.com/rest/actions/variables#create-a-repository-variable
        """
        body = variable.model_dump(mode="json", include=_VARIABLE_BODY_FIELDS, exclude_none=True)
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/actions/variables", body)
        return self._client.bare_do(req)

    def update_repo_variable(self, owner: str, repo: str, variable: ActionsVariable) -> Response:
        body = variable.model_dump(mode="json", include=_VARIABLE_BODY_FIELDS, exclude_none=True)
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/actions/variables/{variable.name}", body)
        return self._client.bare_do(req)

    def delete_repo_variable(self, owner: str, repo: str, name: str) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/actions/variables/{name}")
        return self._client.bare_do(req)

    def list_org_variables(self, org: str, opts: ListOptions | None = None) -> tuple[ActionsVariables, Response]:
        u = add_options(f"orgs/{org}/actions/variables", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ActionsVariables)

    def get_org_variable(self, org: str, name: str) -> tuple[ActionsVariable, Response]:
        req = self._client.new_request("GET", f"orgs/{org}/actions/variables/{name}")
        return self._client.do(req, ActionsVariable)

    def create_org_variable(self, org: str, variable: ActionsVariable) -> Response:
        body = variable.model_dump(mode="json", include=_VARIABLE_BODY_FIELDS, exclude_none=True)
        req = self._client.new_request("POST", f"orgs/{org}/actions/variables", body)
        return self._client.bare_do(req)

    def update_org_variable(self, org: str, variable: ActionsVariable) -> Response:
        body = variable.model_dump(mode="json", include=_VARIABLE_BODY_FIELDS, exclude_none=True)
        req = self._client.new_request("PATCH", f"orgs/{org}/actions/variables/{variable.name}", body)
        return self._client.bare_do(req)

    def delete_org_variable(self, org: str, name: str) -> Response:
        req = self._client.new_request("DELETE", f"orgs/{org}/actions/variables/{name}")
        return self._client.bare_do(req)
