"""Codespaces API.

GitHub API docs: https://docs.github.com/rest/codespaces
"""

from datetime import datetime

from .codespaces_secrets import CodespacesSecretsMixin
from .models import GitHubModel, Response
from .options import ListOptions, Options, add_options
from .repositories import Repository
from .service import Service
from .users import User


class CodespacesMachine(GitHubModel):
    name: str | None = None
    display_name: str | None = None
    operating_system: str | None = None
    storage_in_bytes: int | None = None
    memory_in_bytes: int | None = None
    cpus: int | None = None
    # none, ready or in_progress
    prebuild_availability: str | None = None


class CodespaceMachines(GitHubModel):
    total_count: int | None = None
    machines: list[CodespacesMachine] | None = None


class CodespacesGitStatus(GitHubModel):
    ahead: int | None = None
    behind: int | None = None
    has_unpushed_changes: bool | None = None
    has_uncommitted_changes: bool | None = None
    ref: str | None = None


class CodespacesRuntimeConstraints(GitHubModel):
    allowed_port_privacy_settings: list[str] | None = None


class Codespace(GitHubModel):
    id: int | None = None
    name: str | None = None
    display_name: str | None = None
    environment_id: str | None = None
    owner: User | None = None
    billable_owner: User | None = None
    repository: Repository | None = None
    machine: CodespacesMachine | None = None
    devcontainer_path: str | None = None
    prebuild: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_used_at: datetime | None = None
    # Available, Shutdown, Starting, ...
    state: str | None = None
    url: str | None = None
    git_status: CodespacesGitStatus | None = None
    location: str | None = None
    idle_timeout_minutes: int | None = None
    web_url: str | None = None
    machines_url: str | None = None
    start_url: str | None = None
    stop_url: str | None = None
    pulls_url: str | None = None
    recent_folders: list[str] | None = None
    runtime_constraints: CodespacesRuntimeConstraints | None = None
    pending_operation: bool | None = None
    pending_operation_disabled_reason: str | None = None
    idle_timeout_notice: str | None = None
    retention_period_minutes: int | None = None
    retention_expires_at: datetime | None = None


class ListCodespaces(GitHubModel):
    total_count: int | None = None
    codespaces: list[Codespace] | None = None


class ListCodespacesOptions(ListOptions):
    # Only codespaces of this repository
    repository_id: int | None = None


class CreateCodespaceOptions(GitHubModel):
    ref: str | None = None
    # EastUs, SouthEastAsia, WestEurope or WestUs2
    geo: str | None = None
    client_ip: str | None = None
    machine: str | None = None
    devcontainer_path: str | None = None
    multi_repo_permissions_opt_out: bool | None = None
    working_directory: str | None = None
    idle_timeout_minutes: int | None = None
    display_name: str | None = None
    retention_period_minutes: int | None = None


class ListMachinesOptions(Options):
    ref: str | None = None
    location: str | None = None
    client_ip: str | None = None


class CodespacesService(CodespacesSecretsMixin, Service):
    """Methods for the codespaces API."""

    def list_in_repo(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[ListCodespaces, Response]:
        """List the authenticated user's codespaces in a repository.

        GitHub API docs: https://docs.github.com/rest/codespaces/codespaces#list-codespaces-in-a-repository-for-the-authenticated-user
        """
        u = add_options(f"repos/{owner}/{repo}/codespaces", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ListCodespaces)

    def create_in_repo(
        self, owner: str, repo: str, request: CreateCodespaceOptions
    ) -> tuple[Codespace, Response]:
        """Create a codespace in a repository.

        Creation may be queued, in which case GitHub answers 202 with the
        pending codespace.
        """
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/codespaces", request)
        return self._client.do_accepted(req, Codespace)

    def start(self, codespace_name: str) -> tuple[Codespace, Response]:
        req = self._client.new_request("POST", f"user/codespaces/{codespace_name}/start")
        return self._client.do(req, Codespace)

    def stop(self, codespace_name: str) -> tuple[Codespace, Response]:
        req = self._client.new_request("POST", f"user/codespaces/{codespace_name}/stop")
        return self._client.do(req, Codespace)

    def delete(self, codespace_name: str) -> Response:
        """Delete a codespace. GitHub queues the deletion and answers 202."""
        req = self._client.new_request("DELETE", f"user/codespaces/{codespace_name}")
        _, resp = self._client.do_accepted(req)
        return resp

    def list_machine_types_for_repository(
        self, owner: str, repo: str, opts: ListMachinesOptions | None = None
    ) -> tuple[CodespaceMachines, Response]:
        """List the machine types available for codespaces in a repository."""
        u = add_options(f"repos/{owner}/{repo}/codespaces/machines", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, CodespaceMachines)

    def list_machine_types_for_codespace(self, codespace_name: str) -> tuple[CodespaceMachines, Response]:
        req = self._client.new_request("GET", f"user/codespaces/{codespace_name}/machines")
        return self._client.do(req, CodespaceMachines)

    def list(self, opts: ListCodespacesOptions | None = None) -> tuple[ListCodespaces, Response]:
        """List the authenticated user's codespaces.

        GitHub API docs: https://docs.github.com/rest/codespaces/codespaces#list-codespaces-for-the-authenticated-user
        """
        u = add_options("user/codespaces", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ListCodespaces)
