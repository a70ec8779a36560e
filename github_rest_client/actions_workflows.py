"""Actions workflows.

GitHub API docs: https://docs.github.com/rest/actions/workflows
"""

from datetime import datetime
from typing import Any

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class Workflow(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    path: str | None = None
    # active, deleted, disabled_fork, disabled_inactivity or disabled_manually
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    url: str | None = None
    html_url: str | None = None
    badge_url: str | None = None


class Workflows(GitHubModel):
    total_count: int | None = None
    workflows: list[Workflow] | None = None


class CreateWorkflowDispatchEventRequest(GitHubModel):
    """Body of a workflow_dispatch event."""

    # Git reference (branch or tag name) to run the workflow on; required
    ref: str
    inputs: dict[str, Any] | None = None


class WorkflowsMixin:
    """Workflow methods of ActionsService."""

    def list_workflows(self, owner: str, repo: str, opts: ListOptions | None = None) -> tuple[Workflows, Response]:
        """List the workflows of a repository.

        GitHub API docs: https://docs.github.com/rest/actions/workflows#list-repository-workflows
        """
        u = add_options(f"repos/{owner}/{repo}/actions/workflows", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Workflows)

    def get_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> tuple[Workflow, Response]:
        return self._get_workflow(f"repos/{owner}/{repo}/actions/workflows/{workflow_id}")

    def get_workflow_by_file_name(self, owner: str, repo: str, workflow_file_name: str) -> tuple[Workflow, Response]:
        return self._get_workflow(f"repos/{owner}/{repo}/actions/workflows/{workflow_file_name}")

    def _get_workflow(self, u: str) -> tuple[Workflow, Response]:
        req = self._client.new_request("GET", u)
        return self._client.do(req, Workflow)

    def create_workflow_dispatch_event_by_id(
        self, owner: str, repo: str, workflow_id: int, event: CreateWorkflowDispatchEventRequest
    ) -> Response:
        """Manually trigger a workflow run.

        GitHub API docs: https://docs.github.com/rest/actions/workflows#create-a-workflow-dispatch-event
        """
        return self._dispatch(f"repos/{owner}/{repo}/actions/workflows/{workflow_id}/dispatches", event)

    def create_workflow_dispatch_event_by_file_name(
        self, owner: str, repo: str, workflow_file_name: str, event: CreateWorkflowDispatchEventRequest
    ) -> Response:
        return self._dispatch(f"repos/{owner}/{repo}/actions/workflows/{workflow_file_name}/dispatches", event)

    def _dispatch(self, u: str, event: CreateWorkflowDispatchEventRequest) -> Response:
        req = self._client.new_request("POST", u, event)
        return self._client.bare_do(req)

    def enable_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> Response:
        return self._set_workflow_state(f"repos/{owner}/{repo}/actions/workflows/{workflow_id}/enable")

    def enable_workflow_by_file_name(self, owner: str, repo: str, workflow_file_name: str) -> Response:
        return self._set_workflow_state(f"repos/{owner}/{repo}/actions/workflows/{workflow_file_name}/enable")

    def disable_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> Response:
        return self._set_workflow_state(f"repos/{owner}/{repo}/actions/workflows/{workflow_id}/disable")

    def disable_workflow_by_file_name(self, owner: str, repo: str, workflow_file_name: str) -> Response:
        return self._set_workflow_state(f"repos/{owner}/{repo}/actions/workflows/{workflow_file_name}/disable")

    def _set_workflow_state(self, u: str) -> Response:
        req = self._client.new_request("PUT", u)
        return self._client.bare_do(req)
