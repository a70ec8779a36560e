"""Actions workflow runs.

GitHub API docs: https://docs.github.com/rest/actions/workflow-runs
"""

from datetime import datetime

from .git import CommitAuthor
from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .users import User


class HeadCommit(GitHubModel):
    """The commit a run or push was made against, as embedded in payloads."""

    id: str | None = None
    tree_id: str | None = None
    message: str | None = None
    timestamp: datetime | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    url: str | None = None
    distinct: bool | None = None
    added: list[str] | None = None
    removed: list[str] | None = None
    modified: list[str] | None = None


class ReferencedWorkflow(GitHubModel):
    path: str | None = None
    sha: str | None = None
    ref: str | None = None


class RunRepository(GitHubModel):
    """The minimal repository representation embedded in workflow runs."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    full_name: str | None = None
    owner: User | None = None
    private: bool | None = None
    html_url: str | None = None
    url: str | None = None


class WorkflowRun(GitHubModel):
    id: int | None = None
    name: str | None = None
    node_id: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    path: str | None = None
    run_number: int | None = None
    run_attempt: int | None = None
    event: str | None = None
    display_title: str | None = None
    # queued, in_progress, completed, ...
    status: str | None = None
    # success, failure, cancelled, skipped, ...
    conclusion: str | None = None
    workflow_id: int | None = None
    check_suite_id: int | None = None
    check_suite_node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    run_started_at: datetime | None = None
    jobs_url: str | None = None
    logs_url: str | None = None
    check_suite_url: str | None = None
    artifacts_url: str | None = None
    cancel_url: str | None = None
    rerun_url: str | None = None
    previous_attempt_url: str | None = None
    workflow_url: str | None = None
    head_commit: HeadCommit | None = None
    repository: RunRepository | None = None
    head_repository: RunRepository | None = None
    actor: User | None = None
    triggering_actor: User | None = None
    referenced_workflows: list[ReferencedWorkflow] | None = None


class WorkflowRuns(GitHubModel):
    total_count: int | None = None
    workflow_runs: list[WorkflowRun] | None = None


class ListWorkflowRunsOptions(ListOptions):
    actor: str | None = None
    branch: str | None = None
    event: str | None = None
    status: str | None = None
    # Date range such as ">=2024-01-01" or "2024-01-01..2024-02-01"
    created: str | None = None
    head_sha: str | None = None
    exclude_pull_requests: bool | None = None
    check_suite_id: int | None = None


class WorkflowRunsMixin:
    """Workflow run methods of ActionsService."""

    def list_workflow_runs_by_id(
        self, owner: str, repo: str, workflow_id: int, opts: ListWorkflowRunsOptions | None = None
    ) -> tuple[WorkflowRuns, Response]:
        """List the runs of a workflow.

        GitHub API docs: https://docs.github.com/rest/actions/workflow-runs#list-workflow-runs-for-a-workflow
        """
        return self._list_workflow_runs(f"repos/{owner}/{repo}/actions/workflows/{workflow_id}/runs", opts)

    def list_workflow_runs_by_file_name(
        self, owner: str, repo: str, workflow_file_name: str, opts: ListWorkflowRunsOptions | None = None
    ) -> tuple[WorkflowRuns, Response]:
        return self._list_workflow_runs(f"repos/{owner}/{repo}/actions/workflows/{workflow_file_name}/runs", opts)

    def list_repository_workflow_runs(
        self, owner: str, repo: str, opts: ListWorkflowRunsOptions | None = None
    ) -> tuple[WorkflowRuns, Response]:
        return self._list_workflow_runs(f"repos/{owner}/{repo}/actions/runs", opts)

    def _list_workflow_runs(self, u: str, opts) -> tuple[WorkflowRuns, Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, WorkflowRuns)

    def get_workflow_run_by_id(self, owner: str, repo: str, run_id: int) -> tuple[WorkflowRun, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/actions/runs/{run_id}")
        return self._client.do(req, WorkflowRun)

    def rerun_workflow_by_id(self, owner: str, repo: str, run_id: int) -> Response:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/actions/runs/{run_id}/rerun")
        return self._client.bare_do(req)

    def rerun_failed_jobs_by_id(self, owner: str, repo: str, run_id: int) -> Response:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/actions/runs/{run_id}/rerun-failed-jobs")
        return self._client.bare_do(req)

    def cancel_workflow_run_by_id(self, owner: str, repo: str, run_id: int) -> Response:
        """Cancel a workflow run.

        GitHub answers 202 Accepted, which is returned as a normal response.

        GitHub API docs: https://docs.github.com/rest/actions/workflow-runs#cancel-a-workflow-run
        """
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/actions/runs/{run_id}/cancel")
        _, resp = self._client.do_accepted(req)
        return resp

    def delete_workflow_run(self, owner: str, repo: str, run_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/actions/runs/{run_id}")
        return self._client.bare_do(req)

    def get_workflow_run_logs(self, owner: str, repo: str, run_id: int, max_redirects: int = 0) -> tuple[str, Response]:
        """Return the temporary URL to download a run's log archive.

        GitHub API docs: https://docs.github.com/rest/actions/workflow-runs#download-workflow-run-logs
        """
        return self._client.get_redirect_url(f"repos/{owner}/{repo}/actions/runs/{run_id}/logs", max_redirects)

    def delete_workflow_run_logs(self, owner: str, repo: str, run_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/actions/runs/{run_id}/logs")
        return self._client.bare_do(req)
