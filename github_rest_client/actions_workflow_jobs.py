"""Actions workflow jobs.

GitHub API docs: https://docs.github.com/rest/actions/workflow-jobs
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class TaskStep(GitHubModel):
    name: str | None = None
    status: str | None = None
    conclusion: str | None = None
    number: int | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


class WorkflowJob(GitHubModel):
    id: int | None = None
    run_id: int | None = None
    run_url: str | None = None
    node_id: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    url: str | None = None
    html_url: str | None = None
    status: str | None = None
    conclusion: str | None = None
    created_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    name: str | None = None
    steps: list[TaskStep] | None = None
    check_run_url: str | None = None
    labels: list[str] | None = None
    runner_id: int | None = None
    runner_name: str | None = None
    runner_group_id: int | None = None
    runner_group_name: str | None = None
    run_attempt: int | None = None
    workflow_name: str | None = None


class Jobs(GitHubModel):
    total_count: int | None = None
    jobs: list[WorkflowJob] | None = None


class ListWorkflowJobsOptions(ListOptions):
    # latest or all
    filter: str | None = None


class WorkflowJobsMixin:
    """Job methods of ActionsService."""

    def list_workflow_jobs(
        self, owner: str, repo: str, run_id: int, opts: ListWorkflowJobsOptions | None = None
    ) -> tuple[Jobs, Response]:
        """List the jobs of a workflow run.

        GitHub API docs: https://docs.github.com/rest/actions/workflow-jobs#list-jobs-for-a-workflow-run
        """
        u = add_options(f"repos/{owner}/{repo}/actions/runs/{run_id}/jobs", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Jobs)

    def get_workflow_job_by_id(self, owner: str, repo: str, job_id: int) -> tuple[WorkflowJob, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/actions/jobs/{job_id}")
        return self._client.do(req, WorkflowJob)

    def get_workflow_job_logs(self, owner: str, repo: str, job_id: int, max_redirects: int = 0) -> tuple[str, Response]:
        """Return the temporary URL to download a job's plain text log."""
        return self._client.get_redirect_url(f"repos/{owner}/{repo}/actions/jobs/{job_id}/logs", max_redirects)
