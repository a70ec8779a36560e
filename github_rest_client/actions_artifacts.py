"""Workflow artifacts.

GitHub API docs: https://docs.github.com/rest/actions/artifacts
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class ArtifactWorkflowRun(GitHubModel):
    id: int | None = None
    repository_id: int | None = None
    head_repository_id: int | None = None
    head_branch: str | None = None
    head_sha: str | None = None


class Artifact(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    size_in_bytes: int | None = None
    url: str | None = None
    archive_download_url: str | None = None
    expired: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    expires_at: datetime | None = None
    workflow_run: ArtifactWorkflowRun | None = None


class ArtifactList(GitHubModel):
    total_count: int | None = None
    artifacts: list[Artifact] | None = None


class ListArtifactsOptions(ListOptions):
    # Filters artifacts by exact name match
    name: str | None = None


class ArtifactsMixin:
    """Artifact methods of ActionsService."""

    def list_artifacts(
        self, owner: str, repo: str, opts: ListArtifactsOptions | None = None
    ) -> tuple[ArtifactList, Response]:
        u = add_options(f"repos/{owner}/{repo}/actions/artifacts", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ArtifactList)

    def list_workflow_run_artifacts(
        self, owner: str, repo: str, run_id: int, opts: ListOptions | None = None
    ) -> tuple[ArtifactList, Response]:
        u = add_options(f"repos/{owner}/{repo}/actions/runs/{run_id}/artifacts", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ArtifactList)

    def get_artifact(self, owner: str, repo: str, artifact_id: int) -> tuple[Artifact, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}")
        return self._client.do(req, Artifact)

    def download_artifact(
        self, owner: str, repo: str, artifact_id: int, max_redirects: int = 0
    ) -> tuple[str, Response]:
        """Return the temporary URL to download an artifact zip.

        GitHub API docs: https://docs.github.com/rest/actions/artifacts#download-an-artifact
        """
        return self._client.get_redirect_url(
            f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}/zip", max_redirects
        )

    def delete_artifact(self, owner: str, repo: str, artifact_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/actions/artifacts/{artifact_id}")
        return self._client.bare_do(req)
