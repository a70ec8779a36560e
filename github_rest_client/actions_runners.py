"""Self-hosted runners for repositories and organizations.

GitHub API docs: https://docs.github.com/rest/actions/self-hosted-runners
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class RunnerApplicationDownload(GitHubModel):
    os: str | None = None
    architecture: str | None = None
    download_url: str | None = None
    filename: str | None = None
    temp_download_token: str | None = None
    sha256_checksum: str | None = None


class RegistrationToken(GitHubModel):
    """A short-lived token to register or remove a runner."""

    token: str | None = None
    expires_at: datetime | None = None


# Same shape, returned by the remove-token endpoints
RemoveToken = RegistrationToken


class RunnerLabels(GitHubModel):
    id: int | None = None
    name: str | None = None
    # read-only or custom
    type: str | None = None


class Runner(GitHubModel):
    id: int | None = None
    name: str | None = None
    os: str | None = None
    # online or offline
    status: str | None = None
    busy: bool | None = None
    labels: list[RunnerLabels] | None = None
    runner_group_id: int | None = None


class Runners(GitHubModel):
    total_count: int | None = None
    runners: list[Runner] | None = None


class ListRunnersOptions(ListOptions):
    name: str | None = None


def _runners_base(owner: str, repo: str) -> str:
    return f"repos/{owner}/{repo}/actions/runners"


class RunnersMixin:
    """Runner methods of ActionsService."""

    def _do_downloads(self, u: str) -> tuple[list[RunnerApplicationDownload], Response]:
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[RunnerApplicationDownload])

    def _do_token(self, u: str) -> tuple[RegistrationToken, Response]:
        req = self._client.new_request("POST", u)
        return self._client.do(req, RegistrationToken)

    def _do_runners(self, u: str, opts) -> tuple[Runners, Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Runners)

    def list_runner_application_downloads(
        self, owner: str, repo: str
    ) -> tuple[list[RunnerApplicationDownload], Response]:
        return self._do_downloads(f"{_runners_base(owner, repo)}/downloads")

    def create_registration_token(self, owner: str, repo: str) -> tuple[RegistrationToken, Response]:
        """Create a token to register a self-hosted runner with a repository.

        GitHub API docs: https://docs.github.com/rest/actions/self-hosted-runners#create-a-registration-token-for-a-repository
        """
        return self._do_token(f"{_runners_base(owner, repo)}/registration-token")

    def create_remove_token(self, owner: str, repo: str) -> tuple[RemoveToken, Response]:
        return self._do_token(f"{_runners_base(owner, repo)}/remove-token")

    def list_runners(self, owner: str, repo: str, opts: ListRunnersOptions | None = None) -> tuple[Runners, Response]:
        return self._do_runners(_runners_base(owner, repo), opts)

    def get_runner(self, owner: str, repo: str, runner_id: int) -> tuple[Runner, Response]:
        req = self._client.new_request("GET", f"{_runners_base(owner, repo)}/{runner_id}")
        return self._client.do(req, Runner)

    def remove_runner(self, owner: str, repo: str, runner_id: int) -> Response:
        req = self._client.new_request("DELETE", f"{_runners_base(owner, repo)}/{runner_id}")
        return self._client.bare_do(req)

    def list_organization_runner_application_downloads(
        self, org: str
    ) -> tuple[list[RunnerApplicationDownload], Response]:
        return self._do_downloads(f"orgs/{org}/actions/runners/downloads")

    def create_organization_registration_token(self, org: str) -> tuple[RegistrationToken, Response]:
        return self._do_token(f"orgs/{org}/actions/runners/registration-token")

    def create_organization_remove_token(self, org: str) -> tuple[RemoveToken, Response]:
        return self._do_token(f"orgs/{org}/actions/runners/remove-token")

    def list_organization_runners(self, org: str, opts: ListRunnersOptions | None = None) -> tuple[Runners, Response]:
        return self._do_runners(f"orgs/{org}/actions/runners", opts)

    def get_organization_runner(self, org: str, runner_id: int) -> tuple[Runner, Response]:
        req = self._client.new_request("GET", f"orgs/{org}/actions/runners/{runner_id}")
        return self._client.do(req, Runner)

    def remove_organization_runner(self, org: str, runner_id: int) -> Response:
        req = self._client.new_request("DELETE", f"orgs/{org}/actions/runners/{runner_id}")
        return self._client.bare_do(req)
