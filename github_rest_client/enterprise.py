"""Enterprise administration API.

GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/enterprise-admin
"""

from .actions_runners import ListRunnersOptions, RegistrationToken, RunnerApplicationDownload, Runners
from .enterprise_actions_permissions import ActionsPermissionsMixin
from .enterprise_runner_groups import RunnerGroupsMixin
from .models import Response
from .options import add_options
from .service import Service


class EnterpriseService(RunnerGroupsMixin, ActionsPermissionsMixin, Service):
    """Methods for the enterprise administration API."""

    def create_registration_token(self, enterprise: str) -> tuple[RegistrationToken, Response]:
        """Create a token to register a self-hosted runner with an enterprise.

        GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/actions/self-hosted-runners#create-a-registration-token-for-an-enterprise
        """
        req = self._client.new_request("POST", f"enterprises/{enterprise}/actions/runners/registration-token")
        return self._client.do(req, RegistrationToken)

    def list_runners(self, enterprise: str, opts: ListRunnersOptions | None = None) -> tuple[Runners, Response]:
        u = add_options(f"enterprises/{enterprise}/actions/runners", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Runners)

    def remove_runner(self, enterprise: str, runner_id: int) -> Response:
        req = self._client.new_request("DELETE", f"enterprises/{enterprise}/actions/runners/{runner_id}")
        return self._client.bare_do(req)

    def list_runner_application_downloads(self, enterprise: str) -> tuple[list[RunnerApplicationDownload], Response]:
        req = self._client.new_request("GET", f"enterprises/{enterprise}/actions/runners/downloads")
        return self._client.do(req, list[RunnerApplicationDownload])
