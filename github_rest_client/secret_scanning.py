"""Secret scanning alerts.

GitHub API docs: https://docs.github.com/rest/secret-scanning
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .repositories import Repository
from .service import Service
from .users import User


class SecretScanningAlert(GitHubModel):
    number: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    url: str | None = None
    html_url: str | None = None
    locations_url: str | None = None
    # open or resolved
    state: str | None = None
    # false_positive, wont_fix, revoked, used_in_tests or pattern_edited
    resolution: str | None = None
    resolution_comment: str | None = None
    resolved_at: datetime | None = None
    resolved_by: User | None = None
    secret_type: str | None = None
    secret_type_display_name: str | None = None
    secret: str | None = None
    # active, inactive or unknown
    validity: str | None = None
    repository: Repository | None = None
    push_protection_bypassed: bool | None = None
    push_protection_bypassed_by: User | None = None
    push_protection_bypassed_at: datetime | None = None
    publicly_leaked: bool | None = None
    multi_repo: bool | None = None


class SecretScanningAlertLocationDetails(GitHubModel):
    path: str | None = None
    start_line: int | None = None
    end_line: int | None = None
    start_column: int | None = None
    end_column: int | None = None
    blob_sha: str | None = None
    blob_url: str | None = None
    commit_sha: str | None = None
    commit_url: str | None = None
    issue_title_url: str | None = None
    issue_body_url: str | None = None
    issue_comment_url: str | None = None
    pull_request_title_url: str | None = None


class SecretScanningAlertLocation(GitHubModel):
    # commit, issue_title, issue_body, issue_comment, ...
    type: str | None = None
    details: SecretScanningAlertLocationDetails | None = None


class SecretScanningAlertListOptions(ListOptions):
    """Filters for listing alerts.

    Repository and organization listings are offset paginated; enterprise
    listings also accept the before/after cursors.
    """

    state: str | None = None
    # Comma-separated secret types
    secret_type: str | None = None
    # Comma-separated resolutions
    resolution: str | None = None
    validity: str | None = None
    # created or updated
    sort: str | None = None
    direction: str | None = None
    after: str | None = None
    before: str | None = None


class SecretScanningAlertUpdateOptions(GitHubModel):
    # open or resolved; required
    state: str | None = None
    resolution: str | None = None
    resolution_comment: str | None = None


class SecretScanningService(Service):
    """Methods for the secret scanning API."""

    def _list_alerts(self, u: str, opts) -> tuple[list[SecretScanningAlert], Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[SecretScanningAlert])

    def list_alerts_for_enterprise(
        self, enterprise: str, opts: SecretScanningAlertListOptions | None = None
    ) -> tuple[list[SecretScanningAlert], Response]:
        """List secret scanning alerts for eligible repositories in an enterprise.

        GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/secret-scanning/secret-scanning#list-secret-scanning-alerts-for-an-enterprise
        """
        return self._list_alerts(f"enterprises/{enterprise}/secret-scanning/alerts", opts)

    def list_alerts_for_org(
        self, org: str, opts: SecretScanningAlertListOptions | None = None
    ) -> tuple[list[SecretScanningAlert], Response]:
        return self._list_alerts(f"orgs/{org}/secret-scanning/alerts", opts)

    def list_alerts_for_repo(
        self, owner: str, repo: str, opts: SecretScanningAlertListOptions | None = None
    ) -> tuple[list[SecretScanningAlert], Response]:
        return self._list_alerts(f"repos/{owner}/{repo}/secret-scanning/alerts", opts)

    def get_alert(self, owner: str, repo: str, number: int) -> tuple[SecretScanningAlert, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/secret-scanning/alerts/{number}")
        return self._client.do(req, SecretScanningAlert)

    def update_alert(
        self, owner: str, repo: str, number: int, opts: SecretScanningAlertUpdateOptions
    ) -> tuple[SecretScanningAlert, Response]:
        """Update the status of an alert.

        GitHub API docs: https://docs.github.com/rest/secret-scanning/secret-scanning#update-a-secret-scanning-alert
        """
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/secret-scanning/alerts/{number}", opts)
        return self._client.do(req, SecretScanningAlert)

    def list_locations_for_alert(
        self, owner: str, repo: str, number: int, opts: ListOptions | None = None
    ) -> tuple[list[SecretScanningAlertLocation], Response]:
        u = add_options(f"repos/{owner}/{repo}/secret-scanning/alerts/{number}/locations", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[SecretScanningAlertLocation])
