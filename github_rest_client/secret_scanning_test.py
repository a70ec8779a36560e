import pytest

from .client import Client
from .secret_scanning import SecretScanningAlertListOptions, SecretScanningAlertUpdateOptions


def describe_SecretScanningService():
    @pytest.mark.parametrize(
        ("method_name", "args", "path"),
        [
            ("list_alerts_for_enterprise", ("e",), "/enterprises/e/secret-scanning/alerts"),
            ("list_alerts_for_org", ("o",), "/orgs/o/secret-scanning/alerts"),
            ("list_alerts_for_repo", ("o", "r"), "/repos/o/r/secret-scanning/alerts"),
        ],
    )
    def it_lists_alerts(client: Client, mux, method_name, args, path):
        mux.route(path, json=[{"number": 1, "state": "open", "secret_type": "mailchimp_api_key"}])

        opts = SecretScanningAlertListOptions(state="open", secret_type="mailchimp_api_key", per_page=10)
        alerts, _ = getattr(client.secret_scanning, method_name)(*args, opts)

        assert alerts[0].number == 1
        assert mux.last_params() == {"state": "open", "secret_type": "mailchimp_api_key", "per_page": "10"}

    def it_gets_an_alert(client: Client, mux):
        mux.route(
            "/repos/o/r/secret-scanning/alerts/42",
            json={"number": 42, "resolved_by": {"login": "octocat"}, "created_at": "2024-01-01T00:00:00Z"},
        )

        alert, _ = client.secret_scanning.get_alert("o", "r", 42)

        assert alert.resolved_by.login == "octocat"
        assert alert.created_at.year == 2024

    def it_updates_an_alert(client: Client, mux):
        mux.route("/repos/o/r/secret-scanning/alerts/42", method="PATCH", json={"number": 42, "state": "resolved"})

        alert, _ = client.secret_scanning.update_alert(
            "o", "r", 42, SecretScanningAlertUpdateOptions(state="resolved", resolution="revoked")
        )

        assert mux.last_json() == {"state": "resolved", "resolution": "revoked"}
        assert alert.state == "resolved"

    def it_lists_locations(client: Client, mux):
        mux.route(
            "/repos/o/r/secret-scanning/alerts/42/locations",
            json=[{"type": "commit", "details": {"path": "/x.txt", "start_line": 1, "commit_sha": "abc"}}],
        )

        locations, _ = client.secret_scanning.list_locations_for_alert("o", "r", 42)

        assert locations[0].type == "commit"
        assert locations[0].details.commit_sha == "abc"
