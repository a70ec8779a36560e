from .client import Client
from .repos_statuses import RepoStatus


def describe_StatusesMixin():
    def it_lists_statuses_for_a_ref(client: Client, mux):
        mux.route("/repos/o/r/commits/refs/heads/main/statuses", method="GET", json=[{"id": 1, "state": "success"}])

        statuses, _ = client.repositories.list_statuses("o", "r", "refs/heads/main")

        assert statuses[0].state == "success"
        assert b"/commits/refs%2Fheads%2Fmain/statuses" in mux.last.url.raw_path

    def it_creates_a_status(client: Client, mux):
        mux.route("/repos/o/r/statuses/abc123", method="POST", status=201, json={"id": 1, "state": "pending"})

        status, _ = client.repositories.create_status(
            "o", "r", "abc123", RepoStatus(state="pending", context="ci", target_url="https://ci.test/1")
        )

        assert mux.last_json() == {"state": "pending", "context": "ci", "target_url": "https://ci.test/1"}
        assert status.id == 1

    def it_gets_the_combined_status(client: Client, mux):
        mux.route(
            "/repos/o/r/commits/abc123/status",
            method="GET",
            json={"state": "failure", "total_count": 2, "statuses": [{"context": "a"}, {"context": "b"}]},
        )

        combined, _ = client.repositories.get_combined_status("o", "r", "abc123")

        assert combined.state == "failure"
        assert [s.context for s in combined.statuses] == ["a", "b"]
