import pytest

from .client import Client
from .errors import ErrorResponse
from .pulls import NewPullRequest, PullRequestListOptions, PullRequestOptions, PullRequestUpdate


def describe_PullRequestsService():
    def it_lists_pull_requests(client: Client, mux):
        mux.route("/repos/o/r/pulls", method="GET", json=[{"number": 1, "head": {"ref": "feature", "repo": {"id": 3}}}])

        pulls, _ = client.pull_requests.list("o", "r", PullRequestListOptions(state="closed", head="o:feature"))

        assert pulls[0].head.ref == "feature"
        assert pulls[0].head.repo.id == 3
        assert mux.last_params() == {"state": "closed", "head": "o:feature"}

    def it_gets_a_pull_request(client: Client, mux):
        mux.route("/repos/o/r/pulls/1", method="GET", json={"number": 1, "mergeable": True, "merged_by": {"login": "m"}})

        pull, _ = client.pull_requests.get("o", "r", 1)

        assert pull.mergeable is True
        assert pull.merged_by.login == "m"

    def it_creates_a_pull_request(client: Client, mux):
        mux.route("/repos/o/r/pulls", method="POST", status=201, json={"number": 2})

        pull, _ = client.pull_requests.create(
            "o", "r", NewPullRequest(title="t", head="feature", base="main", draft=True)
        )

        assert mux.last_json() == {"title": "t", "head": "feature", "base": "main", "draft": True}
        assert pull.number == 2

    def it_edits_a_pull_request(client: Client, mux):
        mux.route("/repos/o/r/pulls/1", method="PATCH", json={"number": 1, "state": "closed"})

        client.pull_requests.edit("o", "r", 1, PullRequestUpdate(state="closed"))

        assert mux.last_json() == {"state": "closed"}

    def it_lists_changed_files(client: Client, mux):
        mux.route(
            "/repos/o/r/pulls/1/files",
            method="GET",
            json=[{"filename": "a.py", "status": "renamed", "previous_filename": "b.py", "additions": 2}],
        )

        files, _ = client.pull_requests.list_files("o", "r", 1)

        assert files[0].previous_filename == "b.py"
        assert files[0].additions == 2

    def describe_is_merged():
        def it_is_true_for_204(client: Client, mux):
            mux.route("/repos/o/r/pulls/1/merge", method="GET", status=204)

            merged, _ = client.pull_requests.is_merged("o", "r", 1)

            assert merged is True

        def it_is_false_for_404(client: Client):
            merged, resp = client.pull_requests.is_merged("o", "r", 1)

            assert merged is False
            assert resp.status_code == 404

        def it_raises_for_other_errors(client: Client, mux):
            mux.route("/repos/o/r/pulls/1/merge", status=500, json={"message": "oops"})

            with pytest.raises(ErrorResponse):
                client.pull_requests.is_merged("o", "r", 1)

    def describe_merge():
        def it_merges_with_options_and_a_message(client: Client, mux):
            mux.route("/repos/o/r/pulls/1/merge", method="PUT", json={"sha": "s", "merged": True, "message": "ok"})

            result, _ = client.pull_requests.merge(
                "o", "r", 1, "merge it", PullRequestOptions(merge_method="squash", sha="head")
            )

            assert mux.last_json() == {"commit_message": "merge it", "merge_method": "squash", "sha": "head"}
            assert result.merged is True

        def it_sends_an_empty_object_by_default(client: Client, mux):
            mux.route("/repos/o/r/pulls/1/merge", method="PUT", json={"merged": True})

            client.pull_requests.merge("o", "r", 1, "")

            assert mux.last_json() == {}
