import pytest

from .activity import MEDIA_TYPE_STARRING_PREVIEW, ActivityListStarredOptions
from .client import Client
from .events import PushEvent
from .options import ListOptions


def describe_ActivityService():
    def describe_events():
        @pytest.mark.parametrize(
            ("method_name", "args", "path"),
            [
                ("list_events", (), "/events"),
                ("list_repository_events", ("o", "r"), "/repos/o/r/events"),
                ("list_events_for_repo_network", ("o", "r"), "/networks/o/r/events"),
                ("list_events_for_organization", ("o",), "/orgs/o/events"),
                ("list_events_performed_by_user", ("u",), "/users/u/events"),
                ("list_events_performed_by_user", ("u", True), "/users/u/events/public"),
                ("list_events_received_by_user", ("u",), "/users/u/received_events"),
                ("list_events_received_by_user", ("u", True), "/users/u/received_events/public"),
                ("list_user_events_for_organization", ("o", "u"), "/users/u/events/orgs/o"),
            ],
        )
        def it_lists_events(client: Client, mux, method_name, args, path):
            mux.route(path, json=[{"id": "1", "type": "WatchEvent"}])

            events, _ = getattr(client.activity, method_name)(*args, opts=ListOptions(page=2))

            assert [e.id for e in events] == ["1"]
            assert mux.last_params() == {"page": "2"}

        def it_parses_event_payloads(client: Client, mux):
            mux.route(
                "/events",
                json=[{"id": "2", "type": "PushEvent", "payload": {"push_id": 1, "ref": "refs/heads/main"}}],
            )

            events, _ = client.activity.list_events()
            payload = events[0].parse_payload()

            assert isinstance(payload, PushEvent)
            assert payload.ref == "refs/heads/main"

    def describe_starring():
        def it_lists_stargazers_with_timestamps(client: Client, mux):
            mux.route(
                "/repos/o/r/stargazers",
                json=[{"starred_at": "2002-02-10T15:30:00Z", "user": {"id": 1}}],
            )

            stargazers, _ = client.activity.list_stargazers("o", "r")

            assert mux.last.headers["Accept"] == MEDIA_TYPE_STARRING_PREVIEW
            assert stargazers[0].user.id == 1
            assert stargazers[0].starred_at.year == 2002

        def it_lists_starred_repositories(client: Client, mux):
            mux.route("/users/u/starred", json=[{"starred_at": "2002-02-10T15:30:00Z", "repo": {"id": 1}}])

            starred, _ = client.activity.list_starred(
                "u", ActivityListStarredOptions(sort="created", direction="asc")
            )

            assert mux.last_params() == {"sort": "created", "direction": "asc"}
            assert starred[0].repository.id == 1

        def it_lists_starred_for_the_authenticated_user(client: Client, mux):
            mux.route("/user/starred", json=[])

            starred, _ = client.activity.list_starred()

            assert starred == []

        @pytest.mark.parametrize(("status", "expected"), [(204, True), (404, False)])
        def it_checks_if_starred(client: Client, mux, status, expected):
            mux.route("/user/starred/o/r", method="GET", status=status)

            starred, _ = client.activity.is_starred("o", "r")

            assert starred is expected

        def it_stars_and_unstars(client: Client, mux):
            mux.route("/user/starred/o/r", status=204)

            client.activity.star("o", "r")
            client.activity.unstar("o", "r")

            assert [r.method for r in mux.requests] == ["PUT", "DELETE"]
