import httpx
import pytest

from .client import Client
from .models import Response
from .options import ListCursorOptions, ListOptions, Options
from .pagination import scan
from .repos_hooks import HookDelivery
from .users import UserListOptions


def _resp(link: str = "") -> Response:
    headers = {"Link": link} if link else {}
    return Response.from_http(httpx.Response(200, headers=headers))


def describe_scan():
    def it_follows_next_pages_until_the_last():
        pages = {
            None: (["a", "b"], _resp('<https://api.github.com/x?page=2>; rel="next"')),
            2: (["c"], _resp('<https://api.github.com/x?page=3>; rel="next"')),
            3: (["d"], _resp()),
        }
        seen_args = []

        def method(owner, opts):
            seen_args.append((owner, opts.page))
            return pages[opts.page]

        assert list(scan(method, "octo")) == ["a", "b", "c", "d"]
        assert seen_args == [("octo", None), ("octo", 2), ("octo", 3)]

    def it_advances_cursor_pagination_with_after():
        calls = []

        def method(opts):
            calls.append(opts.after)
            if opts.after is None:
                return [1], _resp('<https://api.github.com/x?after=xyz>; rel="next"')
            return [2], _resp()

        assert list(scan(method, opts=ListCursorOptions(per_page=1))) == [1, 2]
        assert calls == [None, "xyz"]

    def it_extracts_items_from_wrapper_results():
        def method(opts):
            return {"total": 1, "things": ["x"]}, _resp()

        assert list(scan(method, items=lambda r: r["things"])) == ["x"]

    def it_does_not_modify_the_callers_options():
        opts = ListOptions(per_page=10)

        def method(o):
            if o.page is None:
                return [1], _resp('<https://api.github.com/x?page=2>; rel="next"')
            return [], _resp()

        list(scan(method, opts=opts))

        assert opts.page is None

    def it_passes_keyword_arguments_through():
        def method(owner, opts, *, flag):
            return [flag], _resp()

        assert list(scan(method, "o", flag="yes")) == ["yes"]

    def it_treats_none_results_as_empty_pages():
        assert list(scan(lambda opts: (None, _resp()))) == []

    def it_rejects_options_that_cannot_paginate():
        class NoPaging(Options):
            q: str | None = None

        def method(opts):
            return [1], _resp('<https://api.github.com/x?page=2>; rel="next"')

        with pytest.raises(TypeError, match="no 'page' field"):
            list(scan(method, opts=NoPaging(q="x")))

    def it_advances_cursor_links():
        calls = []

        def method(opts):
            calls.append(opts.cursor)
            if opts.cursor is None:
                return [1], _resp('<https://api.github.com/hooks/1/deliveries?cursor=v1_123>; rel="next"')
            return [2], _resp()

        assert list(scan(method, opts=ListCursorOptions())) == [1, 2]
        assert calls == [None, "v1_123"]

    def it_advances_non_numeric_page_tokens():
        calls = []

        def method(opts):
            calls.append(opts.page)
            if opts.page is None:
                return ["a"], _resp('<https://api.github.com/x?page=abc>; rel="next"')
            return ["b"], _resp()

        assert list(scan(method, opts=ListCursorOptions())) == ["a", "b"]
        assert calls == [None, "abc"]

    def describe_since_pagination():
        def _users(mux):
            def handler(request):
                since = int(request.url.params.get("since", "0"))
                if since >= 4:
                    return httpx.Response(200, json=[])
                ids = [since + 1, since + 2]
                link = f'<https://github.test/api-v3/users?since={ids[-1]}>; rel="next"'
                return httpx.Response(200, headers={"Link": link}, json=[{"id": i} for i in ids])

            mux.route("/users", handler)

        def it_advances_since_over_users(client: Client, mux):
            _users(mux)

            ids = [u.id for u in scan(client.users.list_all, opts=UserListOptions(per_page=2))]

            assert ids == [1, 2, 3, 4]
            assert [r.url.params.get("since") for r in mux.requests] == [None, "2", "4"]
            assert all("page" not in r.url.params for r in mux.requests)

        def it_builds_the_methods_own_options_when_none_are_given(client: Client, mux):
            _users(mux)

            ids = [u.id for u in scan(client.users.list_all)]

            assert ids == [1, 2, 3, 4]

        def it_advances_since_over_organizations(client: Client, mux):
            def handler(request):
                if request.url.params.get("since") == "9":
                    return httpx.Response(200, json=[{"id": 10}])
                link = '<https://github.test/api-v3/organizations?since=9>; rel="next"'
                return httpx.Response(200, headers={"Link": link}, json=[{"id": 9}])

            mux.route("/organizations", handler)

            assert [o.id for o in scan(client.organizations.list_all)] == [9, 10]

    def it_follows_webhook_delivery_cursors(client: Client, mux):
        def handler(request):
            if request.url.params.get("cursor") == "v1_2":
                return httpx.Response(200, json=[{"id": 2}])
            link = '<https://github.test/api-v3/repos/o/r/hooks/1/deliveries?cursor=v1_2>; rel="next"'
            return httpx.Response(200, headers={"Link": link}, json=[{"id": 1}])

        mux.route("/repos/o/r/hooks/1/deliveries", handler)

        deliveries = list(scan(client.repositories.list_hook_deliveries, "o", "r", 1))

        assert all(isinstance(d, HookDelivery) for d in deliveries)
        assert [d.id for d in deliveries] == [1, 2]
