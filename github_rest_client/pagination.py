"""Iterate over every item of a paginated list endpoint."""

import inspect
import typing
from collections.abc import Callable, Iterator

from .options import ListOptions, Options


def scan(
    method: Callable,
    *args,
    opts: Options | None = None,
    items: Callable | None = None,
    **kwargs,
) -> Iterator:
    """Yield all items from all pages of a list method.

    Calls ``method(*args, opts, **kwargs)`` repeatedly until no further page
    is advertised, advancing whichever parameter the "next" link used:
    ``since`` for endpoints listing by ID, ``page`` for offset pagination,
    and ``after`` or ``cursor`` for cursor pagination.
    ``items`` extracts the list from wrapper results such as Workflows.

    Example::

        for repo in scan(client.repositories.list_by_org, "github"):
            print(repo.full_name)
    """
    opts = opts.model_copy() if opts is not None else _default_options(method)
    while True:
        result, resp = method(*args, opts, **kwargs)
        page = items(result) if items is not None else result
        yield from page or []

        if resp.next_page_is_since:
            opts = _advance(opts, "since", resp.next_page)
        elif resp.next_page:
            opts = _advance(opts, "page", resp.next_page)
        elif resp.next_page_token:
            opts = _advance(opts, "page", resp.next_page_token)
        elif resp.after:
            opts = _advance(opts, "after", resp.after)
        elif resp.cursor:
            opts = _advance(opts, "cursor", resp.cursor)
        else:
            return


def _default_options(method: Callable) -> Options:
    """Instantiate the options class the method declares for its opts parameter."""
    try:
        param = inspect.signature(method).parameters.get("opts")
    except (TypeError, ValueError):
        param = None
    if param is not None:
        for candidate in typing.get_args(param.annotation) or (param.annotation,):
            if isinstance(candidate, type) and issubclass(candidate, Options):
                return candidate()
    return ListOptions()


def _advance(opts: Options, field: str, value) -> Options:
    if field not in type(opts).model_fields:
        raise TypeError(f"{type(opts).__name__} has no {field!r} field to paginate with")
    return opts.model_copy(update={field: value})
