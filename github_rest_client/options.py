"""Query string options for list endpoints and their URL encoding."""

from datetime import date, datetime
from enum import Enum
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict


class Options(BaseModel):
    """Base for typed query parameter containers.

    Field names are the query parameter names unless an alias says otherwise.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_query(self) -> list[tuple[str, str]]:
        """Encode the set fields as query parameters.

        None, "", 0, False and empty lists are omitted. Lists are joined with
        commas, booleans become "true"/"false" and datetimes RFC 3339.
        """
        params = []
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if _is_empty(value):
                continue
            params.append((info.alias or name, _encode(value)))
        return params


class ListOptions(Options):
    """Optional parameters for offset-paginated list methods."""

    # Page of results to retrieve
    page: int | None = None
    # Results per page (max 100)
    per_page: int | None = None


class ListCursorOptions(Options):
    """Optional parameters for cursor-paginated list methods."""

    page: str | None = None
    per_page: int | None = None
    # Cursor of the item before/after which results are returned
    after: str | None = None
    before: str | None = None
    cursor: str | None = None
    first: int | None = None
    last: int | None = None


def _is_empty(value) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def _encode(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds").replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_encode(v) for v in value)
    return str(value)


def add_options(url: str, opts: Options | None) -> str:
    """Add the parameters in opts as URL query parameters to url.

    Parameters already present on url are kept unless opts sets the same
    name. Parameters are sorted by name.
    """
    if opts is None:
        return url
    params = opts.to_query()
    if not params:
        return url
    parts = urlsplit(url)
    values: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        values.setdefault(key, []).append(value)
    for key, value in params:
        values[key] = [value]
    query = urlencode(sorted((k, v) for k, vs in values.items() for v in vs))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
