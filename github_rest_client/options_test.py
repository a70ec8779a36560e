from datetime import datetime, timezone
from enum import Enum

import pytest
from pydantic import Field, ValidationError

from .options import ListOptions, Options, add_options


class Color(str, Enum):
    RED = "red"


class SampleOptions(ListOptions):
    state: str | None = None
    labels: list[str] | None = None
    since: datetime | None = None
    archived: bool | None = None
    color: Color | None = None
    sort_by: str | None = Field(default=None, alias="sort")


def describe_add_options():
    def it_returns_the_url_unchanged_without_options():
        assert add_options("repos/o/r/issues", None) == "repos/o/r/issues"

    def it_returns_the_url_unchanged_when_nothing_is_set():
        assert add_options("repos/o/r/issues", SampleOptions()) == "repos/o/r/issues"

    def it_encodes_set_fields_sorted_by_name():
        opts = SampleOptions(state="open", page=2, per_page=50)

        assert add_options("repos/o/r/issues", opts) == "repos/o/r/issues?page=2&per_page=50&state=open"

    def it_joins_lists_with_commas():
        url = add_options("issues", SampleOptions(labels=["bug", "help wanted"]))

        assert url == "issues?labels=bug%2Chelp+wanted"

    def it_formats_datetimes_as_rfc3339():
        url = add_options("issues", SampleOptions(since=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)))

        assert url == "issues?since=2024-01-02T03%3A04%3A05Z"

    def it_encodes_booleans_and_enums():
        url = add_options("repos", SampleOptions(archived=True, color=Color.RED))

        assert url == "repos?archived=true&color=red"

    def it_uses_aliases_as_parameter_names():
        assert add_options("repos", SampleOptions(sort_by="updated")) == "repos?sort=updated"

    def it_omits_zero_values():
        assert add_options("repos", SampleOptions(page=0, archived=False)) == "repos"

    def it_merges_with_an_existing_query():
        url = add_options("repos?recursive=1&page=1", SampleOptions(page=3))

        assert url == "repos?page=3&recursive=1"


def describe_Options():
    def it_rejects_unknown_fields():
        with pytest.raises(ValidationError):
            SampleOptions(nope=1)

    def it_accepts_field_names_and_aliases():
        assert SampleOptions(sort="a").sort_by == SampleOptions(sort_by="a").sort_by == "a"

    def it_is_a_base_for_custom_options():
        class Empty(Options):
            pass

        assert Empty().to_query() == []
