"""Common base for API service groups."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .client import Client


class Service:
    """A group of related API methods sharing one Client."""

    def __init__(self, client: "Client"):
        self._client = client
