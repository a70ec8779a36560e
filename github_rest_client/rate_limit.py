"""Rate limit status API.

GitHub API docs: https://docs.github.com/rest/rate-limit
"""

from .models import GitHubModel, Rate, RateLimitCategory, Response
from .service import Service


class RateLimits(GitHubModel):
    """The rate limits of every category for the current user.

    Categories the API does not report stay None.
    """

    core: Rate | None = None
    search: Rate | None = None
    graphql: Rate | None = None
    integration_manifest: Rate | None = None
    source_import: Rate | None = None
    code_scanning_upload: Rate | None = None
    actions_runner_registration: Rate | None = None
    scim: Rate | None = None
    dependency_snapshots: Rate | None = None
    code_search: Rate | None = None
    audit_log: Rate | None = None

    def get(self, category: RateLimitCategory) -> Rate | None:
        return getattr(self, category.value)


class _RateLimitsResponse(GitHubModel):
    resources: RateLimits | None = None


class RateLimitService(Service):
    """Methods for the rate limit API."""

    def get(self) -> tuple[RateLimits | None, Response]:
        """Return the rate limits for the current client.

        The request is not counted against the rate limit and is sent even
        when a limit is known to be exhausted; the client's known limits are
        refreshed from the result.

        GitHub API docs: https://docs.github.com/rest/rate-limit/rate-limit#get-rate-limit-status-for-the-authenticated-user
        """
        req = self._client.new_request("GET", "rate_limit")
        result, resp = self._client.do(req, _RateLimitsResponse, bypass_rate_limit_check=True)
        limits = result.resources if result is not None else None
        if limits is not None:
            self._client.update_rate_limits(limits)
        return limits, resp
