"""Repository webhooks and their deliveries.

GitHub API docs: https://docs.github.com/rest/repos/webhooks
"""

import json
from datetime import datetime
from typing import Any

from pydantic import Field

from .models import GitHubModel, Response
from .options import ListCursorOptions, ListOptions, add_options


class HookConfig(GitHubModel):
    """Configuration of a webhook."""

    content_type: str | None = None
    insecure_ssl: str | None = None
    url: str | None = None
    # Write-only; GitHub never returns the secret
    secret: str | None = None


class HookLastResponse(GitHubModel):
    code: int | None = None
    status: str | None = None
    message: str | None = None


class Hook(GitHubModel):
    """A repository or organization webhook."""

    id: int | None = None
    type: str | None = None
    name: str | None = None
    active: bool | None = None
    events: list[str] | None = None
    config: HookConfig | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    url: str | None = None
    test_url: str | None = None
    ping_url: str | None = None
    deliveries_url: str | None = None
    last_response: HookLastResponse | None = None


class HookRequest(GitHubModel):
    headers: dict[str, str] | None = None
    raw_payload: Any = Field(default=None, alias="payload")


class HookResponse(GitHubModel):
    headers: dict[str, str] | None = None
    raw_payload: Any = Field(default=None, alias="payload")


class HookDelivery(GitHubModel):
    """A delivery attempt of a webhook.

    request and response are only populated by the get_hook_delivery methods.
    """

    id: int | None = None
    guid: str | None = None
    delivered_at: datetime | None = None
    redelivery: bool | None = None
    duration: float | None = None
    status: str | None = None
    status_code: int | None = None
    event: str | None = None
    action: str | None = None
    installation_id: int | None = None
    repository_id: int | None = None
    throttled_at: datetime | None = None

    request: HookRequest | None = None
    response: HookResponse | None = None

    def parse_request_payload(self):
        """Decode the delivered payload into the model for this delivery's event.

        Known events yield their payload model (e.g. PushEvent for "push");
        unknown events yield the decoded JSON value.
        """
        from .events import event_for_type

        if self.request is None:
            raise ValueError("delivery has no request; fetch it with get_hook_delivery")
        payload = self.request.raw_payload
        if isinstance(payload, (str, bytes)):
            payload = json.loads(payload)
        model = event_for_type(self.event or "")
        if model is None:
            return payload
        return model.model_validate(payload)


class HooksMixin:
    """Repository webhook methods of RepositoriesService."""

    def create_hook(self, owner: str, repo: str, hook: Hook) -> tuple[Hook, Response]:
        """Create a webhook for a repository.

        Only name, config, events and active are sent.

        GitHub API docs: https://docs.github.com/rest/repos/webhooks#create-a-repository-webhook
        """
        body = hook.model_dump(mode="json", include={"name", "config", "events", "active"}, exclude_none=True)
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/hooks", body)
        return self._client.do(req, Hook)

    def list_hooks(self, owner: str, repo: str, opts: ListOptions | None = None) -> tuple[list[Hook], Response]:
        u = add_options(f"repos/{owner}/{repo}/hooks", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Hook])

    def get_hook(self, owner: str, repo: str, hook_id: int) -> tuple[Hook, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/hooks/{hook_id}")
        return self._client.do(req, Hook)

    def edit_hook(self, owner: str, repo: str, hook_id: int, hook: Hook) -> tuple[Hook, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/hooks/{hook_id}", hook)
        return self._client.do(req, Hook)

    def delete_hook(self, owner: str, repo: str, hook_id: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/hooks/{hook_id}")
        return self._client.bare_do(req)

    def ping_hook(self, owner: str, repo: str, hook_id: int) -> Response:
        """Trigger a ping event to be sent to the hook."""
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/hooks/{hook_id}/pings")
        return self._client.bare_do(req)

    def test_hook(self, owner: str, repo: str, hook_id: int) -> Response:
        """Trigger a push event for the latest push to be sent to the hook."""
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/hooks/{hook_id}/tests")
        return self._client.bare_do(req)

    def list_hook_deliveries(
        self, owner: str, repo: str, hook_id: int, opts: ListCursorOptions | None = None
    ) -> tuple[list[HookDelivery], Response]:
        """List webhook deliveries for a repository webhook.

        GitHub API docs: https://docs.github.com/rest/repos/webhooks#list-deliveries-for-a-repository-webhook
        """
        u = add_options(f"repos/{owner}/{repo}/hooks/{hook_id}/deliveries", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[HookDelivery])

    def get_hook_delivery(self, owner: str, repo: str, hook_id: int, delivery_id: int) -> tuple[HookDelivery, Response]:
        """Fetch a delivery including its request and response payloads.

        GitHub API docs: https://docs.github.com/rest/repos/webhooks#get-a-delivery-for-a-repository-webhook
        """
        u = f"repos/{owner}/{repo}/hooks/{hook_id}/deliveries/{delivery_id}"
        req = self._client.new_request("GET", u)
        return self._client.do(req, HookDelivery)

    def redeliver_hook_delivery(
        self, owner: str, repo: str, hook_id: int, delivery_id: int
    ) -> tuple[HookDelivery, Response]:
        """Redeliver a delivery. GitHub answers 202 and queues the attempt."""
        u = f"repos/{owner}/{repo}/hooks/{hook_id}/deliveries/{delivery_id}/attempts"
        req = self._client.new_request("POST", u)
        return self._client.do_accepted(req, HookDelivery)
