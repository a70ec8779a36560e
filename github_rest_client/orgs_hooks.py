"""Organization webhook methods."""

from .models import Response
from .options import ListCursorOptions, ListOptions, add_options
from .repos_hooks import Hook, HookDelivery


class OrgHooksMixin:
    """Webhook methods of OrganizationsService.

    GitHub API docs: https://docs.github.com/rest/orgs/webhooks
    """

    def list_hooks(self, org: str, opts: ListOptions | None = None) -> tuple[list[Hook], Response]:
        u = add_options(f"orgs/{org}/hooks", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Hook])

    def get_hook(self, org: str, hook_id: int) -> tuple[Hook, Response]:
        req = self._client.new_request("GET", f"orgs/{org}/hooks/{hook_id}")
        return self._client.do(req, Hook)

    def create_hook(self, org: str, hook: Hook) -> tuple[Hook, Response]:
        """Create a webhook for an organization; name defaults to "web".

        Only name, config, events and active are sent.
        """
        body = hook.model_dump(mode="json", include={"name", "config", "events", "active"}, exclude_none=True)
        body.setdefault("name", "web")
        req = self._client.new_request("POST", f"orgs/{org}/hooks", body)
        return self._client.do(req, Hook)

    def edit_hook(self, org: str, hook_id: int, hook: Hook) -> tuple[Hook, Response]:
        req = self._client.new_request("PATCH", f"orgs/{org}/hooks/{hook_id}", hook)
        return self._client.do(req, Hook)

    def delete_hook(self, org: str, hook_id: int) -> Response:
        req = self._client.new_request("DELETE", f"orgs/{org}/hooks/{hook_id}")
        return self._client.bare_do(req)

    def ping_hook(self, org: str, hook_id: int) -> Response:
        req = self._client.new_request("POST", f"orgs/{org}/hooks/{hook_id}/pings")
        return self._client.bare_do(req)

    def list_hook_deliveries(
        self, org: str, hook_id: int, opts: ListCursorOptions | None = None
    ) -> tuple[list[HookDelivery], Response]:
        u = add_options(f"orgs/{org}/hooks/{hook_id}/deliveries", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[HookDelivery])

    def get_hook_delivery(self, org: str, hook_id: int, delivery_id: int) -> tuple[HookDelivery, Response]:
        req = self._client.new_request("GET", f"orgs/{org}/hooks/{hook_id}/deliveries/{delivery_id}")
        return self._client.do(req, HookDelivery)

    def redeliver_hook_delivery(self, org: str, hook_id: int, delivery_id: int) -> tuple[HookDelivery, Response]:
        u = f"orgs/{org}/hooks/{hook_id}/deliveries/{delivery_id}/attempts"
        req = self._client.new_request("POST", u)
        return self._client.do_accepted(req, HookDelivery)
