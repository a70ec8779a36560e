"""Issue labels.

GitHub API docs: https://docs.github.com/rest/issues/labels
"""

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class Label(GitHubModel):
    id: int | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None
    default: bool | None = None
    node_id: str | None = None


class LabelsMixin:
    """Label methods of IssuesService."""

    def list_labels(self, owner: str, repo: str, opts: ListOptions | None = None) -> tuple[list[Label], Response]:
        u = add_options(f"repos/{owner}/{repo}/labels", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Label])

    def get_label(self, owner: str, repo: str, name: str) -> tuple[Label, Response]:
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/labels/{name}")
        return self._client.do(req, Label)

    def create_label(self, owner: str, repo: str, label: Label) -> tuple[Label, Response]:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/labels", label)
        return self._client.do(req, Label)

    def edit_label(self, owner: str, repo: str, name: str, label: Label) -> tuple[Label, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}/labels/{name}", label)
        return self._client.do(req, Label)

    def delete_label(self, owner: str, repo: str, name: str) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/labels/{name}")
        return self._client.bare_do(req)

    def list_labels_by_issue(
        self, owner: str, repo: str, number: int, opts: ListOptions | None = None
    ) -> tuple[list[Label], Response]:
        u = add_options(f"repos/{owner}/{repo}/issues/{number}/labels", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Label])

    def add_labels_to_issue(
        self, owner: str, repo: str, number: int, labels: list[str]
    ) -> tuple[list[Label], Response]:
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/issues/{number}/labels", labels)
        return self._client.do(req, list[Label])

    def remove_label_for_issue(self, owner: str, repo: str, number: int, label: str) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/issues/{number}/labels/{label}")
        return self._client.bare_do(req)

    def replace_labels_for_issue(
        self, owner: str, repo: str, number: int, labels: list[str]
    ) -> tuple[list[Label], Response]:
        """Replace all labels of an issue; an empty list clears them."""
        req = self._client.new_request("PUT", f"repos/{owner}/{repo}/issues/{number}/labels", labels)
        return self._client.do(req, list[Label])

    def remove_labels_for_issue(self, owner: str, repo: str, number: int) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}/issues/{number}/labels")
        return self._client.bare_do(req)
