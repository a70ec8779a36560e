"""Codespaces secrets for users, organizations and repositories.

GitHub API docs: https://docs.github.com/rest/codespaces/secrets
"""

from .actions_secrets import EncryptedSecret, PublicKey, Secret, Secrets, SelectedReposList
from .models import Response
from .options import ListOptions, add_options


class CodespacesSecretsMixin:
    """Secret methods of CodespacesService.

    User secrets live under user/codespaces/secrets, organization secrets
    under orgs/{org}/codespaces/secrets and repository secrets under
    repos/{owner}/{repo}/codespaces/secrets.
    """

    def _list_codespaces_secrets(self, u: str, opts) -> tuple[Secrets, Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Secrets)

    def _get_codespaces_public_key(self, u: str) -> tuple[PublicKey, Response]:
        req = self._client.new_request("GET", u)
        return self._client.do(req, PublicKey)

    def _get_codespaces_secret(self, u: str) -> tuple[Secret, Response]:
        req = self._client.new_request("GET", u)
        return self._client.do(req, Secret)

    def _put_codespaces_secret(self, u: str, secret: EncryptedSecret) -> Response:
        req = self._client.new_request("PUT", u, secret.body())
        return self._client.bare_do(req)

    def _bare(self, method: str, u: str, body=None) -> Response:
        req = self._client.new_request(method, u, body)
        return self._client.bare_do(req)

    def _list_codespaces_selected_repos(self, u: str, opts) -> tuple[SelectedReposList, Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, SelectedReposList)

    # User secrets

    def list_user_secrets(self, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        return self._list_codespaces_secrets("user/codespaces/secrets", opts)

    def get_user_public_key(self) -> tuple[PublicKey, Response]:
        return self._get_codespaces_public_key("user/codespaces/secrets/public-key")

    def get_user_secret(self, name: str) -> tuple[Secret, Response]:
        return self._get_codespaces_secret(f"user/codespaces/secrets/{name}")

    def create_or_update_user_secret(self, secret: EncryptedSecret) -> Response:
        """Create or update a codespaces secret of the authenticated user.

        GitHub API docs: https://docs.github.com/rest/codespaces/secrets#create-or-update-a-secret-for-the-authenticated-user
        """
        return self._put_codespaces_secret(f"user/codespaces/secrets/{secret.name}", secret)

    def delete_user_secret(self, name: str) -> Response:
        return self._bare("DELETE", f"user/codespaces/secrets/{name}")

    def list_selected_repos_for_user_secret(
        self, name: str, opts: ListOptions | None = None
    ) -> tuple[SelectedReposList, Response]:
        return self._list_codespaces_selected_repos(f"user/codespaces/secrets/{name}/repositories", opts)

    def set_selected_repos_for_user_secret(self, name: str, repository_ids: list[int]) -> Response:
        body = {"selected_repository_ids": list(repository_ids)}
        return self._bare("PUT", f"user/codespaces/secrets/{name}/repositories", body)

    def add_selected_repo_to_user_secret(self, name: str, repository_id: int) -> Response:
        return self._bare("PUT", f"user/codespaces/secrets/{name}/repositories/{repository_id}")

    def remove_selected_repo_from_user_secret(self, name: str, repository_id: int) -> Response:
        return self._bare("DELETE", f"user/codespaces/secrets/{name}/repositories/{repository_id}")

    # Organization secrets

    def list_org_secrets(self, org: str, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        return self._list_codespaces_secrets(f"orgs/{org}/codespaces/secrets", opts)

    def get_org_public_key(self, org: str) -> tuple[PublicKey, Response]:
        return self._get_codespaces_public_key(f"orgs/{org}/codespaces/secrets/public-key")

    def get_org_secret(self, org: str, name: str) -> tuple[Secret, Response]:
        return self._get_codespaces_secret(f"orgs/{org}/codespaces/secrets/{name}")

    def create_or_update_org_secret(self, org: str, secret: EncryptedSecret) -> Response:
        return self._put_codespaces_secret(f"orgs/{org}/codespaces/secrets/{secret.name}", secret)

    def delete_org_secret(self, org: str, name: str) -> Response:
        return self._bare("DELETE", f"orgs/{org}/codespaces/secrets/{name}")

    def list_selected_repos_for_org_secret(
        self, org: str, name: str, opts: ListOptions | None = None
    ) -> tuple[SelectedReposList, Response]:
        return self._list_codespaces_selected_repos(f"orgs/{org}/codespaces/secrets/{name}/repositories", opts)

    def set_selected_repos_for_org_secret(self, org: str, name: str, repository_ids: list[int]) -> Response:
        body = {"selected_repository_ids": list(repository_ids)}
        return self._bare("PUT", f"orgs/{org}/codespaces/secrets/{name}/repositories", body)

    def add_selected_repo_to_org_secret(self, org: str, name: str, repository_id: int) -> Response:
        return self._bare("PUT", f"orgs/{org}/codespaces/secrets/{name}/repositories/{repository_id}")

    def remove_selected_repo_from_org_secret(self, org: str, name: str, repository_id: int) -> Response:
        return self._bare("DELETE", f"orgs/{org}/codespaces/secrets/{name}/repositories/{repository_id}")

    # Repository secrets

    def list_repo_secrets(self, owner: str, repo: str, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        return self._list_codespaces_secrets(f"repos/{owner}/{repo}/codespaces/secrets", opts)

    def get_repo_public_key(self, owner: str, repo: str) -> tuple[PublicKey, Response]:
        return self._get_codespaces_public_key(f"repos/{owner}/{repo}/codespaces/secrets/public-key")

    def get_repo_secret(self, owner: str, repo: str, name: str) -> tuple[Secret, Response]:
        return self._get_codespaces_secret(f"repos/{owner}/{repo}/codespaces/secrets/{name}")

    def create_or_update_repo_secret(self, owner: str, repo: str, secret: EncryptedSecret) -> Response:
        return self._put_codespaces_secret(f"repos/{owner}/{repo}/codespaces/secrets/{secret.name}", secret)

    def delete_repo_secret(self, owner: str, repo: str, name: str) -> Response:
        return self._bare("DELETE", f"repos/{owner}/{repo}/codespaces/secrets/{name}")
