"""Actions secrets for repositories, organizations and environments.

Secret values are encrypted client-side with the owner's public key before
being sent; see encryption.encrypt_secret.

GitHub API docs: https://docs.github.com/rest/actions/secrets
"""

from datetime import datetime

from pydantic import field_validator

from .models import GitHubModel, Response
from .options import ListOptions, add_options


class PublicKey(GitHubModel):
    """The public key used to encrypt secrets."""

    key_id: str | None = None
    key: str | None = None

    @field_validator("key_id", mode="before")
    @classmethod
    def _key_id_as_string(cls, value):
        # Some endpoints return the key id as a number
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class Secret(GitHubModel):
    """A secret's metadata; GitHub never returns the value."""

    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # all, private or selected; organization secrets only
    visibility: str | None = None
    selected_repositories_url: str | None = None


class Secrets(GitHubModel):
    total_count: int | None = None
    secrets: list[Secret] | None = None


class EncryptedSecret(GitHubModel):
    """A secret value sealed with the owner's public key."""

    # Part of the URL, not of the body
    name: str
    key_id: str
    encrypted_value: str
    # Organization secrets only
    visibility: str | None = None
    selected_repository_ids: list[int] | None = None

    def body(self) -> dict:
        return self.model_dump(mode="json", exclude={"name"}, exclude_none=True)


class SelectedRepository(GitHubModel):
    id: int | None = None
    name: str | None = None
    full_name: str | None = None


class SelectedReposList(GitHubModel):
    total_count: int | None = None
    repositories: list[SelectedRepository] | None = None


class SecretsMixin:
    """Secret methods of ActionsService."""

    def _get_public_key(self, u: str) -> tuple[PublicKey, Response]:
        req = self._client.new_request("GET", u)
        return self._client.do(req, PublicKey)

    def _list_secrets(self, u: str, opts) -> tuple[Secrets, Response]:
        u = add_options(u, opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, Secrets)

    def _get_secret(self, u: str) -> tuple[Secret, Response]:
        req = self._client.new_request("GET", u)
        return self._client.do(req, Secret)

    def _put_secret(self, u: str, secret: EncryptedSecret) -> Response:
        req = self._client.new_request("PUT", u, secret.body())
        return self._client.bare_do(req)

    def _delete_secret(self, u: str) -> Response:
        req = self._client.new_request("DELETE", u)
        return self._client.bare_do(req)

    # Repository secrets

    def get_repo_public_key(self, owner: str, repo: str) -> tuple[PublicKey, Response]:
        """Get the key used to encrypt repository secrets.

        GitHub API docs: https://docs.github.com/rest/actions/secrets#get-a-repository-public-key
        """
        return self._get_public_key(f"repos/{owner}/{repo}/actions/secrets/public-key")

    def list_repo_secrets(self, owner: str, repo: str, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        return self._list_secrets(f"repos/{owner}/{repo}/actions/secrets", opts)

    def get_repo_secret(self, owner: str, repo: str, name: str) -> tuple[Secret, Response]:
        return self._get_secret(f"repos/{owner}/{repo}/actions/secrets/{name}")

    def create_or_update_repo_secret(self, owner: str, repo: str, secret: EncryptedSecret) -> Response:
        return self._put_secret(f"repos/{owner}/{repo}/actions/secrets/{secret.name}", secret)

    def delete_repo_secret(self, owner: str, repo: str, name: str) -> Response:
        return self._delete_secret(f"repos/{owner}/{repo}/actions/secrets/{name}")

    # Organization secrets

    def get_org_public_key(self, org: str) -> tuple[PublicKey, Response]:
        return self._get_public_key(f"orgs/{org}/actions/secrets/public-key")

    def list_org_secrets(self, org: str, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        return self._list_secrets(f"orgs/{org}/actions/secrets", opts)

    def get_org_secret(self, org: str, name: str) -> tuple[Secret, Response]:
        return self._get_secret(f"orgs/{org}/actions/secrets/{name}")

    def create_or_update_org_secret(self, org: str, secret: EncryptedSecret) -> Response:
        """Create or update an organization secret.

        GitHub API docs: https://docs.github.com/rest/actions/secrets#create-or-update-an-organization-secret
        """
        return self._put_secret(f"orgs/{org}/actions/secrets/{secret.name}", secret)

    def delete_org_secret(self, org: str, name: str) -> Response:
        return self._delete_secret(f"orgs/{org}/actions/secrets/{name}")

    def list_selected_repos_for_org_secret(
        self, org: str, name: str, opts: ListOptions | None = None
    ) -> tuple[SelectedReposList, Response]:
        u = add_options(f"orgs/{org}/actions/secrets/{name}/repositories", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, SelectedReposList)

    def set_selected_repos_for_org_secret(self, org: str, name: str, repository_ids: list[int]) -> Response:
        """Replace the repositories a "selected" visibility secret is shared with."""
        body = {"selected_repository_ids": list(repository_ids)}
        req = self._client.new_request("PUT", f"orgs/{org}/actions/secrets/{name}/repositories", body)
        return self._client.bare_do(req)

    def add_selected_repo_to_org_secret(self, org: str, name: str, repository_id: int) -> Response:
        req = self._client.new_request("PUT", f"orgs/{org}/actions/secrets/{name}/repositories/{repository_id}")
        return self._client.bare_do(req)

    def remove_selected_repo_from_org_secret(self, org: str, name: str, repository_id: int) -> Response:
        return self._delete_secret(f"orgs/{org}/actions/secrets/{name}/repositories/{repository_id}")

    # Environment secrets

    def get_env_public_key(self, repo_id: int, env: str) -> tuple[PublicKey, Response]:
        return self._get_public_key(f"repositories/{repo_id}/environments/{env}/secrets/public-key")

    def list_env_secrets(self, repo_id: int, env: str, opts: ListOptions | None = None) -> tuple[Secrets, Response]:
        return self._list_secrets(f"repositories/{repo_id}/environments/{env}/secrets", opts)

    def get_env_secret(self, repo_id: int, env: str, name: str) -> tuple[Secret, Response]:
        return self._get_secret(f"repositories/{repo_id}/environments/{env}/secrets/{name}")

    def create_or_update_env_secret(self, repo_id: int, env: str, secret: EncryptedSecret) -> Response:
        return self._put_secret(f"repositories/{repo_id}/environments/{env}/secrets/{secret.name}", secret)

    def delete_env_secret(self, repo_id: int, env: str, name: str) -> Response:
        return self._delete_secret(f"repositories/{repo_id}/environments/{env}/secrets/{name}")
