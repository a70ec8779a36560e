"""Actions permissions and code security settings of an enterprise."""

from .models import GitHubModel, Response


class ActionsPermissionsEnterprise(GitHubModel):
    # all, none or selected
    enabled_organizations: str | None = None
    # all, local_only or selected
    allowed_actions: str | None = None
    selected_actions_url: str | None = None


class EnterpriseSecurityAnalysisSettings(GitHubModel):
    advanced_security_enabled_for_new_repositories: bool | None = None
    secret_scanning_enabled_for_new_repositories: bool | None = None
    secret_scanning_push_protection_enabled_for_new_repositories: bool | None = None
    secret_scanning_push_protection_custom_link: str | None = None


class ActionsPermissionsMixin:
    """Actions permission and code security methods of EnterpriseService."""

    def get_actions_permissions(self, enterprise: str) -> tuple[ActionsPermissionsEnterprise, Response]:
        """Get the GitHub Actions permissions policy for an enterprise.

        GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/actions/permissions#get-github-actions-permissions-for-an-enterprise
        """
        req = self._client.new_request("GET", f"enterprises/{enterprise}/actions/permissions")
        return self._client.do(req, ActionsPermissionsEnterprise)

    def edit_actions_permissions(
        self, enterprise: str, permissions: ActionsPermissionsEnterprise
    ) -> tuple[ActionsPermissionsEnterprise, Response]:
        req = self._client.new_request("PUT", f"enterprises/{enterprise}/actions/permissions", permissions)
        return self._client.do(req, ActionsPermissionsEnterprise)

    def get_code_security_and_analysis(
        self, enterprise: str
    ) -> tuple[EnterpriseSecurityAnalysisSettings, Response]:
        req = self._client.new_request("GET", f"enterprises/{enterprise}/code_security_and_analysis")
        return self._client.do(req, EnterpriseSecurityAnalysisSettings)

    def update_code_security_and_analysis(
        self, enterprise: str, settings: EnterpriseSecurityAnalysisSettings
    ) -> Response:
        req = self._client.new_request("PATCH", f"enterprises/{enterprise}/code_security_and_analysis", settings)
        return self._client.bare_do(req)

    def _set_security_feature(self, enterprise: str, feature: str, action: str) -> Response:
        req = self._client.new_request("POST", f"enterprises/{enterprise}/{feature}/{action}")
        return self._client.bare_do(req)

    def enable_advanced_security(self, enterprise: str) -> Response:
        """Enable advanced security for every eligible repository of the enterprise."""
        return self._set_security_feature(enterprise, "advanced_security", "enable_all")

    def disable_advanced_security(self, enterprise: str) -> Response:
        return self._set_security_feature(enterprise, "advanced_security", "disable_all")

    def enable_secret_scanning(self, enterprise: str) -> Response:
        return self._set_security_feature(enterprise, "secret_scanning", "enable_all")

    def disable_secret_scanning(self, enterprise: str) -> Response:
        return self._set_security_feature(enterprise, "secret_scanning", "disable_all")

    def enable_secret_scanning_push_protection(self, enterprise: str) -> Response:
        return self._set_security_feature(enterprise, "secret_scanning_push_protection", "enable_all")

    def disable_secret_scanning_push_protection(self, enterprise: str) -> Response:
        return self._set_security_feature(enterprise, "secret_scanning_push_protection", "disable_all")
