"""Billing API.

GitHub API docs: https://docs.github.com/rest/billing
"""

from pydantic import Field

from .models import GitHubModel, Response
from .options import ListOptions, Options, add_options
from .service import Service


class PackageBilling(GitHubModel):
    total_gigabytes_bandwidth_used: int | None = None
    total_paid_gigabytes_bandwidth_used: int | None = None
    included_gigabytes_bandwidth: float | None = None


class StorageBilling(GitHubModel):
    days_left_in_billing_cycle: int | None = None
    estimated_paid_storage_for_month: float | None = None
    estimated_storage_for_month: float | None = None


class AdvancedSecurityCommittersBreakdown(GitHubModel):
    user_login: str | None = None
    last_pushed_date: str | None = None


class RepositoryActiveCommitters(GitHubModel):
    name: str | None = None
    advanced_security_committers: int | None = None
    advanced_security_committers_breakdown: list[AdvancedSecurityCommittersBreakdown] | None = None


class ActiveCommitters(GitHubModel):
    total_advanced_security_committers: int | None = None
    total_count: int | None = None
    maximum_advanced_security_committers: int | None = None
    purchased_advanced_security_committers: int | None = None
    repositories: list[RepositoryActiveCommitters] | None = None


class UsageItem(GitHubModel):
    """One line of the enhanced billing usage report."""

    date: str | None = None
    product: str | None = None
    sku: str | None = None
    quantity: float | None = None
    unit_type: str | None = Field(default=None, alias="unitType")
    price_per_unit: float | None = Field(default=None, alias="pricePerUnit")
    gross_amount: float | None = Field(default=None, alias="grossAmount")
    discount_amount: float | None = Field(default=None, alias="discountAmount")
    net_amount: float | None = Field(default=None, alias="netAmount")
    repository_name: str | None = Field(default=None, alias="repositoryName")
    # Only set in user reports
    organization_name: str | None = Field(default=None, alias="organizationName")


class UsageReport(GitHubModel):
    usage_items: list[UsageItem] | None = Field(default=None, alias="usageItems")


class PremiumRequestUsageItem(GitHubModel):
    product: str | None = None
    sku: str | None = None
    model: str | None = None
    unit_type: str | None = Field(default=None, alias="unitType")
    price_per_unit: float | None = Field(default=None, alias="pricePerUnit")
    gross_quantity: int | None = Field(default=None, alias="grossQuantity")
    gross_amount: float | None = Field(default=None, alias="grossAmount")
    discount_quantity: int | None = Field(default=None, alias="discountQuantity")
    discount_amount: float | None = Field(default=None, alias="discountAmount")
    net_quantity: int | None = Field(default=None, alias="netQuantity")
    net_amount: float | None = Field(default=None, alias="netAmount")


class PremiumRequestUsageTimePeriod(GitHubModel):
    year: int | None = None
    month: int | None = None
    day: int | None = None


class PremiumRequestUsageReport(GitHubModel):
    time_period: PremiumRequestUsageTimePeriod | None = Field(default=None, alias="timePeriod")
    organization: str | None = None
    user: str | None = None
    product: str | None = None
    model: str | None = None
    usage_items: list[PremiumRequestUsageItem] | None = Field(default=None, alias="usageItems")


class UsageReportOptions(Options):
    # Defaults to the current year
    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None


class PremiumRequestUsageReportOptions(UsageReportOptions):
    user: str | None = None
    model: str | None = None
    product: str | None = None


class BillingService(Service):
    """Methods for the billing API."""

    def get_packages_billing_org(self, org: str) -> tuple[PackageBilling, Response]:
        req = self._client.new_request("GET", f"orgs/{org}/settings/billing/packages")
        return self._client.do(req, PackageBilling)

    def get_storage_billing_org(self, org: str) -> tuple[StorageBilling, Response]:
        req = self._client.new_request("GET", f"orgs/{org}/settings/billing/shared-storage")
        return self._client.do(req, StorageBilling)

    def get_advanced_security_active_committers_org(
        self, org: str, opts: ListOptions | None = None
    ) -> tuple[ActiveCommitters, Response]:
        """Get the GitHub Advanced Security active committers for an organization.

        GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/billing/billing#get-github-advanced-security-active-committers-for-an-organization
        """
        u = add_options(f"orgs/{org}/settings/billing/advanced-security", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, ActiveCommitters)

    def get_packages_billing_user(self, user: str) -> tuple[PackageBilling, Response]:
        req = self._client.new_request("GET", f"users/{user}/settings/billing/packages")
        return self._client.do(req, PackageBilling)

    def get_storage_billing_user(self, user: str) -> tuple[StorageBilling, Response]:
        req = self._client.new_request("GET", f"users/{user}/settings/billing/shared-storage")
        return self._client.do(req, StorageBilling)

    def get_usage_report_org(self, org: str, opts: UsageReportOptions | None = None) -> tuple[UsageReport, Response]:
        """Get the enhanced billing platform usage report for an organization.

        GitHub API docs: https://docs.github.com/rest/billing/enhanced-billing#get-billing-usage-report-for-an-organization
        """
        u = add_options(f"organizations/{org}/settings/billing/usage", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, UsageReport)

    def get_usage_report_user(self, user: str, opts: UsageReportOptions | None = None) -> tuple[UsageReport, Response]:
        u = add_options(f"users/{user}/settings/billing/usage", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, UsageReport)

    def get_premium_request_usage_report_org(
        self, org: str, opts: PremiumRequestUsageReportOptions | None = None
    ) -> tuple[PremiumRequestUsageReport, Response]:
        u = add_options(f"organizations/{org}/settings/billing/premium_request/usage", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, PremiumRequestUsageReport)

    def get_premium_request_usage_report_user(
        self, user: str, opts: PremiumRequestUsageReportOptions | None = None
    ) -> tuple[PremiumRequestUsageReport, Response]:
        u = add_options(f"users/{user}/settings/billing/premium_request/usage", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, PremiumRequestUsageReport)
