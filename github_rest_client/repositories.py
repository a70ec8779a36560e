"""Repositories API.

GitHub API docs: https://docs.github.com/rest/repos
"""

from datetime import datetime

from .models import GitHubModel, Response
from .options import ListOptions, add_options
from .repos_contents import ContentsMixin
from .repos_hooks import HooksMixin
from .repos_releases import ReleasesMixin
from .repos_statuses import StatusesMixin
from .service import Service
from .users import User

# Media type that includes topics in repository payloads
MEDIA_TYPE_TOPICS_PREVIEW = "application/vnd.github.mercy-preview+json"


class RepositoryLicense(GitHubModel):
    key: str | None = None
    name: str | None = None
    spdx_id: str | None = None
    url: str | None = None
    node_id: str | None = None


class SecurityAndAnalysisStatus(GitHubModel):
    # enabled or disabled
    status: str | None = None


class SecurityAndAnalysis(GitHubModel):
    advanced_security: SecurityAndAnalysisStatus | None = None
    secret_scanning: SecurityAndAnalysisStatus | None = None
    secret_scanning_push_protection: SecurityAndAnalysisStatus | None = None
    dependabot_security_updates: SecurityAndAnalysisStatus | None = None


class Repository(GitHubModel):
    """A GitHub repository."""

    id: int | None = None
    node_id: str | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    created_at: datetime | None = None
    pushed_at: datetime | None = None
    updated_at: datetime | None = None
    html_url: str | None = None
    clone_url: str | None = None
    git_url: str | None = None
    mirror_url: str | None = None
    ssh_url: str | None = None
    svn_url: str | None = None
    language: str | None = None
    fork: bool | None = None
    forks_count: int | None = None
    network_count: int | None = None
    open_issues_count: int | None = None
    open_issues: int | None = None
    stargazers_count: int | None = None
    subscribers_count: int | None = None
    watchers_count: int | None = None
    watchers: int | None = None
    size: int | None = None
    auto_init: bool | None = None
    parent: "Repository | None" = None
    source: "Repository | None" = None
    template_repository: "Repository | None" = None
    permissions: dict[str, bool] | None = None
    allow_rebase_merge: bool | None = None
    allow_update_branch: bool | None = None
    allow_squash_merge: bool | None = None
    allow_merge_commit: bool | None = None
    allow_auto_merge: bool | None = None
    allow_forking: bool | None = None
    web_commit_signoff_required: bool | None = None
    delete_branch_on_merge: bool | None = None
    use_squash_pr_title_as_default: bool | None = None
    squash_merge_commit_title: str | None = None
    squash_merge_commit_message: str | None = None
    merge_commit_title: str | None = None
    merge_commit_message: str | None = None
    topics: list[str] | None = None
    archived: bool | None = None
    disabled: bool | None = None
    license: RepositoryLicense | None = None

    # Only meaningful when creating repositories
    organization: User | None = None
    team_id: int | None = None
    gitignore_template: str | None = None
    license_template: str | None = None

    private: bool | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    has_projects: bool | None = None
    has_downloads: bool | None = None
    has_discussions: bool | None = None
    is_template: bool | None = None
    # public, private or internal
    visibility: str | None = None
    security_and_analysis: SecurityAndAnalysis | None = None

    # API URLs
    url: str | None = None
    archive_url: str | None = None
    branches_url: str | None = None
    commits_url: str | None = None
    contents_url: str | None = None
    contributors_url: str | None = None
    events_url: str | None = None
    forks_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    labels_url: str | None = None
    languages_url: str | None = None
    pulls_url: str | None = None
    releases_url: str | None = None
    tags_url: str | None = None
    trees_url: str | None = None


class Contributor(GitHubModel):
    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    contributions: int | None = None
    # Anonymous contributors carry name and email instead of a login
    name: str | None = None
    email: str | None = None


class CommitRef(GitHubModel):
    sha: str | None = None
    url: str | None = None


class RepositoryTag(GitHubModel):
    name: str | None = None
    commit: CommitRef | None = None
    zipball_url: str | None = None
    tarball_url: str | None = None


class Branch(GitHubModel):
    name: str | None = None
    commit: CommitRef | None = None
    protected: bool | None = None


class RepositoryTopics(GitHubModel):
    names: list[str] | None = None


class RepositoryListOptions(ListOptions):
    """Options for listing the authenticated user's repositories."""

    # all, public or private
    visibility: str | None = None
    # Comma-separated owner, collaborator, organization_member
    affiliation: str | None = None
    # all, owner, public, private, member; not combinable with the two above
    type: str | None = None
    # created, updated, pushed, full_name
    sort: str | None = None
    # asc or desc
    direction: str | None = None


class RepositoryListByUserOptions(ListOptions):
    # all, owner or member
    type: str | None = None
    sort: str | None = None
    direction: str | None = None


class RepositoryListByOrgOptions(ListOptions):
    # all, public, private, forks, sources, member
    type: str | None = None
    sort: str | None = None
    direction: str | None = None


class RepositoryListAllOptions(ListOptions):
    # ID of the last repository seen
    since: int | None = None


class ListContributorsOptions(ListOptions):
    # Include anonymous contributors
    anon: str | None = None


class BranchListOptions(ListOptions):
    protected: bool | None = None


class RepositoryListForksOptions(ListOptions):
    # newest, oldest, stargazers or watchers
    sort: str | None = None


class RepositoryCreateForkOptions(GitHubModel):
    organization: str | None = None
    name: str | None = None
    default_branch_only: bool | None = None


class RepositoriesService(ContentsMixin, HooksMixin, ReleasesMixin, StatusesMixin, Service):
    """Methods for the repositories API."""

    def list_by_authenticated_user(
        self, opts: RepositoryListOptions | None = None
    ) -> tuple[list[Repository], Response]:
        """List repositories the authenticated user can access.

        GitHub API docs: https://docs.github.com/rest/repos/repos#list-repositories-for-the-authenticated-user
        """
        u = add_options("user/repos", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Repository])

    def list_by_user(
        self, user: str, opts: RepositoryListByUserOptions | None = None
    ) -> tuple[list[Repository], Response]:
        u = add_options(f"users/{user}/repos", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Repository])

    def list_by_org(
        self, org: str, opts: RepositoryListByOrgOptions | None = None
    ) -> tuple[list[Repository], Response]:
        """List repositories for an organization.

        GitHub API docs: https://docs.github.com/rest/repos/repos#list-organization-repositories
        """
        u = add_options(f"orgs/{org}/repos", opts)
        req = self._client.new_request("GET", u, headers={"Accept": MEDIA_TYPE_TOPICS_PREVIEW})
        return self._client.do(req, list[Repository])

    def list_all(self, opts: RepositoryListAllOptions | None = None) -> tuple[list[Repository], Response]:
        u = add_options("repositories", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Repository])

    def create(self, org: str, repo: Repository) -> tuple[Repository, Response]:
        """Create a repository. An empty org creates it for the authenticated user.

        GitHub API docs: https://docs.github.com/rest/repos/repos#create-an-organization-repository
        """
        u = f"orgs/{org}/repos" if org else "user/repos"
        req = self._client.new_request("POST", u, repo)
        return self._client.do(req, Repository)

    def get(self, owner: str, repo: str) -> tuple[Repository, Response]:
        req = self._client.new_request(
            "GET", f"repos/{owner}/{repo}", headers={"Accept": MEDIA_TYPE_TOPICS_PREVIEW}
        )
        return self._client.do(req, Repository)

    def get_by_id(self, repo_id: int) -> tuple[Repository, Response]:
        req = self._client.new_request("GET", f"repositories/{repo_id}")
        return self._client.do(req, Repository)

    def edit(self, owner: str, repo: str, repository: Repository) -> tuple[Repository, Response]:
        req = self._client.new_request("PATCH", f"repos/{owner}/{repo}", repository)
        return self._client.do(req, Repository)

    def delete(self, owner: str, repo: str) -> Response:
        req = self._client.new_request("DELETE", f"repos/{owner}/{repo}")
        return self._client.bare_do(req)

    def list_contributors(
        self, owner: str, repo: str, opts: ListContributorsOptions | None = None
    ) -> tuple[list[Contributor], Response]:
        u = add_options(f"repos/{owner}/{repo}/contributors", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Contributor])

    def list_languages(self, owner: str, repo: str) -> tuple[dict[str, int], Response]:
        """List languages for a repository, mapped to bytes of code.

        GitHub API docs: https://docs.github.com/rest/repos/repos#list-repository-languages
        """
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/languages")
        return self._client.do(req, dict[str, int])

    def list_tags(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[RepositoryTag], Response]:
        u = add_options(f"repos/{owner}/{repo}/tags", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[RepositoryTag])

    def list_branches(
        self, owner: str, repo: str, opts: BranchListOptions | None = None
    ) -> tuple[list[Branch], Response]:
        u = add_options(f"repos/{owner}/{repo}/branches", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Branch])

    def get_branch(self, owner: str, repo: str, branch: str, max_redirects: int = 0) -> tuple[Branch, Response]:
        """Get a branch.

        A renamed branch answers with a 301; it is followed up to
        max_redirects times.
        """
        req = self._client.new_request("GET", f"repos/{owner}/{repo}/branches/{branch}")
        return self._client.do(req, Branch, follow_redirects=max_redirects > 0)

    def list_all_topics(self, owner: str, repo: str) -> tuple[list[str], Response]:
        req = self._client.new_request(
            "GET", f"repos/{owner}/{repo}/topics", headers={"Accept": MEDIA_TYPE_TOPICS_PREVIEW}
        )
        topics, resp = self._client.do(req, RepositoryTopics)
        return topics.names or [], resp

    def replace_all_topics(self, owner: str, repo: str, topics: list[str]) -> tuple[list[str], Response]:
        """Replace all repository topics.

        An empty list clears the topics; it is sent as [] rather than null.

        GitHub API docs: https://docs.github.com/rest/repos/repos#replace-all-repository-topics
        """
        req = self._client.new_request(
            "PUT",
            f"repos/{owner}/{repo}/topics",
            {"names": list(topics)},
            headers={"Accept": MEDIA_TYPE_TOPICS_PREVIEW},
        )
        result, resp = self._client.do(req, RepositoryTopics)
        return result.names or [], resp

    def list_forks(
        self, owner: str, repo: str, opts: RepositoryListForksOptions | None = None
    ) -> tuple[list[Repository], Response]:
        u = add_options(f"repos/{owner}/{repo}/forks", opts)
        req = self._client.new_request("GET", u)
        return self._client.do(req, list[Repository])

    def create_fork(
        self, owner: str, repo: str, opts: RepositoryCreateForkOptions | None = None
    ) -> tuple[Repository | None, Response]:
        """Fork a repository.

        Forking happens asynchronously; GitHub answers 202 with the future
        fork, which is returned like a normal result.

        GitHub API docs: https://docs.github.com/rest/repos/forks#create-a-fork
        """
        body = opts or RepositoryCreateForkOptions()
        req = self._client.new_request("POST", f"repos/{owner}/{repo}/forks", body)
        return self._client.do_accepted(req, Repository)
