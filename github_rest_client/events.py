"""Webhook and activity event payloads.

Each payload model is registered under its X-GitHub-Event name ("push",
"pull_request", ...). Activity feed events name the same payloads by class
name ("PushEvent", ...).

GitHub API docs: https://docs.github.com/webhooks/webhook-events-and-payloads
"""

import json
from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from .actions_workflow_jobs import WorkflowJob
from .actions_workflow_runs import HeadCommit, WorkflowRun
from .actions_workflows import Workflow
from .git import CommitAuthor
from .issues import Issue
from .issues_comments import IssueComment
from .issues_labels import Label
from .issues_milestones import Milestone
from .models import GitHubModel
from .organizations import Installation, Organization
from .pulls import PullRequest
from .repos_hooks import Hook
from .repos_releases import RepositoryRelease
from .repositories import Repository
from .secret_scanning import SecretScanningAlert
from .users import User

# X-GitHub-Event name -> payload model
_EVENTS: dict[str, type["WebhookPayload"]] = {}


def register(name: str):
    """Register a payload model under its webhook event name."""

    def wrapper(cls):
        cls.event_type = name
        _EVENTS[name] = cls
        return cls

    return wrapper


def event_for_type(name: str) -> type["WebhookPayload"] | None:
    """Return the payload model for a webhook event name, or None if unknown."""
    return _EVENTS.get(name)


def message_types() -> list[str]:
    """Sorted webhook event names with a payload model."""
    return sorted(_EVENTS)


def _event_for_class_name(type_name: str) -> type["WebhookPayload"] | None:
    for cls in _EVENTS.values():
        if cls.__name__ == type_name:
            return cls
    return None


class WebhookPayload(GitHubModel):
    """Fields shared by most webhook payloads."""

    event_type: ClassVar[str] = ""

    action: str | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None
    organization: Organization | None = None


class Event(GitHubModel):
    """An item of an activity feed."""

    # Payload type such as "PushEvent"
    type: str | None = None
    public: bool | None = None
    raw_payload: Any = Field(default=None, alias="payload")
    repo: Repository | None = None
    actor: User | None = None
    org: Organization | None = None
    created_at: datetime | None = None
    id: str | None = None

    def parse_payload(self):
        """Decode raw_payload into the model named by type.

        Unknown types yield the decoded JSON value.
        """
        payload = self.raw_payload
        if isinstance(payload, (str, bytes)):
            payload = json.loads(payload)
        model = _event_for_class_name(self.type or "")
        if model is None:
            return payload
        return model.model_validate(payload)


@register("push")
class PushEvent(WebhookPayload):
    push_id: int | None = None
    head: str | None = None
    ref: str | None = None
    size: int | None = None
    commits: list[HeadCommit] | None = None
    before: str | None = None
    after: str | None = None
    distinct_size: int | None = None
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    base_ref: str | None = None
    compare: str | None = None
    head_commit: HeadCommit | None = None
    pusher: CommitAuthor | None = None


@register("pull_request")
class PullRequestEvent(WebhookPayload):
    number: int | None = None
    pull_request: PullRequest | None = None
    # Set for the labeled and unlabeled actions
    label: Label | None = None
    # Set for the assigned and unassigned actions
    assignee: User | None = None
    requested_reviewer: User | None = None
    before: str | None = None
    after: str | None = None


@register("issues")
class IssuesEvent(WebhookPayload):
    issue: Issue | None = None
    assignee: User | None = None
    label: Label | None = None
    milestone: Milestone | None = None


@register("issue_comment")
class IssueCommentEvent(WebhookPayload):
    issue: Issue | None = None
    comment: IssueComment | None = None


@register("create")
class CreateEvent(WebhookPayload):
    ref: str | None = None
    # branch or tag
    ref_type: str | None = None
    master_branch: str | None = None
    description: str | None = None
    pusher_type: str | None = None


@register("delete")
class DeleteEvent(WebhookPayload):
    ref: str | None = None
    ref_type: str | None = None
    pusher_type: str | None = None


@register("fork")
class ForkEvent(WebhookPayload):
    # The newly created fork
    forkee: Repository | None = None


@register("watch")
class WatchEvent(WebhookPayload):
    pass


@register("star")
class StarEvent(WebhookPayload):
    starred_at: datetime | None = None


@register("public")
class PublicEvent(WebhookPayload):
    pass


@register("release")
class ReleaseEvent(WebhookPayload):
    release: RepositoryRelease | None = None


@register("label")
class LabelEvent(WebhookPayload):
    label: Label | None = None


@register("milestone")
class MilestoneEvent(WebhookPayload):
    milestone: Milestone | None = None


@register("member")
class MemberEvent(WebhookPayload):
    member: User | None = None


@register("organization")
class OrganizationEvent(WebhookPayload):
    invitation: dict[str, Any] | None = None
    membership: dict[str, Any] | None = None


@register("repository")
class RepositoryEvent(WebhookPayload):
    changes: dict[str, Any] | None = None


@register("status")
class StatusEvent(WebhookPayload):
    sha: str | None = None
    # pending, success, failure or error
    state: str | None = None
    description: str | None = None
    target_url: str | None = None
    context: str | None = None
    name: str | None = None
    branches: list[dict[str, Any]] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@register("ping")
class PingEvent(WebhookPayload):
    zen: str | None = None
    hook_id: int | None = None
    hook: Hook | None = None


@register("meta")
class MetaEvent(WebhookPayload):
    hook_id: int | None = None
    hook: Hook | None = None


@register("installation")
class InstallationEvent(WebhookPayload):
    repositories: list[Repository] | None = None
    requester: User | None = None


@register("workflow_dispatch")
class WorkflowDispatchEvent(WebhookPayload):
    inputs: dict[str, Any] | None = None
    ref: str | None = None
    workflow: str | None = None


@register("workflow_run")
class WorkflowRunEvent(WebhookPayload):
    workflow: Workflow | None = None
    workflow_run: WorkflowRun | None = None


@register("workflow_job")
class WorkflowJobEvent(WebhookPayload):
    workflow_job: WorkflowJob | None = None


@register("secret_scanning_alert")
class SecretScanningAlertEvent(WebhookPayload):
    alert: SecretScanningAlert | None = None
