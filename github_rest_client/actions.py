"""GitHub Actions API.

GitHub API docs: https://docs.github.com/rest/actions
"""

from .actions_artifacts import ArtifactsMixin
from .actions_runners import RunnersMixin
from .actions_secrets import SecretsMixin
from .actions_variables import VariablesMixin
from .actions_workflow_jobs import WorkflowJobsMixin
from .actions_workflow_runs import WorkflowRunsMixin
from .actions_workflows import WorkflowsMixin
from .service import Service


class ActionsService(
    WorkflowsMixin,
    WorkflowRunsMixin,
    WorkflowJobsMixin,
    SecretsMixin,
    VariablesMixin,
    RunnersMixin,
    ArtifactsMixin,
    Service,
):
    """Methods for the GitHub Actions API."""
