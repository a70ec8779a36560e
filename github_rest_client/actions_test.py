"""Tests for ActionsService: workflows, runs, jobs, variables, runners and artifacts."""

import httpx
import pytest
from pydantic import ValidationError

from .actions_artifacts import ListArtifactsOptions
from .actions_runners import ListRunnersOptions
from .actions_variables import ActionsVariable
from .actions_workflow_jobs import ListWorkflowJobsOptions
from .actions_workflow_runs import ListWorkflowRunsOptions
from .actions_workflows import CreateWorkflowDispatchEventRequest
from .client import Client
from .pagination import scan


def describe_WorkflowsMixin():
    def it_lists_workflows(client: Client, mux):
        mux.route("/repos/o/r/actions/workflows", method="GET", json={"total_count": 1, "workflows": [{"id": 72844}]})

        workflows, _ = client.actions.list_workflows("o", "r")

        assert workflows.total_count == 1
        assert workflows.workflows[0].id == 72844

    def it_gets_a_workflow_by_id_or_file_name(client: Client, mux):
        mux.route("/repos/o/r/actions/workflows/72844", json={"id": 72844})
        mux.route("/repos/o/r/actions/workflows/main.yml", json={"id": 72844, "path": ".github/workflows/main.yml"})

        by_id, _ = client.actions.get_workflow_by_id("o", "r", 72844)
        by_name, _ = client.actions.get_workflow_by_file_name("o", "r", "main.yml")

        assert by_id.id == by_name.id
        assert by_name.path == ".github/workflows/main.yml"

    def it_dispatches_a_workflow(client: Client, mux):
        mux.route("/repos/o/r/actions/workflows/72844/dispatches", method="POST", status=204)
        mux.route("/repos/o/r/actions/workflows/main.yml/dispatches", method="POST", status=204)
        event = CreateWorkflowDispatchEventRequest(ref="main", inputs={"key": "value", "n": 1})

        client.actions.create_workflow_dispatch_event_by_id("o", "r", 72844, event)
        assert mux.last_json() == {"ref": "main", "inputs": {"key": "value", "n": 1}}

        resp = client.actions.create_workflow_dispatch_event_by_file_name("o", "r", "main.yml", event)
        assert resp.status_code == 204

    def it_requires_a_ref_to_dispatch():
        with pytest.raises(ValidationError):
            CreateWorkflowDispatchEventRequest()

    def it_enables_and_disables_workflows(client: Client, mux):
        for path in ("72844/enable", "72844/disable", "main.yml/enable", "main.yml/disable"):
            mux.route(f"/repos/o/r/actions/workflows/{path}", method="PUT", status=204)

        client.actions.enable_workflow_by_id("o", "r", 72844)
        client.actions.disable_workflow_by_id("o", "r", 72844)
        client.actions.enable_workflow_by_file_name("o", "r", "main.yml")
        client.actions.disable_workflow_by_file_name("o", "r", "main.yml")

        assert len(mux.requests) == 4
        assert all(r.content == b"" for r in mux.requests)


def describe_WorkflowRunsMixin():
    def it_lists_runs_of_a_workflow(client: Client, mux):
        mux.route(
            "/repos/o/r/actions/workflows/29679449/runs",
            method="GET",
            json={"total_count": 2, "workflow_runs": [{"id": 1, "head_commit": {"author": {"name": "a"}}}]},
        )

        runs, _ = client.actions.list_workflow_runs_by_id(
            "o", "r", 29679449, ListWorkflowRunsOptions(branch="main", event="push", status="success")
        )

        assert runs.workflow_runs[0].head_commit.author.name == "a"
        assert mux.last_params() == {"branch": "main", "event": "push", "status": "success"}

    def it_lists_runs_by_file_name_and_for_the_repository(client: Client, mux):
        mux.route("/repos/o/r/actions/workflows/ci.yml/runs", json={"total_count": 0, "workflow_runs": []})
        mux.route("/repos/o/r/actions/runs", json={"total_count": 1, "workflow_runs": [{"id": 5}]})

        by_name, _ = client.actions.list_workflow_runs_by_file_name("o", "r", "ci.yml")
        for_repo, _ = client.actions.list_repository_workflow_runs(
            "o", "r", ListWorkflowRunsOptions(exclude_pull_requests=True, created=">=2024-01-01")
        )

        assert by_name.workflow_runs == []
        assert for_repo.workflow_runs[0].id == 5
        assert mux.last_params() == {"exclude_pull_requests": "true", "created": ">=2024-01-01"}

    def it_scans_every_page_of_runs(client: Client, mux):
        def handler(request):
            if request.url.params.get("page") == "2":
                return httpx.Response(200, json={"total_count": 2, "workflow_runs": [{"id": 2}]})
            return httpx.Response(
                200,
                json={"total_count": 2, "workflow_runs": [{"id": 1}]},
                headers={"Link": '<https://github.test/api-v3/repos/o/r/actions/runs?page=2>; rel="next"'},
            )

        mux.route("/repos/o/r/actions/runs", handler)

        runs = list(scan(client.actions.list_repository_workflow_runs, "o", "r", items=lambda r: r.workflow_runs))

        assert [run.id for run in runs] == [1, 2]

    def it_gets_a_run(client: Client, mux):
        mux.route(
            "/repos/o/r/actions/runs/29679449",
            method="GET",
            json={"id": 29679449, "repository": {"full_name": "o/r"}, "referenced_workflows": [{"path": "p"}]},
        )

        run, _ = client.actions.get_workflow_run_by_id("o", "r", 29679449)

        assert run.repository.full_name == "o/r"
        assert run.referenced_workflows[0].path == "p"

    def it_reruns_a_run(client: Client, mux):
        mux.route("/repos/o/r/actions/runs/1/rerun", method="POST", status=201)
        mux.route("/repos/o/r/actions/runs/1/rerun-failed-jobs", method="POST", status=201)

        assert client.actions.rerun_workflow_by_id("o", "r", 1).status_code == 201
        assert client.actions.rerun_failed_jobs_by_id("o", "r", 1).status_code == 201

    def it_treats_an_accepted_cancel_as_success(client: Client, mux):
        mux.route("/repos/o/r/actions/runs/1/cancel", method="POST", status=202, json={})

        resp = client.actions.cancel_workflow_run_by_id("o", "r", 1)

        assert resp.status_code == 202

    def it_deletes_a_run_and_its_logs(client: Client, mux):
        mux.route("/repos/o/r/actions/runs/1", method="DELETE", status=204)
        mux.route("/repos/o/r/actions/runs/1/logs", method="DELETE", status=204)

        client.actions.delete_workflow_run("o", "r", 1)
        client.actions.delete_workflow_run_logs("o", "r", 1)

        assert [r.url.path for r in mux.requests] == [
            "/api-v3/repos/o/r/actions/runs/1",
            "/api-v3/repos/o/r/actions/runs/1/logs",
        ]

    def it_returns_the_run_logs_location(client: Client, mux):
        mux.route("/repos/o/r/actions/runs/1/logs", method="GET", status=302, headers={"Location": "https://logs.test/1"})

        url, _ = client.actions.get_workflow_run_logs("o", "r", 1)

        assert url == "https://logs.test/1"


def describe_WorkflowJobsMixin():
    def it_lists_jobs_of_a_run(client: Client, mux):
        mux.route(
            "/repos/o/r/actions/runs/1/jobs",
            method="GET",
            json={"total_count": 1, "jobs": [{"id": 7, "steps": [{"name": "checkout", "number": 1}]}]},
        )

        jobs, _ = client.actions.list_workflow_jobs("o", "r", 1, ListWorkflowJobsOptions(filter="all"))

        assert jobs.jobs[0].steps[0].name == "checkout"
        assert mux.last_params() == {"filter": "all"}

    def it_gets_a_job_and_its_logs(client: Client, mux):
        mux.route("/repos/o/r/actions/jobs/7", json={"id": 7, "runner_name": "r1"})
        mux.route("/repos/o/r/actions/jobs/7/logs", status=302, headers={"Location": "https://logs.test/7"})

        job, _ = client.actions.get_workflow_job_by_id("o", "r", 7)
        url, _ = client.actions.get_workflow_job_logs("o", "r", 7)

        assert job.runner_name == "r1"
        assert url == "https://logs.test/7"


def describe_VariablesMixin():
    def it_manages_repository_variables(client: Client, mux):
        mux.route("/repos/o/r/actions/variables", json={"total_count": 1, "variables": [{"name": "A", "value": "1"}]})
        mux.route("/repos/o/r/actions/variables/A", json={"name": "A", "value": "1"})

        listed, _ = client.actions.list_repo_variables("o", "r")
        fetched, _ = client.actions.get_repo_variable("o", "r", "A")

        assert listed.variables[0].name == fetched.name == "A"

    def it_creates_a_repository_variable(client: Client, mux):
        mux.route("/repos/o/r/actions/variables", method="POST", status=201)

        resp = client.actions.create_repo_variable("o", "r", ActionsVariable(name="A", value="1"))

        assert resp.status_code == 201
        assert mux.last_json() == {"name": "A", "value": "1"}

    def it_updates_a_variable_by_name(client: Client, mux):
        mux.route("/repos/o/r/actions/variables/A", method="PATCH", status=204)

        client.actions.update_repo_variable("o", "r", ActionsVariable(name="A", value="2", created_at="2024-01-01T00:00:00Z"))

        assert mux.last_json() == {"name": "A", "value": "2"}

    def it_deletes_a_repository_variable(client: Client, mux):
        mux.route("/repos/o/r/actions/variables/A", method="DELETE", status=204)

        assert client.actions.delete_repo_variable("o", "r", "A").status_code == 204

    def it_manages_organization_variables(client: Client, mux):
        mux.route("/orgs/o/actions/variables", json={"total_count": 0, "variables": []})
        mux.route("/orgs/o/actions/variables/A", json={"name": "A", "visibility": "selected"})

        client.actions.list_org_variables("o")
        fetched, _ = client.actions.get_org_variable("o", "A")
        client.actions.create_org_variable(
            "o", ActionsVariable(name="A", value="1", visibility="selected", selected_repository_ids=[1, 2])
        )
        create_body = mux.last_json()
        client.actions.update_org_variable("o", ActionsVariable(name="A", visibility="all"))
        client.actions.delete_org_variable("o", "A")

        assert fetched.visibility == "selected"
        assert create_body == {"name": "A", "value": "1", "visibility": "selected", "selected_repository_ids": [1, 2]}
        assert [r.method for r in mux.requests] == ["GET", "GET", "POST", "PATCH", "DELETE"]


def describe_RunnersMixin():
    def it_lists_runner_downloads(client: Client, mux):
        mux.route("/repos/o/r/actions/runners/downloads", json=[{"os": "linux", "architecture": "x64"}])
        mux.route("/orgs/o/actions/runners/downloads", json=[{"os": "osx"}])

        repo_downloads, _ = client.actions.list_runner_application_downloads("o", "r")
        org_downloads, _ = client.actions.list_organization_runner_application_downloads("o")

        assert repo_downloads[0].architecture == "x64"
        assert org_downloads[0].os == "osx"

    def it_creates_registration_and_remove_tokens(client: Client, mux):
        token = {"token": "LLBF3JGZDX3P5PMEXLND6TS6FCWO6", "expires_at": "2020-01-22T12:13:35.123Z"}
        for path in (
            "/repos/o/r/actions/runners/registration-token",
            "/repos/o/r/actions/runners/remove-token",
            "/orgs/o/actions/runners/registration-token",
            "/orgs/o/actions/runners/remove-token",
        ):
            mux.route(path, method="POST", status=201, json=token)

        tokens = [
            client.actions.create_registration_token("o", "r")[0],
            client.actions.create_remove_token("o", "r")[0],
            client.actions.create_organization_registration_token("o")[0],
            client.actions.create_organization_remove_token("o")[0],
        ]

        assert {t.token for t in tokens} == {"LLBF3JGZDX3P5PMEXLND6TS6FCWO6"}
        assert tokens[0].expires_at.year == 2020

    def it_lists_gets_and_removes_runners(client: Client, mux):
        mux.route("/repos/o/r/actions/runners", json={"total_count": 1, "runners": [{"id": 23, "labels": [{"name": "self-hosted"}]}]})
        mux.route("/repos/o/r/actions/runners/23", json={"id": 23, "busy": False})

        runners, _ = client.actions.list_runners("o", "r", ListRunnersOptions(name="MBP"))
        assert mux.last_params() == {"name": "MBP"}
        runner, _ = client.actions.get_runner("o", "r", 23)
        client.actions.remove_runner("o", "r", 23)

        assert runners.runners[0].labels[0].name == "self-hosted"
        assert runner.busy is False
        assert mux.last.method == "DELETE"

    def it_manages_organization_runners(client: Client, mux):
        mux.route("/orgs/o/actions/runners", json={"total_count": 1, "runners": [{"id": 23}]})
        mux.route("/orgs/o/actions/runners/23", json={"id": 23, "status": "online"})

        runners, _ = client.actions.list_organization_runners("o")
        runner, _ = client.actions.get_organization_runner("o", 23)
        client.actions.remove_organization_runner("o", 23)

        assert runners.total_count == 1
        assert runner.status == "online"
        assert mux.last.method == "DELETE"


def describe_ArtifactsMixin():
    def it_lists_artifacts(client: Client, mux):
        mux.route("/repos/o/r/actions/artifacts", json={"total_count": 1, "artifacts": [{"id": 11, "name": "build"}]})
        mux.route("/repos/o/r/actions/runs/1/artifacts", json={"total_count": 0, "artifacts": []})

        repo_artifacts, _ = client.actions.list_artifacts("o", "r", ListArtifactsOptions(name="build"))
        assert mux.last_params() == {"name": "build"}
        run_artifacts, _ = client.actions.list_workflow_run_artifacts("o", "r", 1)

        assert repo_artifacts.artifacts[0].name == "build"
        assert run_artifacts.artifacts == []

    def it_gets_and_deletes_an_artifact(client: Client, mux):
        mux.route("/repos/o/r/actions/artifacts/11", json={"id": 11, "workflow_run": {"head_branch": "main"}})

        artifact, _ = client.actions.get_artifact("o", "r", 11)
        client.actions.delete_artifact("o", "r", 11)

        assert artifact.workflow_run.head_branch == "main"
        assert mux.last.method == "DELETE"

    def it_returns_the_download_location(client: Client, mux):
        mux.route("/repos/o/r/actions/artifacts/11/zip", status=302, headers={"Location": "https://pipelines.test/a.zip"})

        url, resp = client.actions.download_artifact("o", "r", 11)

        assert url == "https://pipelines.test/a.zip"
        assert resp.status_code == 302
