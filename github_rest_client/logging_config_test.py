import json
import logging

import pytest
import structlog

from .logging_config import REDACTED, configure_logging, redact_credentials


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    transport_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, transport_level in transport_levels.items():
        logging.getLogger(name).setLevel(transport_level)
    structlog.reset_defaults()


def describe_configure_logging():
    def it_sets_the_root_level():
        configure_logging(log_level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def it_installs_a_single_stderr_handler():
        configure_logging()
        configure_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def it_renders_json(capsys):
        configure_logging(json_logs=True, log_level="INFO")

        structlog.get_logger("github_rest_client.test").info("github_request", status=200)

        line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert line["event"] == "github_request"
        assert line["status"] == 200
        assert line["level"] == "info"
        assert line["logger"] == "github_rest_client.test"

    def it_routes_stdlib_records_through_the_formatter(capsys):
        configure_logging(json_logs=True, log_level="WARNING")

        logging.getLogger("httpx").warning("plain %s", "record")

        line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert line["event"] == "plain record"

    def it_quiets_transport_loggers_unless_debugging():
        configure_logging(log_level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING

        configure_logging(log_level="DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG

    def it_scrubs_credentials_from_rendered_events(capsys):
        configure_logging(json_logs=True, log_level="DEBUG")

        structlog.get_logger("github_rest_client.client").debug(
            "github_request",
            url="https://api.github.com/applications/1/token?client_id=abc&client_secret=s3cr3t",
            authorization="Bearer ghp_x",
        )

        err = capsys.readouterr().err
        line = json.loads(err.strip().splitlines()[-1])
        assert "s3cr3t" not in err
        assert "ghp_x" not in err
        assert line["url"] == f"https://api.github.com/applications/1/token?client_id=abc&client_secret={REDACTED}"
        assert line["authorization"] == REDACTED


def describe_redact_credentials():
    def it_leaves_urls_without_secrets_alone():
        event = {"event": "github_request", "url": "https://api.github.com/repos/o/r?per_page=2"}

        assert redact_credentials(None, "debug", dict(event)) == event

    def it_masks_token_keys():
        event = redact_credentials(None, "info", {"event": "x", "token": "t", "password": "p", "status": 200})

        assert event == {"event": "x", "token": REDACTED, "password": REDACTED, "status": 200}
