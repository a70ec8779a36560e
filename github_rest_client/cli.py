"""CLI commands for calling the GitHub REST API."""

import argparse
import json
import sys
from pathlib import Path


def _parse_params(pairs: list[str]) -> list[tuple[str, str]]:
    params = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"invalid --param {pair!r}, expected KEY=VALUE")
        params.append((key, value))
    return params


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-rest",
        description="Call the GitHub REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL setting, WARNING)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Render logs as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Make a GitHub API call and print the JSON response",
    )
    api_parser.add_argument(
        "endpoint",
        help="API endpoint path (e.g., repos/owner/repo/contents/path)",
    )
    api_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable, e.g., --param per_page=100)",
    )
    api_parser.add_argument(
        "--method",
        default="GET",
        help="HTTP method (default: GET)",
    )
    api_parser.add_argument(
        "--data",
        default=None,
        help="JSON request body",
    )

    # rate-limit subcommand
    subparsers.add_parser(
        "rate-limit",
        help="Show the current rate limits",
    )

    # verify-webhook subcommand
    verify_parser = subparsers.add_parser(
        "verify-webhook",
        help="Check the signature of a saved webhook payload",
    )
    verify_parser.add_argument(
        "file",
        type=Path,
        help="File holding the raw request body",
    )
    verify_parser.add_argument(
        "--secret",
        required=True,
        help="Webhook secret",
    )
    verify_parser.add_argument(
        "--signature",
        required=True,
        help="Value of the X-Hub-Signature-256 (or X-Hub-Signature) header",
    )
    verify_parser.add_argument(
        "--content-type",
        default="application/json",
        help="Content-Type of the delivery (default: application/json)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    from .logging_config import configure_logging
    from .settings import get_settings

    settings = get_settings()
    configure_logging(
        json_logs=settings.json_logs if args.json_logs is None else args.json_logs,
        log_level=args.log_level or settings.log_level,
    )

    if args.command == "api":
        from urllib.parse import urlencode

        from .client import get_client
        from .errors import GitHubError

        endpoint = args.endpoint.lstrip("/")
        params = _parse_params(args.param)
        if params:
            endpoint += ("&" if "?" in endpoint else "?") + urlencode(params)
        body = json.loads(args.data) if args.data else None

        client = get_client()
        req = client.new_request(args.method.upper(), endpoint, body)
        try:
            resp = client.bare_do(req)
        except GitHubError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        if resp.http_response.content:
            json.dump(resp.http_response.json(), sys.stdout, indent=2)
            sys.stdout.write("\n")
    elif args.command == "rate-limit":
        from .client import get_client

        limits, _ = get_client().rate_limit.get()
        result = limits.model_dump(mode="json", exclude_none=True) if limits is not None else {}
        json.dump(result, sys.stdout, indent=2)
        sys.stdout.write("\n")
    elif args.command == "verify-webhook":
        from .errors import WebhookValidationError
        from .messages import validate_payload_from_body

        body = args.file.read_bytes()
        try:
            validate_payload_from_body(args.content_type, body, args.signature, args.secret)
        except WebhookValidationError as exc:
            print(f"invalid: {exc}", file=sys.stderr)
            return 1
        print("valid")
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
