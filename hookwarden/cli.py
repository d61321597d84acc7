"""Command-line entry point for a one-off webhook reconciliation run."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

import httpx
import msgspec

from hookwarden.github.errors import GitHubAPIError, GitHubResponseShapeError
from hookwarden.logging import configure_logging
from hookwarden.sync.config import SyncConfig
from hookwarden.sync.errors import WebhookSyncConfigError
from hookwarden.sync.service import WebhookSyncService

_EXIT_OK = 0
_EXIT_FAILED = 1
_EXIT_CONFIG = 2


def main(argv: list[str] | None = None) -> int:
    """Reconcile webhooks for the configured account and print the result.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when the run failed (or reported errors
        with ``--fail-on-errors``), 2 when configuration is missing.

    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--api-url",
        default=None,
        help="GitHub API base URL (defaults to https://api.github.com)",
    )
    parser.add_argument(
        "--fail-on-errors",
        action="store_true",
        help="Exit non-zero when any repository could not be reconciled",
    )
    args = parser.parse_args(argv)

    configure_logging(os.environ.get("HOOKWARDEN_LOG_LEVEL", "WARNING"))

    try:
        config = SyncConfig.from_env()
    except WebhookSyncConfigError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return _EXIT_CONFIG

    service = WebhookSyncService(base_url=args.api_url)
    try:
        result = asyncio.run(service.synchronize(config))
    except (GitHubAPIError, GitHubResponseShapeError, httpx.HTTPError) as exc:
        print(f"webhook sync failed: {exc}", file=sys.stderr)
        return _EXIT_FAILED

    print(msgspec.json.encode(result).decode("utf-8"))
    if args.fail_on_errors and result.errors:
        return _EXIT_FAILED
    return _EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
