"""Unit tests for reconciliation result structures."""

from __future__ import annotations

import msgspec

from hookwarden.sync import RATE_LIMITED_REPO, HookOutcome, ReconciliationResult


def test_record_hook_routes_outcomes() -> None:
    """Created and unchanged outcomes land in their own lists."""
    result = ReconciliationResult()

    result.record_hook("octo/new", HookOutcome.CREATED)
    result.record_hook("octo/kept", HookOutcome.UNCHANGED)

    assert (result.created, result.unchanged) == (["octo/new"], ["octo/kept"])


def test_processed_ignores_rate_limit_sentinel() -> None:
    """The rate-limit entry is not counted as a processed repository."""
    result = ReconciliationResult(deleted=["octo/old"])
    result.record_error("octo/bad", ValueError("boom"))
    result.record_error(RATE_LIMITED_REPO, "GitHub API rate limit exceeded")

    assert result.processed == 2


def test_json_encoding_uses_plain_field_names() -> None:
    """Encoded results expose the four lists with repo/error entries."""
    result = ReconciliationResult(unchanged=["octo/reef"])
    result.record_error("octo/bad", "Failed to list hooks: 500")

    assert msgspec.json.decode(msgspec.json.encode(result)) == {
        "created": [],
        "deleted": [],
        "unchanged": ["octo/reef"],
        "errors": [{"repo": "octo/bad", "error": "Failed to list hooks: 500"}],
    }
