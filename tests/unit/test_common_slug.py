"""Unit tests for repository slug utility."""

from __future__ import annotations

import pytest

from hookwarden.common.slug import parse_repo_slug


def test_parse_repo_slug_splits_owner_and_name() -> None:
    """parse_repo_slug returns (owner, name) for valid slugs."""
    assert parse_repo_slug("octo/reef") == ("octo", "reef")
    assert parse_repo_slug("Owner-Org/Repo_Name.py") == ("Owner-Org", "Repo_Name.py")


@pytest.mark.parametrize(
    "slug",
    [
        "",
        "/",
        "invalid",
        "owner/name/extra",
        "owner/",
        "/name",
        "owner//name",
    ],
)
def test_parse_repo_slug_rejects_invalid_slugs(slug: str) -> None:
    """parse_repo_slug raises ValueError for invalid slugs."""
    with pytest.raises(ValueError, match="Invalid repository slug"):
        parse_repo_slug(slug)
