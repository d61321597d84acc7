"""Result structures for webhook reconciliation."""

from __future__ import annotations

import enum

import msgspec

RATE_LIMITED_REPO = "(rate-limited)"


class HookOutcome(enum.StrEnum):
    """Result of ensuring a hook exists on an active repository."""

    CREATED = "created"
    UNCHANGED = "unchanged"


class SyncErrorEntry(msgspec.Struct, kw_only=True, frozen=True):
    """A repository that could not be reconciled, with the failure message."""

    repo: str
    error: str


class ReconciliationResult(msgspec.Struct, kw_only=True):
    """Outcome of one reconciliation run.

    A repository appears in at most one list. Archived repositories that
    already have no hook are deliberately absent from all four.

    Attributes
    ----------
    created : list[str]
        Active repositories that received a new hook.
    deleted : list[str]
        Archived repositories whose hook was removed.
    unchanged : list[str]
        Active repositories that already had a matching hook.
    errors : list[SyncErrorEntry]
        Per-repository failures, plus at most one ``(rate-limited)`` entry
        when the run was aborted.

    """

    created: list[str] = msgspec.field(default_factory=list)
    deleted: list[str] = msgspec.field(default_factory=list)
    unchanged: list[str] = msgspec.field(default_factory=list)
    errors: list[SyncErrorEntry] = msgspec.field(default_factory=list)

    def record_hook(self, repo: str, outcome: HookOutcome) -> None:
        """Record the outcome of ensuring a hook on an active repository."""
        if outcome is HookOutcome.CREATED:
            self.created.append(repo)
        else:
            self.unchanged.append(repo)

    def record_error(self, repo: str, error: BaseException | str) -> None:
        """Record a failure against *repo*."""
        self.errors.append(SyncErrorEntry(repo=repo, error=str(error)))

    @property
    def processed(self) -> int:
        """Return how many repositories have a recorded outcome."""
        return (
            len(self.created)
            + len(self.deleted)
            + len(self.unchanged)
            + sum(1 for entry in self.errors if entry.repo != RATE_LIMITED_REPO)
        )

    def to_builtins(self) -> dict[str, object]:
        """Return a JSON-ready mapping of the four lists."""
        return msgspec.to_builtins(self)
