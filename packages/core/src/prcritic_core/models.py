"""Data models shared across the review pipeline.

Plain dataclasses so prcritic_core stays independent of the HTTP host: the
server layer builds a WebhookEnvelope from the request and reads the
ReviewSummary back, nothing else crosses that boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Outcome statuses recorded per file by run_review.
SKIPPED = "skipped"
CLEAN = "clean"
LINE_COMMENTS = "line_comments"
GENERAL_COMMENT = "general_comment"
FAILED = "failed"


@dataclass(frozen=True)
class WebhookEnvelope:
    """One incoming webhook call, exactly as received."""

    body: bytes  # raw request body, never re-serialized before verification
    signature: str | None = None
    event: str | None = None


@dataclass(frozen=True)
class PullRequestContext:
    owner: str
    repo: str
    pr_number: int
    head_ref: str
    head_sha: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class ChangedFile:
    filename: str
    status: str
    patch: str | None = None  # absent for binary or rename-only entries


@dataclass(frozen=True)
class LineFinding:
    line: int
    comment: str


@dataclass
class FileOutcome:
    """What happened to a single file during run_review."""

    filename: str
    status: str
    comments_posted: int = 0
    comments_failed: int = 0
    error: str | None = None


@dataclass
class ReviewSummary:
    """Result returned by run_review.

    ``files_considered`` is the size of the change set as listed by GitHub,
    not the number of files actually sent to the model.
    """

    repo: str
    pr_number: int
    head_sha: str
    files_considered: int = 0
    outcomes: list[FileOutcome] = field(default_factory=list)
    reviewed_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def reviewed_files(self) -> list[str]:
        return [o.filename for o in self.outcomes if o.status not in (SKIPPED, FAILED)]

    @property
    def skipped_files(self) -> list[str]:
        return [o.filename for o in self.outcomes if o.status == SKIPPED]

    @property
    def failed_files(self) -> list[str]:
        return [o.filename for o in self.outcomes if o.status == FAILED]

    @property
    def total_comments(self) -> int:
        return sum(o.comments_posted for o in self.outcomes)
