"""Event routing and payload validation for pull_request webhooks.

Only two actions start a review: ``opened`` (new PR) and ``synchronize``
(new commits pushed to the head branch). Everything else is acknowledged
and ignored.
"""

from __future__ import annotations

import enum
import json

from pydantic import BaseModel, ValidationError

from prcritic_core.errors import PayloadError
from prcritic_core.models import PullRequestContext

PULL_REQUEST_EVENT = "pull_request"
REVIEWABLE_ACTIONS = frozenset({"opened", "synchronize"})


class RouteDecision(enum.Enum):
    PROCEED = "proceed"
    EVENT_IGNORED = "Event ignored"
    ACTION_IGNORED = "Action ignored"


# Only the fields the pipeline reads are modelled; GitHub sends many more
# and pydantic ignores the rest.
class _Owner(BaseModel):
    login: str


class _Repository(BaseModel):
    name: str
    owner: _Owner


class _Head(BaseModel):
    ref: str
    sha: str


class _PullRequest(BaseModel):
    number: int
    head: _Head


class PullRequestEvent(BaseModel):
    action: str
    pull_request: _PullRequest
    repository: _Repository


def route_event(event: str | None, action: str | None) -> RouteDecision:
    if event != PULL_REQUEST_EVENT:
        return RouteDecision.EVENT_IGNORED
    if not isinstance(action, str) or action not in REVIEWABLE_ACTIONS:
        return RouteDecision.ACTION_IGNORED
    return RouteDecision.PROCEED


def parse_payload(body: bytes | str) -> dict:
    """Decode the raw webhook body into a JSON object."""
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PayloadError(f"Invalid JSON payload: {e}") from e
    if not isinstance(payload, dict):
        raise PayloadError("Invalid JSON payload: expected an object")
    return payload


def parse_pull_request_context(payload: dict) -> PullRequestContext:
    try:
        event = PullRequestEvent.model_validate(payload)
    except ValidationError as e:
        raise PayloadError(f"Malformed pull_request payload: {e.error_count()} invalid field(s)") from e
    return PullRequestContext(
        owner=event.repository.owner.login,
        repo=event.repository.name,
        pr_number=event.pull_request.number,
        head_ref=event.pull_request.head.ref,
        head_sha=event.pull_request.head.sha,
    )
