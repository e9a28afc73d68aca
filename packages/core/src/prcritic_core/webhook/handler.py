"""Per-request webhook state machine.

Received → Verified → Routed → Fetching → Reviewing → Completed, with early
exits to Rejected (401), Ignored (200) and Aborted (500). Kept free of any
web framework so the HTTP host only has to translate a WebhookResponse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from prcritic_core.errors import AuthError
from prcritic_core.models import WebhookEnvelope
from prcritic_core.reviewer import run_review
from prcritic_core.webhook.events import (
    PULL_REQUEST_EVENT,
    RouteDecision,
    parse_payload,
    parse_pull_request_context,
    route_event,
)
from prcritic_core.webhook.signature import require_signature

logger = logging.getLogger(__name__)


@dataclass
class WebhookResponse:
    status_code: int
    body: dict = field(default_factory=dict)


def handle_webhook(envelope: WebhookEnvelope, config: dict, repo_obj=None, reviewer=None) -> WebhookResponse:
    logger.info("Received %s event", envelope.event)

    try:
        require_signature(envelope.body, envelope.signature, config.get("webhook_secret"))
    except AuthError as e:
        logger.warning("Rejected webhook: %s", e)
        return WebhookResponse(401, {"error": str(e)})

    logger.debug("Signature verified")

    if envelope.event != PULL_REQUEST_EVENT:
        return WebhookResponse(200, {"message": RouteDecision.EVENT_IGNORED.value})

    try:
        payload = parse_payload(envelope.body)
        decision = route_event(envelope.event, payload.get("action"))
        if decision is not RouteDecision.PROCEED:
            return WebhookResponse(200, {"message": decision.value})

        context = parse_pull_request_context(payload)
        logger.info("Reviewing PR #%d in %s", context.pr_number, context.full_name)

        summary = run_review(context, config, repo_obj=repo_obj, reviewer=reviewer)
    except Exception as e:
        logger.exception("Webhook processing failed")
        return WebhookResponse(500, {"error": str(e)})

    if summary.files_considered == 0:
        return WebhookResponse(200, {"message": "No files to review"})

    logger.info(
        "Review completed for PR #%d: %d reviewed, %d skipped, %d failed, %d comment(s)",
        summary.pr_number,
        len(summary.reviewed_files),
        len(summary.skipped_files),
        len(summary.failed_files),
        summary.total_comments,
    )
    return WebhookResponse(
        200,
        {
            "message": "Review completed",
            "pr_number": summary.pr_number,
            "files_reviewed": summary.files_considered,
        },
    )
