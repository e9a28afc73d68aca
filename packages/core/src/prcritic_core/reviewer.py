"""Core PR review orchestration."""

from __future__ import annotations

import logging
import time

from prcritic_core.errors import DependencyError
from prcritic_core.gh.comments import get_review_target, post_general_comment, post_line_comment
from prcritic_core.gh.pull_request import get_file_content, get_repo, list_changed_files
from prcritic_core.models import (
    CLEAN,
    FAILED,
    GENERAL_COMMENT,
    LINE_COMMENTS,
    SKIPPED,
    FileOutcome,
    PullRequestContext,
    ReviewSummary,
)
from prcritic_core.providers.anthropic import AnthropicReviewer
from prcritic_core.providers.gemini import GeminiReviewer
from prcritic_core.providers.openai import OpenAIReviewer
from prcritic_core.utils.code import skip_reason, truncate
from prcritic_core.utils.feedback import format_general_comment, is_clean_review, parse_line_findings

logger = logging.getLogger(__name__)


def get_reviewer(config: dict):
    model = config["model"]
    settings = {
        "max_output_tokens": config.get("max_output_tokens"),
        "temperature": config.get("temperature"),
    }
    if model == "gemini":
        return GeminiReviewer(api_key=config["gemini_api_key"], model=config.get("gemini_model"), **settings)
    if model == "anthropic":
        return AnthropicReviewer(api_key=config["anthropic_api_key"], **settings)
    if model == "openai":
        return OpenAIReviewer(api_key=config["openai_api_key"], **settings)
    raise ValueError(f"Unknown model provider: {model!r}. Choose 'gemini', 'anthropic' or 'openai'.")


def publish_review(repo, context: PullRequestContext, filename: str, review_text: str) -> FileOutcome:
    """Publish one file's review, never mixing line and general comments.

    Parsed line findings win: each becomes its own review comment and a
    failure on one does not stop the others. Without findings, a review that
    is not clean becomes a single general comment. A clean review posts
    nothing.
    """
    findings = parse_line_findings(review_text)

    if findings:
        outcome = FileOutcome(filename=filename, status=LINE_COMMENTS)
        pull, commit = get_review_target(repo, context.pr_number, context.head_sha)
        for finding in findings:
            try:
                post_line_comment(pull, commit, filename, finding.line, finding.comment)
            except DependencyError as e:
                logger.error("Error posting line comment for %s:%d: %s", filename, finding.line, e)
                outcome.comments_failed += 1
                continue
            outcome.comments_posted += 1
            logger.info("Posted line comment for %s:%d", filename, finding.line)
        return outcome

    if is_clean_review(review_text):
        logger.info("%s looks good, skipping comment", filename)
        return FileOutcome(filename=filename, status=CLEAN)

    post_general_comment(repo, context.pr_number, format_general_comment(filename, review_text))
    logger.info("Posted general review for %s", filename)
    return FileOutcome(filename=filename, status=GENERAL_COMMENT, comments_posted=1)


def process_file(reviewer, repo, context: PullRequestContext, file, config: dict) -> FileOutcome:
    """Fetch, review and publish a single file.

    Raises whatever the review or publish step raises; run_review turns that
    into a failed outcome.
    """
    max_chars = config.get("max_chars_per_file", 20000)

    content = get_file_content(repo, context.head_ref, file.filename)
    if content is None:
        logger.info("Full content unavailable for %s; reviewing diff only", file.filename)
    else:
        content = truncate(content, max_chars, "file")

    patch = truncate(file.patch or "", max_chars, "diff")
    review_text = reviewer.review(file.filename, patch, content)
    return publish_review(repo, context, file.filename, review_text)


def run_review(
    context: PullRequestContext,
    config: dict,
    repo_obj=None,
    reviewer=None,
) -> ReviewSummary:
    """Run the full review pipeline for one pull request.

    Only the change-set listing can fail the whole run (DependencyError).
    Anything that goes wrong with an individual file is logged and recorded
    as a failed FileOutcome, and the loop moves on to the next file.
    """
    this_repo = repo_obj if repo_obj is not None else get_repo(context.full_name, token=config["github_token"])

    files = list_changed_files(this_repo, context.pr_number)
    logger.info("Found %d files in PR #%d", len(files), context.pr_number)

    summary = ReviewSummary(
        repo=context.full_name,
        pr_number=context.pr_number,
        head_sha=context.head_sha,
        files_considered=len(files),
    )
    if not files:
        return summary

    if reviewer is None:
        reviewer = get_reviewer(config)
    extensions = config.get("code_extensions", [])
    exclude_patterns = config.get("exclude", [])
    delay = config.get("review_delay_seconds", 1.0)

    reviewed = 0
    for file in files:
        reason = skip_reason(file, extensions, exclude_patterns)
        if reason:
            logger.debug("Skipping %s (%s)", file.filename or "<unnamed>", reason)
            summary.outcomes.append(FileOutcome(filename=file.filename, status=SKIPPED))
            continue

        if reviewed and delay:
            time.sleep(delay)
        reviewed += 1

        logger.info("Reviewing file: %s", file.filename)
        try:
            outcome = process_file(reviewer, this_repo, context, file, config)
        except Exception as e:
            logger.error("Error reviewing %s: %s", file.filename, e)
            outcome = FileOutcome(filename=file.filename, status=FAILED, error=str(e))
        summary.outcomes.append(outcome)

    return summary
