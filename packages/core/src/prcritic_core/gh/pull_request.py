from __future__ import annotations

import logging

from github import Auth, Github, GithubException
from requests import RequestException

from prcritic_core.errors import DependencyError
from prcritic_core.models import ChangedFile, PullRequestContext

logger = logging.getLogger(__name__)


def describe_github_error(e: GithubException) -> str:
    """Render a GithubException as '<status> <message>' for logs and error bodies."""
    message = e.data.get("message") if isinstance(e.data, dict) else None
    return f"{e.status} {message or e.data or 'Unknown error'}"


def get_repo(repo_name: str, token: str):
    try:
        return Github(auth=Auth.Token(token)).get_repo(repo_name)
    except GithubException as e:
        message = f"Failed to fetch repository {repo_name}: {describe_github_error(e)}"
        raise DependencyError(message, status=e.status) from e


def get_pull_context(repo, pr_number: int) -> PullRequestContext:
    """Build a PullRequestContext from the live PR, for runs without a webhook payload."""
    try:
        pull = repo.get_pull(pr_number)
    except GithubException as e:
        raise DependencyError(f"Failed to fetch PR #{pr_number}: {describe_github_error(e)}", status=e.status) from e
    owner, _, name = repo.full_name.partition("/")
    return PullRequestContext(
        owner=owner,
        repo=name,
        pr_number=pr_number,
        head_ref=pull.head.ref,
        head_sha=pull.head.sha,
    )


def list_changed_files(repo, pr_number: int) -> list[ChangedFile]:
    """Return every file in the pull request's change set.

    Listing failures are fatal for the pipeline: there is nothing to review
    without them, so they surface as DependencyError.
    """
    try:
        files = list(repo.get_pull(pr_number).get_files())
    except GithubException as e:
        raise DependencyError(f"Failed to fetch PR files: {describe_github_error(e)}", status=e.status) from e
    return [ChangedFile(filename=f.filename or "", status=f.status or "", patch=f.patch) for f in files]


def get_file_content(repo, ref: str, path: str) -> str | None:
    """Return the file at ``ref`` decoded as UTF-8, or None when unavailable.

    Full content is an optional enrichment for the prompt, so every failure
    mode collapses to None rather than an exception.
    """
    try:
        contents = repo.get_contents(path, ref=ref)
        if isinstance(contents, list):
            # A directory listing, not a file.
            return None
        if contents.encoding != "base64":
            # Files over 1 MB come back with encoding "none" and no content.
            logger.info("Content of %s@%s not inlined (encoding %r)", path, ref, contents.encoding)
            return None
        return contents.decoded_content.decode("utf-8", errors="replace")
    except GithubException as e:
        logger.warning("Could not fetch %s@%s: %s", path, ref, describe_github_error(e))
    except RequestException as e:
        logger.warning("Could not fetch %s@%s: %s", path, ref, e)
    return None
