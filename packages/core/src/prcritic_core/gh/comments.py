"""Comment publishing on GitHub pull requests."""

from __future__ import annotations

from github import GithubException

from prcritic_core.errors import DependencyError
from prcritic_core.gh.pull_request import describe_github_error


def post_general_comment(repo, pr_number: int, body: str):
    """Post a conversation-level comment on the pull request."""
    try:
        return repo.get_pull(pr_number).create_issue_comment(body)
    except GithubException as e:
        raise DependencyError(f"Failed to post comment: {describe_github_error(e)}", status=e.status) from e


def get_review_target(repo, pr_number: int, commit_id: str):
    """Fetch the pull request and commit that line comments attach to.

    Fetched once per file so each finding costs a single POST.
    """
    try:
        return repo.get_pull(pr_number), repo.get_commit(commit_id)
    except GithubException as e:
        message = f"Failed to fetch PR #{pr_number} at {commit_id[:7]}: {describe_github_error(e)}"
        raise DependencyError(message, status=e.status) from e


def post_line_comment(pull, commit, path: str, line: int, body: str):
    """Post a review comment anchored to ``line`` of ``path`` at ``commit``.

    ``line`` is a line number in the new version of the file, so the comment
    is placed on the RIGHT side of the diff.
    """
    try:
        return pull.create_review_comment(body, commit, path, line=line, side="RIGHT")
    except GithubException as e:
        raise DependencyError(f"Failed to post line comment: {describe_github_error(e)}", status=e.status) from e
