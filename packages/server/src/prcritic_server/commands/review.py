"""review command - run the review pipeline on one pull request."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from prcritic_core.config import validate_config
from prcritic_core.errors import DependencyError
from prcritic_core.gh.pull_request import get_pull_context, get_repo
from prcritic_core.models import CLEAN, FAILED, GENERAL_COMMENT, LINE_COMMENTS, SKIPPED, ReviewSummary
from prcritic_core.reviewer import run_review

console = Console()

_STATUS_STYLE = {
    CLEAN: "green",
    LINE_COMMENTS: "yellow",
    GENERAL_COMMENT: "yellow",
    SKIPPED: "dim",
    FAILED: "red",
}


def print_summary(summary: ReviewSummary) -> None:
    if summary.files_considered == 0:
        console.print("[yellow]No files to review.[/yellow]")
        return

    table = Table(title=f"{summary.repo}#{summary.pr_number} @ {summary.head_sha[:7]}")
    table.add_column("File")
    table.add_column("Outcome")
    table.add_column("Comments", justify="right")
    table.add_column("Error")
    for outcome in summary.outcomes:
        style = _STATUS_STYLE.get(outcome.status, "white")
        comments = str(outcome.comments_posted)
        if outcome.comments_failed:
            comments += f" ({outcome.comments_failed} failed)"
        table.add_row(
            outcome.filename or "<unnamed>",
            f"[{style}]{outcome.status}[/{style}]",
            comments,
            outcome.error or "",
        )
    console.print(table)
    console.print(
        f"[bold]{len(summary.reviewed_files)}[/bold] reviewed, "
        f"[bold]{len(summary.skipped_files)}[/bold] skipped, "
        f"[bold]{len(summary.failed_files)}[/bold] failed · "
        f"[bold]{summary.total_comments}[/bold] comment(s) posted"
    )


@click.command("review")
@click.option("--repo", required=True, help="GitHub repository in owner/name format.")
@click.option("--pr", "pr_number", type=int, required=True, help="Pull request number.")
@click.option(
    "--model",
    type=click.Choice(["gemini", "anthropic", "openai"]),
    default=None,
    help="AI model provider. Overrides config file.",
)
@click.pass_context
def review_cmd(ctx, repo: str, pr_number: int, model: str | None):
    """Review a pull request now and post comments, without a webhook.

    Runs the same pipeline as the webhook server: every changed source file
    is reviewed and the findings are posted to the pull request.
    """
    config = dict(ctx.obj["config"])
    if model is not None:
        config["model"] = model

    missing = validate_config(config, require_webhook_secret=False)
    if missing:
        raise click.UsageError(f"Missing required environment variable(s): {', '.join(missing)}")

    try:
        this_repo = get_repo(repo, token=config["github_token"])
        context = get_pull_context(this_repo, pr_number)
        summary = run_review(context, config, repo_obj=this_repo)
    except DependencyError as e:
        raise click.ClickException(str(e))

    print_summary(summary)
