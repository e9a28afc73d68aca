"""Tests for the CLI entry point."""

from unittest.mock import MagicMock

from click.testing import CliRunner

from prcritic_core.errors import DependencyError
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
from prcritic_server.cli import main
from prcritic_server.commands.review import _STATUS_STYLE


def _make_config(webhook_secret="s", github_token="tok", model="gemini", gemini_key="key"):
    return {
        "webhook_secret": webhook_secret,
        "github_token": github_token,
        "model": model,
        "gemini_api_key": gemini_key,
        "anthropic_api_key": None,
        "openai_api_key": None,
        "review_delay_seconds": 1.0,
        "code_extensions": [".py"],
        "exclude": [],
    }


def _patch_config(mocker, config=None):
    cfg = config or _make_config()
    mocker.patch("prcritic_core.config.load_config", return_value=cfg)
    return cfg


class TestServe:
    def test_missing_secrets_is_usage_error(self, mocker):
        _patch_config(mocker, _make_config(webhook_secret=None, gemini_key=None))
        create_app = mocker.patch("prcritic_server.commands.serve.create_app")

        result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code != 0
        assert "GITHUB_SECRET" in result.output
        assert "GEMINI_API_KEY" in result.output
        create_app.assert_not_called()

    def test_runs_app_with_host_and_port(self, mocker):
        cfg = _patch_config(mocker)
        create_app = mocker.patch("prcritic_server.commands.serve.create_app")

        result = CliRunner().invoke(main, ["serve", "--host", "0.0.0.0", "--port", "9000"])

        assert result.exit_code == 0, result.output
        create_app.assert_called_once_with(cfg)
        create_app.return_value.run.assert_called_once_with(host="0.0.0.0", port=9000, debug=False)


class TestReview:
    def _summary(self):
        return ReviewSummary(
            repo="acme/widgets",
            pr_number=3,
            head_sha="a" * 40,
            files_considered=2,
            outcomes=[
                FileOutcome(filename="src/app.py", status=LINE_COMMENTS, comments_posted=2),
                FileOutcome(filename="README.md", status=SKIPPED),
            ],
        )

    def test_runs_pipeline_and_prints_summary(self, mocker):
        _patch_config(mocker)
        repo = MagicMock()
        mocker.patch("prcritic_server.commands.review.get_repo", return_value=repo)
        ctx = PullRequestContext("acme", "widgets", 3, "feature/x", "a" * 40)
        mocker.patch("prcritic_server.commands.review.get_pull_context", return_value=ctx)
        run = mocker.patch("prcritic_server.commands.review.run_review", return_value=self._summary())

        result = CliRunner().invoke(main, ["review", "--repo", "acme/widgets", "--pr", "3"])

        assert result.exit_code == 0, result.output
        run.assert_called_once()
        assert run.call_args.args[0] is ctx
        assert run.call_args.kwargs["repo_obj"] is repo
        assert "src/app.py" in result.output
        assert "comment(s) posted" in result.output

    def test_does_not_require_webhook_secret(self, mocker):
        _patch_config(mocker, _make_config(webhook_secret=None))
        mocker.patch("prcritic_server.commands.review.get_repo")
        mocker.patch("prcritic_server.commands.review.get_pull_context")
        mocker.patch("prcritic_server.commands.review.run_review", return_value=self._summary())

        result = CliRunner().invoke(main, ["review", "--repo", "acme/widgets", "--pr", "3"])

        assert result.exit_code == 0, result.output

    def test_model_override_changes_required_key(self, mocker):
        _patch_config(mocker)

        result = CliRunner().invoke(main, ["review", "--repo", "acme/widgets", "--pr", "3", "--model", "openai"])

        assert result.exit_code != 0
        assert "OPENAI_API_KEY" in result.output

    def test_dependency_error_reported(self, mocker):
        _patch_config(mocker)
        mocker.patch(
            "prcritic_server.commands.review.get_repo",
            side_effect=DependencyError("Failed to fetch repository acme/widgets: 404 Not Found"),
        )

        result = CliRunner().invoke(main, ["review", "--repo", "acme/widgets", "--pr", "3"])

        assert result.exit_code != 0
        assert "404 Not Found" in result.output

    def test_requires_pr_number(self, mocker):
        _patch_config(mocker)
        result = CliRunner().invoke(main, ["review", "--repo", "acme/widgets"])
        assert result.exit_code != 0

    def test_every_outcome_status_has_a_style(self):
        assert set(_STATUS_STYLE) == {CLEAN, LINE_COMMENTS, GENERAL_COMMENT, SKIPPED, FAILED}
