"""serve command - run the webhook server."""

from __future__ import annotations

import click

from prcritic_core.config import validate_config
from prcritic_server.app import create_app


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on.")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode.")
@click.pass_context
def serve_cmd(ctx, host: str, port: int, debug: bool):
    """Run the webhook server.

    \b
    Required environment variables:
      GITHUB_SECRET        Webhook shared secret
      GITHUB_TOKEN         GitHub token used to read files and post comments
      GEMINI_API_KEY       Required when model is gemini (the default)
      ANTHROPIC_API_KEY    Required when model is anthropic
      OPENAI_API_KEY       Required when model is openai
    """
    config = ctx.obj["config"]

    missing = validate_config(config)
    if missing:
        raise click.UsageError(f"Missing required environment variable(s): {', '.join(missing)}")

    create_app(config).run(host=host, port=port, debug=debug)
