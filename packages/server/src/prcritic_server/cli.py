"""CLI entry point for prcritic.

Commands:
  serve    - run the webhook server
  review   - review a single pull request without waiting for a webhook
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from prcritic_server.commands.review import review_cmd
from prcritic_server.commands.serve import serve_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


@click.group()
@click.version_option(
    package_name="prcritic",
    prog_name="prcritic",
)
@click.option(
    "--config",
    "config_path",
    default=".prcritic.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRCRITIC_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """AI code review bot for GitHub pull requests."""
    from prcritic_core.config import load_config

    ctx.ensure_object(dict)
    _configure_logging(verbose)
    ctx.obj["config"] = load_config(config_path)


main.add_command(serve_cmd)
main.add_command(review_cmd)
