from __future__ import annotations

import logging
import sys

import click

from open_prs.config import ConfigError, load_config
from open_prs.github import GitHubClient
from open_prs.report import plugin_name, refresh_footer, render_error
from open_prs.reporter import Reporter

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--verbose", "-v", is_flag=True,
    help="Log every request URL and response body to stderr.",
)
def main(verbose: bool) -> None:
    """List open GitHub PRs that involve you or one of your teams.

    Output follows the BitBar/SwiftBar/xbar plugin protocol. Errors are
    rendered into the menu and the exit status is always 0.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(level=log_level, format=log_format, stream=sys.stderr)

    try:
        config = load_config()
    except ConfigError as e:
        logger.debug("Configuration rejected", exc_info=True)
        lines = render_error(e)
    else:
        with GitHubClient(config.api_host_url, config.user_name, config.api_token) as github:
            lines = Reporter(config, github).run()

    for line in lines + refresh_footer(plugin_name(sys.argv[0])):
        click.echo(line)
