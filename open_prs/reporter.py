from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from open_prs.report import Report, render_error
from open_prs.status import check_suites_symbol, format_line, pull_request_symbols

if TYPE_CHECKING:
    from open_prs.config import Config
    from open_prs.github import GitHubClient
    from open_prs.models import PullRequest

logger = logging.getLogger(__name__)

QUERY_FILTERS = "is:open is:pr sort:updated-desc"


def subject_expressions(config: Config) -> list[str]:
    """One ``involves:`` clause for the user, then one ``team:`` clause per team."""
    return [f"involves:{config.user_name}", *(f"team:{team}" for team in config.teams)]


def build_query(updated_since: str, expression: str) -> str:
    return f"{QUERY_FILTERS} updated:>={updated_since} {expression}"


class Reporter:
    """Runs one search pass and turns it into the status-bar report body."""

    def __init__(self, config: Config, github: GitHubClient) -> None:
        self.config = config
        self.github = github

    def run(self) -> list[str]:
        """Collect and render the report, or the error block if anything fails.

        A failure anywhere discards every line gathered so far.
        """
        try:
            report = self.collect()
        except Exception as e:
            logger.debug("Report collection failed", exc_info=True)
            return render_error(e)
        return report.render()

    def collect(self) -> Report:
        report = Report()
        for expression in subject_expressions(self.config):
            query = build_query(self.config.updated_since, expression)
            results = self.github.search_issues(query)
            for hit in results.items:
                pr = self.github.get_pull_request(hit.pull_request_url)
                report.add(self.describe(pr))
        logger.debug("Collected %d distinct PR line(s)", len(report))
        return report

    def describe(self, pr: PullRequest) -> str:
        suites = self.github.get_check_suites(pr.head_repo_url, pr.head_sha)
        line = format_line(pr, pull_request_symbols(pr, check_suites_symbol(suites)))
        logger.debug("PR %s#%d -> %s", pr.repo_name, pr.number, line)
        return line
