from __future__ import annotations

import json
import logging
from urllib.parse import quote

import requests

from open_prs.models import CheckSuite, MalformedResponseError, PullRequest, SearchResults, truncate_for_log

logger = logging.getLogger(__name__)

USER_AGENT = "github-open-prs/v2"
V3_JSON = "application/vnd.github.v3+json"
# Check suites were still a preview API when this plugin was written.
CHECKS_PREVIEW_JSON = "application/vnd.github.antiope-preview+json"


def encode_query(query: str) -> str:
    """Percent-encode a search query, leaving ':', '/' and '=' readable."""
    return quote(query, safe=":/=")


class GitHubClient:
    def __init__(self, api_host_url: str, user_name: str, api_token: str) -> None:
        self.api_host_url = api_host_url.rstrip("/")
        self.session = requests.Session()
        self.session.auth = (user_name, api_token)
        self.session.headers["User-Agent"] = USER_AGENT

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get(self, url: str, accept: str) -> str:
        """GET *url* with basic auth and return the response body."""
        logger.debug("GET %s (Accept: %s)", url, accept)
        response = self.session.get(url, headers={"Accept": accept}, allow_redirects=True)
        logger.debug("  -> %d %s", response.status_code, truncate_for_log(response.text))
        response.raise_for_status()
        return response.text

    def get_json(self, url: str, accept: str) -> object:
        body = self.get(url, accept)
        try:
            return json.loads(body)
        except ValueError as e:
            raise MalformedResponseError(f"Malformed response from {url}: {e}") from e

    # --- Search ---

    def search_issues(self, query: str) -> SearchResults:
        url = f"{self.api_host_url}/search/issues?q={encode_query(query)}"
        results = SearchResults.from_api(self.get_json(url, V3_JSON))
        logger.debug("search_issues(%r) returned %d item(s)", query, len(results.items))
        return results

    # --- Pull Requests ---

    def get_pull_request(self, url: str) -> PullRequest:
        return PullRequest.from_api(self.get_json(url, V3_JSON))

    # --- Checks ---

    def get_check_suites(self, repo_api_url: str, sha: str) -> list[CheckSuite]:
        """Fetch the check suites of one commit."""
        url = f"{repo_api_url}/commits/{sha}/check-suites"
        suites = CheckSuite.list_from_api(self.get_json(url, CHECKS_PREVIEW_JSON))
        logger.debug("get_check_suites(%s) returned %d suite(s)", sha, len(suites))
        return suites
