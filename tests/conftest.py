"""Shared fixtures: a loaded config and GitHub response document builders."""

import pytest

from open_prs.config import Config


@pytest.fixture
def config():
    return Config(
        api_host_url="https://api.github.com",
        api_token="fake_token",
        search_days=7,
        user_name="octocat",
        teams=("acme/backend", "acme/infra"),
        updated_since="2024-03-08",
    )


def make_pr_doc(
    number=1,
    title="Fix the thing",
    repo="widgets",
    author="alice",
    labels=(),
    merged=False,
    mergeable=True,
    sha="abc123",
):
    return {
        "number": number,
        "title": title,
        "html_url": f"https://github.com/acme/{repo}/pull/{number}",
        "user": {"login": author},
        "labels": [{"name": name} for name in labels],
        "merged": merged,
        "mergeable": mergeable,
        "head": {
            "sha": sha,
            "repo": {"name": repo, "url": f"https://api.github.com/repos/acme/{repo}"},
        },
    }


def make_suite(status="completed", conclusion="success", runs=1):
    return {"status": status, "conclusion": conclusion, "latest_check_runs_count": runs}


@pytest.fixture
def pr_doc():
    return make_pr_doc


@pytest.fixture
def suite():
    return make_suite
