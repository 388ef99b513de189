from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from open_prs.models import CheckSuite, PullRequest

EMOJI_INCOMPLETE = "⏳"  # hourglass with flowing sand
EMOJI_ACTION_REQUIRED = "⚠️"  # warning
EMOJI_CANCELLED = "❌"  # cross mark
EMOJI_TIMED_OUT = "❌"
EMOJI_FAILED = "❌"
EMOJI_NEUTRAL = "◾️"  # black medium small square
EMOJI_SUCCESS = "✅"  # check mark
EMOJI_WIP = "🚧"  # construction sign
EMOJI_ARROW = ":arrow_forward:"  # expanded to an emoji by the status-bar host
EMOJI_MERGED = "☯️"  # yin yang
EMOJI_NO_MERGE = "⛔️"  # no entry

# Lowercase check conclusions, see
# https://docs.github.com/en/rest/checks/suites
CONCLUSION_SYMBOLS = {
    "action_required": EMOJI_ACTION_REQUIRED,
    "cancelled": EMOJI_CANCELLED,
    "failure": EMOJI_FAILED,
    "neutral": EMOJI_NEUTRAL,
    "success": EMOJI_SUCCESS,
    "timed_out": EMOJI_TIMED_OUT,
}


def check_suites_symbol(suites: list[CheckSuite]) -> str:
    """Return the CI symbol for a commit's check suites.

    Suites without any runs are ignored. Each remaining suite replaces the
    symbol of the one before it, so the last suite listed decides.
    """
    result = ""
    for suite in suites:
        if suite.check_runs_count <= 0:
            continue
        if suite.status.lower() == "completed":
            result = CONCLUSION_SYMBOLS.get((suite.conclusion or "").lower(), EMOJI_ARROW)
        else:
            result = EMOJI_INCOMPLETE
    return result


def is_wip(pr: PullRequest) -> bool:
    return "WIP" in pr.labels or pr.title.startswith("WIP")


def merge_symbol(pr: PullRequest) -> str:
    if pr.merged:
        return EMOJI_MERGED
    # GitHub reports null while it is still computing mergeability.
    if not pr.mergeable:
        return EMOJI_NO_MERGE
    return ""


def pull_request_symbols(pr: PullRequest, check_symbol: str) -> str:
    return (EMOJI_WIP if is_wip(pr) else "") + merge_symbol(pr) + check_symbol


def format_line(pr: PullRequest, symbols: str) -> str:
    return f"{pr.repo_name} {symbols} #{pr.number} {pr.title} ({pr.author}) | href={pr.html_url}"
