from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class MalformedResponseError(ValueError):
    """A GitHub response body did not have the shape we consume."""


def truncate_for_log(text: str, head: int = 300, tail: int = 200) -> str:
    """Return text trimmed to head+tail chars for log readability."""
    if len(text) <= head + tail:
        return text
    return f"{text[:head]}\n... [truncated] ...\n{text[-tail:]}"


def _field(doc: Any, key: str, kind: type | tuple[type, ...], where: str) -> Any:
    """Return doc[key], raising MalformedResponseError if absent or of the wrong type."""
    if not isinstance(doc, dict):
        raise MalformedResponseError(f"Malformed response: {where} is not an object")
    if key not in doc:
        raise MalformedResponseError(f"Malformed response: missing '{key}' in {where}")
    value = doc[key]
    kinds = kind if isinstance(kind, tuple) else (kind,)
    # bool is an int subclass; a number field must not accept it.
    if not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds):
        raise MalformedResponseError(f"Malformed response: '{key}' in {where} has unexpected type")
    return value


@dataclass(frozen=True)
class SearchHit:
    pull_request_url: str


@dataclass
class SearchResults:
    items: list[SearchHit] = field(default_factory=list)

    @classmethod
    def from_api(cls, doc: Any) -> SearchResults:
        items = _field(doc, "items", list, "search results")
        hits = []
        for i, item in enumerate(items):
            where = f"search item {i}"
            pr = _field(item, "pull_request", dict, where)
            hits.append(SearchHit(pull_request_url=_field(pr, "url", str, f"{where}.pull_request")))
        return cls(items=hits)


@dataclass
class PullRequest:
    repo_name: str
    number: int
    title: str
    author: str
    html_url: str
    labels: list[str]
    merged: bool
    mergeable: bool | None
    head_repo_url: str
    head_sha: str

    @classmethod
    def from_api(cls, doc: Any) -> PullRequest:
        head = _field(doc, "head", dict, "pull request")
        head_repo = _field(head, "repo", dict, "pull request head")
        user = _field(doc, "user", dict, "pull request")
        labels = _field(doc, "labels", list, "pull request")
        return cls(
            repo_name=_field(head_repo, "name", str, "pull request head.repo"),
            number=_field(doc, "number", int, "pull request"),
            title=_field(doc, "title", str, "pull request"),
            author=_field(user, "login", str, "pull request user"),
            html_url=_field(doc, "html_url", str, "pull request"),
            labels=[_field(label, "name", str, "pull request label") for label in labels],
            merged=_field(doc, "merged", bool, "pull request"),
            # null while GitHub is still computing mergeability.
            mergeable=_field(doc, "mergeable", (bool, type(None)), "pull request"),
            head_repo_url=_field(head_repo, "url", str, "pull request head.repo"),
            head_sha=_field(head, "sha", str, "pull request head"),
        )


@dataclass(frozen=True)
class CheckSuite:
    status: str
    conclusion: str | None
    check_runs_count: int

    @classmethod
    def list_from_api(cls, doc: Any) -> list[CheckSuite]:
        suites = _field(doc, "check_suites", list, "check suites")
        result = []
        for i, item in enumerate(suites):
            where = f"check suite {i}"
            conclusion = item.get("conclusion") if isinstance(item, dict) else None
            if conclusion is not None and not isinstance(conclusion, str):
                raise MalformedResponseError(f"Malformed response: 'conclusion' in {where} has unexpected type")
            result.append(cls(
                status=_field(item, "status", str, where),
                conclusion=conclusion,
                check_runs_count=_field(item, "latest_check_runs_count", int, where),
            ))
        return result
