from __future__ import annotations

from pathlib import Path

SEPARATOR = "---"
ICON = ":octopus:"


def plugin_name(program: str) -> str:
    """Name the status-bar host knows this plugin by: the file name minus ``.py``."""
    name = Path(program).name
    return name[: -len(".py")] if name.endswith(".py") else name


def refresh_footer(name: str) -> list[str]:
    return [SEPARATOR, f"Refresh | href=bitbar://refreshPlugin?name={name}"]


def render_error(error: object) -> list[str]:
    # The host treats every newline as a new menu row.
    message = " ".join(str(error).split())
    return [f"{ICON} ", SEPARATOR, f">> Error: {message} | color=red font=Arial-Bold"]


class Report:
    """De-duplicated, sorted collection of report lines."""

    def __init__(self) -> None:
        self._lines: set[str] = set()

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, line: str) -> None:
        self._lines.add(line)

    @property
    def lines(self) -> list[str]:
        return sorted(self._lines)

    def render(self) -> list[str]:
        if not self._lines:
            return [f"{ICON} :white_check_mark:", SEPARATOR, "No PRs :smile:"]
        return [f"{ICON} {len(self._lines)} PRs!", SEPARATOR, *self.lines]
