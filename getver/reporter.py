"""Render a finished report to the terminal with rich."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .models import Report


def _not_found_line(names: tuple[str, ...]) -> Text:
    quoted = ", ".join(f"'{name}'" for name in names)
    if len(names) == 1:
        return Text(f"the package {quoted} doesn't exist", style="red")
    return Text(f"the packages {quoted} don't exist", style="red")


def render_report(report: Report, console: Console) -> None:
    """Print found versions, then absent packages, then failures."""

    for found in report.found:
        console.print(
            Text.assemble((found.display_name, "blue"), ": ", (found.max_version, "yellow")),
            soft_wrap=True,
        )
    if report.not_found:
        console.print(_not_found_line(report.not_found), soft_wrap=True)
    for failed in report.failed:
        console.print(
            Text.assemble(("error", "bold red"), f": {failed.name}: ", (failed.cause, "red")),
            soft_wrap=True,
        )


__all__ = ["render_report"]
