from __future__ import annotations

import io

from rich.console import Console

from getver.models import Failed, Found, Report
from getver.reporter import render_report


def _render(report: Report) -> list[str]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    render_report(report, console)
    return buffer.getvalue().splitlines()


def test_render_found_lines() -> None:
    report = Report(found=(Found("left-pad", "1.3.0"), Found("serde", "1.0.210")))
    assert _render(report) == ["left-pad: 1.3.0", "serde: 1.0.210"]


def test_render_combines_not_found_names() -> None:
    assert _render(Report(not_found=("aaa",))) == ["the package 'aaa' doesn't exist"]
    assert _render(Report(not_found=("aaa", "bbb"))) == [
        "the packages 'aaa', 'bbb' don't exist"
    ]


def test_render_full_report_order() -> None:
    report = Report(
        found=(Found("serde", "1.0.210"),),
        not_found=("nope",),
        failed=(Failed("left-pad", "request for 'left-pad' timed out: [read]"),),
    )
    assert _render(report) == [
        "serde: 1.0.210",
        "the package 'nope' doesn't exist",
        "error: left-pad: request for 'left-pad' timed out: [read]",
    ]


def test_render_empty_report() -> None:
    assert _render(Report()) == []


def test_render_uses_registry_spelling() -> None:
    report = Report(found=(Found("Left_Pad", "1.3.0", registry_name="left-pad"),))
    assert _render(report) == ["left-pad: 1.3.0"]
