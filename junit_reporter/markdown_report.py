"""Markdown report generator."""

from .formatting import format_seconds, group_by_class, status_badge
from .models import TestStatus, TestSuite


def generate_markdown(root: TestSuite) -> str:
    lines = [
        f"# Test Report: {root.name}",
        "",
        "## Summary",
        "",
        f"- Tests: **{root.tests}**",
        f"- {status_badge(TestStatus.PASSED)}: **{root.passed}**",
        f"- {status_badge(TestStatus.FAILED)}: **{root.failures}**",
        f"- {status_badge(TestStatus.ERROR)}: **{root.errors}**",
        f"- {status_badge(TestStatus.SKIPPED)}: **{root.skipped}**",
        f"- Total time: **{format_seconds(root.time_seconds)}s**",
        "",
    ]

    for suite in root.child_suites:
        _append_suite(lines, suite, 2)

    return "\n".join(lines) + "\n"


def _append_suite(lines: list[str], suite: TestSuite, level: int):
    # Two trailing spaces force Markdown line breaks
    lines.extend([
        f"{'#' * level} Suite: {suite.name}",
        "",
        f"- Tests: {suite.tests}  ",
        f"- {status_badge(TestStatus.FAILED)}: {suite.failures}  ",
        f"- {status_badge(TestStatus.ERROR)}: {suite.errors}  ",
        f"- {status_badge(TestStatus.SKIPPED)}: {suite.skipped}  ",
        f"- Time: {format_seconds(suite.time_seconds)}s  ",
        "",
    ])

    for classname, cases in group_by_class(suite.test_cases):
        lines.extend([
            f"{'#' * (level + 2)} Class: {classname}",
            "",
            "| Test | Status | Time (s) |",
            "|---|---|---:|",
        ])
        for case in cases:
            lines.append(f"| {case.name} | {status_badge(case.status)} | {format_seconds(case.time_seconds)} |")
        lines.append("")

    for child in suite.child_suites:
        _append_suite(lines, child, level + 1)
