"""Helpers shared by the Markdown and HTML report generators."""

from itertools import groupby

from .models import TestCase, TestStatus

STATUS_BADGES = {
    TestStatus.PASSED: "✔️ Passed",
    TestStatus.FAILED: "❌ Failed",
    TestStatus.ERROR: "⚠️ Error",
    TestStatus.SKIPPED: "➖ Skipped",
}


def status_badge(status: TestStatus) -> str:
    return STATUS_BADGES[status]


def format_seconds(seconds: float) -> str:
    """Round to at most 3 fractional digits, dropping trailing zeros (1.500 -> 1.5)."""
    text = f"{seconds:.3f}".rstrip('0').rstrip('.')
    return "0" if text in ("", "-0") else text


def group_by_class(test_cases) -> list[tuple[str, list[TestCase]]]:
    """
    Group test cases by class name.

    Groups are sorted by class name; cases keep their document order
    within a group (sorted() is stable).
    """
    ordered = sorted(test_cases, key=lambda tc: tc.classname)
    return [(classname, list(cases)) for classname, cases in groupby(ordered, key=lambda tc: tc.classname)]
