"""HTML report generator.

Produces a single self-contained page: inline CSS, one expanded <details>
block per suite and one collapsed <details> block per test class.
Names are written as-is, without HTML escaping.
"""

from .formatting import format_seconds, group_by_class, status_badge
from .models import TestStatus, TestSuite

STYLE = (
    "body{font-family:Segoe UI,Arial;margin:20px} "
    "table{border-collapse:collapse;width:100%} "
    "th,td{border:1px solid #ddd;padding:6px} th{background:#f4f4f4}\n"
    ".passed{color:green}.failed{color:red}.error{color:#b00020}.skipped{color:orange}"
)


def generate_html(root: TestSuite) -> str:
    lines = [
        "<!doctype html>",
        '<html><head><meta charset="utf-8"><title>Test Report</title>',
        "<style>",
        STYLE,
        "</style></head><body>",
        f"<h1>Test Report: {root.name}</h1>",
        "<h2>Summary</h2>",
        f"<p>Tests: {root.tests}<br/>",
        f"{status_badge(TestStatus.PASSED)}: {root.passed}<br/>",
        f"{status_badge(TestStatus.FAILED)}: {root.failures}<br/>",
        f"{status_badge(TestStatus.ERROR)}: {root.errors}<br/>",
        f"{status_badge(TestStatus.SKIPPED)}: {root.skipped}<br/>",
        f"Total time: {format_seconds(root.time_seconds)}s</p>",
    ]

    for suite in root.child_suites:
        _append_suite(lines, suite, 2)

    lines.append("</body></html>")
    return "\n".join(lines) + "\n"


def _append_suite(lines: list[str], suite: TestSuite, level: int):
    indent = " " * (level * 4)

    lines.append(f"{indent}<details open>")
    lines.append(
        f"{indent}  <summary><strong>Suite:</strong> {suite.name} "
        f"(Tests: {suite.tests}, ❌ {suite.failures} failed, "
        f"⚠️ {suite.errors} errors, ➖ {suite.skipped} skipped, "
        f"Time: {format_seconds(suite.time_seconds)}s)</summary>"
    )

    for classname, cases in group_by_class(suite.test_cases):
        lines.append(f"{indent}  <details>")
        lines.append(f"{indent}    <summary><strong>Class:</strong> {classname}</summary>")
        lines.append(f"{indent}    <ul>")
        for case in cases:
            lines.append(
                f"{indent}      <li class='{case.status.value}'>{case.name} — "
                f"{status_badge(case.status)} ({format_seconds(case.time_seconds)}s)</li>"
            )
        lines.append(f"{indent}    </ul>")
        lines.append(f"{indent}  </details>")

    # Nested suites, whether or not the parser produced any
    for child in suite.child_suites:
        _append_suite(lines, child, level + 1)

    lines.append(f"{indent}</details>")
