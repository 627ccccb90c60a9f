import pytest

from junit_reporter import formatting, models


@pytest.mark.parametrize("seconds,expected", [
    (0.0, "0"),
    (1.5, "1.5"),
    (1.25, "1.25"),
    (0.123, "0.123"),
    (0.1234, "0.123"),
    (2.0001, "2"),
    (2.0006, "2.001"),
    (12.0, "12"),
    (100.0, "100"),
    (0.0004, "0"),
    (1234567.891, "1234567.891"),
])
def test_format_seconds(seconds, expected):
    assert formatting.format_seconds(seconds) == expected


def test_every_status_has_exactly_one_badge():
    assert set(formatting.STATUS_BADGES) == set(models.TestStatus)
    assert len(set(formatting.STATUS_BADGES.values())) == len(models.TestStatus)
    assert formatting.status_badge(models.TestStatus.PASSED) == "✔️ Passed"
    assert formatting.status_badge(models.TestStatus.FAILED) == "❌ Failed"
    assert formatting.status_badge(models.TestStatus.ERROR) == "⚠️ Error"
    assert formatting.status_badge(models.TestStatus.SKIPPED) == "➖ Skipped"


def test_group_by_class_sorts_classes_and_keeps_case_order():
    cases = [
        models.TestCase(name="z1", classname="Zeta", status=models.TestStatus.PASSED),
        models.TestCase(name="a2", classname="Alpha", status=models.TestStatus.FAILED),
        models.TestCase(name="n1", classname="", status=models.TestStatus.PASSED),
        models.TestCase(name="a1", classname="Alpha", status=models.TestStatus.PASSED),
        models.TestCase(name="z0", classname="Zeta", status=models.TestStatus.SKIPPED),
    ]

    groups = formatting.group_by_class(cases)

    assert [(classname, [c.name for c in group]) for classname, group in groups] == [
        ("", ["n1"]),
        ("Alpha", ["a2", "a1"]),
        ("Zeta", ["z1", "z0"]),
    ]


def test_group_by_class_empty():
    assert formatting.group_by_class(()) == []
