from junit_reporter import models
from junit_reporter.markdown_report import generate_markdown


def test_two_suite_report_full_output(parser, fixtures_dir):
    root = parser.parse_file(fixtures_dir / "two-suites.xml")

    expected = "\n".join([
        "# Test Report: All TestSuites",
        "",
        "## Summary",
        "",
        "- Tests: **4**",
        "- ✔️ Passed: **4**",
        "- ❌ Failed: **0**",
        "- ⚠️ Error: **0**",
        "- ➖ Skipped: **0**",
        "- Total time: **1.75s**",
        "",
        "## Suite: SuiteA",
        "",
        "- Tests: 2  ",
        "- ❌ Failed: 0  ",
        "- ⚠️ Error: 0  ",
        "- ➖ Skipped: 0  ",
        "- Time: 1.25s  ",
        "",
        "#### Class: pkg.Alpha",
        "",
        "| Test | Status | Time (s) |",
        "|---|---|---:|",
        "| test_fails | ❌ Failed | 0.5 |",
        "| test_default | ✔️ Passed | 0.75 |",
        "",
        "## Suite: SuiteB",
        "",
        "- Tests: 2  ",
        "- ❌ Failed: 0  ",
        "- ⚠️ Error: 0  ",
        "- ➖ Skipped: 0  ",
        "- Time: 0.5s  ",
        "",
        "#### Class: pkg.Beta",
        "",
        "| Test | Status | Time (s) |",
        "|---|---|---:|",
        "| test_fails | ❌ Failed | 0.25 |",
        "| test_default | ✔️ Passed | 0.25 |",
        "",
    ]) + "\n"

    markdown = generate_markdown(root)

    assert markdown == expected
    assert markdown.count("| ❌ Failed |") == 2
    assert markdown.count("| ✔️ Passed |") == 2


def test_classes_sorted_and_rows_in_document_order(parser, fixtures_dir):
    markdown = generate_markdown(parser.parse_file(fixtures_dir / "mixed.xml"))

    alpha = markdown.index("#### Class: core.Alpha")
    zeta = markdown.index("#### Class: core.Zeta")
    assert alpha < zeta

    rows = [
        markdown.index("| test_a2 | ❌ Failed | 0.2 |"),
        markdown.index("| test_a1 | ⚠️ Error | 1.5 |"),
        markdown.index("| test_a3 | ✔️ Passed | 0 |"),
        markdown.index("| test_z1 | ✔️ Passed | 0.1 |"),
        markdown.index("| test_z2 | ➖ Skipped | 0 |"),
    ]
    assert rows == sorted(rows)
    assert rows[2] < zeta < rows[3]


def test_suite_without_test_cases_has_no_class_section(parser, fixtures_dir):
    markdown = generate_markdown(parser.parse_file(fixtures_dir / "mixed.xml"))

    empty_section = markdown[markdown.index("## Suite: Empty"):]
    assert "- Tests: 0  " in empty_section
    assert "- Time: 0s  " in empty_section
    assert "Class:" not in empty_section
    assert "| Test |" not in empty_section


def test_passed_count_never_negative():
    root = models.TestSuite(name="Inconsistent", tests=2, failures=3, errors=1, skipped=1)

    markdown = generate_markdown(root)

    assert "- ✔️ Passed: **0**" in markdown
    assert "- ❌ Failed: **3**" in markdown


def test_single_suite_document_renders_summary_only(parser, fixtures_dir):
    markdown = generate_markdown(parser.parse_file(fixtures_dir / "single-suite.xml"))

    assert markdown.startswith("# Test Report: Calculator\n")
    assert "- Tests: **10**" in markdown
    assert "- ✔️ Passed: **6**" in markdown
    assert "- Total time: **3.142s**" in markdown
    assert "Suite:" not in markdown


def test_nested_child_suites_render_one_level_deeper():
    inner = models.TestSuite(
        name="Inner",
        tests=1,
        test_cases=(models.TestCase(name="deep", classname="k", status=models.TestStatus.ERROR),),
    )
    outer = models.TestSuite(name="Outer", tests=1, child_suites=(inner,))
    root = models.TestSuite(name="Root", tests=2, child_suites=(outer,))

    markdown = generate_markdown(root)

    assert "## Suite: Outer" in markdown
    assert "### Suite: Inner" in markdown
    assert "##### Class: k" in markdown
    assert "| deep | ⚠️ Error | 0 |" in markdown
    assert markdown.index("## Suite: Outer") < markdown.index("### Suite: Inner")


def test_names_are_embedded_verbatim():
    case = models.TestCase(name="a|b <x>", classname="C", status=models.TestStatus.PASSED)
    root = models.TestSuite(name="R", child_suites=(models.TestSuite(name="S*", test_cases=(case,)),))

    markdown = generate_markdown(root)

    assert "## Suite: S*" in markdown
    assert "| a|b <x> | ✔️ Passed | 0 |" in markdown
