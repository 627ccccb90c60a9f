#!/usr/bin/env python3
"""
Core operations shared between MCP server and CLI.
Loads JUnit documents, renders reports and builds summary statistics.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

import requests

from junit_reporter.config import get_default_format, get_http_timeout
from junit_reporter.junit_parser import JUnitParser
from junit_reporter.models import TestStatus, TestSuite
from junit_reporter.report import ReportFormat, generate_report

logger = logging.getLogger(__name__)

# Global HTTP session (singleton)
_session = None


def get_session() -> requests.Session:
    """Get or create the shared requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({
            "User-Agent": "junit-reporter/0.1.0",
            "Accept": "application/xml, text/xml, */*"
        })
    return _session


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_document(source: Union[str, Path], timeout: Optional[int] = None) -> ET.ElementTree:
    """
    Load a JUnit XML document from a local path or an http(s) URL.

    Raises:
        FileNotFoundError: local input does not exist
        requests.RequestException: download failed
        xml.etree.ElementTree.ParseError: input is not well-formed XML
    """
    source = str(source)
    if is_url(source):
        logger.info(f"Fetching report from {source}")
        response = get_session().get(source, timeout=timeout or get_http_timeout())
        response.raise_for_status()
        return ET.ElementTree(ET.fromstring(response.content))

    path = Path(source).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {source}")
    logger.debug(f"Reading report from {path}")
    return ET.parse(path)


def resolve_format(fmt: Union[ReportFormat, str, None]) -> ReportFormat:
    """Resolve a format selector, falling back to the configured default."""
    if isinstance(fmt, ReportFormat):
        return fmt
    return ReportFormat.parse(fmt or get_default_format())


def build_report(source: Union[str, Path], fmt: Union[ReportFormat, str, None] = None) -> tuple[TestSuite, str]:
    """Parse a JUnit document and render it.

    Returns:
        (parsed root suite, rendered report text)
    """
    report_format = resolve_format(fmt)
    root = JUnitParser().parse(load_document(source))
    logger.debug(f"Parsed {root.name}: {root.tests} tests in {len(root.child_suites)} child suites")
    return root, generate_report(root, report_format)


def write_report(source: Union[str, Path], output_path: Union[str, Path],
                 fmt: Union[ReportFormat, str, None] = None) -> dict:
    """
    Render a JUnit document and write the report to disk.

    Args:
        source: Input path or URL
        output_path: Destination file, written verbatim as UTF-8
        fmt: "markdown" or "html" (uses configured default if not specified)

    Returns:
        dict with output path, format and summary counts
    """
    report_format = resolve_format(fmt)
    root, text = build_report(source, report_format)

    output = Path(output_path)
    output.write_text(text, encoding="utf-8")
    logger.info(f"Wrote {report_format.value} report for {root.name} to {output}")

    return {
        "output_path": str(output),
        "format": report_format.value,
        "summary": summarize(root),
    }


def _failed_tests(suite: TestSuite) -> list[dict]:
    failed = [
        {"classname": tc.classname, "name": tc.name, "status": tc.status.value}
        for tc in suite.test_cases
        if tc.status in (TestStatus.FAILED, TestStatus.ERROR)
    ]
    for child in suite.child_suites:
        failed.extend(_failed_tests(child))
    return failed


def summarize(root: TestSuite) -> dict:
    """
    Summary statistics for a parsed report.

    Pass rate excludes skipped tests, 0.0 when nothing executed.
    """
    executed = root.tests - root.skipped
    pass_rate = (root.passed / executed) * 100 if executed > 0 else 0.0

    return {
        "name": root.name,
        "tests": root.tests,
        "passed": root.passed,
        "failed": root.failures,
        "errors": root.errors,
        "skipped": root.skipped,
        "time_seconds": root.time_seconds,
        "pass_rate": pass_rate,
        "suites": [
            {
                "name": s.name,
                "tests": s.tests,
                "passed": s.passed,
                "failed": s.failures,
                "errors": s.errors,
                "skipped": s.skipped,
                "time_seconds": s.time_seconds,
            }
            for s in root.child_suites
        ],
        "failed_tests": _failed_tests(root),
    }


def summarize_source(source: Union[str, Path]) -> dict:
    """Load, parse and summarize a JUnit document."""
    return summarize(JUnitParser().parse(load_document(source)))
