"""JUnit XML parser - turns a test report document into a TestSuite tree."""

import math
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from .models import TestCase, TestStatus, TestSuite

ROOT_SUITE_NAME = "All TestSuites"
DEFAULT_SUITE_NAME = "Unnamed"
DEFAULT_TEST_NAME = "UnnamedTest"

# Raw `status` attribute (upper-cased) -> normalized status.
# Anything not listed here, including a missing attribute, counts as passed.
STATUS_MAP = {
    "PASS": TestStatus.PASSED,
    "FAIL": TestStatus.FAILED,
    "ERROR": TestStatus.ERROR,
    "SKIPPED": TestStatus.SKIPPED,
    "IGNORE": TestStatus.SKIPPED,
}
DEFAULT_STATUS = TestStatus.PASSED

# Counts are 32-bit in the JUnit producers; anything larger is treated as unparsable
INT_MAX = 2**31 - 1

# ASCII only: base-10 digits, no locale or Unicode digit forms
_INT_RE = re.compile(r'^\s*\+?\d+\s*$', re.ASCII)
_FLOAT_RE = re.compile(r'^\s*\+?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$', re.ASCII)


class JUnitStructureError(ValueError):
    """Raised when a document is not a JUnit test report."""


def normalize_status(raw: Optional[str]) -> TestStatus:
    """Map a raw status attribute onto one of the four normalized statuses."""
    if raw is None:
        return DEFAULT_STATUS
    return STATUS_MAP.get(raw.upper(), DEFAULT_STATUS)


def parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None or not _INT_RE.match(value):
        return default
    try:
        result = int(value)
    except ValueError:
        # More digits than int() accepts
        return default
    return result if result <= INT_MAX else default


def parse_float(value: Optional[str], default: float = 0.0) -> float:
    # Always '.' as decimal separator, independent of the host locale
    if value is None or not _FLOAT_RE.match(value):
        return default
    result = float(value)
    return result if math.isfinite(result) else default


def _local_name(element: ET.Element) -> str:
    """Lower-cased tag name without any XML namespace."""
    tag = element.tag
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.rsplit('}', 1)[-1].lower()


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child) == name]


class JUnitParser:
    """Parser for JUnit XML test reports."""

    def parse(self, document: Union[ET.ElementTree, ET.Element]) -> TestSuite:
        """
        Parse an already loaded JUnit document.

        Args:
            document: ElementTree or its root Element

        Returns:
            A synthetic root suite for `testsuites` documents, or the suite
            itself for single `testsuite` documents.

        Raises:
            JUnitStructureError: the document has no root element, or the
                root is neither `testsuites` nor `testsuite`.
        """
        root = document.getroot() if isinstance(document, ET.ElementTree) else document
        if root is None:
            raise JUnitStructureError("Empty XML document")

        root_name = _local_name(root)
        if root_name == "testsuites":
            return self._parse_collection(root)
        if root_name == "testsuite":
            return self._parse_suite(root)
        raise JUnitStructureError(f"Unexpected root element: {root.tag}")

    def parse_string(self, text: Union[str, bytes]) -> TestSuite:
        """Parse a JUnit document from XML text."""
        return self.parse(ET.fromstring(text))

    def parse_file(self, path: Union[str, Path]) -> TestSuite:
        """Parse a JUnit XML file."""
        return self.parse(ET.parse(path))

    def _parse_collection(self, element: ET.Element) -> TestSuite:
        suites = [self._parse_suite(ts) for ts in _children(element, "testsuite")]
        return TestSuite(
            name=ROOT_SUITE_NAME,
            tests=sum(s.tests for s in suites),
            failures=sum(s.failures for s in suites),
            errors=sum(s.errors for s in suites),
            skipped=sum(s.skipped for s in suites),
            time_seconds=sum(s.time_seconds for s in suites),
            child_suites=tuple(suites),
        )

    def _parse_suite(self, element: ET.Element) -> TestSuite:
        # Declared counts are trusted as-is; nested testsuite elements are not walked
        return TestSuite(
            name=_text_attr(element, "name", DEFAULT_SUITE_NAME),
            tests=parse_int(element.get("tests")),
            failures=parse_int(element.get("failures")),
            errors=parse_int(element.get("errors")),
            skipped=parse_int(element.get("skipped")),
            time_seconds=parse_float(element.get("time")),
            test_cases=tuple(self._parse_test_case(tc) for tc in _children(element, "testcase")),
        )

    def _parse_test_case(self, element: ET.Element) -> TestCase:
        return TestCase(
            name=_text_attr(element, "name", DEFAULT_TEST_NAME),
            classname=_text_attr(element, "classname", ""),
            status=normalize_status(element.get("status")),
            time_seconds=parse_float(element.get("time")),
        )


def _text_attr(element: ET.Element, attr: str, default: str) -> str:
    value = element.get(attr)
    return value if value is not None else default
