"""
Data models for parsed JUnit test reports.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TestStatus(Enum):
    """Normalized outcome of a test case."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TestCase:
    """Represents a single test case result."""
    name: str
    classname: str
    status: TestStatus
    time_seconds: float = 0.0
    # Not populated by the parser yet
    message: Optional[str] = None
    details: Optional[str] = None


@dataclass(frozen=True)
class TestSuite:
    """Represents a test suite, or the synthetic root aggregating several suites."""
    name: str
    tests: int = 0
    failures: int = 0
    errors: int = 0
    skipped: int = 0
    time_seconds: float = 0.0
    test_cases: tuple[TestCase, ...] = field(default_factory=tuple)
    child_suites: tuple["TestSuite", ...] = field(default_factory=tuple)

    @property
    def passed(self) -> int:
        # Declared counts may be inconsistent, never report a negative number
        return max(0, self.tests - self.failures - self.errors - self.skipped)
