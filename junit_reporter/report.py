"""Report format selection and dispatch."""

from enum import Enum
from typing import Optional, Union

from .html_report import generate_html
from .markdown_report import generate_markdown
from .models import TestSuite


class ReportFormat(Enum):
    """Supported output formats."""
    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def parse(cls, value: Optional[str], default: Optional["ReportFormat"] = None) -> "ReportFormat":
        """Case-insensitive lookup; None or empty selects the default (Markdown unless given)."""
        if not value:
            return default or cls.MARKDOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unsupported report format: {value!r} (expected one of: {choices})") from None


_GENERATORS = {
    ReportFormat.MARKDOWN: generate_markdown,
    ReportFormat.HTML: generate_html,
}


def generate_report(root: TestSuite, fmt: Union[ReportFormat, str, None] = None) -> str:
    """Render a parsed TestSuite tree in the requested format."""
    if not isinstance(fmt, ReportFormat):
        fmt = ReportFormat.parse(fmt)
    return _GENERATORS[fmt](root)
