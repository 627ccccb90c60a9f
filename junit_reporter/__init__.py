"""Convert JUnit XML test reports into Markdown or HTML summaries."""

from .junit_parser import JUnitParser, JUnitStructureError
from .report import ReportFormat, generate_report

__all__ = ["JUnitParser", "JUnitStructureError", "ReportFormat", "generate_report"]
