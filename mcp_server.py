#!/usr/bin/env python3
"""
MCP Server for junit-reporter.
Provides tools for rendering JUnit XML test reports and summarizing their results.
"""

import asyncio
import json
import logging

from fastmcp import FastMCP

import core
from junit_reporter.config import get_mcp_port

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# FastMCP server
mcp = FastMCP("junit-reporter")


@mcp.tool(
    name="render_junit_report",
    description="""Render a JUnit XML test report as Markdown or HTML.
        Args:
            source: Path or http(s) URL of the JUnit XML document
            format: "markdown" or "html" (default: configured DEFAULT_FORMAT, markdown)
            output_path: Write the report to this file instead of returning its text
    """
)
async def render_junit_report(
    source: str,
    format: str = None,
    output_path: str = None
) -> str:
    try:
        if output_path:
            result = core.write_report(source, output_path, format)
            return json.dumps(result, indent=2, default=str)
        _, text = core.build_report(source, format)
        return text
    except Exception as e:
        logger.error(f"Error in render_junit_report: {str(e)}")
        return json.dumps({"error": str(e)})


@mcp.tool(
    name="summarize_junit_report",
    description="""Summarize a JUnit XML test report.

    Returns total/passed/failed/error/skipped counts, pass rate (skipped tests excluded),
    per-suite counts and the failed tests.

    Args:
        source: Path or http(s) URL of the JUnit XML document
    """
)
async def summarize_junit_report(source: str) -> str:
    try:
        result = core.summarize_source(source)
        return json.dumps(result, indent=2, default=str)
    except Exception as e:
        logger.error(f"Error in summarize_junit_report: {str(e)}")
        return json.dumps({"error": str(e)})


async def main():
    port = get_mcp_port()
    logger.info(f"Starting junit-reporter MCP server on port {port}")
    await mcp.run_async(transport="sse", host="0.0.0.0", port=port)


if __name__ == "__main__":
    asyncio.run(main())
