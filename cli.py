#!/usr/bin/env python3
"""CLI for JUnit Reporter."""

import argparse
import json
import logging
import sys
import xml.etree.ElementTree as ET

import requests

import core
from junit_reporter.junit_parser import JUnitStructureError
from junit_reporter.report import ReportFormat

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INPUT_NOT_FOUND = 3

# Input, parse and output failures reported as "Error: ..." with exit code 1
REPORT_ERRORS = (JUnitStructureError, ET.ParseError, requests.RequestException, ValueError, OSError)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )


def cmd_render(args):
    """Render a JUnit report to Markdown or HTML."""
    try:
        core.write_report(args.input, args.output, args.format)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INPUT_NOT_FOUND
    except REPORT_ERRORS as e:
        logger.debug("Render failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"Report written to {args.output}")
    return EXIT_OK


def cmd_summary(args):
    """Print summary counts for a JUnit report."""
    try:
        summary = core.summarize_source(args.input)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INPUT_NOT_FOUND
    except REPORT_ERRORS as e:
        logger.debug("Summary failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.format == 'json':
        print(json.dumps(summary, indent=2, default=str))
    else:
        _print_summary(summary)
    return EXIT_OK


def _print_summary(summary: dict):
    """Print human-readable summary."""
    print(f"\n{'='*60}")
    print(f"Report: {summary['name']}")
    print(f"\nTest Results:")
    print(f"  Total:   {summary['tests']}")
    print(f"  Passed:  {summary['passed']}")
    print(f"  Failed:  {summary['failed']}")
    print(f"  Errors:  {summary['errors']}")
    print(f"  Skipped: {summary['skipped']}")
    print(f"  Pass Rate: {summary['pass_rate']:.1f}%")
    print(f"  Time: {summary['time_seconds']:.3f}s")

    suites = summary.get("suites", [])
    if suites:
        max_name_len = max(len(s['name']) for s in suites)
        print(f"\nSuites ({len(suites)}):")
        print(f"  {'Suite':<{max_name_len}}  {'Pass':>6}  {'Fail':>6}  {'Error':>6}  {'Skip':>6}  {'Total':>6}")
        for s in suites:
            print(f"  {s['name']:<{max_name_len}}  {s['passed']:>6}  {s['failed']:>6}  "
                  f"{s['errors']:>6}  {s['skipped']:>6}  {s['tests']:>6}")

    failed_tests = summary.get("failed_tests", [])
    if failed_tests:
        print(f"\nFailed Tests ({len(failed_tests)}):")
        for t in failed_tests[:10]:
            test_id = f"{t['classname']}::{t['name']}" if t['classname'] else t['name']
            print(f"  - {test_id[:70]} ({t['status']})")
        if len(failed_tests) > 10:
            print(f"  ... and {len(failed_tests) - 10} more")

    print(f"{'='*60}\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Convert JUnit XML test reports to Markdown or HTML')
    parser.add_argument('-v', '--verbose', action='store_true')

    sub = parser.add_subparsers(dest='command')

    # render
    p = sub.add_parser('render', help='Write a Markdown or HTML report')
    p.add_argument('input', help='JUnit XML file path or http(s) URL')
    p.add_argument('output', help='Report file to write')
    p.add_argument('--format', '-f', type=str.lower,
                   choices=[f.value for f in ReportFormat], default=None,
                   help='Report format (default: DEFAULT_FORMAT setting, markdown)')

    # summary
    p = sub.add_parser('summary', help='Print test counts for a JUnit report')
    p.add_argument('input', help='JUnit XML file path or http(s) URL')
    p.add_argument('--format', '-f', choices=['text', 'json'], default='text')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    cmds = {
        'render': cmd_render,
        'summary': cmd_summary,
    }
    return cmds[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
