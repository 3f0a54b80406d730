#!/usr/bin/env python3
"""
CSS Complexity Weights
Main entry point: scores the selectors and at-rules of CSS files and writes JSON reports.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from core.constants import DEFAULT_OUTPUT_FILE, LOG_FILE_NAME
from core.css_reader import CSSReader
from core.css_weights import build_report
from core.errors import CSSWeightsError
from reporting.outputter import Outputter
from reporting.report_builder import ReportBuilder
from utils.file_utils import expand_css_paths
from utils.logger import Logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='css-weights',
        description='Score CSS selectors and at-rules by structural complexity.')
    parser.add_argument('paths', nargs='+', help='CSS files or directories containing CSS files')
    parser.add_argument('-o', '--output', default=None,
                        help=f"output name; a name not ending in {DEFAULT_OUTPUT_FILE} is used as a prefix")
    parser.add_argument('--html', default=None, help='also write an HTML report to this path')
    parser.add_argument('--log-file', default=LOG_FILE_NAME, help='file that errors are appended to')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug output')
    return parser


def report_labels(paths: List[Path]) -> Dict[Path, str]:
    """
    A distinct report name per input, built from its path relative to the
    working directory: ``x/site.css`` -> ``x.site``.
    """
    cwd = Path.cwd().resolve()
    labels = {}
    used = set()
    for path in paths:
        relative = Path(os.path.relpath(Path(path).resolve(), cwd)).with_suffix('')
        label = '.'.join(part for part in relative.parts if part not in ('..', '.')) or 'stylesheet'
        candidate, counter = label, 2
        while candidate in used:
            candidate = f"{label}-{counter}"
            counter += 1
        used.add(candidate)
        labels[path] = candidate
    return labels


def analyze_file(path: Path, builder: ReportBuilder, output: Optional[str], html: Optional[str]) -> dict:
    """Read, parse and score one file, then write its reports."""
    reader = CSSReader(path)
    reader.read_file()
    if reader.raw_css is None:
        raise CSSWeightsError(f"Could not read {path}")
    sheet = reader.parsed_css
    if sheet is None:
        raise CSSWeightsError(f"Could not parse {path}")

    report = build_report(sheet)
    builder.collect_metrics(report['weightedRules'], report['atRules'], report['selectors'], source=str(path))
    builder.generate_json_report(output)
    if html:
        builder.generate_html_report(html)
    return builder.data


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    log = Logger(args.log_file)
    log.start_timer()
    log.to_console(Logger.style_info('CSS Complexity Weights', timestamp=True))

    builder = ReportBuilder(Outputter(log=log))
    paths = expand_css_paths(args.paths)
    labels = report_labels(paths)
    failures = 0
    for path in paths:
        # Several inputs get one report each, named after the input's path
        label = labels[path]
        output = args.output if len(paths) == 1 else f"{args.output + '.' if args.output else ''}{label}"
        html = args.html
        if html and len(paths) > 1:
            html = Path(args.html).parent / f"{label}.{Path(args.html).name}"
        try:
            data = analyze_file(path, builder, output, html)
        except (CSSWeightsError, ValueError, OSError) as e:
            failures += 1
            logger.error(f"Error analyzing {path}: {str(e)}")
            log.error_to_file(e)
            continue
        summary = data['summary']
        log.to_console(f"{path}: {summary['totalRules']} rules, "
                       f"max selector complexity {summary['maxSelectorComplexity']}")

    log.end_timer()
    log.to_console(f"Analyzed {len(paths) - failures}/{len(paths)} files in {log.elapsed_time:.0f}ms")
    log.close()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
