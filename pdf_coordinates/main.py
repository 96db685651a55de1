#!/usr/bin/env python3
"""PDF Coordinates Extractor - CLI Entry Point

Finds keyword-matched text on the first page of a PDF and prints its position
scaled into a template coordinate space.

Usage:
    pdf-coordinates extract FILE.pdf --keywords keywords.json [--format json|array]
    pdf-coordinates scan FILE.pdf [--filter TEXT]
    pdf-coordinates keywords --create keywords.json

Example:
    pdf-coordinates keywords --create keywords.json
    pdf-coordinates extract form.pdf --keywords keywords.json --output coords.json
    pdf-coordinates extract form.pdf --keywords keywords.json --template-width 210 --template-height 297 --format array
    pdf-coordinates scan form.pdf --filter total
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import pdf_coordinates.config as config
from pdf_coordinates import __version__
from pdf_coordinates.errors import EmptyResultError, ExtractorError, InputError
from pdf_coordinates.formatter import format_results, write_output
from pdf_coordinates.keyword_loader import create_sample_keywords, load_keywords
from pdf_coordinates.matcher import build_coordinate_map, match_fragments
from pdf_coordinates.models import TemplateConfig
from pdf_coordinates.normalizer import CoordinateNormalizer
from pdf_coordinates.pdf_extractor import get_text_source
from pdf_coordinates.utils.logging_utils import (
    log_and_status,
    log_error,
    log_section_header,
    log_success,
    log_summary,
    log_warning,
)
from pdf_coordinates.utils.validators import count_usable_patterns, validate_template


def status(msg: str):
    """Print a status line to stderr so stdout carries only results."""
    print(msg, file=sys.stderr)


def setup_logging(log_file: Optional[str] = None, verbose: bool = False):
    """
    Setup logging with an optional console handler and log file.

    Args:
        log_file: Path to log file
        verbose: Also log debug output to stderr
    """
    level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.NullHandler()]

    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        handlers=handlers,
        force=True  # Force reconfiguration if already configured
    )


def add_template_arguments(parser: argparse.ArgumentParser):
    """Add the template transform options to a subcommand."""
    parser.add_argument(
        '--template-x',
        type=float,
        default=config.DEFAULT_TEMPLATE_X,
        help='X offset of the template origin (default: 0)'
    )
    parser.add_argument(
        '--template-y',
        type=float,
        default=config.DEFAULT_TEMPLATE_Y,
        help='Y offset of the template origin (default: 0)'
    )
    parser.add_argument(
        '--template-width',
        type=float,
        default=config.DEFAULT_TEMPLATE_WIDTH,
        help='Template width (default: 210, A4 in mm)'
    )
    parser.add_argument(
        '--template-height',
        type=float,
        default=config.DEFAULT_TEMPLATE_HEIGHT,
        help='Template height (default: scale Y like X)'
    )
    parser.add_argument(
        '--backend',
        choices=config.BACKENDS,
        default=config.DEFAULT_BACKEND,
        help=f'PDF backend (default: {config.DEFAULT_BACKEND})'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog='pdf-coordinates',
        description='Extract template coordinates of keyword-matched text from the first page of a PDF'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log debug output to stderr'
    )
    parser.add_argument(
        '--log-file',
        help='Also write the log to this file'
    )

    subparsers = parser.add_subparsers(dest='command')

    extract = subparsers.add_parser('extract', help='Extract coordinates of keyword matches')
    extract.add_argument('pdf_file', help='PDF file to read')
    extract.add_argument('--keywords', required=True, help='Keyword configuration file (JSON)')
    add_template_arguments(extract)
    extract.add_argument('--output', help='Also write the results to this file')
    extract.add_argument(
        '--format',
        choices=config.OUTPUT_FORMATS,
        default=config.DEFAULT_FORMAT,
        help=f'Output encoding (default: {config.DEFAULT_FORMAT})'
    )

    scan = subparsers.add_parser('scan', help='List every text fragment with its coordinates')
    scan.add_argument('pdf_file', help='PDF file to read')
    add_template_arguments(scan)
    scan.add_argument('--filter', help='Only show fragments containing this text (case-insensitive)')

    keywords = subparsers.add_parser('keywords', help='Manage keyword configuration files')
    group = keywords.add_mutually_exclusive_group(required=True)
    group.add_argument('--create', metavar='FILE', help='Write a sample keyword file')
    group.add_argument('--check', metavar='FILE', help='Load a keyword file and list its entries')

    return parser


def template_from_args(args: argparse.Namespace) -> TemplateConfig:
    """Build and validate the template transform from parsed options."""
    template = TemplateConfig(
        origin_x=args.template_x,
        origin_y=args.template_y,
        width=args.template_width,
        height=args.template_height,
    )
    validate_template(template)
    return template


def run_extract(args: argparse.Namespace) -> int:
    """Run the extract command. Raises ExtractorError on failure."""
    log_section_header(status, "PDF Coordinates Extractor")

    if not os.path.isfile(args.pdf_file):
        raise InputError(f"PDF file not found: {args.pdf_file}")

    template = template_from_args(args)

    patterns = load_keywords(args.keywords)
    if count_usable_patterns(patterns) == 0:
        log_warning(status, "Keyword file has no usable entries", details=args.keywords)

    source = get_text_source(args.backend)
    page_text = source.get_first_page_fragments(args.pdf_file)

    normalizer = CoordinateNormalizer.for_page(template, page_text)
    fragments = normalizer.normalize_all(page_text.fragments)
    logging.info(
        f"Scale: x={normalizer.scale_x:.4f} y={normalizer.scale_y:.4f} "
        f"(y axis origin: {normalizer.y_axis_origin})"
    )

    results = match_fragments(fragments, patterns)
    if not results:
        raise EmptyResultError(f"No keywords matched in {args.pdf_file}")

    coordinates = build_coordinate_map(results)
    if len(coordinates) < len(results):
        logging.debug(f"{len(results) - len(coordinates)} earlier match(es) replaced by later ones")

    # Write the file first so a failed write leaves stdout empty
    if args.output:
        write_output(format_results(coordinates, args.format), args.output)
        log_success(status, f"Results saved to: {args.output}", details=f"format={args.format}")

    print(format_results(coordinates, args.format, with_comments=True))

    log_summary(status, "Summary:", {
        "Fragments": len(fragments),
        "Matches": len(results),
        "Fields": len(coordinates),
    })
    return 0


def run_scan(args: argparse.Namespace) -> int:
    """Run the scan command. Raises ExtractorError on failure."""
    template = template_from_args(args)

    source = get_text_source(args.backend)
    page_text = source.get_first_page_fragments(args.pdf_file)

    normalizer = CoordinateNormalizer.for_page(template, page_text)
    fragments = normalizer.normalize_all(page_text.fragments)

    if args.filter:
        needle = args.filter.lower()
        fragments = [fragment for fragment in fragments if needle in fragment.text.lower()]

    print(f"{'x':>6} {'y':>6} {'width':>6} {'height':>6}  text")
    for fragment in fragments:
        print(f"{fragment.x:>6} {fragment.y:>6} {fragment.width:>6} {fragment.height:>6}  {fragment.text}")

    log_and_status(status, f"{len(fragments)} fragment(s) on page 1 of {args.pdf_file}")
    return 0


def run_keywords(args: argparse.Namespace) -> int:
    """Run the keywords command. Raises ExtractorError on failure."""
    if args.create:
        create_sample_keywords(args.create)
        log_success(status, f"Sample keyword file created: {args.create}")
        return 0

    patterns = load_keywords(args.check)
    for pattern in patterns:
        if pattern.is_usable():
            print(f"{pattern.field}: {pattern.keyword}")
        else:
            print(f"(unusable entry) field={pattern.field!r} keyword={pattern.keyword!r}")

    usable = count_usable_patterns(patterns)
    log_and_status(status, f"{usable} of {len(patterns)} keyword(s) usable in {args.check}")
    return 0


COMMANDS = {
    'extract': run_extract,
    'scan': run_scan,
    'keywords': run_keywords,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    setup_logging(args.log_file, args.verbose)

    try:
        return COMMANDS[args.command](args)

    except ExtractorError as e:
        log_error(status, str(e), details=type(e).__name__)
        return 1

    except KeyboardInterrupt:
        log_warning(status, "Interrupted by user")
        return 130

    except Exception as e:
        log_error(status, f"Unexpected error: {e}", exc=e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
