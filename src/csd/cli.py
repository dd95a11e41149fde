"""
Command line interface for CSD conversion.

    csd -c 28.5 -p 2       ->  +00-00.+0
    csd -f 28.5 -z 2       ->  +00-00
    csd -d +00-00.+        ->  28.5
    csd -d +00-00          ->  28.0   (Python float repr)
    csd --to_decimal=-00+00 -> -28.0  (a leading '-' needs the = form)
    csd -a +-00+-00+-00+-0 --format yaml

Conversions print in the order: to_csd, to_csdfixed, to_decimal, analyze.
"""

import argparse
import logging
import sys
from typing import List, Optional

from csd import __version__
from csd.analyzer import CsdReport, analyze_csd
from csd.config import CsdConfig, load_config_file
from csd.decoder import to_decimal
from csd.encoder import to_csd, to_csdfixed
from csd.errors import CsdError
from csd.serialization import report_to_json, report_to_yaml


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csd",
        description="Canonical Signed Digit (CSD) Conversion",
    )
    parser.add_argument("-v", "--version", action="version",
                        version=f"Csd, version {__version__}",
                        help="Print the current version number")
    parser.add_argument("-d", "--to_decimal", metavar="CSD",
                        help="Convert to decimal (a CSD starting with '-' needs the "
                             "= form: --to_decimal=-00+00)")
    parser.add_argument("-c", "--to_csd", metavar="NUMBER", type=float,
                        help="Convert to CSD with places")
    parser.add_argument("-f", "--to_csdfixed", metavar="NUMBER", type=float,
                        help="Convert to CSD with number of non-zeros")
    parser.add_argument("-p", "--place", type=int, default=None,
                        help="Number of places (default: 4)")
    parser.add_argument("-z", "--nnz", type=int, default=None,
                        help="Number of non-zeros (default: 3)")
    parser.add_argument("-a", "--analyze", metavar="CSD",
                        help="Print an analysis report for a CSD string")
    parser.add_argument("--format", choices=["text", "json", "yaml"], default="text",
                        help="Output format for --analyze (default: text)")
    parser.add_argument("--config", metavar="FILE",
                        help="YAML file with default places/nnz")
    parser.add_argument("--verbose", action="store_true",
                        help="print status messages")
    parser.add_argument("--debug", action="store_true",
                        help="print debug messages")
    return parser


def format_report(report: CsdReport) -> str:
    """Human-readable rendering of a CsdReport."""
    lines = [
        f"CSD:               {report.csd}",
        f"Value:             {report.value!r}",
        f"Digits:            {report.length} "
        f"({report.integral_digits} integral, {report.fractional_digits} fractional)",
        f"Non-zero digits:   {report.nonzero_digits}",
        f"Highest power:     {report.highest_power if report.highest_power is not None else '-'}",
        f"Canonical:         {'YES' if report.is_canonical else 'NO'}",
        f"Repeated pattern:  {report.repeated_pattern or 'None'}",
    ]
    for i, warning in enumerate(report.warnings, 1):
        lines.append(f"Warning {i}: {warning}")
    return "\n".join(lines)


def _render_report(report: CsdReport, fmt: str) -> str:
    if fmt == "json":
        return report_to_json(report)
    if fmt == "yaml":
        return report_to_yaml(report).rstrip("\n")
    return format_report(report)


def _resolve_config(args: argparse.Namespace) -> CsdConfig:
    config = load_config_file(args.config) if args.config else CsdConfig()
    if args.place is not None:
        config.places = args.place
    if args.nnz is not None:
        config.nnz = args.nnz
    logger.info("using places=%d nnz=%d", config.places, config.nnz)
    return config


def run(args: argparse.Namespace) -> List[str]:
    """
    Execute the conversions requested in args.

    Returns:
        Output lines, in flag order

    Raises:
        CsdError: On invalid input
        FileNotFoundError: If --config names a missing file
    """
    config = _resolve_config(args)
    output: List[str] = []

    if args.to_csd is not None:
        output.append(to_csd(args.to_csd, config.places))

    if args.to_csdfixed is not None:
        output.append(to_csdfixed(args.to_csdfixed, config.nnz))

    if args.to_decimal is not None:
        output.append(repr(to_decimal(args.to_decimal)))

    if args.analyze is not None:
        output.append(_render_report(analyze_csd(args.analyze), args.format))

    return output


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    if all(getattr(args, name) is None
           for name in ("to_csd", "to_csdfixed", "to_decimal", "analyze")):
        parser.print_help()
        return 0

    try:
        lines = run(args)
    except (CsdError, FileNotFoundError) as e:
        logger.debug("conversion failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0
