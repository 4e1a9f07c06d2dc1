# -*- coding: utf-8 -*-
"""
Command Line - WGS 84 EGM96 15-minute undulation calculator.

Loads a tabular grid, interpolates every record of a query file and
writes the result file. Defaults match the classic ``intpt`` tool::

    geoidgrid -g ww15mgh.grd.tsv -i input.tsv -o outintpt.tsv

Two helper subcommands prepare inputs::

    geoidgrid convert-grid WW15MGH.GRD ww15mgh.grd.tsv
    geoidgrid convert-dms input_dms.tsv > input.tsv

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# geoidgrid internal
from geoidgrid.batch import run_batch
from geoidgrid.convert import convert_dms_records, convert_raw_grid
from geoidgrid.exceptions import GeoidGridError
from geoidgrid.interpolation import DEFAULT_RADIUS_KM
from geoidgrid.loader import load_grid
from geoidgrid.vocabulary import InterpolationMethod

logger = logging.getLogger(__name__)

_COMMANDS = ("run", "convert-grid", "convert-dms")


# ── CLI ──────────────────────────────────────────────────────────────


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed arguments. ``command`` is ``'run'``, ``'convert-grid'``
        or ``'convert-dms'``.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    wants_help = argv[:1] in (['-h'], ['--help'])
    if not wants_help and not any(a in _COMMANDS for a in argv):
        argv.insert(0, 'run')

    # -v is accepted before or after the command word; the subcommand
    # copy leaves the attribute unset unless given
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log debug detail.",
    )

    parser = argparse.ArgumentParser(
        prog='geoidgrid',
        description="WGS 84 EGM96 15-minute geoid undulation calculator.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug detail.",
    )
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser(
        "run", parents=[common], help="Interpolate a query file (default).",
    )
    run.add_argument(
        "-g", "--grid",
        type=Path,
        default=Path("ww15mgh.grd.tsv"),
        help="Tabular grid file (default: ww15mgh.grd.tsv).",
    )
    run.add_argument(
        "-i", "--input",
        type=Path,
        default=Path("input.tsv"),
        help="Query file, tab-delimited lat, lon[, remark] "
             "(default: input.tsv).",
    )
    run.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("outintpt.tsv"),
        help="Result file (default: outintpt.tsv).",
    )
    run.add_argument(
        "-r", "--radius",
        type=float,
        default=DEFAULT_RADIUS_KM,
        help="Interpolation radius in km for the pole/seam safety "
             f"margins (default: {DEFAULT_RADIUS_KM}).",
    )
    run.add_argument(
        "-m", "--method",
        choices=[m.value for m in InterpolationMethod],
        default=InterpolationMethod.SPLINE.value,
        help="Interpolation algorithm (default: spline).",
    )

    grid = sub.add_parser(
        "convert-grid", parents=[common],
        help="Convert raw WW15MGH.GRD to the tabular grid.",
    )
    grid.add_argument("raw", type=Path, help="Raw grid file.")
    grid.add_argument(
        "tabular",
        type=Path,
        nargs="?",
        default=Path("ww15mgh.grd.tsv"),
        help="Output tabular grid (default: ww15mgh.grd.tsv).",
    )

    dms = sub.add_parser(
        "convert-dms", parents=[common],
        help="Convert DDMMSS query records to decimal degrees on stdout.",
    )
    dms.add_argument("input", type=Path, help="DMS query file.")

    return parser.parse_args(argv)


# ── Main ─────────────────────────────────────────────────────────────


def _run(args: argparse.Namespace) -> None:
    logger.info(
        "geoidgrid -g=%s -i=%s -o=%s", args.grid, args.input, args.output,
    )
    for label, path in (("Grid File", args.grid), ("Input File", args.input)):
        if not path.exists():
            raise FileNotFoundError(f"{label} does not exist: {path}")

    model = load_grid(args.grid)
    run_batch(model, args.input, args.output, args.radius, args.method)


def _convert_dms(args: argparse.Namespace) -> None:
    if not args.input.exists():
        raise FileNotFoundError(f"Input file does not exist: {args.input}")
    with open(args.input, 'r', encoding='utf-8') as f:
        for record in convert_dms_records(f):
            sys.stdout.write(record + '\n')


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``geoidgrid`` console script.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 on error.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "convert-grid":
            convert_raw_grid(args.raw, args.tabular)
        elif args.command == "convert-dms":
            _convert_dms(args)
        else:
            _run(args)
    except (GeoidGridError, OSError) as e:
        logger.error("%s", e)
        logger.error("Exit on error.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
