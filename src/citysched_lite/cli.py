"""citysched-lite CLI entry point.

Usage: uv run citysched-lite [command]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "generate",
        help="Write the nine standard datasets and their report.",
    )
    p.add_argument(
        "--data-dir", default="data",
        help="Directory to write datasets into (default: data)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible datasets (default: 42)",
    )


def _add_run_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "run",
        help="Analyze one or more datasets (all of --data-dir if none given).",
    )
    p.add_argument(
        "datasets", nargs="*", metavar="DATASET",
        help="Dataset JSON files to process.",
    )
    p.add_argument(
        "--data-dir", default="data",
        help="Where to look for datasets when none are given (default: data)",
    )
    p.add_argument(
        "--results-dir", default="results",
        help="Directory for CSV/JSON output (default: results)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="Seed used if the standard datasets have to be generated (default: 42)",
    )
    p.add_argument(
        "--no-export", action="store_true",
        help="Print reports only; don't write result files.",
    )


def _run_generate(args: argparse.Namespace) -> None:
    from citysched_lite.pipeline.generator import DatasetGenerator

    paths = DatasetGenerator(seed=args.seed).generate_all(args.data_dir)
    print(f"Generated {len(paths)} datasets in {args.data_dir}/")


def _run_run(args: argparse.Namespace) -> int:
    from citysched_lite.pipeline.export import export_results, export_summary
    from citysched_lite.pipeline.generator import DatasetGenerator
    from citysched_lite.pipeline.processor import discover_datasets, process_all
    from citysched_lite.pipeline.report import format_report, format_summary

    if args.datasets:
        paths = [Path(p) for p in args.datasets]
    else:
        paths = discover_datasets(args.data_dir)
        if not paths:
            print(f"No datasets in {args.data_dir}/, generating the standard set...")
            paths = DatasetGenerator(seed=args.seed).generate_all(args.data_dir)

    results = process_all(paths)
    for result in results:
        print(format_report(result))
        print()
        if not args.no_export:
            export_results(result, args.results_dir)

    if len(results) > 1:
        print(format_summary(results))
        if not args.no_export:
            export_summary(results, args.results_dir)

    # non-zero if any dataset failed
    return 0 if len(results) == len(paths) else 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="citysched-lite",
        description="Smart-city task scheduling analysis: SCCs, topological "
                    "order, shortest and critical paths.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_generate_parser(subparsers)
    _add_run_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        _run_generate(args)
    elif args.command == "run":
        sys.exit(_run_run(args))
