#!/usr/bin/env python3
"""
Batch JPEG Resizer CLI

Reads every JPEG in a directory → Resizes to each size → Writes <name>_<size>.jpg
Supports multiple concurrency strategies: multithread, asyncio, serial
"""

import sys
import argparse
from typing import Dict, List, Optional, Tuple

from .core import (
    ResizeConfig,
    enable_debug_logging,
    get_logger,
    parse_sizes,
)
from .processors.common import RunPipelineFunction, run_processing
from .processors import (
    asyncio_run_pipeline,
    multithread_run_pipeline,
    serial_run_pipeline,
)

PROCESSORS: Dict[str, Tuple[str, RunPipelineFunction]] = {
    "multithread": ("Multithreaded", multithread_run_pipeline),
    "asyncio": ("AsyncIO", asyncio_run_pipeline),
    "serial": ("Serial", serial_run_pipeline),
}


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the argument parser shared by both entry points."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Resize every JPEG in a directory to a list of sizes",
    )
    add_resize_arguments(parser)
    return parser


def add_resize_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the resize options to ``parser``."""
    parser.add_argument(
        "-f",
        "--from",
        dest="source_dir",
        default=".",
        help="directory of original images (default: current directory)",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="dest_dir",
        default=".",
        help="directory to store resized images, created if missing",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        default="",
        help="comma-separated list of sizes, e.g. 50,100,200",
    )
    parser.add_argument(
        "--processor",
        type=str,
        default="multithread",
        choices=list(PROCESSORS),
        help="Processing strategy to use (default: multithread)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum concurrent loads and resizes per stage (default: CPU count)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the resizer.

    Returns:
        An `argparse.Namespace` object containing the parsed arguments.
    """
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace) -> ResizeConfig:
    """
    Turn parsed arguments into a validated `ResizeConfig`.

    Sizes are parsed first so that a bad size list fails before anything
    touches the file system.

    Raises:
        ConfigurationError: If the size list is malformed or empty.
    """
    sizes = parse_sizes(args.sizes)
    overrides = {}
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers
    return ResizeConfig(
        source_dir=args.source_dir,
        dest_dir=args.dest_dir,
        sizes=sizes,
        debug=args.debug,
        **overrides,
    )


def run(args: argparse.Namespace) -> None:
    """
    Build the configuration from ``args`` and run the selected strategy.

    Exits with status 1 on configuration errors. Per-image failures are
    only logged; a run that reaches the pipeline always returns normally.
    """
    logger = get_logger("resizer")
    try:
        logger.info("Starting Batch JPEG Resizer")
        config = build_config(args)

        if config.debug:
            enable_debug_logging("resizer", "asyncio-resizer")

        processor_name, run_pipeline_fn = PROCESSORS[args.processor]
        run_processing(config, processor_name, run_pipeline_fn)

    except KeyboardInterrupt:
        logger.warning("Resizing interrupted by user.")
    except Exception as e:
        logger.error(f"Resizing failed: {e}")
        logger.debug("Failure details", exc_info=True)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the standalone ``resize-images`` script.

    Parses arguments and hands them to `run`.
    """
    run(parse_args(argv))


if __name__ == "__main__":
    main()
