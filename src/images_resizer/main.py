"""Main module for the images resizer CLI."""

import sys
import argparse
from typing import List, Optional

from .resize_images import add_resize_arguments, run

VERSION = "0.1.0"


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the unified command-line interface (CLI) of the Images Resizer.

    This function sets up an `ArgumentParser` with a "resize" command, which
    runs the batch resizer, and a "version" command.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="images-resizer",
        description="Images Resizer - batch JPEG resizing with multiple concurrency strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resize every JPEG in ./photos to 50px and 100px boxes
  images-resizer resize -f photos -t thumbs -s 50,100

  # Use asyncio with at most 4 concurrent tasks per stage
  images-resizer resize -f photos -t thumbs -s 640 \\
                        --processor asyncio --max-workers 4

  # Show version
  images-resizer version
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    resize_parser: argparse.ArgumentParser = subparsers.add_parser(
        "resize", help="Resize every JPEG in a directory to a list of sizes"
    )
    add_resize_arguments(resize_parser)

    subparsers.add_parser("version", help="Show version information")

    args: argparse.Namespace = parser.parse_args(argv)

    if args.command == "resize":
        run(args)

    elif args.command == "version":
        print("Images Resizer CLI")
        print(f"Version {VERSION}")
        print("Batch JPEG resizing with multiple concurrency strategies")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
