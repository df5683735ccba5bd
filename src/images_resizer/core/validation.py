"""Argument and directory validation run before the pipeline starts.

Every failure here is a ``ConfigurationError`` and aborts the run before
any concurrent work begins.
"""

import re
from pathlib import Path
from typing import List, Union

from .exceptions import ConfigurationError
from .logging_config import get_logger

SOURCE_EXTENSIONS = (".jpg", ".jpeg")

_SIZE_TOKEN = re.compile(r"[+-]?\d+")


def parse_sizes(text: str) -> List[int]:
    """
    Parse a comma-separated list of sizes.

    Empty fields are skipped and duplicates are dropped, keeping the first
    occurrence.

    Args:
        text: Size list such as ``"50,100,200"``

    Returns:
        List of non-negative sizes in the order given

    Raises:
        ConfigurationError: If a token is not an integer, is negative, or
            the list is empty
    """
    sizes: List[int] = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        if not _SIZE_TOKEN.fullmatch(token):
            raise ConfigurationError(f"{token} is not a valid size")
        size = int(token)
        if size < 0:
            raise ConfigurationError(f"size {size} is less than zero")
        if size not in sizes:
            sizes.append(size)

    if not sizes:
        raise ConfigurationError("no sizes specified")
    return sizes


def validate_directory(path: Union[str, Path], must_exist: bool) -> None:
    """
    Check that ``path`` is a directory.

    A missing path is only an error when ``must_exist`` is set; an existing
    path that is not a directory is always an error.
    """
    path = Path(path)
    if not path.exists():
        if must_exist:
            raise ConfigurationError(f"directory {path} doesn't exist")
        return
    if not path.is_dir():
        raise ConfigurationError(f"{path} is not a directory")


def prepare_destination(path: Union[str, Path]) -> Path:
    """Create the destination directory (and parents) if missing."""
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigurationError(f"can't create directory {path}: {exc}") from exc
    return path


def discover_source_files(directory: Union[str, Path]) -> List[Path]:
    """
    List the JPEG files directly inside ``directory``.

    Raises:
        ConfigurationError: If no images are found
    """
    logger = get_logger("resizer")
    directory = Path(directory)
    logger.debug(f"Listing JPEG files in {directory}")

    files = sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in SOURCE_EXTENSIONS
    )
    if not files:
        raise ConfigurationError(f"no images to resize in {directory}")

    logger.info(f"Found {len(files)} JPEG files in {directory}")
    return files
