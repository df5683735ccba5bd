"""Image geometry and naming utilities for the images resizer."""

from pathlib import Path
from typing import Tuple, Union

from PIL import Image

from .exceptions import ImageResizeError, with_error_handling

RESAMPLING_FILTER = Image.Resampling.LANCZOS


def base_name(path: Union[str, Path]) -> str:
    """Return the source filename with its final extension stripped."""
    return Path(path).stem


def output_filename(name: str, size: int, extension: str = "jpg") -> str:
    """
    Build the output filename for one (image, size) pair.

    Args:
        name: Base name of the source image
        size: Bounding box size
        extension: Output extension without the leading dot

    Returns:
        Filename of the form ``<name>_<size>.<extension>``
    """
    return f"{name}_{size}.{extension.lstrip('.')}"


def fit_dimensions(width: int, height: int, size: int) -> Tuple[int, int]:
    """
    Calculate the dimensions of an image fitted into a ``size x size`` box.

    Images that already fit are never upscaled. Otherwise the longer side
    becomes ``size`` and the shorter side follows the source aspect ratio,
    truncated and never smaller than one pixel.

    Args:
        width: Source width in pixels
        height: Source height in pixels
        size: Side of the square bounding box

    Returns:
        Tuple of (width, height) for the fitted image

    Raises:
        ImageResizeError: If the bounding box is empty
    """
    if size <= 0:
        raise ImageResizeError(f"cannot fit an image into a {size}x{size} box")

    if width <= size and height <= size:
        return width, height

    # Integer arithmetic keeps the truncation exact
    if width > height:
        new_width = size
        new_height = size * height // width
    else:
        new_height = size
        new_width = size * width // height

    return max(1, new_width), max(1, new_height)


@with_error_handling
def resize_to_fit(img: Image.Image, size: int) -> Image.Image:
    """
    Resize an image to fit within a ``size x size`` box, keeping its aspect ratio.

    Always returns a new image; the input is only read.
    """
    new_size = fit_dimensions(img.width, img.height, size)
    if new_size == img.size:
        return img.copy()
    return img.resize(new_size, RESAMPLING_FILTER)
