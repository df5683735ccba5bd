"""Core utilities and shared components for the images resizer."""

from .image_utils import (
    base_name,
    fit_dimensions,
    output_filename,
    resize_to_fit,
)
from .logging_config import (
    enable_debug_logging,
    get_logger,
    setup_logger,
)
from .exceptions import (
    ImagesResizerError,
    ConfigurationError,
    ImageLoadError,
    ImageResizeError,
    with_error_handling,
)
from .models import (
    DecodedImage,
    PipelineSummary,
    ResizeConfig,
    ResizeResult,
    ResizeTask,
)
from .validation import (
    discover_source_files,
    parse_sizes,
    prepare_destination,
    validate_directory,
)

__all__ = [
    "ResizeConfig",
    "DecodedImage",
    "ResizeTask",
    "ResizeResult",
    "PipelineSummary",
    "base_name",
    "fit_dimensions",
    "output_filename",
    "resize_to_fit",
    "setup_logger",
    "get_logger",
    "enable_debug_logging",
    "ImagesResizerError",
    "ConfigurationError",
    "ImageLoadError",
    "ImageResizeError",
    "with_error_handling",
    "parse_sizes",
    "validate_directory",
    "prepare_destination",
    "discover_source_files",
]
