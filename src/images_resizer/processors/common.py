"""Common functions shared across all pipeline implementations."""

import io
import time
from pathlib import Path
from typing import Callable, List, Optional

from PIL import Image

from ..core import (
    DecodedImage,
    PipelineSummary,
    ResizeConfig,
    ResizeResult,
    ResizeTask,
    get_logger,
)
from ..core.exceptions import ImageLoadError, ImageResizeError
from ..core.image_utils import base_name, output_filename, resize_to_fit
from ..core.validation import (
    discover_source_files,
    prepare_destination,
    validate_directory,
)

SOURCE_FORMAT = "JPEG"

RunPipelineFunction = Callable[[List[Path], ResizeConfig], PipelineSummary]


def _decode_image(path: Path) -> Image.Image:
    try:
        image_bytes = path.read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"can't open {path}: {exc}") from exc

    try:
        image = Image.open(io.BytesIO(image_bytes), formats=[SOURCE_FORMAT])
        image.load()  # Decode now, not lazily inside a resize worker
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        # UnidentifiedImageError is an OSError
        raise ImageLoadError(f"can't decode {path}: {exc}") from exc
    return image


def load_image(path: Path) -> Optional[DecodedImage]:
    """
    Read and decode one source file.

    Failures are logged and reported as ``None`` so the batch carries on
    without this source.

    Args:
        path: Source file to decode

    Returns:
        The decoded image, or None if it could not be opened or decoded
    """
    logger = get_logger("resizer")
    logger.info(f"Reading {path}")

    try:
        image = _decode_image(path)
    except ImageLoadError as e:
        logger.error(f"[{path.name}] {e}")
        return None

    logger.debug(f"[{path.name}] Decoded {image.width}x{image.height} {image.mode} image.")
    return DecodedImage(image=image, base_name=base_name(path), source_path=path)


def build_resize_tasks(image: DecodedImage, config: ResizeConfig) -> List[ResizeTask]:
    """Create one resize task per configured size for a decoded image."""
    return [
        ResizeTask(
            image=image,
            size=size,
            dest_path=config.dest_dir / output_filename(image.base_name, size),
        )
        for size in config.sizes
    ]


def resize_image(task: ResizeTask) -> ResizeResult:
    """
    Resize one image to one size and write it to its destination file.

    Never raises: every failure is logged and reported through the result.
    A zero-sized box is rejected before the destination is created; an
    encode failure may leave a partial file behind.
    """
    logger = get_logger("resizer")
    start_time = time.time()
    result = ResizeResult(
        source_name=task.image.base_name,
        size=task.size,
        dest_path=str(task.dest_path),
    )

    try:
        if task.size <= 0:
            raise ImageResizeError(
                f"size {task.size} leaves no room for {task.image.base_name}, skipping"
            )

        logger.info(f"Creating {task.dest_path}")
        try:
            with open(task.dest_path, "wb") as output:
                resized = resize_to_fit(task.image.image, task.size)
                logger.debug(
                    f"[{task.dest_path.name}] Resized to {resized.width}x{resized.height}."
                )
                resized.save(output, format=SOURCE_FORMAT)
        except (OSError, ValueError) as exc:
            raise ImageResizeError(f"can't write {task.dest_path}: {exc}") from exc

        result.success = True

    except ImageResizeError as e:
        result.error = str(e)
        logger.error(f"[{task.dest_path.name}] {e}")

    result.processing_time = time.time() - start_time
    return result


def failed_result(task: ResizeTask, error: BaseException) -> ResizeResult:
    """Result for a resize task that escaped its own error handling."""
    return ResizeResult(
        source_name=task.image.base_name,
        size=task.size,
        dest_path=str(task.dest_path),
        success=False,
        error=str(error),
    )


def run_resize_task(task: ResizeTask) -> ResizeResult:
    """Run ``resize_image`` so that every task reports a result, whatever happens."""
    try:
        return resize_image(task)
    except Exception as e:
        logger = get_logger("resizer")
        logger.error(
            f"[{task.dest_path.name}] Unexpected resize failure: {e}", exc_info=True
        )
        return failed_result(task, e)


def summarize(
    total_sources: int,
    images_loaded: int,
    results: List[ResizeResult],
    processing_time: float,
) -> PipelineSummary:
    """Tally the counts reported at the end of a run."""
    resized = sum(1 for result in results if result.success)
    return PipelineSummary(
        total_sources=total_sources,
        images_loaded=images_loaded,
        load_errors=total_sources - images_loaded,
        resize_tasks=len(results),
        resized=resized,
        resize_errors=len(results) - resized,
        processing_time=processing_time,
    )


def log_configuration(config: ResizeConfig, processor_name: str):
    """Log resize configuration."""
    logger = get_logger("resizer")
    logger.info("=" * 80)
    logger.info(f"{processor_name.upper()} IMAGE RESIZER")
    logger.info("=" * 80)

    logger.info("CONFIGURATION:")
    logger.info(f"  Source:        {config.source_dir}")
    logger.info(f"  Destination:   {config.dest_dir}")
    logger.info(f"  Sizes:         {', '.join(str(size) for size in config.sizes)}")
    logger.info(f"  Max workers:   {config.max_workers}")
    logger.info("=" * 80)


def log_final_statistics(summary: PipelineSummary):
    """Log final resize statistics."""
    logger = get_logger("resizer")
    overall_rate = (
        summary.resize_tasks / summary.processing_time
        if summary.processing_time > 0
        else 0
    )

    logger.info("=" * 80)
    logger.info("RESIZING COMPLETED")
    logger.info("=" * 80)
    logger.info(f"Total execution time: {summary.processing_time:.1f}s")
    logger.info(f"Overall resize rate: {overall_rate:.1f} files/sec")
    logger.info(f"Images loaded: {summary.images_loaded}/{summary.total_sources}")
    logger.info(f"Files written: {summary.resized}/{summary.resize_tasks}")
    if summary.load_errors or summary.resize_errors:
        logger.warning(
            f"Errors encountered: {summary.load_errors} load, "
            f"{summary.resize_errors} resize (see log above)"
        )
    logger.info("=" * 80)


def run_processing(
    config: ResizeConfig,
    processor_name: str,
    run_pipeline_fn: RunPipelineFunction,
) -> PipelineSummary:
    """
    Validate directories, discover sources and run the selected pipeline.

    Raises:
        ConfigurationError: If a directory is invalid or no sources are found.
            Nothing concurrent has started when this is raised.
    """
    logger = get_logger("resizer")
    log_configuration(config, processor_name)

    validate_directory(config.source_dir, must_exist=True)
    validate_directory(config.dest_dir, must_exist=False)
    prepare_destination(config.dest_dir)

    source_files = discover_source_files(config.source_dir)
    logger.info(
        f"Resizing {len(source_files)} images to {len(config.sizes)} sizes "
        f"using {processor_name}..."
    )

    summary = run_pipeline_fn(source_files, config)
    log_final_statistics(summary)
    return summary
