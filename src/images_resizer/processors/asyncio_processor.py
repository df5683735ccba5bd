"""AsyncIO pipeline implementation - coroutines with blocking work in worker threads."""

import asyncio
import time
from pathlib import Path
from typing import List, Optional, Tuple

from ..core import (
    DecodedImage,
    PipelineSummary,
    ResizeConfig,
    ResizeResult,
    ResizeTask,
    get_logger,
)
from .common import (
    build_resize_tasks,
    failed_result,
    load_image,
    run_resize_task,
    summarize,
)

END_OF_STREAM = None


async def read_images_async(
    paths: List[Path],
    images: "asyncio.Queue[Optional[DecodedImage]]",
    limit: asyncio.Semaphore,
) -> None:
    """Decode every source concurrently, then close the stream."""
    logger = get_logger("asyncio-resizer")

    async def load(path: Path) -> None:
        # The slot is held until the image is on the stream
        async with limit:
            decoded = await asyncio.to_thread(load_image, path)
            if decoded is not None:
                await images.put(decoded)

    try:
        outcomes = await asyncio.gather(
            *(load(path) for path in paths), return_exceptions=True
        )
        for path, outcome in zip(paths, outcomes):
            if isinstance(outcome, Exception):
                logger.error(
                    f"[{path.name}] Unexpected load failure: {outcome}",
                    exc_info=outcome,
                )
    finally:
        await images.put(END_OF_STREAM)


async def resize_images_async(
    images: "asyncio.Queue[Optional[DecodedImage]]",
    config: ResizeConfig,
    limit: asyncio.Semaphore,
) -> Tuple[int, List[ResizeResult]]:
    """Spawn one resize per (image, size) until the stream closes, then wait for all."""

    async def resize(task: ResizeTask) -> ResizeResult:
        try:
            return await asyncio.to_thread(run_resize_task, task)
        except Exception as e:
            return failed_result(task, e)
        finally:
            limit.release()

    pending: List["asyncio.Task[ResizeResult]"] = []
    images_loaded = 0

    while True:
        decoded = await images.get()
        if decoded is END_OF_STREAM:
            break
        images_loaded += 1
        for task in build_resize_tasks(decoded, config):
            # Wait for a free slot so spawned tasks never pile up decoded rasters
            await limit.acquire()
            pending.append(asyncio.create_task(resize(task)))

    results = await asyncio.gather(*pending)
    return images_loaded, list(results)


async def run_pipeline_async(
    source_files: List[Path], config: ResizeConfig
) -> PipelineSummary:
    """Run the loader and dispatcher stages on one event loop."""
    start_time = time.time()
    images: "asyncio.Queue[Optional[DecodedImage]]" = asyncio.Queue(
        maxsize=config.max_workers
    )

    loader = asyncio.create_task(
        read_images_async(source_files, images, asyncio.Semaphore(config.max_workers))
    )
    images_loaded, results = await resize_images_async(
        images, config, asyncio.Semaphore(config.max_workers)
    )
    await loader

    return summarize(
        len(source_files), images_loaded, results, time.time() - start_time
    )


def run_pipeline(source_files: List[Path], config: ResizeConfig) -> PipelineSummary:
    """
    Resize every source to every size using asyncio.

    This is the synchronous wrapper that runs the async pipeline.

    Args:
        source_files: Source images to resize
        config: Resize configuration

    Returns:
        Counts for the completed run
    """
    return asyncio.run(run_pipeline_async(source_files, config))
