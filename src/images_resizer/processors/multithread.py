"""Multithreaded pipeline implementation - thread pools for loading and resizing."""

import queue
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Tuple

from ..core import DecodedImage, PipelineSummary, ResizeConfig, ResizeResult, get_logger
from .common import build_resize_tasks, load_image, run_resize_task, summarize

# Put on the stream once every source has been attempted.
END_OF_STREAM = None


def _load_into(path: Path, images: "queue.Queue[Optional[DecodedImage]]") -> None:
    decoded = load_image(path)
    if decoded is not None:
        images.put(decoded)


def read_images(
    paths: List[Path],
    images: "queue.Queue[Optional[DecodedImage]]",
    max_workers: int,
) -> None:
    """
    Decode every source concurrently, then close the stream.

    Each load puts its image on the stream itself, so a full stream holds
    loader threads back until the dispatcher catches up.

    Args:
        paths: Source files to decode
        images: Stream the decoded images are put on
        max_workers: Maximum number of concurrent loads
    """
    logger = get_logger("resizer")
    try:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="loader"
        ) as executor:
            future_to_path = {
                executor.submit(_load_into, path, images): path for path in paths
            }
            for future in as_completed(future_to_path):
                try:
                    future.result()
                except Exception as e:
                    logger.error(
                        f"[{future_to_path[future].name}] Unexpected load failure: {e}",
                        exc_info=True,
                    )
    finally:
        images.put(END_OF_STREAM)


def resize_images(
    images: "queue.Queue[Optional[DecodedImage]]", config: ResizeConfig
) -> Tuple[int, List[ResizeResult]]:
    """
    Spawn one resize per (image, size) until the stream closes, then wait for all.

    A semaphore holds back new spawns while ``max_workers`` resizes are in
    flight.

    Returns:
        Tuple of (images received, results of every spawned resize)
    """
    slots = threading.BoundedSemaphore(config.max_workers)
    futures: List["Future[ResizeResult]"] = []
    images_loaded = 0

    with ThreadPoolExecutor(
        max_workers=config.max_workers, thread_name_prefix="resizer"
    ) as executor:
        while True:
            decoded = images.get()
            if decoded is END_OF_STREAM:
                break
            images_loaded += 1

            for task in build_resize_tasks(decoded, config):
                slots.acquire()
                future = executor.submit(run_resize_task, task)
                future.add_done_callback(lambda _: slots.release())
                futures.append(future)

        results = [future.result() for future in as_completed(futures)]

    return images_loaded, results


def run_pipeline(source_files: List[Path], config: ResizeConfig) -> PipelineSummary:
    """
    Resize every source to every size using thread pools.

    The loader stage runs on its own thread while this thread dispatches
    resizes; returns once every load and resize has finished.

    Args:
        source_files: Source images to resize
        config: Resize configuration

    Returns:
        Counts for the completed run
    """
    start_time = time.time()
    images: "queue.Queue[Optional[DecodedImage]]" = queue.Queue(
        maxsize=config.max_workers
    )

    loader = threading.Thread(
        target=read_images,
        args=(source_files, images, config.max_workers),
        name="image-loader",
        daemon=True,
    )
    loader.start()

    images_loaded, results = resize_images(images, config)
    loader.join()

    return summarize(
        len(source_files), images_loaded, results, time.time() - start_time
    )
