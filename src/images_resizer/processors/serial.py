"""Serial pipeline implementation - loads and resizes images one by one."""

import time
from pathlib import Path
from typing import List

from ..core import PipelineSummary, ResizeConfig, ResizeResult
from .common import build_resize_tasks, load_image, run_resize_task, summarize


def run_pipeline(source_files: List[Path], config: ResizeConfig) -> PipelineSummary:
    """
    Resizes every source to every size in the current thread.

    Each source is decoded with `load_image` and then written once per
    size with `run_resize_task` before the next source is read. Useful for
    debugging and for runs where output order should be reproducible.

    Args:
        source_files: Source images to resize.
        config: `ResizeConfig` with destination and sizes.

    Returns:
        A `PipelineSummary` with the counts for the run.
    """
    start_time = time.time()
    results: List[ResizeResult] = []
    images_loaded = 0

    for path in source_files:
        decoded = load_image(path)
        if decoded is None:
            continue
        images_loaded += 1
        for task in build_resize_tasks(decoded, config):
            results.append(run_resize_task(task))

    return summarize(
        len(source_files), images_loaded, results, time.time() - start_time
    )
