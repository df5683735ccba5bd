"""Shared data models for the images resizer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List

from pydantic import BaseModel, Field, NonNegativeInt

if TYPE_CHECKING:
    from PIL import Image


def default_worker_count() -> int:
    """Number of workers per stage when none is configured."""
    return os.cpu_count() or 4


class ResizeConfig(BaseModel):
    """Configuration for a resize run."""

    source_dir: Path
    dest_dir: Path
    sizes: List[NonNegativeInt] = Field(min_length=1)
    max_workers: int = Field(default_factory=default_worker_count, ge=1)
    debug: bool = False


@dataclass(frozen=True)
class DecodedImage:
    """A decoded source image, shared read-only by its resize tasks."""

    image: "Image.Image"
    base_name: str
    source_path: Path


@dataclass(frozen=True)
class ResizeTask:
    """One (image, size) pair and the file it is written to."""

    image: DecodedImage
    size: int
    dest_path: Path


class ResizeResult(BaseModel):
    """Result of a single resize task."""

    source_name: str
    size: int
    dest_path: str = ""
    success: bool = False
    error: str = ""
    processing_time: float = 0.0


class PipelineSummary(BaseModel):
    """Counts reported once the whole pipeline has completed."""

    total_sources: int = 0
    images_loaded: int = 0
    load_errors: int = 0
    resize_tasks: int = 0
    resized: int = 0
    resize_errors: int = 0
    processing_time: float = 0.0
