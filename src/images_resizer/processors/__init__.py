"""Resize pipelines with different concurrency strategies."""

from .serial import run_pipeline as serial_run_pipeline
from .multithread import run_pipeline as multithread_run_pipeline
from .asyncio_processor import run_pipeline as asyncio_run_pipeline

__all__ = [
    "serial_run_pipeline",
    "multithread_run_pipeline",
    "asyncio_run_pipeline",
]
