"""Testing utilities and fakes for the images resizer."""

from .fakes import (
    FakeLogger,
    create_test_image,
    setup_test_source_dir,
    write_corrupt_image,
    write_test_image,
)

__all__ = [
    "FakeLogger",
    "create_test_image",
    "setup_test_source_dir",
    "write_corrupt_image",
    "write_test_image",
]
