import logging
from unittest.mock import patch

import pytest

from images_resizer.core.exceptions import (
    ConfigurationError,
    ImageLoadError,
    ImageResizeError,
    ImagesResizerError,
    with_error_handling,
)


@with_error_handling
def _fail_func() -> None:
    raise ValueError("boom")


@with_error_handling
def _config_fail_func() -> None:
    raise ConfigurationError("bad sizes")


def test_custom_exception_inheritance() -> None:
    assert issubclass(ConfigurationError, ImagesResizerError)
    assert issubclass(ImageLoadError, ImagesResizerError)
    assert issubclass(ImageResizeError, ImagesResizerError)


def test_with_error_handling_raises_image_resize_error() -> None:
    with pytest.raises(ImageResizeError) as exc_info:
        _fail_func()
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_with_error_handling_passes_resizer_errors_through() -> None:
    with pytest.raises(ConfigurationError):
        _config_fail_func()


def test_with_error_handling_logs_error() -> None:
    with patch("images_resizer.core.exceptions.get_logger") as mock_get_logger:
        mock_logger = logging.getLogger("test")
        mock_get_logger.return_value = mock_logger
        with pytest.raises(ImageResizeError):
            _fail_func()
        assert mock_get_logger.called


def test_with_error_handling_keeps_function_name() -> None:
    assert _fail_func.__name__ == "_fail_func"
