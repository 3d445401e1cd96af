"""
Pipeline error taxonomy.

Every stage of the pipeline raises a subclass of ``WatermarkPipelineError``
wrapping the underlying Pillow / OS exception. The pipeline boundary
collapses them into a single failed result; the distinct types exist for
diagnostics and tests.
"""

from pathlib import Path
from typing import Union


class WatermarkPipelineError(RuntimeError):
    """Base class for failures inside the watermark pipeline."""


class LoadError(WatermarkPipelineError):
    """Raised when a base or overlay image cannot be read or decoded."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        message = f"Cannot load image: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class FontLoadError(WatermarkPipelineError):
    """Raised when the built-in watermark font is unavailable. Not recoverable."""


class WriteError(WatermarkPipelineError):
    """Raised when the result cannot be encoded or written to disk."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        message = f"Cannot write image: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
