"""
Watermark Manager Application Package
=====================================
An interactive console tool that stamps a text or image watermark onto a
picture and optionally applies a few tonal edits.

Modules:
    - core: Pure image algorithms (no prompt dependencies)
    - pipeline: Request model and the load -> mark -> edit -> save runner
    - cli: click-based interactive session

Usage:
    from watermark_manager.pipeline import WatermarkRequest, TextWatermark, apply_watermark
    from watermark_manager.cli import main
"""

__version__ = "1.0.0"
__app_name__ = "Watermark manager"

# Core exports
from .core import EditOption, TextWatermarker, ImageWatermarker, apply_edits
from .core.errors import WatermarkPipelineError, LoadError, FontLoadError, WriteError
# Pipeline exports
from .pipeline import (
    WatermarkRequest, TextWatermark, ImageWatermark, PipelineResult,
    WatermarkPipeline, apply_watermark
)
from .config import Settings

__all__ = [
    # Version info
    "__version__",
    "__app_name__",

    # Core
    "EditOption",
    "TextWatermarker",
    "ImageWatermarker",
    "apply_edits",

    # Errors
    "WatermarkPipelineError",
    "LoadError",
    "FontLoadError",
    "WriteError",

    # Pipeline
    "WatermarkRequest",
    "TextWatermark",
    "ImageWatermark",
    "PipelineResult",
    "WatermarkPipeline",
    "apply_watermark",

    # Config
    "Settings",
]
