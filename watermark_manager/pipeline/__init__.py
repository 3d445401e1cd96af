"""
Pipeline Module - Request Execution
===================================
Request/result types and the sequential runner that turns a request into
a watermarked file.

Components:
- WatermarkRequest: input, output, watermark kind and edit options
- WatermarkPipeline: load, watermark, edit and save
- apply_watermark: one-shot helper returning a PipelineResult
"""

from .request import (
    WatermarkRequest, TextWatermark, ImageWatermark, WatermarkKind, PipelineResult
)
from .runner import WatermarkPipeline, apply_watermark

__all__ = [
    "WatermarkRequest",
    "TextWatermark",
    "ImageWatermark",
    "WatermarkKind",
    "PipelineResult",
    "WatermarkPipeline",
    "apply_watermark",
]
