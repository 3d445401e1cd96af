"""
Core Module - Pure Image Logic
==============================
This module contains no prompt or session dependencies.
Watermark rendering and edit transforms are implemented here.
"""

from .edits import EditOption, apply_edits
from .overlay import ImageWatermarker, compute_center_offset
from .text import TextWatermarker

__all__ = [
    "EditOption",
    "apply_edits",
    "ImageWatermarker",
    "compute_center_offset",
    "TextWatermarker",
]
