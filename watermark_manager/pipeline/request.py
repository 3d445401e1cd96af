"""
Pipeline request and result types.

A WatermarkRequest is built once from validated user input, stays frozen
for the whole run and is thrown away afterwards.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from watermark_manager.core.edits import EditOption


@dataclass(frozen=True)
class TextWatermark:
    """Text stamped in the middle of the image."""
    text: str


@dataclass(frozen=True)
class ImageWatermark:
    """Overlay image blended onto the middle of the image."""
    overlay_path: Path

    def __post_init__(self):
        object.__setattr__(self, "overlay_path", Path(self.overlay_path))


WatermarkKind = Union[TextWatermark, ImageWatermark]


@dataclass(frozen=True)
class WatermarkRequest:
    """Everything one pipeline run needs."""
    input_path: Path
    output_path: Path
    kind: WatermarkKind
    # Order matters; items that are not EditOption members are skipped
    edit_options: Tuple[Union[EditOption, str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "edit_options", tuple(self.edit_options or ()))


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""
    request: WatermarkRequest
    output_path: Optional[Path] = None
    success: bool = False
    error_message: str = ""
