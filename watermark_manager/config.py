"""
Application settings.

Every constant the pipeline and the interactive session rely on lives in
``Settings``. Values are process-wide defaults; a couple of them may be
overridden from the environment, nothing is ever written back.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

ENV_PREFIX = "WATERMARK_MANAGER_"


@dataclass(frozen=True)
class Settings:
    """Configuration shared by the collector and the pipeline."""
    images_dir: Path = Path("img")
    output_suffix: str = "-with-watermark"

    # Edit option strengths on a 0-1 scale
    brightness_factor: float = 0.2
    contrast_factor: float = 0.2

    # Image watermark
    overlay_opacity: float = 0.5

    # Text watermark
    font_size: int = 32
    font_path: Optional[str] = None  # None = Pillow's bundled font
    text_color: Tuple[int, int, int, int] = (0, 0, 0, 255)

    # Encoding
    jpeg_quality: int = 100

    # Prompt defaults
    default_input_name: str = "test.jpg"
    default_overlay_name: str = "logo.png"

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings, letting environment variables override defaults.

        Recognised variables:
            WATERMARK_MANAGER_IMAGES_DIR: folder holding input and output images.
            WATERMARK_MANAGER_LOG_LEVEL: logging level name (DEBUG, INFO, ...).
        """
        environ = os.environ if environ is None else environ
        overrides = {}

        images_dir = environ.get(ENV_PREFIX + "IMAGES_DIR")
        if images_dir:
            overrides["images_dir"] = Path(images_dir)

        log_level = environ.get(ENV_PREFIX + "LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return cls(**overrides)
