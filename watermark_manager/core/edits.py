"""
Tonal Edit Options
==================
Post-watermark adjustments applied to an RGBA pixel buffer with numpy.

Every transform takes a (height, width, 4) uint8 array and returns a new
array of the same shape. Only the colour channels are touched; alpha is
carried over unchanged.

Unknown option values are ignored on purpose, so option lists may contain
choices that are not implemented yet.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_BRIGHTNESS_FACTOR = 0.2
DEFAULT_CONTRAST_FACTOR = 0.2

# Rec. 709 luma weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


class EditOption(Enum):
    """Edit choices offered after watermarking. Values are the menu labels."""
    BRIGHTEN = "Make image brighter"
    INCREASE_CONTRAST = "Increase contrast"
    GREYSCALE = "Make image b&w"
    INVERT = "Invert image"

    @classmethod
    def parse(cls, value) -> Optional["EditOption"]:
        """
        Resolve a member from itself, its label or its name.

        Returns None for anything unrecognised.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for option in cls:
                if value == option.value or value.upper() == option.name:
                    return option
        return None


def brighten(pixels: np.ndarray, factor: float = DEFAULT_BRIGHTNESS_FACTOR) -> np.ndarray:
    """
    Move every channel towards white by factor of the remaining headroom.

    A negative factor darkens instead: v * (1 + factor).
    """
    if not -1.0 <= factor <= 1.0:
        raise ValueError("Brightness factor must be between -1 and 1")

    out = pixels.copy()
    rgb = out[..., :3].astype(np.float64)
    if factor < 0:
        rgb = rgb * (1.0 + factor)
    else:
        rgb = rgb + (255.0 - rgb) * factor
    out[..., :3] = np.clip(rgb, 0, 255).astype(np.uint8)
    return out


def increase_contrast(pixels: np.ndarray, factor: float = DEFAULT_CONTRAST_FACTOR) -> np.ndarray:
    """
    Stretch each channel's distance from mid-grey (127).

    The multiplier is (1 + factor) / (1 - factor); results are floored
    and clamped to 0-255.
    """
    if not -1.0 <= factor < 1.0:
        raise ValueError("Contrast factor must be in [-1, 1)")

    multiplier = (factor + 1.0) / (1.0 - factor)
    out = pixels.copy()
    rgb = out[..., :3].astype(np.float64)
    rgb = np.floor(multiplier * (rgb - 127.0) + 127.0)
    out[..., :3] = np.clip(rgb, 0, 255).astype(np.uint8)
    return out


def greyscale(pixels: np.ndarray) -> np.ndarray:
    """Replace each colour channel with the pixel's luma (truncated)."""
    out = pixels.copy()
    rgb = out[..., :3].astype(np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    grey = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]
    grey = np.clip(grey, 0, 255).astype(np.uint8)
    out[..., 0] = grey
    out[..., 1] = grey
    out[..., 2] = grey
    return out


def invert(pixels: np.ndarray) -> np.ndarray:
    """255 - v on every colour channel."""
    out = pixels.copy()
    out[..., :3] = 255 - out[..., :3]
    return out


def apply_edit(
        pixels: np.ndarray,
        option,
        brightness_factor: float = DEFAULT_BRIGHTNESS_FACTOR,
        contrast_factor: float = DEFAULT_CONTRAST_FACTOR
) -> np.ndarray:
    """
    Apply one edit option to a pixel buffer.

    Unrecognised options return the buffer untouched.
    """
    resolved = EditOption.parse(option)

    if resolved is EditOption.BRIGHTEN:
        return brighten(pixels, brightness_factor)
    if resolved is EditOption.INCREASE_CONTRAST:
        return increase_contrast(pixels, contrast_factor)
    if resolved is EditOption.GREYSCALE:
        return greyscale(pixels)
    if resolved is EditOption.INVERT:
        return invert(pixels)

    logger.debug("Ignoring unknown edit option: %r", option)
    return pixels


def apply_edits(
        image: Image.Image,
        options: Iterable,
        brightness_factor: float = DEFAULT_BRIGHTNESS_FACTOR,
        contrast_factor: float = DEFAULT_CONTRAST_FACTOR
) -> Image.Image:
    """
    Apply edit options to an image, in the given order.

    Args:
        image: Source image. Converted to RGBA if needed.
        options: EditOption members or their labels. Unknown values are skipped.
        brightness_factor: Strength of BRIGHTEN.
        contrast_factor: Strength of INCREASE_CONTRAST.

    Returns:
        New RGBA image of the same size.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")

    pixels = np.array(image, dtype=np.uint8)
    for option in options:
        pixels = apply_edit(pixels, option, brightness_factor, contrast_factor)

    return Image.fromarray(pixels)
