"""
Image loading and saving helpers.

Loading applies EXIF orientation and fully decodes the file so the handle
can be closed straight away. Saving picks the format from the extension
and always encodes at the highest quality the format offers.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import LoadError, WriteError

logger = logging.getLogger(__name__)

# Formats Pillow cannot write with an alpha channel
_OPAQUE_FORMATS = {"JPEG", "PPM", "EPS", "PCX"}
_BACKGROUND = (255, 255, 255)

# Single-channel modes holding more than 8 bits per sample
_WIDE_INT_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}


def _to_8bit(image: Image.Image) -> Image.Image:
    """
    Scale 16-bit, 32-bit integer and float images down to 8-bit "L".

    Integer samples are read as 16-bit and shifted right by 8. Float
    samples in 0-1 are scaled by 255, anything wider is treated like
    16-bit data. Other modes are returned untouched.
    """
    if image.mode in _WIDE_INT_MODES:
        samples = np.clip(np.asarray(image, dtype=np.int64), 0, 65535) >> 8
    elif image.mode == "F":
        samples = np.nan_to_num(np.asarray(image, dtype=np.float64))
        if samples.size and samples.max() <= 1.0:
            samples = samples * 255.0
        else:
            samples = samples / 256.0
        samples = np.clip(samples, 0, 255)
    else:
        return image
    return Image.fromarray(samples.astype(np.uint8))


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Read an image from disk as RGBA.

    Raises:
        LoadError: If the file is missing, unreadable or not an image.
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            oriented = ImageOps.exif_transpose(img)
            result = _to_8bit(oriented).convert("RGBA")
    except FileNotFoundError as e:
        raise LoadError(path, "file not found") from e
    except UnidentifiedImageError as e:
        raise LoadError(path, "unsupported or corrupt image") from e
    except (OSError, ValueError) as e:
        raise LoadError(path, str(e)) from e

    logger.debug("Loaded %s (%dx%d)", path, result.width, result.height)
    return result


def _format_for(path: Path) -> str:
    extension = path.suffix.lower()
    image_format = Image.registered_extensions().get(extension)
    if image_format is None:
        raise WriteError(path, f"unknown image extension '{extension or path.name}'")
    return image_format


def save_image(image: Image.Image, path: Union[str, Path], quality: int = 100) -> Path:
    """
    Encode an image to disk at maximum quality.

    Formats without alpha support are flattened onto white first.

    Raises:
        WriteError: If the extension is unknown or the file cannot be written.
    """
    path = Path(path)
    image_format = _format_for(path)

    if image_format in _OPAQUE_FORMATS and image.mode in ("RGBA", "LA", "P"):
        rgba = image.convert("RGBA")
        flattened = Image.new("RGB", rgba.size, _BACKGROUND)
        flattened.paste(rgba, mask=rgba.getchannel("A"))
        image = flattened

    params = {}
    if image_format == "JPEG":
        params = {"quality": quality, "subsampling": 0}
    elif image_format == "WEBP":
        params = {"lossless": True}

    try:
        image.save(path, format=image_format, **params)
    except (OSError, ValueError, KeyError) as e:
        raise WriteError(path, str(e)) from e

    logger.debug("Saved %s as %s", path, image_format)
    return path
