"""
Image Watermark Processor
=========================
Composites an overlay image over the centre of a base image.

Technical Notes:
- The overlay keeps its own pixel dimensions; it is never resized
- Offsets are (base - overlay) / 2 per axis, half pixels rounded up
- The overlay's alpha is scaled by the source opacity before blending
- Source-over blending is done by Image.alpha_composite on a full-size layer,
  so overlay pixels outside the base canvas are clipped
"""

import logging
from typing import Tuple

from PIL import Image

logger = logging.getLogger(__name__)


def compute_center_offset(
        base_size: Tuple[int, int],
        overlay_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Top-left position that centres an overlay on a base image.

    Offsets may be negative when the overlay is larger than the base.

    >>> compute_center_offset((200, 100), (50, 50))
    (75, 25)
    """
    base_w, base_h = base_size
    mark_w, mark_h = overlay_size
    return (base_w - mark_w + 1) // 2, (base_h - mark_h + 1) // 2


class ImageWatermarker:
    """
    Blends a watermark image onto the middle of another image.
    """

    DEFAULT_OPACITY = 0.5

    def __init__(self, opacity: float = DEFAULT_OPACITY):
        """
        Initialize the ImageWatermarker.

        Args:
            opacity: Source opacity in the 0-1 range applied to the overlay.
        """
        if not 0.0 <= opacity <= 1.0:
            raise ValueError("Opacity must be between 0 and 1")
        self.opacity = opacity

    def _fade(self, overlay: Image.Image) -> Image.Image:
        """Return an RGBA copy of the overlay with its alpha scaled by opacity."""
        overlay = overlay.convert("RGBA")
        if self.opacity >= 1.0:
            return overlay

        r, g, b, a = overlay.split()
        a = a.point(lambda p: int(round(p * self.opacity)))
        return Image.merge("RGBA", (r, g, b, a))

    def process_image_object(
            self,
            image: Image.Image,
            overlay: Image.Image
    ) -> Image.Image:
        """
        Composite the overlay onto the centre of the image.

        Args:
            image: Base image. Converted to RGBA if needed.
            overlay: Watermark image, any mode.

        Returns:
            New RGBA image with the same size as the base.
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")

        mark = self._fade(overlay)
        x, y = compute_center_offset(image.size, mark.size)

        # Plain paste: the layer is fully transparent, so the faded RGBA
        # values are copied as they are and the blend happens below
        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        layer.paste(mark, (x, y))
        logger.debug("Overlay %dx%d placed at (%d, %d)", mark.width, mark.height, x, y)

        return Image.alpha_composite(image, layer)
