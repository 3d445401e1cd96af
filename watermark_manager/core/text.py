"""
Text Watermark Processor
========================
Renders a text watermark centred over the whole image using PIL/Pillow.

Technical Notes:
- The font is Pillow's bundled font at a fixed size unless a TTF path is given
- Text is word-wrapped to the image width; every line is centred
- The wrapped block's bounding box is centred within the full canvas
- Text is drawn on a transparent RGBA layer, then alpha-composited
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .errors import FontLoadError

logger = logging.getLogger(__name__)


class TextWatermarker:
    """
    Adds a centred text watermark to images.

    Fonts are cached per size, so one instance can stamp several images
    without reloading the font resource.
    """

    DEFAULT_FONT_SIZE = 32
    DEFAULT_COLOR = (0, 0, 0, 255)

    def __init__(self, font_path: Optional[str] = None):
        """
        Initialize the TextWatermarker.

        Args:
            font_path: Optional path to a TTF/OTF font file.
                      If None, Pillow's bundled font is used.
        """
        self._font_path = font_path
        self._cached_fonts: dict[int, ImageFont.FreeTypeFont] = {}

    def _get_font(self, size: int) -> ImageFont.FreeTypeFont:
        """
        Get or create a cached font object for the given size.

        Args:
            size: Font size in pixels.

        Returns:
            ImageFont object for drawing text.

        Raises:
            FontLoadError: If the font resource cannot be loaded.
        """
        if size not in self._cached_fonts:
            try:
                if self._font_path:
                    font = ImageFont.truetype(self._font_path, size)
                else:
                    # Sized default font needs Pillow >= 10.1 built with FreeType
                    font = ImageFont.load_default(size=size)
            except (OSError, ImportError, TypeError, ValueError) as e:
                source = self._font_path or "built-in font"
                raise FontLoadError(f"Cannot load {source} at size {size}: {e}") from e
            self._cached_fonts[size] = font

        return self._cached_fonts[size]

    def clear_cache(self):
        """Drop cached font objects."""
        self._cached_fonts.clear()

    @staticmethod
    def _wrap_text(
            draw: ImageDraw.ImageDraw,
            text: str,
            font: ImageFont.FreeTypeFont,
            max_width: int
    ) -> str:
        """
        Break text into lines no wider than max_width.

        Explicit newlines are kept. A single word wider than max_width
        stays on its own line.
        """
        lines = []
        for paragraph in text.splitlines():
            line = ""
            for word in paragraph.split():
                candidate = f"{line} {word}" if line else word
                if line and draw.textlength(candidate, font=font) > max_width:
                    lines.append(line)
                    line = word
                else:
                    line = candidate
            lines.append(line)
        return "\n".join(lines)

    def process_image_object(
            self,
            image: Image.Image,
            text: str,
            size: int = DEFAULT_FONT_SIZE,
            color: Tuple[int, int, int, int] = DEFAULT_COLOR
    ) -> Image.Image:
        """
        Apply a centred text watermark to a PIL Image.

        Args:
            image: Base image. Converted to RGBA if needed.
            text: Watermark text. Whitespace-only text leaves the image as is.
            size: Font size in pixels.
            color: RGBA fill colour for the text.

        Returns:
            New RGBA image of the same size with the text applied.

        Raises:
            FontLoadError: If the font cannot be loaded.
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")

        font = self._get_font(size)

        if not text or not text.strip():
            logger.debug("Empty watermark text, nothing to draw")
            return image.copy()

        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)

        wrapped = self._wrap_text(draw, text.strip(), font, image.width)
        bbox = draw.multiline_textbbox((0, 0), wrapped, font=font, align="center")
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]

        # Centre the block's bounding box on the full canvas
        x = (image.width - text_width) // 2 - bbox[0]
        y = (image.height - text_height) // 2 - bbox[1]

        draw.multiline_text((x, y), wrapped, font=font, fill=color, align="center")
        logger.debug("Text block %dx%d drawn at (%d, %d)", text_width, text_height, x, y)

        return Image.alpha_composite(image, layer)
