"""
Watermark Pipeline Runner
=========================
Runs one WatermarkRequest from start to finish.

Workflow:
1. Load the base image
2. Apply the watermark:
   a. Text: render centred text with the built-in font
   b. Image: blend the overlay onto the centre at half opacity
3. Apply edit options in the order requested
4. Save to the output path at maximum quality

Stages run strictly one after another on a single owned image. Nothing is
written until every transformation has succeeded.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from watermark_manager.config import Settings
from watermark_manager.core.edits import apply_edits
from watermark_manager.core.errors import WatermarkPipelineError
from watermark_manager.core.imageio import load_image, save_image
from watermark_manager.core.overlay import ImageWatermarker
from watermark_manager.core.text import TextWatermarker
from .request import ImageWatermark, PipelineResult, TextWatermark, WatermarkRequest

logger = logging.getLogger(__name__)


class WatermarkPipeline:
    """
    Load -> watermark -> edit -> save for a single request.

    ``run`` raises the typed pipeline errors; ``process`` collapses every
    failure into an unsuccessful PipelineResult.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the pipeline.

        Args:
            settings: Strengths, font and encoding options. Defaults apply if None.
        """
        self.settings = settings or Settings()
        self._text_wm = TextWatermarker(font_path=self.settings.font_path)
        self._image_wm = ImageWatermarker(opacity=self.settings.overlay_opacity)

    def _apply_text(self, image: Image.Image, mark: TextWatermark) -> Image.Image:
        return self._text_wm.process_image_object(
            image,
            mark.text,
            size=self.settings.font_size,
            color=self.settings.text_color
        )

    def _apply_overlay(self, image: Image.Image, mark: ImageWatermark) -> Image.Image:
        overlay = load_image(mark.overlay_path)
        try:
            return self._image_wm.process_image_object(image, overlay)
        finally:
            overlay.close()

    def _apply_watermark(self, image: Image.Image, request: WatermarkRequest) -> Image.Image:
        kind = request.kind
        if isinstance(kind, TextWatermark):
            return self._apply_text(image, kind)
        if isinstance(kind, ImageWatermark):
            return self._apply_overlay(image, kind)
        raise TypeError(f"Unsupported watermark kind: {type(kind).__name__}")

    def run(self, request: WatermarkRequest) -> Path:
        """
        Execute the request.

        Returns:
            The path of the written file.

        Raises:
            LoadError: Base or overlay image cannot be read.
            FontLoadError: The watermark font is unavailable.
            WriteError: The result cannot be saved.
        """
        logger.info("Watermarking %s -> %s", request.input_path, request.output_path)

        # Step 1: Load
        image = load_image(request.input_path)
        original_size = image.size
        # Every intermediate buffer, closed whether or not the run succeeds
        stages = [image]

        try:
            # Step 2: Watermark
            image = self._apply_watermark(image, request)
            stages.append(image)

            # Step 3: Edits
            if request.edit_options:
                image = apply_edits(
                    image,
                    request.edit_options,
                    brightness_factor=self.settings.brightness_factor,
                    contrast_factor=self.settings.contrast_factor
                )
                stages.append(image)

            if image.size != original_size:
                raise WatermarkPipelineError(
                    f"Image size changed from {original_size} to {image.size}"
                )

            # Step 4: Save
            output_path = save_image(image, request.output_path, quality=self.settings.jpeg_quality)
        finally:
            for stage in stages:
                stage.close()

        logger.info("Wrote %s", output_path)
        return output_path

    def process(self, request: WatermarkRequest) -> PipelineResult:
        """
        Execute the request without raising.

        Returns:
            PipelineResult with success flag, output path or error message.
        """
        result = PipelineResult(request=request)

        try:
            result.output_path = self.run(request)
            result.success = True

        except WatermarkPipelineError as e:
            result.error_message = str(e)
            logger.exception("Pipeline failed: %s", e)

        except Exception as e:
            result.error_message = f"Unexpected error: {e}"
            logger.exception("Unexpected pipeline failure")

        return result

    def cleanup(self):
        """Release cached resources."""
        self._text_wm.clear_cache()


def apply_watermark(
        request: WatermarkRequest,
        settings: Optional[Settings] = None
) -> PipelineResult:
    """
    Convenience function to run one request with a fresh pipeline.

    Args:
        request: The validated request.
        settings: Optional settings override.

    Returns:
        PipelineResult; never raises for pipeline failures.
    """
    pipeline = WatermarkPipeline(settings)
    try:
        return pipeline.process(request)
    finally:
        pipeline.cleanup()
