"""
Test script for the watermark pipeline runner.

Run with: python -m pytest tests/test_pipeline.py -v
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from PIL import Image

from watermark_manager.config import Settings
from watermark_manager.core.edits import EditOption, greyscale, invert
from watermark_manager.core.errors import FontLoadError, LoadError, WriteError
from watermark_manager.pipeline import (
    ImageWatermark, TextWatermark, WatermarkPipeline, WatermarkRequest, apply_watermark
)
from watermark_manager.pipeline import runner


def create_test_image(path: Path, width: int = 320, height: int = 200) -> Path:
    """Create a gradient test image on disk."""
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            arr[y, x] = [
                int(255 * x / width),
                int(255 * y / height),
                128
            ]

    Image.fromarray(arr).save(path)
    return path


def create_logo(path: Path, width: int = 60, height: int = 40) -> Path:
    """Create a semi-opaque two-colour logo."""
    logo = Image.new("RGBA", (width, height), (250, 30, 30, 255))
    logo.paste((20, 220, 60, 200), (0, 0, width // 2, height))
    logo.save(path)
    return path


@pytest.fixture
def base_image(tmp_path):
    return create_test_image(tmp_path / "photo.png")


@pytest.fixture
def logo_image(tmp_path):
    return create_logo(tmp_path / "logo.png")


def pixels_of(path: Path) -> np.ndarray:
    with Image.open(path) as img:
        return np.array(img.convert("RGBA"))


def test_text_watermark_without_edits(base_image, tmp_path):
    output = tmp_path / "photo-with-watermark.png"
    request = WatermarkRequest(base_image, output, TextWatermark("SAMPLE"))

    result = apply_watermark(request)

    assert result.success, result.error_message
    assert result.output_path == output
    assert output.exists()

    with Image.open(base_image) as before, Image.open(output) as after:
        assert after.size == before.size

    assert not np.array_equal(pixels_of(output), pixels_of(base_image))


def test_jpeg_output(base_image, tmp_path):
    output = tmp_path / "photo-with-watermark.jpg"
    request = WatermarkRequest(base_image, output, TextWatermark("SAMPLE"))

    path = WatermarkPipeline().run(request)

    with Image.open(path) as saved:
        assert saved.format == "JPEG"
        assert saved.size == (320, 200)


@pytest.mark.parametrize("options", [
    (),
    (EditOption.BRIGHTEN,),
    (EditOption.INCREASE_CONTRAST, EditOption.GREYSCALE),
    tuple(EditOption),
    ("Not implemented yet", EditOption.INVERT),
])
def test_dimensions_never_change(base_image, logo_image, tmp_path, options):
    for kind in (TextWatermark("SAMPLE"), ImageWatermark(logo_image)):
        output = tmp_path / "out.png"
        WatermarkPipeline().run(WatermarkRequest(base_image, output, kind, options))
        with Image.open(output) as saved:
            assert saved.size == (320, 200)


def test_overlay_then_greyscale_then_invert(base_image, logo_image, tmp_path):
    plain = tmp_path / "plain.png"
    edited = tmp_path / "edited.png"
    pipeline = WatermarkPipeline()

    pipeline.run(WatermarkRequest(base_image, plain, ImageWatermark(logo_image)))
    pipeline.run(WatermarkRequest(
        base_image, edited, ImageWatermark(logo_image),
        (EditOption.GREYSCALE, EditOption.INVERT)
    ))

    composited = pixels_of(plain)
    result = pixels_of(edited)

    assert np.array_equal(result, invert(greyscale(composited)))
    assert not np.array_equal(result, greyscale(invert(composited)))
    assert np.all(result[..., 0] == result[..., 1])
    assert np.all(result[..., 1] == result[..., 2])


def test_overlay_changes_only_the_centre(base_image, logo_image, tmp_path):
    output = tmp_path / "out.png"
    WatermarkPipeline().run(WatermarkRequest(base_image, output, ImageWatermark(logo_image)))

    before = pixels_of(base_image)
    after = pixels_of(output)
    changed = np.argwhere(np.any(before != after, axis=2))

    (top, left), (bottom, right) = changed.min(axis=0), changed.max(axis=0)
    # 320x200 base, 60x40 logo -> (130, 80) .. (189, 119)
    assert (left, top) == (130, 80)
    assert (right, bottom) == (189, 119)


def test_edit_strengths_come_from_settings(base_image, tmp_path):
    output = tmp_path / "out.png"
    settings = Settings(brightness_factor=1.0)
    request = WatermarkRequest(base_image, output, TextWatermark(""), (EditOption.BRIGHTEN,))

    WatermarkPipeline(settings).run(request)

    assert np.all(pixels_of(output)[..., :3] == 255)


def test_missing_base_image(tmp_path):
    output = tmp_path / "out.png"
    request = WatermarkRequest(tmp_path / "missing.png", output, TextWatermark("SAMPLE"))

    with pytest.raises(LoadError):
        WatermarkPipeline().run(request)

    result = apply_watermark(request)
    assert not result.success
    assert result.output_path is None
    assert "missing.png" in result.error_message
    assert not output.exists()


def test_missing_overlay(base_image, tmp_path):
    output = tmp_path / "out.png"
    request = WatermarkRequest(base_image, output, ImageWatermark(tmp_path / "nologo.png"))

    with pytest.raises(LoadError):
        WatermarkPipeline().run(request)
    assert not output.exists()


def test_font_failure(base_image, tmp_path):
    output = tmp_path / "out.png"
    settings = Settings(font_path=str(tmp_path / "missing.ttf"))
    request = WatermarkRequest(base_image, output, TextWatermark("SAMPLE"))

    with pytest.raises(FontLoadError):
        WatermarkPipeline(settings).run(request)

    assert not apply_watermark(request, settings).success
    assert not output.exists()


def test_write_failure(base_image, tmp_path):
    request = WatermarkRequest(
        base_image, tmp_path / "no-such-dir" / "out.png", TextWatermark("SAMPLE")
    )

    with pytest.raises(WriteError):
        WatermarkPipeline().run(request)

    assert not apply_watermark(request).success


def test_buffers_closed_when_save_fails(base_image, tmp_path, monkeypatch):
    saved = []
    closed = []
    original_close = Image.Image.close

    def failing_save(image, path, quality=100):
        saved.append(image)
        raise WriteError(path, "disk full")

    def recording_close(self):
        closed.append(self)
        original_close(self)

    monkeypatch.setattr(runner, "save_image", failing_save)
    monkeypatch.setattr(Image.Image, "close", recording_close)

    request = WatermarkRequest(
        base_image, tmp_path / "out.png", TextWatermark("SAMPLE"), (EditOption.INVERT,)
    )
    with pytest.raises(WriteError):
        WatermarkPipeline().run(request)

    (final,) = saved
    assert any(image is final for image in closed)
    # loaded, watermarked and edited buffers
    assert len({id(image) for image in closed}) >= 3


def test_request_is_frozen(base_image, tmp_path):
    request = WatermarkRequest(str(base_image), str(tmp_path / "o.png"), TextWatermark("x"), [EditOption.INVERT])

    assert isinstance(request.input_path, Path)
    assert request.edit_options == (EditOption.INVERT,)
    with pytest.raises(AttributeError):
        request.output_path = tmp_path / "other.png"
