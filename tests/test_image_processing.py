import os

import pytest
from PIL import Image

from photogallery.config import Config
from photogallery.image_processing import (
    full_dimensions,
    process_image,
    thumbnail_dimensions,
)


def _make_config(tmp_path, **overrides):
    settings = dict(
        originals=str(tmp_path / "originals"),
        output=str(tmp_path / "output"),
        thumb_size=100,
        full_size=800,
        jpeg_quality=90,
        copy_originals=False,
        gallery_url="https://example.com",
        gallery_path="/gallery",
    )
    settings.update(overrides)
    return Config(**settings)


def _make_image(path, size=(200, 100)):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, (10, 20, 30)).save(path, "JPEG", quality=90)
    return path


def test_thumbnail_dimensions_follow_aspect_ratio():
    assert thumbnail_dimensions(200, 100, 100) == (100, 50)


def test_full_dimensions_landscape():
    assert full_dimensions(200, 100, 800) == (800, 400)


def test_full_dimensions_portrait():
    assert full_dimensions(100, 200, 800) == (400, 800)


def test_dimensions_reject_empty_image():
    with pytest.raises(ValueError):
        thumbnail_dimensions(200, 0, 100)


def test_process_image(tmp_path):
    config = _make_config(tmp_path)
    original = _make_image(tmp_path / "originals" / "test.jpg")

    item = process_image(config, original)

    output_dir = tmp_path / "output"
    with Image.open(output_dir / "thumb_test.jpg") as thumb:
        assert thumb.size == (100, 50)
    with Image.open(output_dir / "full_test.jpg") as full:
        assert full.size == (800, 400)
    assert item.title == "test.jpg"
    assert item.link == "https://example.com/gallery/#test.jpg"
    assert item.guid == item.link


def test_process_image_with_copy_originals(tmp_path):
    config = _make_config(tmp_path, copy_originals=True)
    original = _make_image(tmp_path / "originals" / "test.jpg")

    process_image(config, original)

    output_dir = tmp_path / "output"
    assert (output_dir / "thumb_test.jpg").is_file()
    assert (output_dir / "full_test.jpg").read_bytes() == original.read_bytes()


def test_process_image_in_subdirectory(tmp_path):
    config = _make_config(tmp_path)
    original = _make_image(tmp_path / "originals" / "trip" / "beach.jpg", size=(100, 200))

    item = process_image(config, str(original))

    sub_output = tmp_path / "output" / "trip"
    assert sorted(os.listdir(sub_output)) == ["full_beach.jpg", "thumb_beach.jpg"]
    with Image.open(sub_output / "full_beach.jpg") as full:
        assert full.size == (400, 800)
    assert item.link == "https://example.com/gallery/trip/#beach.jpg"
    assert "thumb_beach.jpg" in item.description


def test_process_image_missing_file(tmp_path):
    config = _make_config(tmp_path)
    with pytest.raises(FileNotFoundError):
        process_image(config, tmp_path / "originals" / "missing.jpg")