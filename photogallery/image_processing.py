"""Resizing original images into thumbnails and full-size copies."""

from __future__ import annotations

import logging
import os
from datetime import datetime

from PIL import Image

from .config import Config
from .file_utils import copy_file
from .rss_processing import make_rss_item
from .types import RSSItem

log = logging.getLogger(__name__)


def _output_dir_for(config: Config, directory) -> str:
    """Map a directory below the originals onto its place in the output tree."""
    relative = str(directory).removeprefix(str(config.originals))
    relative = relative.lstrip("/" + os.sep)
    if not relative:
        return str(config.output)
    return os.path.join(str(config.output), relative)


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size: {width}x{height}")


def thumbnail_dimensions(width: int, height: int, thumb_size: int) -> tuple[int, int]:
    """Thumbnail size: ``thumb_size`` wide, height following the aspect ratio."""
    _check_size(width, height)
    aspect_ratio = width / height
    return thumb_size, int(thumb_size / aspect_ratio)


def full_dimensions(width: int, height: int, full_size: int) -> tuple[int, int]:
    """Full image size: the longest side becomes ``full_size``."""
    _check_size(width, height)
    aspect_ratio = width / height
    if aspect_ratio < 1:
        return int(full_size * aspect_ratio), full_size
    return full_size, int(full_size / aspect_ratio)


def _save_resized(image: Image.Image, size: tuple[int, int], resample, target: str, quality: int) -> None:
    width, height = size
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    resized = image.resize((max(width, 1), max(height, 1)), resample)
    resized.save(target, format="JPEG", quality=quality)


def process_image(config: Config, path) -> RSSItem:
    """Write the thumbnail and full image of ``path``; return its feed entry."""
    path = str(path)
    name = os.path.basename(path)
    output_dir = _output_dir_for(config, os.path.dirname(path))
    thumb_file = os.path.join(output_dir, f"thumb_{name}")
    full_file = os.path.join(output_dir, f"full_{name}")
    log.debug("Processing image %s", path)

    with Image.open(path) as image:
        image.load()
        width, height = image.size
        os.makedirs(output_dir, exist_ok=True)

        _save_resized(
            image,
            thumbnail_dimensions(width, height, config.thumb_size),
            Image.Resampling.LANCZOS,
            thumb_file,
            config.jpeg_quality,
        )
        log.debug("Thumbnail saved: %s", thumb_file)

        if config.copy_originals:
            copy_file(path, full_file)
            log.debug("Original file copied: %s", full_file)
        else:
            _save_resized(
                image,
                full_dimensions(width, height, config.full_size),
                Image.Resampling.BILINEAR,
                full_file,
                config.jpeg_quality,
            )
            log.debug("Full image saved: %s", full_file)

    pub_date = datetime.fromtimestamp(os.stat(thumb_file).st_mtime).astimezone()
    return make_rss_item(config, output_dir, name, pub_date)