"""Loading and validating the gallery configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

log = logging.getLogger(__name__)

IMAGE_ORDERS = ("new", "old", "alphabetical")


class ConfigError(ValueError):
    """Raised when the configuration file is unreadable or invalid."""


@dataclass
class Config:
    """Gallery settings, with the defaults used when no file is present."""

    name: str = "Photo Gallery"
    copyright: str = ""
    originals: str = "originals"
    output: str = "output"
    template: str = "default"
    thumb_size: int = 200
    full_size: int = 2000
    copy_originals: bool = False
    image_order: str = "new"
    jpeg_quality: int = 90
    gallery_path: str = "/"
    gallery_url: str = ""
    rss_feed: bool = False


_YAML_KEYS = {
    "name": "name",
    "copyright": "copyright",
    "originals": "originals",
    "output": "output",
    "template": "template",
    "thumbnail_size": "thumb_size",
    "full_size": "full_size",
    "copy_originals": "copy_originals",
    "image_order": "image_order",
    "jpeg_quality": "jpeg_quality",
    "gallery_path": "gallery_path",
    "gallery_url": "gallery_url",
    "rss_feed": "rss_feed",
}

_FIELD_TYPES = {f.name: f.type for f in fields(Config)}


def _coerce(key: str, attr: str, value):
    kind = _FIELD_TYPES[attr]
    if kind == "bool":
        if not isinstance(value, bool):
            raise ConfigError(f"{key}: expected a boolean, got {value!r}")
        return value
    if kind == "int":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{key}: expected an integer, got {value!r}")
        return value
    if isinstance(value, (dict, list)):
        raise ConfigError(f"{key}: expected a string, got {value!r}")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _looks_like_url(url: str) -> bool:
    return url.startswith(("http://", "https://"))


def _validate(config: Config) -> None:
    if config.image_order not in IMAGE_ORDERS:
        raise ConfigError(
            f"invalid image order: {config.image_order}, "
            "must be one of: new, old, alphabetical"
        )
    if config.rss_feed and not config.gallery_url:
        raise ConfigError("gallery_url is required when rss_feed is enabled")
    if config.rss_feed and not _looks_like_url(config.gallery_url):
        raise ConfigError(f"invalid gallery_url: {config.gallery_url}")
    if config.originals == config.output:
        raise ConfigError(
            'the "originals" and "output" directories cannot be the same'
        )


def load_config(filename) -> Config:
    """Read ``filename`` as YAML over the defaults; a missing file gives the defaults."""
    log.debug("Loading config file %s", filename)
    config = Config()
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except FileNotFoundError:
        log.info("No config file found, using defaults")
        return config

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {filename}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{filename}: expected a mapping at the top level")

    for key, value in data.items():
        attr = _YAML_KEYS.get(key)
        if attr is None or value is None:
            continue
        setattr(config, attr, _coerce(key, attr, value))

    _validate(config)
    log.debug("Config file parsed successfully: %s", config)
    return config