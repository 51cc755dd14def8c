"""Building and writing the RSS feed of recent images."""

from __future__ import annotations

import logging
import os
import posixpath
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .config import Config
from .types import RSSFeed, RSSItem

log = logging.getLogger(__name__)

RSS_TEMPLATE = "rss.xml.j2"
MAX_ITEMS = 100


def _join_url_path(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _format_date(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return format_datetime(moment)


def _parse_date(text: str):
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def make_rss_item(config: Config, output_dir, name: str, pub_date: datetime) -> RSSItem:
    """Describe the image ``name`` in ``output_dir`` as a feed entry."""
    relative = str(output_dir).removeprefix(str(config.output)).replace(os.sep, "/")
    base_url = config.gallery_url + _join_url_path(config.gallery_path, relative)
    image_url = f"{base_url}/#{name}"
    thumb_url = f"{base_url}/thumb_{name}"
    return RSSItem(
        title=name,
        description=f'&lt;img src="{thumb_url}" alt="{name}" /&gt;',
        link=image_url,
        pub_date=_format_date(pub_date),
        guid=image_url,
    )


def build_feed(config: Config, items, now=None) -> RSSFeed:
    """Assemble the feed: non-empty items, newest first, at most 100 of them."""
    if now is None:
        now = datetime.now().astimezone()

    def newest_first(item: RSSItem):
        parsed = _parse_date(item.pub_date)
        if parsed is None:
            return (1, 0.0)
        return (0, -parsed.timestamp())

    kept = sorted((item for item in items if item != RSSItem()), key=newest_first)
    return RSSFeed(
        title=config.name,
        description=f"Latest images from {config.name}",
        link=config.gallery_url + config.gallery_path,
        copyright=config.copyright,
        atom_link=config.gallery_url + _join_url_path(config.gallery_path, "rss.xml"),
        language="en-us",
        last_build_date=_format_date(now),
        items=kept[:MAX_ITEMS],
    )


def write_rss_feed(config: Config, items, templates_dir="templates", now=None):
    """Write ``rss.xml`` into the output directory when it is enabled and out of date.

    Returns the path written, or None when nothing was written.
    """
    if not config.rss_feed:
        log.debug("RSS feed generation is disabled, skipping")
        return None

    feed = build_feed(config, items, now)
    if not feed.items:
        return None

    rss_file = Path(config.output) / "rss.xml"
    if rss_file.exists():
        newest = _parse_date(feed.items[0].pub_date)
        if newest is None:
            raise ValueError(f"cannot parse publication date: {feed.items[0].pub_date!r}")
        modified = datetime.fromtimestamp(rss_file.stat().st_mtime, tz=timezone.utc)
        if modified > newest:
            log.debug("RSS feed file is up to date, skipping write")
            return None

    environment = Environment(
        loader=FileSystemLoader(str(Path(templates_dir) / config.template)),
        autoescape=False,
        keep_trailing_newline=True,
    )
    template = environment.get_template(RSS_TEMPLATE)
    rss_file.write_text(template.render(**vars(feed)), encoding="utf-8")
    log.debug("RSS feed file written: %s", rss_file)
    return rss_file