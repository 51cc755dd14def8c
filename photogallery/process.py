"""Walking the originals and bringing the output tree up to date."""

from __future__ import annotations

import logging
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from .config import Config
from .file_utils import ensure_output_dir, update_template_files
from .html_processing import render_index
from .image_processing import _output_dir_for, process_image
from .rss_processing import make_rss_item, write_rss_feed
from .types import DirMap, FileEntry, RSSItem, SubDir

log = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".jpg", ".jpeg")


def _directory_needs_update(config: Config, path: str, info: os.stat_result) -> bool:
    index = os.path.join(_output_dir_for(config, path), "index.html")
    try:
        index_info = os.stat(index)
    except FileNotFoundError:
        log.debug("Output index does not exist: %s", index)
        return True
    except OSError:
        return False
    return info.st_mtime_ns > index_info.st_mtime_ns


def scan_originals(config: Config) -> tuple[DirMap, list[str], list[RSSItem]]:
    """Walk the originals directory.

    Returns the directories found, the images whose output is missing or
    stale, and feed entries for the images that are already up to date.
    """
    galleries = DirMap()
    pending: list[str] = []
    items: list[RSSItem] = []

    def visit_file(path: str, name: str, parent: str, info: os.stat_result) -> None:
        if not name.endswith(IMAGE_SUFFIXES):
            log.debug("Ignoring non-jpg file %s", path)
            return
        output_dir = _output_dir_for(config, parent)
        needs_update = False
        thumb_time = None
        for size in ("thumb", "full"):
            target = os.path.join(output_dir, f"{size}_{name}")
            try:
                target_info = os.stat(target)
            except FileNotFoundError:
                needs_update = True
                continue
            if info.st_mtime_ns > target_info.st_mtime_ns:
                needs_update = True
            elif size == "thumb":
                thumb_time = datetime.fromtimestamp(target_info.st_mtime).astimezone()
        if needs_update:
            pending.append(path)
        else:
            items.append(make_rss_item(config, output_dir, name, thumb_time))
        galleries[parent].files[path] = FileEntry(
            name=name,
            mod_time=datetime.fromtimestamp(info.st_mtime, tz=timezone.utc),
        )

    def visit_dir(path: str, name: str, parent: str, info: os.stat_result) -> None:
        galleries.add_dir(path, name, _directory_needs_update(config, path, info))
        if parent in galleries:
            galleries[parent].subdirs[path] = SubDir(name=name)
        with os.scandir(path) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
        for entry in entries:
            child = os.path.join(path, entry.name)
            entry_info = entry.stat(follow_symlinks=False)
            if entry.is_dir(follow_symlinks=False):
                visit_dir(child, entry.name, path, entry_info)
            else:
                visit_file(child, entry.name, path, entry_info)

    root = str(config.originals)
    root_info = os.stat(root)
    if not stat.S_ISDIR(root_info.st_mode):
        raise NotADirectoryError(f"originals is not a directory: {root}")
    visit_dir(root, os.path.basename(os.path.normpath(root)), os.path.dirname(root), root_info)
    return galleries, pending, items


def process(config: Config, templates_dir="templates", workers=None) -> None:
    """Generate images, index pages, the feed and template assets in the output."""
    ensure_output_dir(config)
    galleries, pending, items = scan_originals(config)

    workers = workers or os.cpu_count() or 1
    with ThreadPoolExecutor(max_workers=workers) as pool:
        image_jobs = [pool.submit(process_image, config, path) for path in pending]
        page_jobs = [
            pool.submit(render_index, config, directory, templates_dir)
            for directory in galleries.values()
            if directory.needs_update and (directory.files or directory.subdirs)
        ]
        items.extend(job.result() for job in image_jobs)
        for job in page_jobs:
            job.result()

    write_rss_feed(config, items, templates_dir)
    update_template_files(config, templates_dir)
    log.debug("Processing completed")