"""Rendering the index page of one gallery directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .config import Config
from .types import Dir, Gallery, Image, NavigationElement

log = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html.j2"


def _relative_image_path(config: Config, directory: Dir) -> str:
    relative = str(directory.path).removeprefix(str(config.originals))
    relative = relative.replace(os.sep, "/")
    return relative.removeprefix("/")


def _navigation(image_path: str) -> list[NavigationElement]:
    parts = image_path.split("/")
    return [
        NavigationElement(path="/".join(parts[: depth + 1]), name=part)
        for depth, part in enumerate(parts)
    ]


def build_gallery(config: Config, directory: Dir, year: int) -> Gallery:
    """Collect the images, folders and navigation of ``directory`` for the index page."""
    image_path = _relative_image_path(config, directory)

    entries = sorted(directory.files.values(), key=lambda entry: entry.name)
    pairs = [
        (
            entry,
            Image(
                description=entry.name,
                file=entry.name,
                path=image_path,
                index=position,
            ),
        )
        for position, entry in enumerate(entries, start=1)
    ]

    if config.image_order == "new":
        pairs.sort(key=lambda pair: pair[0].mod_time, reverse=True)
    elif config.image_order == "old":
        pairs.sort(key=lambda pair: pair[0].mod_time)

    folders = sorted(subdir.name for subdir in directory.subdirs.values())

    return Gallery(
        name=config.name,
        copyright=config.copyright,
        folders=folders,
        navigation=_navigation(image_path),
        images=[image for _, image in pairs],
        year=year,
        gallery_path=config.gallery_path,
    )


def render_index(config: Config, directory: Dir, templates_dir="templates", year=None) -> Path:
    """Write ``index.html`` for ``directory`` into the output tree; return its path."""
    if year is None:
        from datetime import date

        year = date.today().year

    environment = Environment(
        loader=FileSystemLoader(str(Path(templates_dir) / config.template)),
        autoescape=False,
        keep_trailing_newline=True,
    )
    template = environment.get_template(INDEX_TEMPLATE)

    gallery = build_gallery(config, directory, year)
    output_dir = Path(config.output) / _relative_image_path(config, directory)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_file = output_dir / "index.html"
    output_file.write_text(template.render(**vars(gallery)), encoding="utf-8")
    log.debug("Index written: %s", output_file)
    return output_file