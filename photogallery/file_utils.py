"""File system helpers for the output directory and template assets."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .config import Config

log = logging.getLogger(__name__)

TEMPLATE_ASSETS = ("default.css", "default.js", "folder.svg")


def ensure_output_dir(config: Config) -> Path:
    """Create the output directory if nothing exists at its path; return the path."""
    output = Path(config.output)
    log.debug("Checking output directory %s", output)
    if not output.exists():
        log.info("Output directory does not exist, creating it: %s", output)
        output.mkdir(parents=True, exist_ok=True)
    return output


def copy_file(source, destination) -> None:
    """Copy the content of ``source`` to ``destination``."""
    log.debug("Copying file %s to %s", source, destination)
    shutil.copyfile(source, destination)


def update_template_files(config: Config, templates_dir="templates") -> list[Path]:
    """Copy template assets that are missing from the output directory.

    Returns the paths that were written.
    """
    copied = []
    template_root = Path(templates_dir) / config.template
    output = Path(config.output)
    for name in TEMPLATE_ASSETS:
        target = output / name
        if target.exists():
            continue
        log.debug("Output file does not exist: %s", target)
        copy_file(template_root / name, target)
        copied.append(target)
    return copied