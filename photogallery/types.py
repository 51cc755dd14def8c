"""Data structures shared by the gallery generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class Metadata:
    """EXIF and IPTC metadata of an image, as rows of strings."""

    exif: list[list[str]] = field(default_factory=list)
    iptc: list[list[str]] = field(default_factory=list)


@dataclass(frozen=True)
class RSSItem:
    """A single entry in the RSS feed."""

    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = ""
    guid: str = ""


@dataclass
class RSSFeed:
    """The RSS feed as handed to the feed template."""

    title: str = ""
    description: str = ""
    link: str = ""
    copyright: str = ""
    atom_link: str = ""
    language: str = ""
    last_build_date: str = ""
    items: list[RSSItem] = field(default_factory=list)


@dataclass
class Image:
    """An image shown on a gallery page."""

    description: str = ""
    file: str = ""
    path: str = ""
    metadata: Metadata = field(default_factory=Metadata)
    index: int = 0


@dataclass(frozen=True)
class NavigationElement:
    """One step of the breadcrumb navigation."""

    path: str = ""
    name: str = ""


@dataclass
class Gallery:
    """Everything the index template needs to render one directory."""

    name: str = ""
    copyright: str = ""
    folders: list[str] = field(default_factory=list)
    navigation: list[NavigationElement] = field(default_factory=list)
    images: list[Image] = field(default_factory=list)
    year: int = 0
    gallery_path: str = "/"


@dataclass(frozen=True)
class FileEntry:
    """A file on disk with its modification time."""

    name: str = ""
    mod_time: datetime = ZERO_TIME


@dataclass(frozen=True)
class SubDir:
    """A subdirectory on disk."""

    name: str = ""


@dataclass
class Dir:
    """The content of a directory on disk."""

    name: str = ""
    path: str = ""
    files: dict[str, FileEntry] = field(default_factory=dict)
    subdirs: dict[str, SubDir] = field(default_factory=dict)
    needs_update: bool = False


class DirMap(dict):
    """Directories on disk, keyed by path."""

    def add_dir(self, path: str, name: str, needs_update: bool) -> Dir:
        """Add a directory unless one is already known at ``path``; return the entry."""
        if path not in self:
            self[path] = Dir(name=name, path=path, needs_update=needs_update)
        return self[path]