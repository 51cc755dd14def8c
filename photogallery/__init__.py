"""Static photo gallery generator: thumbnails, index pages and an RSS feed."""

__version__ = "0.1.0"