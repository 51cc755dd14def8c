[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "photogallery"
version = "0.1.0"
description = "Static photo gallery generator with thumbnails, HTML index pages and an RSS feed"
requires-python = ">=3.10"
keywords = ["gallery", "photo", "static-site", "thumbnails", "rss", "jpeg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Presentation",
]
dependencies = [
    "pyyaml",
    "pillow",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
photogallery = "photogallery.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["photogallery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
