# photogallery

Builds a static photo gallery from a directory tree of JPEG images. For each
image it writes a thumbnail and a full-size image. For each directory it
writes an `index.html` page. It can also write an RSS feed of the newest
images.

Only files whose names end in `.jpg` or `.jpeg` (lower case) are picked up;
other files are ignored. An image is processed again only when its thumbnail
or full-size output is missing or older than the original. A directory's
`index.html` is written again only when it is missing or older than the
directory, and only if the directory holds images or subdirectories. Later
runs therefore handle only what changed.

## Installation

```
pip install .
```

## Usage

Run the command from the directory that holds your configuration file and
your templates directory:

```
photogallery
```

Options:

- `--config FILE`: configuration file to read (default: `config.yml`).
  If the file does not exist, the defaults below are used.
- `--templates DIR`: directory holding the templates (default: `templates`).

The command exits with status 1 when the configuration cannot be loaded or
processing fails, and 0 otherwise.

### Logging

Log lines go to standard output. Two environment variables control them:

- `LOG_LEVEL`: one of `debug`, `info`, `warn` or `error`, in any case. The
  default, also used for unknown values, is `info`.
- `ADD_SOURCE`: set it to `true` to include the source file and line in each
  log line.

## Configuration

The configuration file is YAML and takes these keys:

| key              | default         | meaning                                                |
|------------------|-----------------|--------------------------------------------------------|
| `name`           | `Photo Gallery` | gallery title                                          |
| `copyright`      | empty           | copyright line                                         |
| `originals`      | `originals`     | directory with the source images                       |
| `output`         | `output`        | directory the gallery is written to                    |
| `template`       | `default`       | subdirectory of the templates directory to use         |
| `thumbnail_size` | `200`           | thumbnail width in pixels                              |
| `full_size`      | `2000`          | longest side of the full-size image, in pixels         |
| `copy_originals` | `false`         | copy each original unchanged instead of resizing it    |
| `image_order`    | `new`           | image order: `new`, `old` or `alphabetical`            |
| `jpeg_quality`   | `90`            | JPEG quality of the images written                     |
| `gallery_path`   | `/`             | path the gallery is served under                       |
| `gallery_url`    | empty           | base URL; required when `rss_feed` is on               |
| `rss_feed`       | `false`         | write `rss.xml` to the output directory                |

Unknown keys and keys set to null are ignored. `load_config` raises
`ConfigError` when:

- the file is not valid YAML, or its top level is not a mapping;
- a value has the wrong type (a boolean or integer key given something else);
- `image_order` is not one of the three values above;
- `rss_feed` is on and `gallery_url` is empty or does not start with
  `http://` or `https://`;
- `originals` and `output` are the same.

## Output

For an image `photo.jpg` the output holds, in the matching subdirectory:

- `thumb_photo.jpg`: `thumbnail_size` pixels wide, its height following the
  aspect ratio (Lanczos resampling).
- `full_photo.jpg`: the longest side scaled to `full_size` (bilinear
  resampling), or the original copied unchanged when `copy_originals` is on.

Images on an index page are numbered in alphabetical order and then listed
newest first (`new`), oldest first (`old`) or alphabetically, by file
modification time. Subfolders are listed alphabetically.

The feed, when `rss_feed` is on, holds at most the 100 newest images, newest
first. It is written only if there are items and `rss.xml` is missing or older
than the newest item.

`default.css`, `default.js` and `folder.svg` are copied from the template
directory into the output directory when they are not already there.

## Templates

Templates are Jinja2 files in `<templates>/<template>/`:

- `index.html.j2`: the page template. It receives `name`, `copyright`,
  `folders` (list of names), `navigation` (elements with `path` and `name`),
  `images` (with `description`, `file`, `path`, `index` and `metadata`),
  `year` and `gallery_path`.
- `rss.xml.j2`: the feed template, needed only when `rss_feed` is on. It
  receives `title`, `description`, `link`, `copyright`, `atom_link`,
  `language`, `last_build_date` and `items` (with `title`, `description`,
  `link`, `pub_date` and `guid`).
- `default.css`, `default.js` and `folder.svg`.

Autoescaping is off; each item's `description` is already an escaped
`<img>` tag pointing at the thumbnail.

## Library use

```python
from photogallery.config import load_config
from photogallery.process import process

config = load_config("config.yml")
process(config, "templates", 4)
```

Other entry points: `photogallery.process.scan_originals`,
`photogallery.image_processing.process_image`,
`photogallery.html_processing.build_gallery` and `render_index`, and
`photogallery.rss_processing.build_feed` and `write_rss_feed`.

## What it does not do

- It reads no EXIF or IPTC data: each image's `metadata` is always empty.
- It does not remove output for originals that were deleted.
- It ships no templates; you supply the template directory.
- It only writes files; it does not serve the gallery.