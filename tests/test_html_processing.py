from datetime import datetime, timezone

import pytest

from photogallery.config import Config
from photogallery.html_processing import build_gallery, render_index
from photogallery.types import Dir, FileEntry, NavigationElement, SubDir

TEMPLATE = """
<html>
<head><title>{{ name }}</title></head>
<body>
    <h1>{{ name }}</h1>
    <ul>
        {% for image in images %}
            <li>{{ image.file }}</li>
        {% endfor %}
    </ul>
    <p>{{ copyright }}</p>
</body>
</html>
"""


@pytest.fixture
def setup(tmp_path):
    config = Config(
        output=str(tmp_path / "output"),
        originals=str(tmp_path / "originals"),
        name="Test Gallery",
        copyright="© 2025 Test",
        gallery_path="/gallery",
        image_order="new",
    )
    templates = tmp_path / "templates"
    (templates / "default").mkdir(parents=True)
    (templates / "default" / "index.html.j2").write_text(TEMPLATE, encoding="utf-8")
    return config, templates


def test_render_index(setup, tmp_path):
    config, templates = setup
    task = Dir(
        path="/test",
        files={
            "image1.jpg": FileEntry(name="image1.jpg"),
            "image2.jpg": FileEntry(name="image2.jpg"),
        },
        subdirs={"subdir1": SubDir(name="subdir1")},
    )
    written = render_index(config, task, templates, 2025)

    assert written == tmp_path / "output" / "test" / "index.html"
    assert (tmp_path / "output" / "test").is_dir()
    content = written.read_text(encoding="utf-8")
    assert "Test Gallery" in content
    assert "© 2025 Test" in content
    assert "image1.jpg" in content
    assert "image2.jpg" in content


def test_render_index_newest_first(setup):
    config, templates = setup
    task = Dir(
        path="/test",
        files={
            "image1.jpg": FileEntry(
                name="image1.jpg", mod_time=datetime(2025, 1, 1, tzinfo=timezone.utc)
            ),
            "image2.jpg": FileEntry(
                name="image2.jpg", mod_time=datetime(2025, 2, 1, tzinfo=timezone.utc)
            ),
        },
        subdirs={"subdir1": SubDir(name="subdir1")},
    )
    content = render_index(config, task, templates, 2025).read_text(encoding="utf-8")
    assert "Test Gallery" in content
    assert "© 2025 Test" in content
    assert content.index("image2.jpg") < content.index("image1.jpg")


def test_missing_template_raises(tmp_path):
    config = Config(output=str(tmp_path / "out"), originals=str(tmp_path / "orig"))
    from jinja2 import TemplateNotFound

    with pytest.raises(TemplateNotFound):
        render_index(config, Dir(path="/x"), tmp_path / "templates", 2025)


def _dated_dir():
    return Dir(
        path="orig/holiday/beach",
        files={
            "orig/holiday/beach/b.jpg": FileEntry(
                name="b.jpg", mod_time=datetime(2024, 5, 1, tzinfo=timezone.utc)
            ),
            "orig/holiday/beach/a.jpg": FileEntry(
                name="a.jpg", mod_time=datetime(2024, 6, 1, tzinfo=timezone.utc)
            ),
            "orig/holiday/beach/c.jpg": FileEntry(
                name="c.jpg", mod_time=datetime(2024, 4, 1, tzinfo=timezone.utc)
            ),
        },
        subdirs={
            "orig/holiday/beach/z": SubDir(name="z"),
            "orig/holiday/beach/m": SubDir(name="m"),
        },
    )


def test_build_gallery_fields_and_navigation():
    config = Config(originals="orig", output="out", name="G", gallery_path="/g")
    gallery = build_gallery(config, _dated_dir(), 2030)
    assert gallery.name == "G"
    assert gallery.year == 2030
    assert gallery.gallery_path == "/g"
    assert gallery.folders == ["m", "z"]
    assert gallery.navigation == [
        NavigationElement(path="holiday", name="holiday"),
        NavigationElement(path="holiday/beach", name="beach"),
    ]
    assert all(image.path == "holiday/beach" for image in gallery.images)


@pytest.mark.parametrize(
    "order, expected",
    [
        ("new", ["a.jpg", "b.jpg", "c.jpg"]),
        ("old", ["c.jpg", "b.jpg", "a.jpg"]),
        ("alphabetical", ["a.jpg", "b.jpg", "c.jpg"]),
    ],
)
def test_build_gallery_image_order(order, expected):
    config = Config(originals="orig", output="out", image_order=order)
    gallery = build_gallery(config, _dated_dir(), 2030)
    assert [image.file for image in gallery.images] == expected


def test_build_gallery_indexes_follow_names():
    config = Config(originals="orig", output="out", image_order="old")
    gallery = build_gallery(config, _dated_dir(), 2030)
    assert {image.file: image.index for image in gallery.images} == {
        "a.jpg": 1,
        "b.jpg": 2,
        "c.jpg": 3,
    }


def test_build_gallery_root_directory_navigation():
    config = Config(originals="orig", output="out")
    gallery = build_gallery(config, Dir(path="orig"), 2030)
    assert gallery.navigation == [NavigationElement(path="", name="")]
    assert gallery.images == []