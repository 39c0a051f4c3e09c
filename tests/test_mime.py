import pytest

from assethttpd.mime import get_mime_type


@pytest.mark.parametrize(
    "name, expected",
    [
        ("/index.html", "text/html"),
        ("/style.css", "text/css"),
        ("/app.js", "application/javascript"),
        ("/data.json", "application/json"),
        ("/font.ttf", "font/ttf"),
        ("/photo.jpg", "image/jpeg"),
        ("/icon.png", "image/png"),
        ("/anim.gif", "image/gif"),
        ("/logo.svg", "image/svg+xml"),
        ("/favicon.ico", "image/x-icon"),
        ("/song.mp3", "audio/mpeg"),
    ],
)
def test_known_extensions(name, expected):
    assert get_mime_type(name) == expected


def test_unknown_extension_is_octet_stream():
    assert get_mime_type("/archive.zip") == "application/octet-stream"


def test_no_dot_is_octet_stream():
    assert get_mime_type("README") == "application/octet-stream"


def test_leading_dot_only_is_octet_stream():
    assert get_mime_type(".html") == "application/octet-stream"


def test_last_dot_decides():
    assert get_mime_type("/page.html.png") == "image/png"


def test_dot_in_directory_name_does_not_count():
    assert get_mime_type("/dir.html/file") == "application/octet-stream"


def test_extension_is_case_sensitive():
    assert get_mime_type("/INDEX.HTML") == "application/octet-stream"