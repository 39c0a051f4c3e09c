"""Content types for files served from the asset directory."""

_MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".ttf": "font/ttf",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".mp3": "audio/mpeg",
}

DEFAULT_MIME_TYPE = "application/octet-stream"


def get_mime_type(filename):
    """Return the MIME type for ``filename`` judged by the text after its last dot."""
    dot = filename.rfind(".")
    if dot <= 0:
        return DEFAULT_MIME_TYPE
    return _MIME_TYPES.get(filename[dot:], DEFAULT_MIME_TYPE)