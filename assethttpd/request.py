"""Reading and parsing of HTTP request lines."""

import re
from dataclasses import dataclass

_RECV_SIZE = 1024
_HEADER_END = b"\r\n\r\n"
_ESCAPE = re.compile(rb"%(..)|\+", re.DOTALL)
_HEX_PREFIX = re.compile(rb"[0-9a-fA-F]+")
_LINE_BREAK = re.compile(rb"[\r\n]")


@dataclass(frozen=True)
class HttpRequest:
    """The parts of an HTTP request line."""

    method: str
    path: str
    version: str


def _unescape(match):
    pair = match.group(1)
    if pair is None:
        return b" "
    digits = _HEX_PREFIX.match(pair)
    value = int(digits.group(), 16) if digits else 0
    return bytes([value & 0xFF])


def decode_url(encoded):
    """Decode %XX escapes and '+' in a URL path; the bytes are read as UTF-8.

    A '%' without two characters after it is kept as it is. Decoding stops at
    a NUL byte.
    """
    raw = encoded.encode("utf-8") if isinstance(encoded, str) else bytes(encoded)
    decoded = _ESCAPE.sub(_unescape, raw)
    decoded = decoded.split(b"\x00", 1)[0]
    return decoded.decode("utf-8", errors="replace")


def parse_request(data):
    """Parse the request line out of raw request bytes.

    Raises ValueError when there is no request line or no method in it.
    """
    data = bytes(data).split(b"\x00", 1)[0]
    line = _LINE_BREAK.split(data.lstrip(b"\r\n"), 1)[0]
    if not line:
        raise ValueError("empty request")
    tokens = line.split()
    if not tokens:
        raise ValueError("request line has no method")
    method = tokens[0].decode("latin-1")
    path = decode_url(tokens[1]) if len(tokens) > 1 else ""
    version = tokens[2].decode("latin-1") if len(tokens) > 2 else ""
    return HttpRequest(method=method, path=path, version=version)


def receive_request(sock):
    """Read from ``sock`` until the end of the headers or of the stream, then parse."""
    received = bytearray()
    while True:
        chunk = sock.recv(_RECV_SIZE)
        if not chunk:
            break
        received += chunk
        if _HEADER_END in received:
            break
    return parse_request(received)