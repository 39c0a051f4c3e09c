"""A threaded HTTP server for static files on the loopback interface."""

import errno
import logging
import os
import socket
import threading

from .mime import get_mime_type
from .request import receive_request

RESPONSE_BUFFER_SIZE = 20 * 1024 * 1024
_ACCEPT_POLL_SECONDS = 0.5

_BAD_REQUEST = b"HTTP/1.1 400 Bad Request\r\nContent-Length: 0\r\nConnection: close\r\n\r\n"
_NOT_FOUND = b"HTTP/1.1 404 Not Found\r\nContent-Length: 0\r\nConnection: close\r\n\r\n"
_NOT_IMPLEMENTED = (
    b"HTTP/1.1 501 Not Implemented\r\nContent-Length: 0\r\nConnection: close\r\n\r\n"
)

log = logging.getLogger(__name__)


def build_path(root, requested_path):
    """Return the absolute path of ``requested_path`` under ``root``.

    Raises ValueError for paths containing '..' or leading outside ``root``.
    """
    if ".." in requested_path:
        raise ValueError(f"path traversal in {requested_path!r}")
    full_path = os.path.abspath(f"{root}{requested_path}")
    root_canonical = os.path.abspath(root)
    if not full_path.startswith(root_canonical):
        raise ValueError(f"{requested_path!r} is outside {root!r}")
    return full_path


class HttpServer:
    """Serves files below ``root_path`` on 127.0.0.1.

    When ``port`` is taken the next free port above it is used; the port in
    use is in ``self.port``.
    """

    def __init__(self, root_path, port):
        self.root_path = root_path
        self.running = False
        self._lock = threading.Lock()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)
        try:
            while True:
                try:
                    self._socket.bind(("127.0.0.1", port))
                    break
                except OSError as exc:
                    if exc.errno != errno.EADDRINUSE:
                        raise
                    port += 1
            self.port = self._socket.getsockname()[1]
            self._socket.listen(socket.SOMAXCONN)
            self._socket.settimeout(_ACCEPT_POLL_SECONDS)
        except BaseException:
            self._socket.close()
            raise
        self._closed = False

    def serve_forever(self):
        """Accept connections until closed, handling each in its own thread."""
        self.running = True
        while self.running:
            try:
                client, _ = self._socket.accept()
            except OSError:
                if not self.running:
                    break
                continue
            threading.Thread(target=self.handle_client, args=(client,), daemon=True).start()

    def handle_client(self, client):
        """Answer one request on ``client`` and close it."""
        with client:
            try:
                self._respond(client)
            except OSError as exc:
                log.warning("Connection error: %s", exc)

    def _respond(self, client):
        try:
            request = receive_request(client)
        except ValueError:
            client.sendall(_BAD_REQUEST)
            return

        log.info("Received request: %s %s", request.method, request.path)

        if request.method != "GET":
            client.sendall(_NOT_IMPLEMENTED)
            log.warning("Unsupported method: %s. Responded 501", request.method)
            return

        request_path = "/index.html" if request.path == "/" else request.path
        full_path = f"{self.root_path}{request_path}"
        try:
            file = open(full_path, "rb")
        except OSError:
            client.sendall(_NOT_FOUND)
            log.warning("File not found: %s. Responded 404", full_path)
            return

        with file:
            size = os.fstat(file.fileno()).st_size
            header = (
                "HTTP/1.1 200 OK\r\n"
                f"Content-Type: {get_mime_type(request_path)}\r\n"
                f"Content-Length: {size}\r\n"
                "Connection: close\r\n\r\n"
            )
            client.sendall(header.encode("ascii"))
            chunk_size = min(size, RESPONSE_BUFFER_SIZE)
            while chunk_size and (block := file.read(chunk_size)):
                client.sendall(block)
        log.info("Responded 200 OK for %s", full_path)

    def close(self):
        """Stop the accept loop and release the listening socket."""
        with self._lock:
            self.running = False
            if self._closed:
                return
            self._closed = True
            self._socket.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()