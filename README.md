# assethttpd

assethttpd is a small HTTP server for static files. It listens on
`127.0.0.1` only and serves files from one root directory. Each accepted
connection is handled in its own thread.

It answers one request per connection:

- Only `GET` is served. Any other method gets `501 Not Implemented`.
- A request with no request line, or with no method in it, gets
  `400 Bad Request`.
- `/` is served as `/index.html`.
- Percent escapes in the request path are decoded, and `+` becomes a space.
  The decoded bytes are read as UTF-8.
- The `Content-Type` comes from the file extension (`.html`, `.css`, `.js`,
  `.json`, `.ttf`, `.jpg`, `.png`, `.gif`, `.svg`, `.ico`, `.mp3`). Any other
  extension gets `application/octet-stream`.
- A file that cannot be opened gets `404 Not Found`.
- Every response carries `Connection: close`, and the connection is closed
  after it.

If the requested port is already in use, the server tries the next port up.
It keeps going until a bind succeeds. The port it ends up on is in
`server.port`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
assethttpd
```

With no arguments, this serves `./assets` and starts trying ports at 3050.
The address it ends up on is printed at start-up, and each request is logged
to standard output. Press Ctrl+C to stop it.

```
assethttpd path/to/site --port 8080
```

- `root`: the directory to serve. The default is `./assets`.
- `--port`: the first port to try. The default is 3050.

If the listening socket cannot be created, an error is printed and the
command exits with status 1.

## Library use

```python
from assethttpd.server import HttpServer

with HttpServer("./assets", 3050) as server:
    print(f"Listening on http://localhost:{server.port}")
    server.serve_forever()
```

`serve_forever()` blocks until `close()` is called, which can be done from
another thread. Leaving the `with` block also closes the server. Calling
`close()` more than once does nothing further.

### Helpers

- `assethttpd.mime.get_mime_type(filename)` returns the MIME type for a file
  name, judged by the text after its last dot.
- `assethttpd.request.decode_url(encoded)` decodes a URL-encoded path. A `%`
  without two characters after it is kept as it is.
- `assethttpd.request.parse_request(data)` turns raw request bytes into an
  `HttpRequest` with `method`, `path` and `version`. It raises `ValueError`
  when there is no request line.
- `assethttpd.request.receive_request(sock)` reads from a socket until the
  end of the headers or of the stream, then parses the request line.
- `assethttpd.server.build_path(root, requested_path)` resolves a requested
  path under a root directory. It raises `ValueError` for paths that contain
  `..` or that end up outside the root.

## What it does not do

- Only the request line is parsed. Request headers and bodies are neither
  read into the request nor acted on.
- There is no `HEAD`, no range requests, no caching headers and no directory
  listings.
- The server opens the root path joined with the requested path as it is; it
  does not call `build_path` itself, so requests are not checked for leaving
  the root directory.
- It cannot be made to listen on any address other than `127.0.0.1`.