"""Command line entry point that serves an asset directory."""

import argparse
import logging
import sys

from .server import HttpServer

DEFAULT_ROOT = "./assets"
DEFAULT_PORT = 3050


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="assethttpd", description="Serve static files on 127.0.0.1."
    )
    parser.add_argument("root", nargs="?", default=DEFAULT_ROOT, help="directory to serve")
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="first port to try"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Start the server and run until interrupted; return the exit status."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO, format="[%(levelname)s] %(message)s", stream=sys.stdout
    )
    try:
        server = HttpServer(args.root, args.port)
    except (OSError, OverflowError) as exc:
        print(f"[ERROR] Failed to create server: {exc}", file=sys.stderr)
        return 1

    print(
        f"[INFO] Server created successfully, Listening on http://localhost:{server.port}",
        flush=True,
    )
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())