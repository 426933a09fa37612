import argparse
import logging
import socket
import sys

import uvicorn

from .app import app
from .core.config import get_settings

logger = logging.getLogger("page_to_md")


def is_port_available(host: str, port: int) -> bool:
    """Return True when nothing is bound to ``host:port``"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
            return True
        except OSError:
            return False


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="page-to-md",
        description="HTTP service that saves web pages as Markdown files",
    )
    parser.add_argument("--host", default=settings.host, help="Host to bind to")
    parser.add_argument(
        "--port", type=int, default=settings.port, help="Port to listen on"
    )
    args = parser.parse_args()

    if not is_port_available(args.host, args.port):
        print(f"Error: Port {args.port} is already in use")
        print("Try using a different port:")
        print(f"  page-to-md --port {args.port + 1}")
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.info(f"Server listening on http://{args.host}:{args.port}")

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
