"""
Command Line Entry Point

Parse CLI arguments and serve the API with uvicorn.

Usage:
======
    items-api                       # 127.0.0.1:3000, settings defaults
    items-api --host 0.0.0.0 -p 80  # listen on all interfaces
    items-api --log debug
    items-api --version             # print version info and exit
    python -m items_api
"""

import argparse
import ipaddress
from typing import Optional, Sequence

import uvicorn

from items_api.api.main import app
from items_api.config.settings import get_settings
from items_api.shared.core.logging import setup_logging
from items_api.shared.utils.constants import LOG_LEVELS
from items_api.shared.utils.version import version_string

# Bind address for a host value that is not an IP address
FALLBACK_HOST = "0.0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="items-api",
        description="Items REST API with api-key gated admin routes",
    )
    parser.add_argument(
        "--host",
        metavar="IP",
        default=None,
        help='Host IP to listen to (for example "0.0.0.0"), defaults to HOST setting',
    )
    parser.add_argument(
        "-l",
        "--log",
        metavar="LEVEL",
        choices=LOG_LEVELS,
        default=None,
        help=f"Log level to use: {', '.join(LOG_LEVELS)}",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help="Port number to use, defaults to PORT setting",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print version info and exit",
    )
    return parser


def resolve_host(host: Optional[str]) -> str:
    """
    Normalize the listen address.

    None means localhost; anything that does not parse as an IP address
    binds to all interfaces.
    """
    if host is None:
        return "127.0.0.1"
    try:
        return str(ipaddress.ip_address(host.strip()))
    except ValueError:
        return FALLBACK_HOST


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = get_settings()
    args = build_parser().parse_args(argv)

    if args.version:
        print(version_string(settings))
        return

    setup_logging(args.log or settings.LOG_LEVEL)

    host = resolve_host(args.host if args.host is not None else settings.HOST)
    port = args.port if args.port is not None else settings.PORT

    # Logging is already configured through structlog; requests are logged by middleware
    uvicorn.run(app, host=host, port=port, log_config=None, access_log=False)


if __name__ == "__main__":
    main()
