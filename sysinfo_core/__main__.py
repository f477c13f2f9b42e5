# -*- coding: utf-8 -*-
#
# sysinfo-core : local diagnostics endpoint for captured host system metrics
# License : BSD-3-Clause


"""
sysinfo-core
~~~~~~~~~~~~

serves CPU, process and disk usage parsed from captured reports
"""

# stdlib imports
import argparse
import os
import platform
import sys

# third party imports
import uvicorn

# app imports
from .__version__ import __version__
from .constants import DEFAULT_PORT

PORT_RANGE = (1024, 65353)


def port(value) -> int:
    """Check if the provided port is valid"""
    try:
        value = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value} is not a number")

    if PORT_RANGE[0] <= value <= PORT_RANGE[1]:
        return value

    raise argparse.ArgumentTypeError(
        f"{value} is not valid. Pick a port between {PORT_RANGE[0]} and {PORT_RANGE[1]}."
    )


def setup_parser() -> argparse.ArgumentParser:
    """Set default values and handle arg parser"""
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="sysinfo-core serves a JSON snapshot of CPU, process and disk usage read from captured lscpu, top and df output.",
    )
    parser.add_argument(
        "--reload",
        dest="livereload",
        action="store_true",
        default=False,
        help="Enable live reload for development",
    )
    parser.add_argument(
        "--host",
        dest="host",
        default="0.0.0.0",
        help="Address to bind the server to",
    )
    parser.add_argument(
        "--port",
        "-p",
        dest="port",
        type=port,
        default=DEFAULT_PORT,
        help="Port number to run the server on",
    )
    parser.add_argument(
        "--debug",
        "-d",
        dest="debug",
        action="store_true",
        default=False,
        help="Enable debug mode with verbose logging",
    )
    parser.add_argument(
        "--version", "-V", "-v", action="version", version=f"{__version__}"
    )
    return parser


def main(argv=None) -> None:
    parser = setup_parser()
    args = parser.parse_args(argv)

    # hard set no support for python < v3.9
    if sys.version_info < (3, 9):
        sys.exit(
            "{0} requires Python version 3.9 or higher...\nyou are trying to run with Python version {1}...\nexiting...".format(
                os.path.basename(__file__), platform.python_version()
            )
        )

    os.environ["SYSINFO_CORE_DEBUG"] = str(args.debug)

    uvicorn.run(
        "sysinfo_core.asgi:app",
        port=args.port,
        host=args.host,
        reload=args.livereload,
    )


if __name__ == "__main__":
    sys.exit(main())
