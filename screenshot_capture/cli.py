"""
╔══════════════════════════════════════════════════════════════════════════╗
║            Instrument Screen Capture : LAN (VXI-11 / SCPI)               ║
╠══════════════════════════════════════════════════════════════════════════╣
║  screenshot-capture -a 192.168.1.10                 autodetect + save   ║
║  screenshot-capture -a 192.168.1.10 -p rigol-2000 scope.bmp             ║
║  screenshot-capture --list                          show plugins        ║
╚══════════════════════════════════════════════════════════════════════════╝
"""

import argparse
import logging
import sys

from . import __version__, settings
from .capture import screenshot
from .errors import ScreenshotError
from .listing import list_plugins
from .registry import default_registry


def _timeout(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout '{value}'")
    if seconds < 0:
        raise argparse.ArgumentTypeError("timeout must not be negative")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screenshot-capture",
        description="Capture a screenshot from a LAN connected instrument",
    )
    parser.add_argument("-a", "--address", default="",
                        help="instrument IP address, hostname or VISA resource")
    parser.add_argument("-p", "--plugin", default="",
                        help="screenshot plugin name (skips autodetection)")
    parser.add_argument("-t", "--timeout", type=_timeout, default=settings.DEFAULT_TIMEOUT_SEC,
                        help="timeout in seconds per transfer, 0 = none (default: %(default)s)")
    parser.add_argument("-l", "--list", action="store_true",
                        help="list available screenshot plugins and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show SCPI traffic and plugin scores")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("filename", nargs="?", default=None,
                        help="output file (default: screenshot_<address>_<date_time>.<format>)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        registry = default_registry()
        if args.list:
            list_plugins(registry)
            return 0
        screenshot(args.address, args.plugin or None, args.filename, args.timeout,
                   registry=registry)
    except ScreenshotError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
