"""Command line front end: ``code128b [OPTIONS] <image filename> <text> ...``"""
import argparse
import logging
import sys
from typing import List, Optional, Tuple

from PIL import ImageColor

from code128b import __version__
from code128b.barcode import generate_barcode_image, save_barcode
from code128b.errors import ColorError

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_UNKNOWN_ERROR = 1
EXIT_OPTION_ERROR = 2

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 320
DEFAULT_FOREGROUND = "Black"
DEFAULT_BACKGROUND = "White"
DEFAULT_FONT_SIZE = 48
DEFAULT_MODULE_WIDTH = 0

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


class OptionError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise OptionError(message)


def parse_color(name: str) -> Tuple[int, ...]:
    """Translate a color name or HTML color code (``#0080FF``) to RGB(A)."""
    try:
        return ImageColor.getrgb(name)
    except ValueError as e:
        raise ColorError(str(e)) from e


def build_argparser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="code128b",
        usage="%(prog)s [OPTIONS]+ <image filename> <text> <text>",
        add_help=False,
    )
    p.add_argument("-?", "--help", dest="show_help", action="store_true", help="Show help message")
    p.add_argument("-w", "--width", type=int, default=DEFAULT_WIDTH, help="Optional: Image width")
    p.add_argument("-h", "--height", type=int, default=DEFAULT_HEIGHT, help="Optional: Image height")
    p.add_argument(
        "-f", "--foreground", default=DEFAULT_FOREGROUND,
        help="Optional: Foreground color. You can use HTML color codes. i.e. #0080FF",
    )
    p.add_argument(
        "-b", "--background", default=DEFAULT_BACKGROUND,
        help="Optional: Background color. You can use HTML color codes. i.e. #0080FF",
    )
    p.add_argument("-s", "--size", type=float, default=DEFAULT_FONT_SIZE, help="Optional: Font size")
    p.add_argument(
        "-m", "--module-width", type=int, default=DEFAULT_MODULE_WIDTH,
        help="Optional: Width of one module in pixels. 0 fits the barcode to the image width.",
    )
    p.add_argument("-n", "--notext", action="store_true", help="Optional: Draw only the bars, without the barcode text.")
    p.add_argument("-q", "--quietzone", action="store_true", help="Optional: Add leading and trailing quiet zone")
    p.add_argument("-v", "--verbose", action="store_true", help="Optional: Log debug output")
    p.add_argument("args", nargs="*", metavar="<image filename> <text>", help=argparse.SUPPRESS)
    return p


def _print_help(parser: argparse.ArgumentParser, error: Optional[str]) -> None:
    print(f"Code128B Version {__version__}")
    print("Copyright 2015 (c) by Andreas Schaefer <andreas.schaefer@schaefer-it.net>")
    if error:
        print()
        print(f"Error: {error}")
    print()
    print("Create an image containing a code128 b barcode.")
    print(f"The default width and height is {DEFAULT_WIDTH}x{DEFAULT_HEIGHT} if not specified.")
    print()
    print(parser.format_help())
    print('Example: code128b product.png "Example ABC"')


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    error = None
    try:
        ns = parser.parse_args(argv)
    except OptionError as e:
        _print_help(parser, str(e))
        return EXIT_OPTION_ERROR

    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING, format=LOG_FORMAT)

    if ns.show_help:
        _print_help(parser, None)
        return EXIT_SUCCESS

    if len(ns.args) >= 2:
        file_name = ns.args[0]
        text = " ".join(ns.args[1:])
    elif len(ns.args) == 1:
        error = "Please specify the text to create the barcode from."
    else:
        error = "Please specify a filename and the text to create the barcode from."

    try:
        foreground = parse_color(ns.foreground)
    except ColorError as e:
        error = f"Error parsing foreground color: {e}"
    try:
        background = parse_color(ns.background)
    except ColorError as e:
        error = f"Error parsing background color: {e}"

    if error:
        _print_help(parser, error)
        return EXIT_OPTION_ERROR

    try:
        image = generate_barcode_image(
            ns.width, ns.height,
            ns.size,
            foreground, background,
            text, ns.module_width, ns.notext, ns.quietzone,
        )
        save_barcode(image, file_name)
    except Exception as e:
        logger.debug("barcode generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_UNKNOWN_ERROR

    print(f'Barcode "{text}" saved to file "{file_name}".')
    return EXIT_SUCCESS
