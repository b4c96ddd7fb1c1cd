import argparse
import logging
import sys
from pathlib import Path

from asciidither.charsets import CharSet
from asciidither.config import ConvertConfig
from asciidither.converter import convert, load_image
from asciidither.dithering import Dithering
from asciidither.result import FORMATS

logger = logging.getLogger(__name__)


def _dithering(value: str) -> Dithering:
    try:
        return Dithering.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _charset(value: str) -> CharSet:
    try:
        return CharSet.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    defaults = ConvertConfig()
    parser = argparse.ArgumentParser(prog="asciidither", description="Render an image as dithered character art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-r",
        "--resolution",
        type=float,
        default=defaults.resolution,
        help=f"Scale relative to the source image, 0.01-1.0 (default: {defaults.resolution})",
    )
    parser.add_argument(
        "-c", "--contrast", type=float, default=defaults.contrast, help="Contrast multiplier, 0.1-3.0 (default: 1.0)"
    )
    parser.add_argument(
        "-b",
        "--brightness",
        type=float,
        default=defaults.brightness,
        help="Brightness multiplier, 0.1-3.0 (default: 1.0)",
    )
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Use the inverted ramp")
    parser.add_argument(
        "--colour",
        action=argparse.BooleanOptionalAction,
        default=defaults.colored,
        help="Emit truecolor output (default: on)",
    )
    parser.add_argument(
        "-d",
        "--dither",
        type=_dithering,
        default=defaults.dithering,
        help="Dithering: " + ", ".join(d.name.lower() for d in Dithering) + " (default: none)",
    )
    parser.add_argument(
        "--charset",
        type=_charset,
        default=defaults.charset,
        help="Character set: " + ", ".join(c.name.lower() for c in CharSet) + " (default: photo)",
    )
    parser.add_argument("--ramp", default="", help="Custom character ramp, sparsest to densest (overrides --charset)")
    parser.add_argument(
        "-f", "--format", choices=FORMATS, default=None, help="Output format (default: ansi if colour, else text)"
    )
    parser.add_argument("-o", "--output", default=None, help="Write to this file instead of stdout")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    config = ConvertConfig(
        resolution=args.resolution,
        contrast=args.contrast,
        brightness=args.brightness,
        inverted=args.invert,
        colored=args.colour,
        dithering=args.dither,
        charset=args.charset,
        custom_ramp=args.ramp,
    )
    fmt = args.format or ("ansi" if config.colored else "text")

    try:
        image = load_image(Path(args.image))
        result = convert(image, config)
        if args.output:
            path = result.save(args.output, fmt)
            logger.info("Wrote %s output to %s", fmt, path)
        else:
            sys.stdout.write(result.render(fmt))
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
