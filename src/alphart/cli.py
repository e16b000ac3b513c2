import argparse
import re
import sys
from pathlib import Path

from PIL import UnidentifiedImageError

from alphart.charsets import RAMPS
from alphart.converter import image_to_ascii, save_ascii
from alphart.renderer import DEFAULT_ASPECT, DEFAULT_WIDTH, InvalidInput, RenderConfig

MIN_WIDTH = 30
MAX_WIDTH = 300

# "80px" reads as 80, "2.7" as 2
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def clamp_width(value: str) -> int:
    """Parse a column count from its leading digits, falling back to the default on junk and
    clamping to [MIN_WIDTH, MAX_WIDTH]."""
    match = _LEADING_INT.match(value)
    if match is None:
        return DEFAULT_WIDTH
    width = int(match.group())
    if width == 0:
        return DEFAULT_WIDTH
    return max(MIN_WIDTH, min(MAX_WIDTH, width))


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w",
        "--width",
        type=clamp_width,
        default=DEFAULT_WIDTH,
        help=f"Output width in columns, clamped to {MIN_WIDTH}-{MAX_WIDTH} (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-a",
        "--aspect",
        type=float,
        default=DEFAULT_ASPECT,
        help=f"Character cell width/height ratio (default: {DEFAULT_ASPECT})",
    )
    parser.add_argument("-i", "--invert", action="store_true", default=False, help="Invert brightness (dark mode)")
    parser.add_argument(
        "-r", "--ramp", default="ascii", choices=sorted(RAMPS), help="Glyph ramp to use (default: ascii)"
    )
    parser.add_argument("-o", "--output", default=None, help="Write to this text file instead of stdout")
    args = parser.parse_args(argv)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = RenderConfig(width=args.width, aspect=args.aspect, invert=args.invert, ramp=RAMPS[args.ramp])
        art = image_to_ascii(image_path, config)
    except (UnidentifiedImageError, OSError):
        print(f"Could not load image: {image_path}", file=sys.stderr)
        sys.exit(1)
    except InvalidInput as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output is None:
        sys.stdout.write(art)
        return
    try:
        save_ascii(art, args.output)
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"{e}: output is empty at width {args.width}", file=sys.stderr)
        sys.exit(1)
