import argparse
import logging
import sys

from color import RGBA
from wallpaper import WallpaperConfig, render_wallpaper


def parse_size(value: str) -> tuple[int, int]:
    """Parse a "WIDTHxHEIGHT" string, e.g. "3456x2234"."""
    width, sep, height = value.partition("x")
    try:
        if not sep:
            raise ValueError
        size = (int(width), int(height))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value}") from None
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"invalid size: {value}")
    return size


def parse_color(value: str) -> RGBA:
    try:
        color = RGBA.from_any(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    if color is None:
        raise argparse.ArgumentTypeError(f"invalid color: {value}")
    return color


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Render the logo wallpaper to a PNG image.")
    parser.add_argument(
        "--size", type=parse_size, default=(3456, 2234), help="image size as WIDTHxHEIGHT (default is 3456x2234)"
    )
    parser.add_argument(
        "--dst", type=str, default="wallpaper.png", help="output PNG path (default is 'wallpaper.png')"
    )
    parser.add_argument("--debug", action="store_true", help="draw layout guides over the logos")
    parser.add_argument(
        "--background", type=parse_color, default=RGBA.from_rgb(35, 108, 255), help="background color"
    )
    parser.add_argument("--foreground", type=parse_color, default=RGBA.from_u32(0xFFFFFF), help="logo color")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    return parser.parse_args(argv)


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        config = WallpaperConfig(
            size=args.size,
            background=args.background,
            foreground=args.foreground,
            debug=args.debug,
        )
        renderer = render_wallpaper(config)
        renderer.save_png(args.dst)
        print(f'\033[92mSuccessfully saved output image to: "{args.dst}"\033[0m')
    except Exception as e:
        exception_name = type(e).__name__
        print(f"\033[91mError while rendering wallpaper ({exception_name}): \033[0m{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
