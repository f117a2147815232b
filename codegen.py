import argparse
import logging
import sys

from path import CommandSequence


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Convert path data to drawing calls, one per line.")
    parser.add_argument(
        "path_file", type=str, nargs="?", default="-", help="file with path data ('-' or omitted reads stdin)"
    )
    parser.add_argument("--normalize", action="store_true", help="centre the path bounds on the origin")
    parser.add_argument("--strict", action="store_true", help="reject S, Q, T and A commands")
    parser.add_argument("--bounds", action="store_true", help="print the path bounds instead of drawing calls")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    return parser.parse_args(argv)


def read_path_data(path_file: str) -> str:
    if path_file == "-":
        return sys.stdin.read()
    with open(path_file, "r") as f:
        return f.read()


def generate(path_data: str, normalize: bool = False, strict: bool = False) -> list[str]:
    """Return the drawing calls for path data, preceded by a `new_path` call."""
    commands = CommandSequence.parse(path_data, strict=strict)
    if normalize:
        commands = commands.normalize()
    return ["ctx.new_path()", *commands.instructions()]


def describe_bounds(path_data: str, normalize: bool = False, strict: bool = False) -> str:
    commands = CommandSequence.parse(path_data, strict=strict)
    if normalize:
        commands = commands.normalize()
    bounds = commands.bounds()
    if bounds is None:
        return "no bounds"
    (x0, y0), (x1, y1) = bounds.top_left, bounds.bottom_right
    return f"{x0:.6f} {y0:.6f} {x1:.6f} {y1:.6f}"


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        path_data = read_path_data(args.path_file)
        if args.bounds:
            print(describe_bounds(path_data, normalize=args.normalize, strict=args.strict))
        else:
            print("\n".join(generate(path_data, normalize=args.normalize, strict=args.strict)))
    except Exception as e:
        exception_name = type(e).__name__
        print(f"\033[91mError while processing path ({exception_name}): \033[0m{e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
