"""CLI entry point for the JSON explorer."""

import argparse
import logging
import sys

from .builder import visualize
from .icons import DEFAULT_ICON_FILE, ICON_FAMILIES
from .models import FjeError
from .render import STYLES


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="fje",
        description="Render a JSON file as an annotated tree or box diagram.",
    )
    parser.add_argument(
        "-f", "--file",
        required=True,
        help="JSON file to render",
    )
    parser.add_argument(
        "-s", "--style",
        required=True,
        choices=sorted(STYLES),
        help="Output style",
    )
    parser.add_argument(
        "-i", "--icon-family",
        required=True,
        choices=sorted(ICON_FAMILIES),
        help="Icons marking internal and leaf keys",
    )
    parser.add_argument(
        "--icon-file",
        default=DEFAULT_ICON_FILE,
        help=f"Icon definition used by json_defined (default: {DEFAULT_ICON_FILE})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Load the JSON file and print its rendering."""
    args = parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("fje").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        output = visualize(args.file, args.style, args.icon_family, args.icon_file)
    except FjeError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
