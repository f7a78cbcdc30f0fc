"""
resgen command line entry point
Generates icon and splash screen resources for every platform from one
1024x1024 icon and one 2732x2732 splash image
"""

import argparse

from . import __version__
from .errors import ResGenError
from .pipeline import run
from .settings import Settings


def build_parser():
    parser = argparse.ArgumentParser(
        prog="resgen",
        description="Generate platform icon and splash screen resources from source images",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-i", "--icon",
                        help="Icon file path (default: ./resources/icon.png)")
    parser.add_argument("-s", "--splash",
                        help="Splash file path (default: ./resources/splash.png)")
    parser.add_argument("-p", "--platforms",
                        help="Comma separated platform list (default: all platforms processed)")
    parser.add_argument("-o", "--outputdir",
                        help="Output directory (default: ./resources/)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = Settings.from_args(args)

    print()
    print(f"resgen {__version__}")

    try:
        run(settings)
    except ResGenError as e:
        print(f"Error: {e}")
        return 1

    return 0
