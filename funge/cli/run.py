""" Run a befunge program.

The program reads from standard input and writes to standard output.
"""

import argparse
from .base import base_parser, grid_parser, LogSetup
from ..api import befunge_run
from ..streams import TextInputStream


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, grid_parser],
)
parser.add_argument(
    '--input', '-i', metavar='input-file',
    type=argparse.FileType('r'), default=None,
    help='Read program input from this file instead of stdin')
parser.add_argument(
    '--trace', action='store_true', default=False,
    help='Log every executed instruction, use together with -v')


def run(args=None):
    """ Run a befunge program """
    args = parser.parse_args(args)
    with LogSetup(args) as log_setup:
        befunge_run(
            args.source,
            input_stream=TextInputStream(args.input),
            width=args.width,
            height=args.height,
            reporter=log_setup.reporter,
            trace=args.trace,
        )


if __name__ == '__main__':
    run()
