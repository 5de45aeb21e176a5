""" Display a befunge program as the torus the interpreter sees """

import argparse
from .base import base_parser, grid_parser, LogSetup
from ..api import load_befunge


parser = argparse.ArgumentParser(
    description=__doc__, parents=[base_parser, grid_parser])
parser.add_argument(
    '--border', action='store_true', default=False,
    help='Draw a border around the torus')


def show(args=None):
    """ Display a befunge program as the torus the interpreter sees """
    args = parser.parse_args(args)
    with LogSetup(args) as log_setup:
        grid = load_befunge(args.source, width=args.width, height=args.height)
        log_setup.reporter.dump_grid(grid)
        print('{} columns by {} rows'.format(grid.width, grid.height))
        lines = grid.render()
        if args.border:
            edge = '+' + '-' * grid.width + '+'
            lines = [edge] + ['|' + line + '|' for line in lines] + [edge]
        for line in lines:
            print(line)


if __name__ == '__main__':
    show()
