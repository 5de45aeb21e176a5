""" Read befunge source text into a grid """

import logging
from .common import get_file, source_encoding, LoadError
from .space import Grid, Location


logger = logging.getLogger('loader')


def split_lines(text):
    """ Split program text into rows.

    A final line terminator does not start an extra row.
    """
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def load_source(text, width=None, height=None):
    """ Turn program text into a grid of the given, or natural, size """
    rows = split_lines(text)
    natural_width = max((len(row) for row in rows), default=0)
    natural_height = len(rows)

    if width is not None and width < natural_width:
        row = next(y for y, line in enumerate(rows) if len(line) > width)
        raise LoadError(
            'Program is {} columns wide, which does not fit in {}'.format(
                natural_width, width), Location(width, row))
    if height is not None and height < natural_height:
        raise LoadError(
            'Program has {} rows, which does not fit in {}'.format(
                natural_height, height), Location(0, height))

    grid = Grid(rows, width=width, height=height)
    logger.debug('Loaded %s', grid)
    return grid


def load_file(f, width=None, height=None):
    """ Load a program from a filename or an open file """
    try:
        if hasattr(f, 'read'):
            text = f.read()
        else:
            with get_file(f) as handle:
                text = handle.read()
    except OSError as ex:
        raise LoadError(str(ex))
    if isinstance(text, bytes):
        text = text.decode(source_encoding)
    return load_source(text, width=width, height=height)
