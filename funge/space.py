""" The two dimensional instruction space of a befunge program.

The space is a torus: a cursor leaving at one edge enters again at the
opposite edge. Its dimensions are fixed when the program is loaded.

The program itself is kept as an immutable base layer. Self modifying code
writes into an overlay which shadows the base layer.
"""

import enum
import random as _random
from collections import namedtuple


class Direction(enum.Enum):
    """ One of the four directions the cursor can travel in """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    def opposite(self):
        return _opposites[self]

    @classmethod
    def default(cls):
        """ Programs start moving to the right """
        return cls.RIGHT

    @classmethod
    def up_or_down(cls, rng=_random):
        if rng.random() < 0.5:
            return cls.UP
        else:
            return cls.DOWN

    @classmethod
    def right_or_left(cls, rng=_random):
        if rng.random() < 0.5:
            return cls.RIGHT
        else:
            return cls.LEFT

    @classmethod
    def random(cls, rng=_random):
        """ Pick one of the four directions, each with equal chance """
        if rng.random() < 0.5:
            return cls.up_or_down(rng)
        else:
            return cls.right_or_left(rng)


_opposites = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Location(namedtuple('Location', ['x', 'y'])):
    """ A place in the instruction space """
    __slots__ = ()

    def step(self, direction, width, height):
        """ Return the location one step further in the given direction.

        The step wraps around on a torus of the given dimensions. A torus
        without cells has nowhere to go, so the location is returned as is.
        """
        if width <= 0 or height <= 0:
            return self
        x = (self.x + direction.dx + width) % width
        y = (self.y + direction.dy + height) % height
        return Location(x, y)

    def __str__(self):
        return '({}, {})'.format(self.x, self.y)


class Grid:
    """ Instruction space: base layer with an overlay of runtime writes """

    def __init__(self, rows, width=None, height=None):
        rows = list(rows)
        if width is None:
            width = max((len(row) for row in rows), default=0)
        if height is None:
            height = len(rows)
        assert width >= max((len(row) for row in rows), default=0)
        assert height >= len(rows)

        # Materialize every cell within the torus:
        rows.extend([''] * (height - len(rows)))
        self.rows = tuple(row.ljust(width) for row in rows)
        self.width = width
        self.height = height
        self.overlay = {}

    def __repr__(self):
        return 'Grid({}x{}, {} writes)'.format(
            self.width, self.height, len(self.overlay))

    @property
    def is_empty(self):
        return self.width == 0 or self.height == 0

    def in_base(self, loc):
        """ Check whether the location refers to a cell of the base layer """
        if not 0 <= loc.y < len(self.rows):
            return False
        return 0 <= loc.x < len(self.rows[loc.y])

    def value_at(self, loc):
        """ Get the character at the location, or None if there is none """
        if loc in self.overlay:
            return self.overlay[loc]

        if self.in_base(loc):
            return self.rows[loc.y][loc.x]

        return None

    def set_value(self, loc, ch):
        """ Enable self modifying code! """
        assert len(ch) == 1
        self.overlay[loc] = ch

    def step(self, loc, direction):
        return loc.step(direction, self.width, self.height)

    def render(self):
        """ Produce the current text of the torus, overlay included """
        lines = []
        for y in range(self.height):
            lines.append(''.join(
                self.value_at(Location(x, y)) for x in range(self.width)))
        return lines
