""" Execution state of a befunge program and its instruction set.

The state consists of the grid, the value stack, the cursor, the direction
in which the cursor moves and the execution mode. Every instruction is a
method on the state which mutates it in place.
"""

import enum
import logging
import re
from .space import Direction, Location
from .stack import Stack, CELL_BITS
from .streams import TextInputStream, TextOutputStream


class Mode(enum.Enum):
    """ Top level execution mode """

    NORMAL = 1  # Characters are instructions
    QUOTED = 2  # Characters are pushed as their code
    EXITED = 3  # The program reached its end


def char_to_int(ch):
    """ Cells hold single bytes """
    return ord(ch) & 0xFF


def int_to_char(value):
    return chr(value & 0xFF)


integer_pattern = re.compile(r'[+-]?[0-9]+')


def parse_integer(text):
    """ Parse a decimal cell value, or return None if the text is not one """
    text = text.strip()
    if not integer_pattern.fullmatch(text):
        return None
    value = int(text, 10)
    if not -(1 << (CELL_BITS - 1)) <= value < (1 << (CELL_BITS - 1)):
        return None
    return value


def truncated_divide(b, a):
    """ Integer division rounding toward zero """
    quotient = abs(b) // abs(a)
    if (b < 0) == (a < 0):
        return quotient
    else:
        return -quotient


def truncated_modulo(b, a):
    """ Remainder of truncated division, with the sign of the dividend """
    return b - a * truncated_divide(b, a)


class ExecutionState:
    """ The complete state of a running befunge program """
    logger = logging.getLogger('befunge')

    def __init__(
        self,
        grid,
        input_stream=None,
        output_stream=None,
        random_direction=None,
    ):
        self.grid = grid
        self.stack = Stack()
        self.cursor = Location(0, 0)
        self.direction = Direction.default()
        self.mode = Mode.NORMAL
        self.input_stream = input_stream or TextInputStream()
        self.output_stream = output_stream or TextOutputStream()
        self.random_direction = random_direction or Direction.random

        self.instructions = {
            '"': self.start_quote,
            '#': self.bridge,
            '+': self.add,
            '-': self.subtract,
            '*': self.multiply,
            '/': self.divide,
            '%': self.modulo,
            '!': self.logical_not,
            '`': self.greater_than,
            '>': self.go_right,
            '<': self.go_left,
            '^': self.go_up,
            'v': self.go_down,
            '?': self.go_random,
            '|': self.vertical_if,
            '_': self.horizontal_if,
            '$': self.discard,
            ':': self.stack.duplicate_top,
            '\\': self.stack.swap_top,
            '&': self.read_integer,
            '~': self.read_char,
            '.': self.print_number,
            ',': self.print_char,
            'p': self.put,
            'g': self.get,
            '@': self.end_program,
        }

    def __repr__(self):
        return 'ExecutionState(cursor={}, direction={}, mode={})'.format(
            self.cursor, self.direction.name, self.mode.name)

    def value_at(self, loc):
        return self.grid.value_at(loc)

    def current_value(self):
        """ Get the character below the cursor """
        return self.grid.value_at(self.cursor)

    def set_value(self, loc, ch):
        self.grid.set_value(loc, ch)

    def step_cursor(self):
        """ Move the cursor to the next cell holding a character.

        Returns False when there is no such cell anywhere in the current
        direction, or when the program has ended.
        """
        if self.mode is Mode.EXITED:
            return False

        start = self.cursor
        while True:
            self.cursor = self.grid.step(self.cursor, self.direction)
            if self.current_value() is not None:
                return True
            if self.cursor == start:
                return False

    def execute(self, ch):
        """ Process a character according to the current mode """
        if self.mode is Mode.QUOTED:
            self.process_quoted(ch)
        elif self.mode is Mode.NORMAL:
            self.process_normal(ch)

    def process_quoted(self, ch):
        if ch == '"':
            self.mode = Mode.NORMAL
        else:
            self.stack.push(char_to_int(ch))

    def process_normal(self, ch):
        if ch in '0123456789abcdef':
            self.stack.push(int(ch, 16))
        elif ch in self.instructions:
            self.instructions[ch]()
        # Anything else, space included, does nothing.

    # Modal operators:
    def start_quote(self):
        self.mode = Mode.QUOTED

    def bridge(self):
        """ Skip the next cell """
        self.step_cursor()

    def end_program(self):
        self.mode = Mode.EXITED

    # Arithmetic operators:
    def add(self):
        a = self.stack.pop()
        b = self.stack.pop()
        self.stack.push(b + a)

    def subtract(self):
        a = self.stack.pop()
        b = self.stack.pop()
        self.stack.push(b - a)

    def multiply(self):
        a = self.stack.pop()
        b = self.stack.pop()
        self.stack.push(b * a)

    def divide(self):
        a = self.stack.pop()
        b = self.stack.pop()
        if a == 0:
            self.logger.warning('Division of %s by zero at %s', b, self.cursor)
            self.stack.push(0)
        else:
            self.stack.push(truncated_divide(b, a))

    def modulo(self):
        a = self.stack.pop()
        b = self.stack.pop()
        if a == 0:
            self.logger.warning('Modulo of %s by zero at %s', b, self.cursor)
            self.stack.push(0)
        else:
            self.stack.push(truncated_modulo(b, a))

    # Logical operators:
    def logical_not(self):
        self.stack.push(1 if self.stack.pop() == 0 else 0)

    def greater_than(self):
        a = self.stack.pop()
        b = self.stack.pop()
        self.stack.push(1 if b > a else 0)

    # Directional operators:
    def go_right(self):
        self.direction = Direction.RIGHT

    def go_left(self):
        self.direction = Direction.LEFT

    def go_up(self):
        self.direction = Direction.UP

    def go_down(self):
        self.direction = Direction.DOWN

    def go_random(self):
        self.direction = self.random_direction()

    def vertical_if(self):
        """ Go up when the popped value is non-zero, down otherwise """
        if self.stack.pop() == 0:
            self.direction = Direction.DOWN
        else:
            self.direction = Direction.UP

    def horizontal_if(self):
        """ Go left when the popped value is non-zero, right otherwise """
        if self.stack.pop() == 0:
            self.direction = Direction.RIGHT
        else:
            self.direction = Direction.LEFT

    # Stack manipulation:
    def discard(self):
        self.stack.pop()

    # Input and output:
    def read_integer(self):
        line = self.input_stream.read_line()
        value = parse_integer(line)
        if value is None:
            self.logger.debug('Input %r is not a number', line)
            value = 0
        self.stack.push(value)

    def read_char(self):
        line = self.input_stream.read_line()
        if line:
            self.stack.push(char_to_int(line[0]))
        else:
            self.stack.push(0)

    def print_number(self):
        self.output_stream.write_number(self.stack.pop())

    def print_char(self):
        self.output_stream.write_character(int_to_char(self.stack.pop()))

    # Load and store:
    def put(self):
        """ Pop y, x and v and store character v at x, y """
        y = self.stack.pop()
        x = self.stack.pop()
        v = self.stack.pop()
        self.set_value(Location(x, y), int_to_char(v))

    def get(self):
        """ Pop y and x and push the character code found at x, y """
        y = self.stack.pop()
        x = self.stack.pop()
        ch = self.value_at(Location(x, y))
        self.stack.push(0 if ch is None else char_to_int(ch))
