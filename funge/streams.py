"""
 The streams connect a running program to the outside world.

 A program can only read a line of text, and write a single value.
"""

import abc
import sys


class InputStream(metaclass=abc.ABCMeta):
    """ Interface to read program input from. """

    @abc.abstractmethod
    def read_line(self):
        """ Read one line of text, blocking.

        The line terminator is part of the result. At the end of the input
        an empty string is returned.
        """
        raise NotImplementedError("Abstract base class")


class TextInputStream(InputStream):
    """ Input stream reading from a text file, stdin by default """

    def __init__(self, f=None):
        self.input_file = f

    def read_line(self):
        f = self.input_file if self.input_file else sys.stdin
        return f.readline()


class OutputStream(metaclass=abc.ABCMeta):
    """ Interface to write program output to. """

    def write_number(self, value):
        """ Write an integer in decimal notation """
        self.do_write(str(value))

    def write_character(self, ch):
        """ Write a single character """
        assert len(ch) == 1
        self.do_write(ch)

    @abc.abstractmethod
    def do_write(self, text):
        """ Actual write implementation """
        raise NotImplementedError("Abstract base class")


class TextOutputStream(OutputStream):
    """ Output stream that writes to a text file, stdout by default. """

    def __init__(self, f=None):
        self.output_file = f

    def do_write(self, text):
        f = self.output_file if self.output_file else sys.stdout
        print(text, end='', file=f, flush=True)
