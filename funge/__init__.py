""" An interpreter for the two dimensional Befunge language implemented in
pure Python.

Example usage:

>>> from funge.api import befunge_run
>>> import io
>>> state = befunge_run(io.StringIO('1 2+.55+,@'))
3

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
