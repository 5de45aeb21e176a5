"""
   Error handling routines
   Source file helpers
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'

# Program text is read one byte per cell:
source_encoding = 'latin-1'


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode, encoding=source_encoding)
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))


class FungeError(Exception):
    """ Base class of all errors raised by the interpreter """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error, together with its grid location if known """
        if self.loc:
            print('{} at ({}, {})'.format(
                self.msg, self.loc.x, self.loc.y), file=file)
        else:
            print(self.msg, file=file)


class LoadError(FungeError):
    """ A program could not be turned into a grid """
    pass
