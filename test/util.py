import os

# Store testdir for safe switch back to directory:
testdir = os.path.dirname(os.path.abspath(__file__))


def relpath(*args):
    return os.path.normpath(os.path.join(testdir, *args))


def example_path(name):
    """ Path of one of the example programs """
    return relpath('..', 'examples', 'befunge', name)
