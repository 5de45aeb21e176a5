"""
The api module contains a set of handy functions to load and run
befunge programs.
"""

import logging
from .interpreter import BefungeInterpreter
from .loader import load_file
from .utils.reporting import DummyReportGenerator, TextReportGenerator


# When using 'from funge.api import *' include the following:
__all__ = ['load_befunge', 'befunge_run']


logger = logging.getLogger('api')


def get_reporter(reporter):
    if reporter is None:
        return DummyReportGenerator()
    elif isinstance(reporter, str):
        f = open(reporter, 'wt', encoding='utf8')
        r = TextReportGenerator(f)
        r.header()
        return r
    else:
        return reporter


def load_befunge(f, width=None, height=None):
    """ Load a befunge program into a grid.

    Args:
        f: a filename or a file like object with the program text.
        width: the fixed width of the torus, the widest row if not given.
        height: the fixed height of the torus, the row count if not given.

    Raises:
        LoadError: when the program cannot be read, or does not fit.
    """
    return load_file(f, width=width, height=height)


def befunge_run(
    f,
    input_stream=None,
    output_stream=None,
    width=None,
    height=None,
    random_direction=None,
    reporter=None,
    trace=False,
):
    """ Load and run a befunge program until it ends.

    Args:
        f: a filename or a file like object with the program text.
        input_stream: where the program reads input, stdin if not given.
        output_stream: where the program writes output, stdout if not given.
        width: fixed torus width.
        height: fixed torus height.
        random_direction: callable returning a direction for the '?'
            instruction.
        reporter: a report generator, or the filename of a text report.
        trace: log every executed instruction at debug level.

    Returns:
        The final execution state.
    """
    own_reporter = isinstance(reporter, str)
    reporter = get_reporter(reporter)
    try:
        grid = load_befunge(f, width=width, height=height)
        reporter.heading(2, 'Program')
        reporter.dump_grid(grid)

        interpreter = BefungeInterpreter(
            grid,
            verbose=trace,
            input_stream=input_stream,
            output_stream=output_stream,
            random_direction=random_direction,
        )
        state = interpreter.run()
        logger.info('Program ended after %s steps', interpreter.steps)

        reporter.heading(2, 'Final state')
        reporter.dump_state(state, steps=interpreter.steps)
        reporter.dump_grid(state.grid)
    finally:
        if own_reporter:
            reporter.footer()
            reporter.close()
    return state
