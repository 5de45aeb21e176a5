""" Befunge support.

Epic esoteric language in 2D!

See also: https://en.wikipedia.org/wiki/Befunge

"""

import logging
from .state import ExecutionState, Mode


class BefungeInterpreter:
    """ Befunge machine.

    Drives an execution state from the first cell until the program ends,
    or until the cursor cannot find any instruction to execute.
    """
    logger = logging.getLogger('befunge')

    def __init__(self, grid, verbose=False, **kwargs):
        self.verbose = verbose
        self.state = ExecutionState(grid, **kwargs)
        self.steps = 0

    def run(self):
        """ Run until finished. """
        self.logger.debug('Running %s', self.state.grid)
        while self.single_step():
            pass
        self.logger.debug('Finished after %s steps', self.steps)
        return self.state

    def single_step(self):
        """ Execute a single opcode.

        Returns whether execution can continue.
        """
        state = self.state
        if state.mode is Mode.EXITED:
            return False

        op = state.current_value()
        if op is None:
            self.logger.debug('No instruction at %s', state.cursor)
            return False

        if self.verbose:
            self.logger.debug(
                'at %s execute %r (%s), top=%s', state.cursor, op,
                state.mode.name, state.stack.peek())

        state.execute(op)
        self.steps += 1

        if state.mode is Mode.EXITED:
            return False

        return state.step_cursor()
