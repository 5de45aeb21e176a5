"""
    To create a report of what happened during a run, this file
    implements several reporting types.

    Reports can be written to plain text, or into the void.
"""

import abc
import io
import traceback
from datetime import datetime
from .. import __version__
from ..common import FungeError


class ReportGenerator(metaclass=abc.ABCMeta):
    """ Implement all these function to create a custom reporting generator """

    def header(self):
        pass

    def footer(self):
        pass

    def close(self):
        pass

    def __enter__(self):
        self.header()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if isinstance(exc_value, FungeError):
            self.dump_funge_error(exc_value)

        if exc_type:
            self.dump_exception((exc_type, exc_value, traceback))

        self.footer()

    @abc.abstractmethod
    def heading(self, level, title):
        raise NotImplementedError()

    @abc.abstractmethod
    def message(self, msg):
        raise NotImplementedError()

    @abc.abstractmethod
    def dump_raw_text(self, text):
        raise NotImplementedError()

    def dump_grid(self, grid):
        pass

    def dump_state(self, state, steps=None):
        pass

    @abc.abstractmethod
    def dump_exception(self, einfo):
        """ List the given exception in report """
        raise NotImplementedError()

    def dump_funge_error(self, funge_error):
        self.heading(3, 'Error')
        f = io.StringIO()
        funge_error.print(file=f)
        self.dump_raw_text(f.getvalue())


class DummyReportGenerator(ReportGenerator):
    """ Report generator which reports into the void """
    def heading(self, level, title):
        pass

    def message(self, msg):
        pass

    def dump_exception(self, einfo):
        pass

    def dump_raw_text(self, text):
        pass


class TextWritingReporter(ReportGenerator):
    def __init__(self, dump_file):
        self.dump_file = dump_file

    def close(self):
        self.dump_file.close()

    def print(self, *args, end='\n'):
        """ Convenience helper for printing to dumpfile """
        print(*args, end=end, file=self.dump_file)


class TextReportGenerator(TextWritingReporter):
    def header(self):
        self.print('Report of funge {} at {}'.format(
            __version__, datetime.now().isoformat(timespec='seconds')))

    def heading(self, level, title):
        self.print()
        self.print(title)
        markers = {1: '=', 2: '-'}
        marker = markers[level] if level in markers else '~'
        self.print(marker * len(title))
        self.print()

    def message(self, msg):
        self.print(msg)

    def dump_raw_text(self, text):
        self.print(text)

    def dump_grid(self, grid):
        """ Write the torus, with all self modifications applied """
        self.print('Grid of {} columns by {} rows:'.format(
            grid.width, grid.height))
        for row, line in enumerate(grid.render()):
            self.print('{:5} :{}'.format(row, line))
        if grid.overlay:
            self.print('Written cells:')
            for loc, ch in sorted(grid.overlay.items()):
                self.print('  {} = {!r}'.format(loc, ch))

    def dump_state(self, state, steps=None):
        if steps is not None:
            self.print('Steps: {}'.format(steps))
        self.print('Mode: {}'.format(state.mode.name))
        self.print('Cursor: {}'.format(state.cursor))
        self.print('Direction: {}'.format(state.direction.name))
        self.print('Stack (bottom to top): {}'.format(list(state.stack)))

    def dump_exception(self, einfo):
        self.print(''.join(traceback.format_exception(*einfo)))
