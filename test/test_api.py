import io
import os
import tempfile
import unittest
from unittest.mock import patch
from funge.api import befunge_run, load_befunge
from funge.common import LoadError
from funge.space import Direction
from funge.state import Mode
from funge.streams import TextInputStream, TextOutputStream
from funge.utils.reporting import TextReportGenerator
from util import example_path


class ApiTestCase(unittest.TestCase):
    def test_load(self):
        grid = load_befunge(io.StringIO('@'), width=10, height=2)
        self.assertEqual(10, grid.width)
        self.assertEqual(2, grid.height)

    def test_load_error(self):
        with self.assertRaises(LoadError):
            load_befunge(io.StringIO('@@@'), width=2)

    def test_run(self):
        output = io.StringIO()
        state = befunge_run(
            io.StringIO('&.@'),
            input_stream=TextInputStream(io.StringIO('12\n')),
            output_stream=TextOutputStream(output))
        self.assertEqual('12', output.getvalue())
        self.assertIs(Mode.EXITED, state.mode)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_run_default_streams(self, mock_stdout):
        befunge_run(example_path('hello.bf'))
        self.assertEqual('Hello, world!\n', mock_stdout.getvalue())

    def test_run_random(self):
        output = io.StringIO()
        befunge_run(
            io.StringIO('?1.@'),
            output_stream=TextOutputStream(output),
            random_direction=lambda: Direction.RIGHT)
        self.assertEqual('1', output.getvalue())

    def test_report(self):
        f = io.StringIO()
        reporter = TextReportGenerator(f)
        befunge_run(
            io.StringIO('"@"90p 1.X'),
            output_stream=TextOutputStream(io.StringIO()),
            reporter=reporter)
        report = f.getvalue()
        self.assertIn('Final state', report)
        self.assertIn('Mode: EXITED', report)
        self.assertIn('(9, 0) = ', report)

    def test_report_file_name(self):
        handle, filename = tempfile.mkstemp(suffix='.txt')
        os.close(handle)
        try:
            state = befunge_run(
                io.StringIO('7.@'),
                output_stream=TextOutputStream(io.StringIO()),
                reporter=filename)
            self.assertIs(Mode.EXITED, state.mode)
            with open(filename) as f:
                self.assertIn('Steps: 3', f.read())
        finally:
            os.remove(filename)


if __name__ == '__main__':
    unittest.main()
