""" Test the befunge instruction set one instruction at a time. """

import io
import unittest
from funge.loader import load_source
from funge.space import Direction, Grid, Location
from funge.state import ExecutionState, Mode
from funge.state import truncated_divide, truncated_modulo
from funge.streams import TextInputStream, TextOutputStream


def make_state(source='', input_text='', random_direction=None):
    output = io.StringIO()
    state = ExecutionState(
        load_source(source),
        input_stream=TextInputStream(io.StringIO(input_text)),
        output_stream=TextOutputStream(output),
        random_direction=random_direction,
    )
    return state, output


class StateTestCase(unittest.TestCase):
    def run_ops(self, ops, values=(), **kwargs):
        """ Execute the given characters on a fresh state """
        state, output = make_state(**kwargs)
        for value in values:
            state.stack.push(value)
        for op in ops:
            state.execute(op)
        return state, output


class InitialStateTestCase(StateTestCase):
    def test_initial_state(self):
        state, _ = make_state('@')
        self.assertEqual(Location(0, 0), state.cursor)
        self.assertIs(Direction.RIGHT, state.direction)
        self.assertIs(Mode.NORMAL, state.mode)
        self.assertEqual([], list(state.stack))
        self.assertEqual('@', state.current_value())


class LiteralTestCase(StateTestCase):
    def test_digits(self):
        state, _ = self.run_ops('0479')
        self.assertEqual([0, 4, 7, 9], list(state.stack))

    def test_hex_digits(self):
        state, _ = self.run_ops('af')
        self.assertEqual([10, 15], list(state.stack))


class ArithmeticTestCase(StateTestCase):
    def test_add(self):
        state, _ = self.run_ops('+', [3, 4])
        self.assertEqual([7], list(state.stack))

    def test_subtract(self):
        state, _ = self.run_ops('-', [3, 4])
        self.assertEqual([-1], list(state.stack))

    def test_multiply(self):
        state, _ = self.run_ops('*', [6, 7])
        self.assertEqual([42], list(state.stack))

    def test_divide(self):
        state, _ = self.run_ops('/', [7, 2])
        self.assertEqual([3], list(state.stack))

    def test_divide_truncates(self):
        state, _ = self.run_ops('/', [-7, 2])
        self.assertEqual([-3], list(state.stack))

    def test_modulo(self):
        state, _ = self.run_ops('%', [7, 3])
        self.assertEqual([1], list(state.stack))

    def test_modulo_sign_of_dividend(self):
        state, _ = self.run_ops('%', [-7, 2])
        self.assertEqual([-1], list(state.stack))
        state, _ = self.run_ops('%', [7, -2])
        self.assertEqual([1], list(state.stack))

    def test_divide_by_zero(self):
        with self.assertLogs('befunge', level='WARNING') as cm:
            state, _ = self.run_ops('/', [7, 0])
        self.assertEqual([0], list(state.stack))
        self.assertIn('zero', cm.output[0])

    def test_modulo_by_zero(self):
        with self.assertLogs('befunge', level='WARNING'):
            state, _ = self.run_ops('%', [7, 0])
        self.assertEqual([0], list(state.stack))

    def test_underflow(self):
        state, _ = self.run_ops('-', [5])
        self.assertEqual([-5], list(state.stack))

    def test_helpers(self):
        self.assertEqual(2, truncated_divide(5, 2))
        self.assertEqual(-2, truncated_divide(-5, 2))
        self.assertEqual(-2, truncated_divide(5, -2))
        self.assertEqual(2, truncated_divide(-5, -2))
        self.assertEqual(-1, truncated_modulo(-5, -2))


class LogicTestCase(StateTestCase):
    def test_not(self):
        state, _ = self.run_ops('!', [0])
        self.assertEqual([1], list(state.stack))
        state, _ = self.run_ops('!', [5])
        self.assertEqual([0], list(state.stack))

    def test_greater_than(self):
        state, _ = self.run_ops('`', [5, 3])
        self.assertEqual([1], list(state.stack))
        state, _ = self.run_ops('`', [3, 5])
        self.assertEqual([0], list(state.stack))
        state, _ = self.run_ops('`', [4, 4])
        self.assertEqual([0], list(state.stack))


class DirectionTestCase(StateTestCase):
    def test_set_direction(self):
        for op, direction in [
                ('>', Direction.RIGHT), ('<', Direction.LEFT),
                ('^', Direction.UP), ('v', Direction.DOWN)]:
            state, _ = self.run_ops('<' + op)
            self.assertIs(direction, state.direction)

    def test_random_direction(self):
        state, _ = self.run_ops('?', random_direction=lambda: Direction.UP)
        self.assertIs(Direction.UP, state.direction)

    def test_vertical_if(self):
        state, _ = self.run_ops('|', [0])
        self.assertIs(Direction.DOWN, state.direction)
        state, _ = self.run_ops('|', [3])
        self.assertIs(Direction.UP, state.direction)
        self.assertEqual([], list(state.stack))

    def test_horizontal_if(self):
        state, _ = self.run_ops('<_', [0])
        self.assertIs(Direction.RIGHT, state.direction)
        state, _ = self.run_ops('_', [-1])
        self.assertIs(Direction.LEFT, state.direction)


class StackOperationTestCase(StateTestCase):
    def test_discard(self):
        state, _ = self.run_ops('$', [1, 2])
        self.assertEqual([1], list(state.stack))

    def test_duplicate(self):
        state, _ = self.run_ops(':', [1, 2])
        self.assertEqual([1, 2, 2], list(state.stack))

    def test_swap(self):
        state, _ = self.run_ops('\\', [1, 2])
        self.assertEqual([2, 1], list(state.stack))


class InputOutputTestCase(StateTestCase):
    def test_read_integer(self):
        state, _ = self.run_ops('&&', input_text='42\n  -5 \n')
        self.assertEqual([42, -5], list(state.stack))

    def test_read_bad_integer(self):
        state, _ = self.run_ops('&', input_text='forty two\n')
        self.assertEqual([0], list(state.stack))

    def test_read_integer_plus_sign(self):
        state, _ = self.run_ops('&', input_text='+17\n')
        self.assertEqual([17], list(state.stack))

    def test_read_integer_with_separators(self):
        state, _ = self.run_ops('&', input_text='1_000\n')
        self.assertEqual([0], list(state.stack))

    def test_read_integer_non_ascii_digits(self):
        state, _ = self.run_ops('&', input_text='٤٢\n')
        self.assertEqual([0], list(state.stack))

    def test_read_integer_out_of_range(self):
        state, _ = self.run_ops(
            '&&&', input_text='9223372036854775808\n'
            '-9223372036854775809\n-9223372036854775808\n')
        self.assertEqual([0, 0, -2 ** 63], list(state.stack))

    def test_read_integer_end_of_input(self):
        state, _ = self.run_ops('&')
        self.assertEqual([0], list(state.stack))

    def test_read_char(self):
        state, _ = self.run_ops('~~', input_text='xyz\n\n')
        self.assertEqual([ord('x'), 10], list(state.stack))

    def test_read_char_end_of_input(self):
        state, _ = self.run_ops('~')
        self.assertEqual([0], list(state.stack))

    def test_print_number(self):
        state, output = self.run_ops('..', [-12, 42])
        self.assertEqual('42-12', output.getvalue())
        self.assertEqual([], list(state.stack))

    def test_print_char(self):
        _, output = self.run_ops(',,', [10, 72])
        self.assertEqual('H\n', output.getvalue())

    def test_print_char_is_a_byte(self):
        _, output = self.run_ops(',', [256 + 65])
        self.assertEqual('A', output.getvalue())


class SelfModificationTestCase(StateTestCase):
    def test_put_then_get(self):
        state, _ = self.run_ops('p', [65, 1, 0], source='abc')
        self.assertEqual('A', state.value_at(Location(1, 0)))
        self.assertEqual([], list(state.stack))
        state.stack.push(1)
        state.stack.push(0)
        state.execute('g')
        self.assertEqual([65], list(state.stack))

    def test_get_source(self):
        state, _ = self.run_ops('g', [1, 0], source='abc')
        self.assertEqual([ord('b')], list(state.stack))

    def test_get_nothing(self):
        state, _ = self.run_ops('g', [40, 40], source='abc')
        self.assertEqual([0], list(state.stack))

    def test_put_outside_torus(self):
        state, _ = self.run_ops('pg', [-1, -2, 66, -1, -2], source='abc')
        self.assertEqual([66], list(state.stack))
        self.assertEqual(3, state.grid.width)

    def test_put_wraps_value_to_byte(self):
        state, _ = self.run_ops('p', [256 + 64, 0, 0], source='abc')
        self.assertEqual('@', state.current_value())


class ModeTestCase(StateTestCase):
    def test_quoted(self):
        state, _ = self.run_ops('"a1 +"+')
        self.assertEqual(
            [ord('a'), ord('1'), ord(' ') + ord('+')], list(state.stack))
        self.assertIs(Mode.NORMAL, state.mode)

    def test_quote_mode_entered(self):
        state, _ = self.run_ops('"')
        self.assertIs(Mode.QUOTED, state.mode)

    def test_end(self):
        state, _ = self.run_ops('@', source='@')
        self.assertIs(Mode.EXITED, state.mode)
        self.assertFalse(state.step_cursor())

    def test_unknown_is_noop(self):
        state, _ = self.run_ops(' zZ\tA', [1])
        self.assertEqual([1], list(state.stack))
        self.assertIs(Direction.RIGHT, state.direction)
        self.assertIs(Mode.NORMAL, state.mode)


class CursorTestCase(StateTestCase):
    def test_step(self):
        state, _ = make_state('abc')
        self.assertTrue(state.step_cursor())
        self.assertEqual(Location(1, 0), state.cursor)

    def test_step_wraps(self):
        state, _ = make_state('abc\ndef')
        state.execute('^')
        self.assertTrue(state.step_cursor())
        self.assertEqual(Location(0, 1), state.cursor)
        self.assertEqual('d', state.current_value())

    def test_bridge(self):
        state, _ = make_state('#12')
        state.execute('#')
        self.assertEqual(Location(1, 0), state.cursor)
        state.step_cursor()
        self.assertEqual('2', state.current_value())

    def test_step_on_empty_grid(self):
        state = ExecutionState(Grid([]))
        self.assertIsNone(state.current_value())
        self.assertFalse(state.step_cursor())
        self.assertEqual(Location(0, 0), state.cursor)

    def test_self_modification_is_visible(self):
        state, _ = make_state('ab')
        state.set_value(Location(1, 0), '@')
        state.step_cursor()
        self.assertEqual('@', state.current_value())


if __name__ == '__main__':
    unittest.main()
