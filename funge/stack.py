""" The value stack shared by all instructions of a program. """

CELL_BITS = 64


def to_signed(value, bits=CELL_BITS):
    """ Wrap an integer into the two's complement range of the given bits """
    base = 1 << bits
    value %= base
    if value.bit_length() == bits:
        return value - base
    else:
        return value


class Stack:
    """ A last in, first out sequence of 64 bit signed integers.

    Popping from an empty stack is not an error, it yields zero.
    """

    def __init__(self, values=()):
        self._values = []
        for value in values:
            self.push(value)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        """ Iterate the values from bottom to top """
        return iter(self._values)

    def __repr__(self):
        return 'Stack({})'.format(self._values)

    def push(self, value):
        """ Add a new number to the top of the stack """
        self._values.append(to_signed(value))

    def pop(self):
        """ Take the top value from the stack, or 0 """
        if self._values:
            return self._values.pop()
        else:
            return 0

    def peek(self):
        if self._values:
            return self._values[-1]
        else:
            return 0

    def duplicate_top(self):
        value = self.pop()
        self.push(value)
        self.push(value)

    def swap_top(self):
        a = self.pop()
        b = self.pop()
        self.push(a)
        self.push(b)

    def clear(self):
        del self._values[:]
