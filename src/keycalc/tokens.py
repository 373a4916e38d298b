'''
Calculator tokens: one per key press, whatever the key was called.
'''

from collections import namedtuple
from enum import Enum


class Kind(Enum):
    DIGIT = 'digit'
    DECIMAL = 'decimal'
    OPERATOR = 'operator'
    NEGATE = 'negate'
    EQUALS = 'equals'
    CLEAR = 'clear'
    BACKSPACE = 'backspace'


class Operator(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    MODULO = '%'


class Token(namedtuple('Token', ['kind', 'value'])):
    '''
    One calculator key press.

    ``value`` is the digit character for DIGIT tokens, the Operator for
    OPERATOR tokens, and None otherwise.
    '''

    __slots__ = ()

    def __new__(cls, kind, value=None):
        return super().__new__(cls, kind, value)

    def __str__(self):
        if self.kind is Kind.DIGIT:
            return 'Digit{}'.format(self.value)
        elif self.kind is Kind.OPERATOR:
            return 'Op' + self.value.name.capitalize()
        return self.kind.name.capitalize()


def digit(d):
    d = str(d)
    if len(d) != 1 or d not in '0123456789':
        raise ValueError('Not a digit: {!r}'.format(d))
    return Token(Kind.DIGIT, d)


def operator(op):
    return Token(Kind.OPERATOR, Operator(op))


DECIMAL = Token(Kind.DECIMAL)
NEGATE = Token(Kind.NEGATE)
EQUALS = Token(Kind.EQUALS)
CLEAR = Token(Kind.CLEAR)
BACKSPACE = Token(Kind.BACKSPACE)

ADD = operator(Operator.ADD)
SUBTRACT = operator(Operator.SUBTRACT)
MULTIPLY = operator(Operator.MULTIPLY)
DIVIDE = operator(Operator.DIVIDE)
MODULO = operator(Operator.MODULO)
