'''
Arithmetic engine.

Pure functions over exact decimals. Operands arrive as the text typed into
the calculator (or as plain numbers), results leave rounded to the configured
number of fractional digits.

Rounding is round-half-away-from-zero (ROUND_HALF_UP in decimal's terms),
applied once per operation with Decimal.quantize, so no binary floating point
error can creep in: 0.1 + 0.2 is exactly 0.3.
'''

from decimal import (Context, Decimal, ROUND_HALF_UP,
                     DivisionByZero, InvalidOperation,
                     Overflow as DecimalOverflow)

import regex

from .settings import DEFAULT_SETTINGS
from .tokens import Operator
from .util import DivideByZero, InvalidOperand, Overflow, wrap_user_errors


# Wide enough for two full operands multiplied together, many times over.
# The exponent range mirrors IEEE doubles; anything past it is an overflow.
CONTEXT = Context(prec=64,
                  rounding=ROUND_HALF_UP,
                  Emax=308,
                  Emin=-308,
                  traps=[DivisionByZero, InvalidOperation, DecimalOverflow])

OPERATIONS = {
    Operator.ADD: Context.add,
    Operator.SUBTRACT: Context.subtract,
    Operator.MULTIPLY: Context.multiply,
    Operator.DIVIDE: Context.divide,
    # Sign follows the dividend, like C's fmod.
    Operator.MODULO: Context.remainder,
}

# Operand text as the machine writes it: no exponents, no underscores.
OPERAND = regex.compile(r'-?(?:\d+\.?\d*|\.\d+)')


@wrap_user_errors('Cannot parse operand {0!r}', InvalidOperand)
def parse_operand(operand):
    '''
    Convert an operand to an exact Decimal.

    Floats go through their shortest repr, so 0.1 is one tenth rather than
    its binary approximation.
    '''
    if isinstance(operand, Decimal):
        return operand
    elif isinstance(operand, bool):
        raise InvalidOperand('Cannot parse operand {!r}'.format(operand))
    elif isinstance(operand, int):
        return Decimal(operand)
    elif isinstance(operand, float):
        return Decimal(repr(operand))
    text = operand.strip()
    if not OPERAND.fullmatch(text):
        raise InvalidOperand('Cannot parse operand {!r}'.format(operand))
    return Decimal(text)


def integer_digits(value):
    '''
    Number of digits left of the decimal point, 0 for pure fractions.
    '''
    if not value or value.adjusted() < 0:
        return 0
    return value.adjusted() + 1


def _quantize(value, places):
    # Past this, the value has no digits beyond `places` left to round.
    if value.adjusted() < CONTEXT.prec - places:
        value = value.quantize(Decimal(1).scaleb(-places), context=CONTEXT)
    return value


def round_result(value, settings=DEFAULT_SETTINGS):
    '''
    Round value to fit an operand buffer.

    Keeps at most precision_digits fractional digits, and fewer when the
    integer part leaves no room for them within max_operand_digits. An
    integer part wider than that is rounded to max_operand_digits
    significant digits.
    '''
    if not value.is_finite():
        raise Overflow('Result is not finite')
    # A pure fraction still shows its leading 0.
    width = max(1, integer_digits(value))
    places = min(settings.precision_digits,
                 settings.max_operand_digits - width)
    rounded = _quantize(value, places)
    if max(1, integer_digits(rounded)) > width:
        # Rounding carried into a new integer digit, e.g. 99.99 -> 100.0
        rounded = _quantize(value, places - 1)
    return rounded


def compute(prev, current, op, settings=DEFAULT_SETTINGS):
    '''
    Apply a binary operator and return the rounded Decimal result.

    :param prev: Left-hand operand.
    :param current: Right-hand operand.
    :param op: An Operator, or its symbol.
    :raises DivideByZero: Dividing or taking the remainder by zero.
    :raises Overflow: Non-finite result, or too many integer digits.
    :raises InvalidOperand: Unparsable operand.
    '''
    left = parse_operand(prev)
    right = parse_operand(current)
    op = Operator(op)
    if op in (Operator.DIVIDE, Operator.MODULO) and right == 0:
        raise DivideByZero('Cannot {} {} by zero'
                           .format(op.name.lower(), left))
    try:
        result = OPERATIONS[op](CONTEXT, left, right)
    except DecimalOverflow:
        raise Overflow('{} {} {} overflows'
                       .format(left, op.value, right)) from None
    except InvalidOperation:
        # inf - inf, or a remainder whose quotient won't fit the context
        raise Overflow('{} {} {} is out of range'
                       .format(left, op.value, right)) from None
    result = round_result(result, settings)
    if not settings.scientific and \
       integer_digits(result) > settings.max_operand_digits:
        raise Overflow('{} has more than {} integer digits'
                       .format(result, settings.max_operand_digits))
    return result
