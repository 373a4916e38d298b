'''
Calculator settings.

One structure holds every threshold the engine, formatter and machine agree
on, so rounding and display limits are never duplicated.
'''

from collections import namedtuple
from enum import Enum

from .util import CalculatorError


class LargeMagnitude(Enum):
    '''
    What to do with results too wide for the display.
    '''
    ERROR = 'error'
    SCIENTIFIC = 'scientific'


_Settings = namedtuple('_Settings', ['precision_digits',
                                     'max_operand_digits',
                                     'large_magnitude_policy'])


class Settings(_Settings):
    '''
    Rounding and display limits.

    :param precision_digits: Fractional digits kept after each operation.
    :param max_operand_digits: Digits an operand may hold, sign and point
                               excluded.
    :param large_magnitude_policy: A LargeMagnitude, or its value.
    '''

    __slots__ = ()

    DEFAULT_PRECISION = 8
    MIN_PRECISION = 8
    MAX_PRECISION = 10
    DEFAULT_MAX_DIGITS = 15
    DEFAULT_POLICY = LargeMagnitude.ERROR
    # Nonzero magnitudes below 1e-7 are too small for the plain display.
    SMALL_EXPONENT = -7

    def __new__(cls,
                precision_digits=DEFAULT_PRECISION,
                max_operand_digits=DEFAULT_MAX_DIGITS,
                large_magnitude_policy=DEFAULT_POLICY):
        try:
            policy = LargeMagnitude(large_magnitude_policy)
        except ValueError:
            raise CalculatorError('No such large magnitude policy {!r}'
                                  .format(large_magnitude_policy)) from None
        if not cls.MIN_PRECISION <= precision_digits <= cls.MAX_PRECISION:
            raise CalculatorError('Precision must be between {} and {}'
                                  .format(cls.MIN_PRECISION,
                                          cls.MAX_PRECISION))
        if max_operand_digits < 1:
            raise CalculatorError('Operands need at least one digit')
        return super().__new__(cls,
                               int(precision_digits),
                               int(max_operand_digits),
                               policy)

    @property
    def scientific(self):
        return self.large_magnitude_policy is LargeMagnitude.SCIENTIFIC

    @property
    def large_threshold(self):
        '''
        Smallest magnitude that no longer fits the display.
        '''
        return 10 ** self.max_operand_digits

    @property
    def small_exponent(self):
        '''
        Magnitudes below 10 ** small_exponent render in scientific notation.
        '''
        return type(self).SMALL_EXPONENT


DEFAULT_SETTINGS = Settings()
