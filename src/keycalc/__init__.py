'''
Keypad calculator.

Takes calculator keys one at a time, the way a desk calculator or its
on-screen cousin does, and returns what the display should show after each.
Chained operators apply left to right; there is no precedence, no memory and
no parentheses.

Arithmetic is done in decimal, rounded to a fixed number of fractional
digits, so 0.1 + 0.2 shows 0.3. Anything that goes wrong (division by zero,
results too large for the display) shows Error until cleared.
'''

from loguru import logger

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .settings import Settings
from .state import CalculatorState


logger.disable(__name__)

__all__ = 'Machine', 'CalculatorState', 'Settings', 'Lexer', 'CLI'
