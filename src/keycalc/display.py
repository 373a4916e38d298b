'''
Display formatting.

Turns calculator state into the text a screen shows. Never mutates the
state.
'''

from decimal import localcontext

from .engine import CONTEXT, parse_operand
from .settings import DEFAULT_SETTINGS
from .util import InvalidOperand


ERROR = 'Error'


def _trim(text):
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_number(value):
    '''
    Render a Decimal in plain positional form, trailing zeros trimmed.

    This is what gets written back into an operand buffer.
    '''
    if not value:
        # Also catches -0
        return '0'
    return _trim(format(value, 'f'))


def format_scientific(value, settings=DEFAULT_SETTINGS):
    '''
    Render a Decimal as d.ddddddde±x, precision_digits significant digits.
    '''
    with localcontext(CONTEXT):
        return format(value, '.{}e'.format(settings.precision_digits - 1))


def format_value(value, settings=DEFAULT_SETTINGS):
    if not value.is_finite():
        return ERROR
    magnitude = abs(value)
    if magnitude >= settings.large_threshold:
        if settings.scientific:
            return format_scientific(value, settings)
        return ERROR
    if magnitude and magnitude.adjusted() < settings.small_exponent:
        return format_scientific(value, settings)
    return format_number(value)


def format_display(state, settings=DEFAULT_SETTINGS):
    '''
    Return the display string for a calculator state.
    '''
    if state.faulted:
        return ERROR
    try:
        value = parse_operand(state.current_operand)
    except InvalidOperand:
        return ERROR
    return format_value(value, settings)
