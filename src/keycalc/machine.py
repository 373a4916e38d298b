'''
Calculator state machine.

Applies tokens to a CalculatorState, calling the engine to resolve pending
operators.
'''

from loguru import logger

from .display import ERROR, format_display, format_number
from .engine import compute, parse_operand, round_result
from .settings import DEFAULT_SETTINGS
from .state import CalculatorState
from .tokens import Kind
from .util import CalculatorError


class Machine:
    '''
    Calculator state machine.

    Takes tokens one at a time and applies them to its CalculatorState.
    Chained operators are resolved left to right; there is no precedence.

    Arithmetic errors never escape. They fault the machine, which then shows
    the error sentinel until it is cleared.
    '''

    def __init__(self, settings=None, state=None):
        '''
        Create a calculator showing 0.

        :param settings: Settings to round and display with.
        :param state: Existing CalculatorState to drive, if any.
        '''
        self.settings = settings or DEFAULT_SETTINGS
        self.state = state if state is not None else CalculatorState()

    def handle(self, token):
        '''
        Apply one token to the state and return the state.
        '''
        logger.debug('{} on {!r}', token, self.state)
        type(self).HANDLERS[token.kind](self, token)
        return self.state

    def feed(self, token):
        '''
        Apply one token and return the resulting display string.
        '''
        self.handle(token)
        return self.display()

    def feed_all(self, tokens):
        '''
        Apply tokens in order, yielding the display after each.
        '''
        for token in tokens:
            yield self.feed(token)

    def display(self):
        return format_display(self.state, self.settings)

    def _digits(self, operand):
        return sum(c.isdigit() for c in operand)

    def _fault(self, error):
        logger.warning('{}', error.args[0])
        state = self.state
        state.faulted = True
        state.current_operand = ERROR
        state.previous_operand = ''
        state.pending_operator = None
        state.reset_on_next_digit = True

    def _resolve(self):
        '''
        Apply the pending operator to the buffers.

        Returns False, having faulted the machine, if the engine refused.
        '''
        state = self.state
        try:
            result = compute(state.previous_operand,
                             state.current_operand,
                             state.pending_operator,
                             self.settings)
        except CalculatorError as e:
            self._fault(e)
            return False
        state.current_operand = format_number(result)
        return True

    def digit(self, token):
        state = self.state
        if state.faulted:
            return
        if state.reset_on_next_digit:
            state.current_operand = token.value
            state.reset_on_next_digit = False
        elif self._digits(state.current_operand) >= \
                self.settings.max_operand_digits:
            return
        elif state.current_operand in ('0', '-0'):
            state.current_operand = state.current_operand[:-1] + token.value
        else:
            state.current_operand += token.value

    def decimal(self, token):
        state = self.state
        if state.faulted:
            return
        if state.reset_on_next_digit:
            state.current_operand = '0.'
            state.reset_on_next_digit = False
        elif '.' not in state.current_operand:
            state.current_operand += '.'

    def operator(self, token):
        state = self.state
        if state.faulted:
            return
        if state.pending_operator is not None and not self._resolve():
            return
        state.previous_operand = state.current_operand
        state.pending_operator = token.value
        state.reset_on_next_digit = True

    def negate(self, token):
        state = self.state
        if state.faulted:
            return
        try:
            value = round_result(-parse_operand(state.current_operand),
                                 self.settings)
        except CalculatorError as e:
            self._fault(e)
            return
        state.current_operand = format_number(value)

    def equals(self, token):
        state = self.state
        if state.pending_operator is None:
            return
        if self._resolve():
            state.previous_operand = ''
            state.pending_operator = None
            state.reset_on_next_digit = True

    def clear(self, token=None):
        '''
        Reset the calculator to 0, leaving any fault.
        '''
        self.state.reset()

    reset = clear

    def backspace(self, token):
        state = self.state
        if state.faulted:
            return
        operand = state.current_operand[:-1]
        if operand in ('', '-'):
            operand = '0'
        state.current_operand = operand

    # Token kinds to handlers.
    HANDLERS = {
        Kind.DIGIT: digit,
        Kind.DECIMAL: decimal,
        Kind.OPERATOR: operator,
        Kind.NEGATE: negate,
        Kind.EQUALS: equals,
        Kind.CLEAR: clear,
        Kind.BACKSPACE: backspace,
    }
