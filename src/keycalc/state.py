'''
Calculator state.
'''


class CalculatorState:
    '''
    Operand buffers and flags of one calculator.

    Only a Machine writes to it. Buffers hold text until the engine parses
    them.
    '''

    INITIAL_OPERAND = '0'
    FIELDS = ('current_operand',
              'previous_operand',
              'pending_operator',
              'reset_on_next_digit',
              'faulted')

    def __init__(self):
        self.reset()

    def reset(self):
        '''
        Reinitialize every field in place.
        '''
        self.current_operand = type(self).INITIAL_OPERAND
        self.previous_operand = ''
        self.pending_operator = None
        self.reset_on_next_digit = False
        self.faulted = False

    def as_dict(self):
        return {name: getattr(self, name) for name in type(self).FIELDS}

    def copy(self):
        other = type(self)()
        for name, value in self.as_dict().items():
            setattr(other, name, value)
        return other

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return '{}({})'.format(type(self).__name__,
                               ', '.join('{}={!r}'.format(*item)
                                         for item in self.as_dict().items()))
