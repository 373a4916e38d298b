from functools import reduce
import operator

import regex

from . import tokens
from .util import CalculatorError


class Lexer:
    '''
    Input normalizer: keyboard keys and button labels to calculator tokens.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''

    # Named keys, as a keyboard event reports them, and button labels.
    KEYS = {
        'Enter': tokens.EQUALS,
        'Backspace': tokens.BACKSPACE,
        'Escape': tokens.CLEAR,
        '=': tokens.EQUALS,
        'C': tokens.CLEAR,
        '\N{ERASE TO THE LEFT}': tokens.BACKSPACE,
        '.': tokens.DECIMAL,
        '+': tokens.ADD,
        '-': tokens.SUBTRACT,
        '*': tokens.MULTIPLY,
        '\N{MULTIPLICATION SIGN}': tokens.MULTIPLY,
        '/': tokens.DIVIDE,
        '\N{DIVISION SIGN}': tokens.DIVIDE,
        '%': tokens.MODULO,
        # Like dc's unary minus.
        '_': tokens.NEGATE,
        '\N{PLUS-MINUS SIGN}': tokens.NEGATE,
    }
    KEYS.update((d, tokens.digit(d)) for d in '0123456789')

    DIGIT = r'[0-9]'
    # Longest first, so Escape is never read as E, s, ...
    KEY = r'(?:' + r'|'.join(map(regex.escape,
                                 sorted((key
                                         for key
                                         in KEYS
                                         if not key.isdigit()),
                                        key=len,
                                        reverse=True))) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<key>' + KEY + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line of keys and yield all lexemes.

        Stops on the first unrecognized key, after yielding everything
        before it.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalculatorError("Couldn't lex {0}".format(line.strip()))

    def tokenize(self, line):
        '''
        Take a line of keys and yield their tokens, skipping whitespace.
        '''
        for match in self.lex(line):
            if self.isfeedable(match):
                yield self.parse(match)

    def parse(self, match):
        '''
        Return the token for a feedable lexeme match.
        '''
        return type(self).KEYS[match.group(0)]

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def token(self, key):
        '''
        Return the token for a single key name or label, or None.
        '''
        return type(self).KEYS.get(key)

    def recognizes(self, key):
        '''
        Return True if the key belongs to the calculator.

        UI adapters suppress default key behavior for these keys only.
        '''
        return key in type(self).KEYS
