from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from loguru import logger
from prompt_toolkit import PromptSession

from .util import CalculatorError
from .settings import LargeMagnitude, Settings
from .machine import Machine
from .lexer import Lexer


class InteractiveInput:
    '''
    Lines of keys typed at a prompt, with the live display on the right.
    '''

    def __init__(self, prompt, machine=None):
        self.prompt = prompt
        self.machine = machine

    def _rprompt(self):
        if self.machine is None:
            return None
        return self.machine.display()

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=None,
                                    rprompt=self._rprompt,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '<lvl>{level: <8}</> | <c>{name}:{function}</> | {message}'

    def dumper(self):
        '''
        Dump all lexemes and their tokens.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<token>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)
                groups = lexer.matchedgroups(match)
                token = lexer.parse(match) if lexer.isfeedable(match) else None
                print(*groups.keys(),
                      repr(matched),
                      token,
                      sep='\t')

    def executor(self):
        '''
        Run the calculator, printing the display after each line.

        With --trace, print it after every token instead.
        '''
        machine = self.machine
        lexer = Lexer()
        for line in self.args.expressions:
            display = None
            try:
                for token in lexer.tokenize(line):
                    display = machine.feed(token)
                    if self.args.trace:
                        print(token, display, sep='\t')
            # Abort entire rest of line
            except CalculatorError as e:
                print(e.args[0], file=sys.stderr)
            if display is not None and not self.args.trace:
                print(display)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return an interactive prompt instead of stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    machine=self.machine)
        else:
            return sys.stdin

    def _settings(self):
        return Settings(precision_digits=self.args.precision,
                        max_operand_digits=self.args.max_digits,
                        large_magnitude_policy=self.args.large_magnitude)

    def _configure_logging(self):
        logger.remove()
        logger.add(sys.stderr,
                   level='DEBUG' if self.args.verbose else 'WARNING',
                   format=self.LOG_FORMAT)
        logger.enable('keycalc')

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Keypad calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log every key')
        self.argument_parser.add_argument('-t', '--trace',
                                          action='store_true',
                                          help='print the display after '
                                               'every key')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          default=Settings.DEFAULT_PRECISION,
                                          help='fractional digits to round '
                                               'results to')
        self.argument_parser.add_argument('-m', '--max-digits',
                                          type=int,
                                          default=Settings.DEFAULT_MAX_DIGITS,
                                          help='digits an operand may hold')
        self.argument_parser.add_argument('-s', '--scientific',
                                          action='store_const',
                                          const=LargeMagnitude.SCIENTIFIC,
                                          default=Settings.DEFAULT_POLICY,
                                          dest='large_magnitude',
                                          help='show large results in '
                                               'scientific notation instead '
                                               'of Error')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        self._configure_logging()
        try:
            self.machine = Machine(settings=self._settings())
        except CalculatorError as e:
            self.argument_parser.error(e.args[0])
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
