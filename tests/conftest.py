from loguru import logger
from pytest import Item, fixture

from keycalc.lexer import Lexer
from keycalc.machine import Machine


@fixture
def machine():
    return Machine()


@fixture
def press(machine):
    '''
    Feed a line of keys to the machine, returning the final display.
    '''
    lexer = Lexer()

    def press(line):
        display = machine.display()
        for token in lexer.tokenize(line):
            display = machine.feed(token)
        return display
    return press


@fixture(autouse=True)
def quiet_logger():
    '''
    Drop any sink a CLI test pointed at a capture stream.
    '''
    yield
    logger.remove()
    logger.disable('keycalc')


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
