from functools import wraps


class CalculatorError(Exception):
    pass


class DivideByZero(CalculatorError):
    pass


class Overflow(CalculatorError):
    pass


class InvalidOperand(CalculatorError):
    pass


def wrap_user_errors(fmt, error=CalculatorError):
    '''
    Decorator that converts stray exceptions into calculator errors.

    Passes through CalculatorErrors. Anything else is re-raised as ``error``,
    with ``fmt`` formatted from the call's arguments as the message.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
