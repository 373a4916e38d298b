'''
Arithmetic engine tests
'''

from decimal import Decimal

from keycalc.engine import compute, integer_digits, parse_operand, round_result
from keycalc.settings import Settings
from keycalc.tokens import Operator
from keycalc.util import DivideByZero, InvalidOperand, Overflow

from pytest import mark, raises


@mark.parametrize('prev, current, op, expected', [
    ('2', '3', Operator.ADD, '5'),
    ('2', '3', Operator.SUBTRACT, '-1'),
    ('2.5', '4', Operator.MULTIPLY, '10'),
    ('1', '4', Operator.DIVIDE, '0.25'),
    ('7', '3', '%', '1'),
    ('-7', '3', Operator.MODULO, '-1'),
    ('7', '-3', Operator.MODULO, '1'),
    ('5.5', '2', Operator.MODULO, '1.5'),
])
def test_operations(prev, current, op, expected):
    assert compute(prev, current, op) == Decimal(expected)


def test_point_one_plus_point_two():
    assert compute(0.1, 0.2, Operator.ADD) == Decimal('0.3')
    assert str(compute('0.1', '0.2', Operator.ADD).normalize()) == '0.3'


def test_division_rounds_half_away_from_zero():
    assert compute('2', '3', Operator.DIVIDE) == Decimal('0.66666667')
    assert compute('-2', '3', Operator.DIVIDE) == Decimal('-0.66666667')
    assert compute('0.000000005', '1', Operator.MULTIPLY) == \
        Decimal('0.00000001')


def test_precision_is_configurable():
    settings = Settings(precision_digits=10)
    assert compute('1', '3', Operator.DIVIDE, settings) == \
        Decimal('0.3333333333')


@mark.parametrize('op', [Operator.DIVIDE, Operator.MODULO])
def test_divide_by_zero(op):
    with raises(DivideByZero):
        compute(10, 0, op)
    with raises(DivideByZero):
        compute('10', '0.', op)


def test_overflow_on_integer_digits():
    with raises(Overflow):
        compute(1e16, 1, Operator.ADD)
    with raises(Overflow):
        compute('999999999999999', '1', Operator.ADD)
    assert compute('999999999999998', '1', Operator.ADD) == \
        Decimal('999999999999999')


def test_scientific_policy_allows_large_results():
    settings = Settings(large_magnitude_policy='scientific')
    # Rounded to 15 significant digits.
    assert compute(1e16, 1, Operator.ADD, settings) == \
        Decimal('10000000000000000')
    assert compute('123456789012345', '100', Operator.MULTIPLY,
                   settings) == Decimal('12345678901234500')


def test_overflow_past_exponent_range():
    settings = Settings(large_magnitude_policy='scientific')
    with raises(Overflow):
        compute('1' + '0' * 200, '1' + '0' * 200, Operator.MULTIPLY,
                settings)


def test_non_finite_operands():
    with raises(Overflow):
        compute(float('inf'), 1, Operator.ADD)
    with raises(Overflow):
        compute(float('nan'), 1, Operator.ADD)


@mark.parametrize('operand', ['Error', '', '-', '1e5', '1_000', '1.2.3', None])
def test_invalid_operand(operand):
    with raises(InvalidOperand):
        parse_operand(operand)
    with raises(InvalidOperand):
        compute(operand, '1', Operator.ADD)


def test_parse_operand():
    assert parse_operand('12.') == Decimal('12')
    assert parse_operand('-0.5') == Decimal('-0.5')
    assert parse_operand(0.1) == Decimal('0.1')
    assert parse_operand(7) == Decimal(7)


def test_round_result():
    assert round_result(Decimal('0.123456785')) == Decimal('0.12345679')
    assert round_result(Decimal('-0.123456785')) == Decimal('-0.12345679')
    with raises(Overflow):
        round_result(Decimal('Infinity'))


def test_round_result_fits_operand_digits():
    assert round_result(Decimal('17636684144620.714285714')) == \
        Decimal('17636684144620.7')
    assert round_result(Decimal('123456789012345.4')) == \
        Decimal('123456789012345')
    assert round_result(Decimal('9.999999999')) == Decimal('10')
    assert round_result(Decimal('-1234567.890123456')) == \
        Decimal('-1234567.89012346')
    settings = Settings(max_operand_digits=4)
    assert round_result(Decimal('0.123456'), settings) == Decimal('0.123')
    assert round_result(Decimal('12.3456'), settings) == Decimal('12.35')


def test_division_result_fits_operand_digits():
    result = compute('123456789012345', '7', Operator.DIVIDE)
    assert result == Decimal('17636684144620.7')
    assert len(result.as_tuple().digits) <= 15


def test_integer_digits():
    assert integer_digits(Decimal('0.5')) == 0
    assert integer_digits(Decimal('0')) == 0
    assert integer_digits(Decimal('-123.45')) == 3
    assert integer_digits(Decimal('1E+15')) == 16
