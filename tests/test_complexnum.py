import pytest

from adtkit.complexnum import Complex


@pytest.fixture
def c1():
    return Complex(4, 2)


@pytest.fixture
def c2():
    return Complex(3.1, -1)


def test_construction_and_printing(c1, c2):
    assert str(c1) == "4+2i"
    assert str(c2) == "3.1-i"
    assert str(Complex()) == "0"
    assert str(Complex(4)) == "4"


def test_setters_change_parts(c1):
    copy = Complex(c1.real, c1.imag)
    c1.real = 5
    assert str(c1) == "5+2i"
    assert c1.real == 5
    c1.imag = 5
    assert str(c1) == "5+5i"
    assert c1.imag == 5
    assert str(copy) == "4+2i"


def test_negation(c1):
    assert str(-c1) == "-4-2i"


def test_addition(c1, c2):
    assert str(c1 + c2) == "7.1+i"
    assert str(c1 + 7) == "11+2i"
    assert str(c1 + 7.7) == "11.7+2i"


def test_subtraction(c1, c2):
    assert str(c1 - c2) == "0.9+3i"
    assert str(c1 - 7) == "-3+2i"
    assert str(c1 - 7.7) == "-3.7+2i"


def test_multiplication(c1, c2):
    assert str(c1 * c2) == "14.4+2.2i"
    assert str(c1 * 7) == "28+14i"
    assert str(c1 * 7.7) == "30.8+15.4i"


def test_conjugate(c1, c2):
    assert str(~c1) == "4-2i"
    assert str(~c2) == "3.1+i"
    assert c1.conjugate() == ~c1


def test_division(c1, c2):
    assert str(c1 / c2) == "0.980207+0.961357i"
    assert str(c1 / 2) == "2+i"
    assert str(c1 / 2.2) == "1.81818+0.909091i"


def test_division_round_trip(c1, c2):
    result = (c1 / c2) * c2
    assert abs(result - c1) < 1e-9


@pytest.mark.parametrize("divisor", [Complex(), 0, 0.0])
def test_division_by_zero(c1, divisor):
    with pytest.raises(ZeroDivisionError):
        c1 / divisor
    assert c1 == Complex(4, 2)
    assert str(c1) == "4+2i"


def test_exponentiation(c1):
    assert str(c1 ** 3) == "16+88i"
    assert str(c1 ** 0) == "1"
    assert str(c1 ** -3) == "0.002-0.011i"


def test_negative_power_is_reciprocal(c1):
    product = (c1 ** -2) * (c1 ** 2)
    assert abs(product - Complex(1, 0)) < 1e-12


def test_zero_to_negative_power():
    with pytest.raises(ZeroDivisionError):
        Complex() ** -1


def test_abs(c1):
    assert f"{abs(c1):g}" == "4.47214"
    assert abs(Complex(-4, -2)) == abs(c1)


def test_equality(c1):
    assert c1 == Complex(4, 2)
    assert not (c1 != Complex(4, 2))
    assert c1 != Complex(4, -2)
    assert Complex(4) == 4


def test_unsupported_operand_type(c1):
    with pytest.raises(TypeError):
        c1 + "x"
    with pytest.raises(TypeError):
        c1 ** 1.5
    assert c1 == Complex(4, 2)
    assert str(c1) == "4+2i"


@pytest.mark.parametrize(
    "text, real, imag",
    [
        ("5+5i", 5, 5),
        ("3.1-i", 3.1, -1),
        ("4+i", 4, 1),
        ("4-2i", 4, -2),
        ("4", 4, 0),
        ("4i", 0, 4),
        ("-4i", 0, -4),
        ("i", 0, 1),
        ("+i", 0, 1),
        ("-i", 0, -1),
    ],
)
def test_parse_formats(text, real, imag):
    assert Complex.parse(text) == Complex(real, imag)


@pytest.mark.parametrize("text", ["abc", "5+3", "5+x", "", "5 + 3i", "i5"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Complex.parse(text)


@pytest.mark.parametrize(
    "value",
    [Complex(4, 2), Complex(3.1, -1), Complex(0, 1), Complex(0, -1), Complex(-3.7, 2), Complex(7, 0)],
)
def test_print_parse_round_trip(value):
    assert Complex.parse(str(value)) == value