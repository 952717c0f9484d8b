import pytest

from beginnerkit.arithmetic import (
    add,
    largest,
    product,
    product_difference,
    weighted_average,
    weighted_average3,
)

PAIRS = [(10, 9), (-10, 4), (15, -7), (0, 0), (123456, 654321)]


@pytest.mark.parametrize("a, b", PAIRS)
def test_add_inverts_with_subtraction(a, b):
    assert add(a, b) - b == a
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("a, b", PAIRS)
def test_product_is_commutative_and_has_identity(a, b):
    assert product(a, b) == product(b, a)
    assert product(a, 1) == a


def test_product_with_zero():
    assert product(0, 9) == product(7, 0) == add(0, 0)


@pytest.mark.parametrize("a, b", PAIRS)
def test_product_difference_relations(a, b):
    assert product_difference(a, b, a, b) == 0
    assert product_difference(a, b, 0, 0) == product(a, b)
    assert product_difference(a, b, 1, 1) == add(product(a, b), -1)


@pytest.mark.parametrize(
    "values",
    [(7, 14, 106), (217, 14, 6), (-5, -1, -9), (3, 3, 3), (0, -4, 2)],
)
def test_largest_is_member_and_bounds_all(values):
    result = largest(*values)
    assert result in values
    assert all(result >= v for v in values)


def test_largest_ignores_order():
    assert largest(1, 50, 9) == largest(50, 9, 1) == largest(9, 1, 50)


@pytest.mark.parametrize("grade", [0.0, 5.0, 7.3, 10.0])
def test_weighted_average_of_equal_grades(grade):
    assert weighted_average(grade, grade) == pytest.approx(grade)
    assert weighted_average3(grade, grade, grade) == pytest.approx(grade)


def test_weighted_average_favours_second_grade():
    assert weighted_average(0.0, 10.0) > weighted_average(10.0, 0.0)