import pytest

from beginnerkit.money import (
    BANKNOTES,
    COIN_CENTS,
    NOTE_CENTS,
    banknotes,
    line_total,
    notes_and_coins,
    salary,
    to_cents,
    total_with_bonus,
)


@pytest.mark.parametrize("amount", [0, 1, 576, 11257, 503, 1000000])
def test_banknotes_sum_to_amount(amount):
    counts = banknotes(amount)
    assert tuple(counts) == BANKNOTES
    assert sum(value * count for value, count in counts.items()) == amount
    assert all(count >= 0 for count in counts.values())


@pytest.mark.parametrize("amount", [576, 11257, 999])
def test_banknotes_are_greedy(amount):
    counts = banknotes(amount)
    assert counts[100] == amount // 100
    assert counts[1] <= 1 and counts[2] <= 2


@pytest.mark.parametrize("cents", [0, 1, 7, 57, 12345, 9999999])
def test_to_cents_round_trip(cents):
    assert to_cents(cents / 100) == cents


@pytest.mark.parametrize("value", [576.73, 4.00, 91.01, 0.01, 1000.99])
def test_notes_and_coins_sum_to_value(value):
    notes, coins = notes_and_coins(value)
    assert tuple(notes) == NOTE_CENTS
    assert tuple(coins) == COIN_CENTS
    total = sum(c * n for c, n in notes.items()) + sum(c * n for c, n in coins.items())
    assert total == to_cents(value)


def test_notes_and_coins_of_cent_only():
    notes, coins = notes_and_coins(0.01)
    assert sum(notes.values()) == 0
    assert coins[1] == 1


@pytest.mark.parametrize("fixed", [0.0, 500.0, 1700.0])
def test_bonus_without_sales_is_fixed_salary(fixed):
    assert total_with_bonus(fixed, 0.0) == fixed


def test_bonus_grows_with_sales():
    assert total_with_bonus(500.0, 1230.3) > total_with_bonus(500.0, 1000.0)


@pytest.mark.parametrize("hours, rate", [(100, 5.50), (200, 20.50), (0, 9.0)])
def test_salary_matches_line_total(hours, rate):
    assert salary(hours, rate) == line_total(hours, rate)
    assert salary(hours, rate) == pytest.approx(rate * hours)


def test_line_total_of_single_item():
    assert line_total(1, 5.30) == 5.30