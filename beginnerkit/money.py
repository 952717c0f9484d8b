"""Money breakdowns into notes and coins, and pay calculations."""

BANKNOTES = (100, 50, 20, 10, 5, 2, 1)
NOTE_CENTS = (10000, 5000, 2000, 1000, 500, 200)
COIN_CENTS = (100, 50, 25, 10, 5, 1)
COMMISSION_RATE = 0.15


def _truncated_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide with the quotient truncated toward zero."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def _break_down(amount: int, denominations: tuple[int, ...]) -> dict[int, int]:
    counts = {}
    for denomination in denominations:
        counts[denomination], amount = _truncated_divmod(amount, denomination)
    return counts


def banknotes(amount: int) -> dict[int, int]:
    """Count the notes, largest first, that make up a whole amount."""
    return _break_down(amount, BANKNOTES)


def to_cents(value: float) -> int:
    """Convert a money value to whole cents, rounding half up."""
    return int(value * 100 + 0.5)


def notes_and_coins(value: float) -> tuple[dict[int, int], dict[int, int]]:
    """Split a money value into note and coin counts, both keyed by cents."""
    counts = _break_down(to_cents(value), NOTE_CENTS + COIN_CENTS)
    notes = {cents: counts[cents] for cents in NOTE_CENTS}
    coins = {cents: counts[cents] for cents in COIN_CENTS}
    return notes, coins


def total_with_bonus(fixed_salary: float, sales: float) -> float:
    """Fixed salary plus a 15% commission on sales."""
    return sales * COMMISSION_RATE + fixed_salary


def salary(hours: int, hourly_rate: float) -> float:
    """Pay for the hours worked."""
    return hours * hourly_rate


def line_total(quantity: int, unit_price: float) -> float:
    """Price of a quantity of items."""
    return quantity * unit_price