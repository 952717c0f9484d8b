"""Basic integer arithmetic and weighted grade averages."""


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def product(a: int, b: int) -> int:
    """Return the product of two numbers."""
    return a * b


def product_difference(a: int, b: int, c: int, d: int) -> int:
    """Return ``a * b - c * d``."""
    return a * b - c * d


def largest(a: int, b: int, c: int) -> int:
    """Return the largest of three integers."""
    return max(a, b, c)


def weighted_average(grade1: float, grade2: float) -> float:
    """Average two grades weighted 3.5 and 7.5."""
    return (grade1 * 3.5 + grade2 * 7.5) / 11


def weighted_average3(grade1: float, grade2: float, grade3: float) -> float:
    """Average three grades weighted 2, 3 and 5."""
    return (grade1 * 2 + grade2 * 3 + grade3 * 5) / 10