"""Plane and solid geometry with a fixed approximation of pi."""

from dataclasses import dataclass

PI = 3.14159
PRECISION = 0.00001


def square_root(number: float) -> float:
    """Approximate a square root by Newton's method."""
    if number < 0:
        raise ValueError("square root of a negative number")
    x = number
    while abs(x * x - number) > PRECISION:
        x = (x + number / x) / 2
    return x


def circle_area(radius: float) -> float:
    """Return the area of a circle."""
    return PI * (radius * radius)


def triangle_area(base: float, height: float) -> float:
    """Return the area of a right triangle."""
    return base * height / 2


def trapezoid_area(base_a: float, base_b: float, height: float) -> float:
    """Return the area of a trapezoid."""
    return (base_a + base_b) * height / 2


def square_area(side: float) -> float:
    """Return the area of a square."""
    return side * side


def rectangle_area(side_a: float, side_b: float) -> float:
    """Return the area of a rectangle."""
    return side_a * side_b


def sphere_volume(radius: float) -> float:
    """Return the volume of a sphere."""
    return (4 / 3.0) * PI * (radius * radius * radius)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the distance between two points."""
    return square_root((x2 - x1) * (x2 - x1) + (y2 - y1) * (y2 - y1))


@dataclass(frozen=True)
class GeometricAreas:
    """Areas of the five figures built from three measures."""

    triangle: float
    circle: float
    trapezoid: float
    square: float
    rectangle: float

    def __str__(self) -> str:
        return (
            f"TRIANGULO: {self.triangle:.3f}\n"
            f"CIRCULO: {self.circle:.3f}\n"
            f"TRAPEZIO: {self.trapezoid:.3f}\n"
            f"QUADRADO: {self.square:.3f}\n"
            f"RETANGULO: {self.rectangle:.3f}\n"
        )


def areas(a: float, b: float, c: float) -> GeometricAreas:
    """Compute the figure areas from the measures ``a``, ``b`` and ``c``."""
    return GeometricAreas(
        triangle=triangle_area(a, c),
        circle=circle_area(c),
        trapezoid=trapezoid_area(a, b, c),
        square=square_area(b),
        rectangle=rectangle_area(a, b),
    )