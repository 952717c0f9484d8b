"""Command line front end for the small calculation programs."""

import argparse
import struct
import sys
from collections.abc import Callable

from beginnerkit.arithmetic import (
    add,
    largest,
    product,
    product_difference,
    weighted_average,
    weighted_average3,
)
from beginnerkit.conversions import (
    age_from_days,
    chase_minutes,
    consumption,
    duration_from_seconds,
    fuel_needed,
)
from beginnerkit.geometry import areas, circle_area, distance, sphere_volume
from beginnerkit.money import (
    banknotes,
    line_total,
    notes_and_coins,
    salary,
    total_with_bonus,
)


class _Input:
    """Whitespace-separated tokens read in order."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def read_word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def read_int(self) -> int:
        return int(self.read_word())

    def read_float(self) -> float:
        return float(self.read_word())

    def read_single(self) -> float:
        """Read a number stored with single precision."""
        return struct.unpack("f", struct.pack("f", self.read_float()))[0]


def _extremely_basic(inp: _Input) -> str:
    return f"X = {add(inp.read_int(), inp.read_int())}\n"


def _simple_sum(inp: _Input) -> str:
    return f"SOMA = {add(inp.read_int(), inp.read_int())}\n"


def _simple_product(inp: _Input) -> str:
    return f"PROD = {product(inp.read_int(), inp.read_int())}\n"


def _product_difference(inp: _Input) -> str:
    values = [inp.read_int() for _ in range(4)]
    return f"DIFERENCA = {product_difference(*values)}\n"


def _the_biggest(inp: _Input) -> str:
    values = [inp.read_int() for _ in range(3)]
    return f"{largest(*values)} eh o maior\n"


def _weighted_average(inp: _Input) -> str:
    return f"MEDIA = {weighted_average(inp.read_float(), inp.read_float()):.5f}\n"


def _weighted_average3(inp: _Input) -> str:
    grades = [inp.read_float() for _ in range(3)]
    return f"MEDIA = {weighted_average3(*grades):.1f}\n"


def _area_circle(inp: _Input) -> str:
    return f"A={circle_area(inp.read_float()):.4f}\n"


def _geometric_areas(inp: _Input) -> str:
    a, b, c = (inp.read_float() for _ in range(3))
    return str(areas(a, b, c))


def _sphere(inp: _Input) -> str:
    return f"VOLUME = {sphere_volume(inp.read_int()):.3f}\n"


def _distance(inp: _Input) -> str:
    x1, y1, x2, y2 = (inp.read_float() for _ in range(4))
    return f"{distance(x1, y1, x2, y2):.4f}\n"


def _age_days(inp: _Input) -> str:
    return f"{age_from_days(inp.read_int())}\n"


def _time_conversion(inp: _Input) -> str:
    return f"{duration_from_seconds(inp.read_int())}\n"


def _car_distance(inp: _Input) -> str:
    return f"{chase_minutes(inp.read_int())} minutos\n"


def _consumption(inp: _Input) -> str:
    distance_km = inp.read_int()
    return f"{consumption(distance_km, inp.read_single()):.3f} km/l\n"


def _fuel_consumption(inp: _Input) -> str:
    hours = inp.read_int()
    speed = inp.read_int()
    return f"{fuel_needed(speed, hours):.3f}\n"


def _banknotes(inp: _Input) -> str:
    amount = inp.read_int()
    lines = [str(amount)]
    lines += [f"{count} nota(s) de R$ {value},00" for value, count in banknotes(amount).items()]
    return "\n".join(lines) + "\n"


def _banknotes_coins(inp: _Input) -> str:
    notes, coins = notes_and_coins(inp.read_float())
    lines = ["NOTAS:"]
    lines += [f"{count} nota(s) de R$ {cents / 100:.2f}" for cents, count in notes.items()]
    lines.append("MOEDAS:")
    lines += [f"{count} moeda(s) de R$ {cents / 100:.2f}" for cents, count in coins.items()]
    return "\n".join(lines) + "\n"


def _salary_bonus(inp: _Input) -> str:
    inp.read_word()
    fixed_salary = inp.read_float()
    sales = inp.read_float()
    return f"TOTAL = R$ {total_with_bonus(fixed_salary, sales):.2f}\n"


def _salary_calculation(inp: _Input) -> str:
    employee = inp.read_int()
    hours = inp.read_int()
    rate = inp.read_float()
    return f"NUMBER = {employee}\nSALARY = U$ {salary(hours, rate):.2f}\n"


def _simple_calculation(inp: _Input) -> str:
    total = 0.0
    for _ in range(2):
        inp.read_int()
        quantity = inp.read_int()
        total += line_total(quantity, inp.read_float())
    return f"VALOR A PAGAR: R$ {total:.2f}\n"


# Programs that read nothing and always print the same text.
FIXED_OUTPUTS: dict[str, str] = {
    "hello_world": "Hello World!\n",
}

PROGRAMS: dict[str, Callable[[_Input], str]] = {
    "age_days": _age_days,
    "area_circle": _area_circle,
    "banknotes": _banknotes,
    "banknotes_coins": _banknotes_coins,
    "calculate_weighted_average": _weighted_average,
    "calculate_weighted_average2": _weighted_average3,
    "car_distance": _car_distance,
    "consumption": _consumption,
    "distance_between_two_points": _distance,
    "extremely_basic": _extremely_basic,
    "fuel_consumption": _fuel_consumption,
    "geometric_areas": _geometric_areas,
    "product_difference": _product_difference,
    "salary_bonus_calculation": _salary_bonus,
    "salary_calculation": _salary_calculation,
    "simple_calculation": _simple_calculation,
    "simple_product": _simple_product,
    "simple_sum": _simple_sum,
    "sphere": _sphere,
    "the_biggest": _the_biggest,
    "time_conversion": _time_conversion,
}


def run(program: str, text: str) -> str:
    """Run a named program on the given input text and return its output."""
    if program in FIXED_OUTPUTS:
        return FIXED_OUTPUTS[program]
    try:
        handler = PROGRAMS[program]
    except KeyError:
        raise ValueError(f"unknown program: {program}") from None
    return handler(_Input(text))


def main(argv: list[str] | None = None) -> int:
    """Read standard input, run the chosen program and print its output."""
    parser = argparse.ArgumentParser(
        prog="beginnerkit", description="Run one of the small calculation programs."
    )
    parser.add_argument("program", choices=sorted({*PROGRAMS, *FIXED_OUTPUTS}))
    args = parser.parse_args(argv)
    text = "" if args.program in FIXED_OUTPUTS else sys.stdin.read()
    try:
        output = run(args.program, text)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())