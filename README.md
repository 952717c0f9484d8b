# beginnerkit

A collection of small, self-contained calculations of the kind found in
introductory programming exercises: arithmetic on a few numbers, areas and
volumes, splitting amounts of time and money into parts, and a few travel and
pay calculations. Each one is a plain Python function, and every one of them
can also be run from the command line as a small program that reads numbers
from standard input and prints a formatted result.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Arithmetic — `beginnerkit.arithmetic`

- `add(a, b)` returns the sum of two numbers.
- `product(a, b)` returns their product.
- `product_difference(a, b, c, d)` returns `a * b - c * d`.
- `largest(a, b, c)` returns the largest of three integers.
- `weighted_average(grade1, grade2)` averages two grades with weights 3.5 and 7.5.
- `weighted_average3(grade1, grade2, grade3)` averages three grades with weights 2, 3 and 5.

```python
from beginnerkit.arithmetic import add, largest

add(10, 9)           # 19
largest(7, 14, 106)  # 106
```

### Geometry — `beginnerkit.geometry`

All formulas use π = 3.14159 (the constant `PI`).

- `circle_area(radius)`
- `triangle_area(base, height)` — area of a right triangle, `base * height / 2`.
- `trapezoid_area(base_a, base_b, height)`
- `square_area(side)` and `rectangle_area(side_a, side_b)`
- `sphere_volume(radius)` — (4/3)·π·r³.
- `square_root(number)` — Newton's method, stopping when `x * x` is within
  0.00001 of `number`; raises `ValueError` for a negative number.
- `distance(x1, y1, x2, y2)` — distance between two points, using `square_root`.
- `areas(a, b, c)` returns a frozen `GeometricAreas` record with the fields
  `triangle` (from `a` and `c`), `circle` (radius `c`), `trapezoid` (`a`, `b`,
  height `c`), `square` (side `b`) and `rectangle` (`a` and `b`). Its `str()`
  lists the five areas, one per line, to three decimal places.

```python
from beginnerkit.geometry import circle_area

circle_area(2.0)  # 12.56636
```

### Conversions — `beginnerkit.conversions`

- `age_from_days(total_days)` returns an `Age` with `years`, `months` and
  `days`, counting a year as 365 days and a month as 30.
- `duration_from_seconds(seconds)` returns a `Duration` with `hours`,
  `minutes` and `seconds`; its `str()` is `hours:minutes:seconds` without
  zero padding.
- `chase_minutes(km)` gives the minutes a car 30 km/h faster than another
  needs to open a gap of `km` kilometres (`km * 2`).
- `consumption(distance, fuel)` gives kilometres per litre.
- `fuel_needed(speed, hours)` gives the litres used at `speed` km/h over
  `hours` by a car doing 12 km/l.

Negative inputs to the splitting functions are divided with the quotient
truncated toward zero, so every part carries the sign of the input.

### Money — `beginnerkit.money`

- `banknotes(amount)` splits a whole amount into notes of 100, 50, 20, 10, 5,
  2 and 1, returning a dict from note value to count, largest first.
- `to_cents(value)` turns an amount such as `576.73` into whole cents,
  rounding half up.
- `notes_and_coins(value)` returns two dicts keyed by value in cents: notes
  of 100.00 down to 2.00, and coins of 1.00, 0.50, 0.25, 0.10, 0.05 and 0.01.
- `total_with_bonus(fixed_salary, sales)` adds a 15% commission on sales to a
  fixed salary.
- `salary(hours, hourly_rate)` returns hours times rate.
- `line_total(quantity, unit_price)` returns quantity times unit price.

```python
from beginnerkit.money import banknotes

banknotes(576)  # {100: 5, 50: 1, 20: 1, 10: 0, 5: 1, 2: 0, 1: 1}
```

## Command line

Installing the package provides the `beginnerkit` command. Give it the name
of a program; it reads that program's input (whitespace-separated values)
from standard input and prints the result:

```
echo "10 9" | beginnerkit simple_sum
SOMA = 19
```

```
beginnerkit --help
```

| Program | Input | Output |
| --- | --- | --- |
| `hello_world` | nothing | `Hello World!` |
| `extremely_basic` | two integers | `X = <sum>` |
| `simple_sum` | two integers | `SOMA = <sum>` |
| `simple_product` | two integers | `PROD = <product>` |
| `product_difference` | four integers | `DIFERENCA = <a*b - c*d>` |
| `the_biggest` | three integers | `<largest> eh o maior` |
| `calculate_weighted_average` | two grades | `MEDIA = ` to 5 places |
| `calculate_weighted_average2` | three grades | `MEDIA = ` to 1 place |
| `area_circle` | radius | `A=` to 4 places |
| `geometric_areas` | three measures | the five areas |
| `sphere` | integer radius | `VOLUME = ` to 3 places |
| `distance_between_two_points` | x1 y1 x2 y2 | distance to 4 places |
| `age_days` | days | years, months and days |
| `time_conversion` | seconds | `h:m:s` |
| `car_distance` | kilometres | `<n> minutos` |
| `consumption` | integer distance, fuel | `<n> km/l` to 3 places |
| `fuel_consumption` | integer hours, integer speed | litres to 3 places |
| `banknotes` | integer amount | amount and note counts |
| `banknotes_coins` | amount with cents | note and coin counts |
| `salary_bonus_calculation` | name, fixed salary, sales | `TOTAL = R$ ` |
| `salary_calculation` | employee number, hours, rate | `NUMBER` and `SALARY` lines |
| `simple_calculation` | two lines of code, quantity, price | `VALOR A PAGAR: R$ ` |

If the input runs out, a value cannot be parsed, or a division by zero
occurs, the command prints `error: ...` to standard error and exits with
status 1.

The same programs can be run from Python with
`beginnerkit.cli.run(program, text)`, which takes the input as a string and
returns the output text; an unknown program name raises `ValueError`.

## Limitations

Each program performs one calculation per run; there is no interactive mode
and nothing is stored between runs. Output labels are fixed and in Portuguese.