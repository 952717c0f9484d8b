"""Conversions of days, seconds, distances and fuel."""

from dataclasses import dataclass


def _truncated_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide with the quotient truncated toward zero."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


@dataclass(frozen=True)
class Age:
    """An age split into years of 365 days and months of 30 days."""

    years: int
    months: int
    days: int

    def __str__(self) -> str:
        return f"{self.years} ano(s)\n{self.months} mes(es)\n{self.days} dia(s)"


@dataclass(frozen=True)
class Duration:
    """A span of time split into hours, minutes and seconds."""

    hours: int
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes}:{self.seconds}"


def age_from_days(total_days: int) -> Age:
    """Split a number of days into years, months and days."""
    years, rest = _truncated_divmod(total_days, 365)
    months, days = _truncated_divmod(rest, 30)
    return Age(years, months, days)


def duration_from_seconds(seconds: int) -> Duration:
    """Split a number of seconds into hours, minutes and seconds."""
    hours, rest = _truncated_divmod(seconds, 3600)
    minutes, secs = _truncated_divmod(rest, 60)
    return Duration(hours, minutes, secs)


def chase_minutes(km: int) -> int:
    """Minutes for a car 30 km/h faster to open a gap of ``km`` kilometres."""
    return km * 2


def consumption(distance: float, fuel: float) -> float:
    """Kilometres travelled per litre of fuel."""
    return distance / fuel


def fuel_needed(speed: float, hours: float) -> float:
    """Litres used at ``speed`` km/h for ``hours`` by a car doing 12 km/l."""
    return speed * hours / 12