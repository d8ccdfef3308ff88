"""Age Derivation — integer age from a birth date, and its inverse as date bounds.

Invariants:
    - calculate_age(b, t) = t.year - b.year, minus 1 if b shifted by that many years is after t
    - Feb 29 shifted into a non-leap year lands on Feb 28
    - birth_date_range() is the exact inverse of calculate_age():
      min_age <= calculate_age(b, t) <= max_age  <=>  lo < b <= hi

Design Decisions:
    - Age is never stored: discovery recomputes it per query against Clock.today()
    - Bounds instead of per-row evaluation: the age filter stays a plain
      date comparison the database can index and count
"""

from datetime import date, timedelta


def shift_years(value: date, years: int) -> date:
    """Move a date by whole years, clamping Feb 29 to Feb 28 when needed."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def calculate_age(birth_date: date, today: date) -> int:
    """Completed years between birth_date and today."""
    age = today.year - birth_date.year
    if shift_years(birth_date, age) > today:
        age -= 1
    return age


def latest_birth_date_for_age(age: int, today: date) -> date:
    """Latest birth date whose derived age on `today` is at least `age`."""
    candidate = shift_years(today, -age)
    # Feb 29 clamping can make the next day still qualify
    while shift_years(candidate + timedelta(days=1), age) <= today:
        candidate += timedelta(days=1)
    return candidate


def birth_date_range(min_age: int, max_age: int, today: date) -> tuple[date, date]:
    """(earliest_exclusive, latest_inclusive) birth dates for an inclusive age range."""
    latest_inclusive = latest_birth_date_for_age(min_age, today)
    earliest_exclusive = latest_birth_date_for_age(max_age + 1, today)
    return earliest_exclusive, latest_inclusive
