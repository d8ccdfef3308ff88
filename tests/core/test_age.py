"""Age Derivation — verifies calculate_age and its inverse birth-date bounds.

Tests:
    - Birthday today counts; birthday tomorrow does not
    - Feb 29 birthdays age on Feb 28 in non-leap years
    - birth_date_range agrees with calculate_age for every birth date in a window
"""

from datetime import date, timedelta

from dating_api.core.age import (
    birth_date_range, calculate_age, latest_birth_date_for_age, shift_years,
)

TODAY = date(2024, 6, 15)


def test_eighteenth_birthday_today_is_eighteen():
    assert calculate_age(date(2006, 6, 15), TODAY) == 18


def test_one_day_short_of_eighteen_is_seventeen():
    assert calculate_age(date(2006, 6, 16), TODAY) == 17


def test_born_today_is_zero():
    assert calculate_age(TODAY, TODAY) == 0


def test_shift_years_clamps_leap_day():
    assert shift_years(date(2000, 2, 29), 1) == date(2001, 2, 28)
    assert shift_years(date(2000, 2, 29), 4) == date(2004, 2, 29)


def test_leap_day_birthday_ages_on_feb_28():
    born = date(2000, 2, 29)
    assert calculate_age(born, date(2001, 2, 27)) == 0
    assert calculate_age(born, date(2001, 2, 28)) == 1
    assert calculate_age(born, date(2004, 2, 28)) == 3
    assert calculate_age(born, date(2004, 2, 29)) == 4


def test_latest_birth_date_for_age_is_tight():
    latest = latest_birth_date_for_age(18, TODAY)
    assert latest == date(2006, 6, 15)
    assert calculate_age(latest, TODAY) == 18
    assert calculate_age(latest + timedelta(days=1), TODAY) == 17


def test_latest_birth_date_covers_leap_day_on_feb_28():
    """On Feb 28 of a non-leap year, someone born Feb 29 has just aged."""
    today = date(2023, 2, 28)
    latest = latest_birth_date_for_age(3, today)
    assert latest == date(2020, 2, 29)
    assert calculate_age(latest, today) == 3


def test_birth_date_range_matches_calculate_age():
    """min <= age <= max exactly when earliest_exclusive < birth <= latest_inclusive."""
    for today in (TODAY, date(2023, 2, 28), date(2024, 2, 29), date(2024, 3, 1)):
        lo, hi = birth_date_range(20, 22, today)
        start = shift_years(today, -25)
        for offset in range(0, 6 * 366):
            born = start + timedelta(days=offset)
            in_range = 20 <= calculate_age(born, today) <= 22
            assert in_range == (lo < born <= hi), (today, born)


def test_birth_date_range_single_age():
    lo, hi = birth_date_range(30, 30, TODAY)
    assert calculate_age(hi, TODAY) == 30
    assert calculate_age(lo, TODAY) == 31
    assert calculate_age(lo + timedelta(days=1), TODAY) == 30
