"""Domain Types — verifies identity wrappers and enum values.

Tests:
    - NewType wrappers compare equal to the wrapped int
    - Gender serializes to its lowercase value
"""

from dating_api.core.domain_types import Gender, MessageId, PhotoId, UserId


def test_identity_types_wrap_int():
    assert UserId(5) == 5
    assert MessageId(6) == 6
    assert PhotoId(7) == 7


def test_gender_has_two_values():
    assert {g.value for g in Gender} == {"male", "female"}


def test_gender_parses_from_value():
    assert Gender("female") is Gender.FEMALE
