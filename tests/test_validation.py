"""Tests for name and phone number validation."""

import random

import pytest

from phonebook.domain import ValidationError, validate, validate_name, validate_number
from phonebook.domain.validation import is_valid_number_format


def test_valid_pair_returns_none():
    assert validate("Ada", "040-1234556") is None
    assert validate("Arto Hellas", "040123456") is None


def test_digits_only_of_length_eight_or_more_accepted():
    rng = random.Random(1234)
    for length in range(8, 20):
        number = "".join(rng.choice("0123456789") for _ in range(length))
        assert validate_number(number) is None, number


@pytest.mark.parametrize(
    "number",
    ["09-1234556", "040-22334455", "12-345678", "123-45678", "99-1", "12-34567"],
)
def test_hyphen_form_accepted_when_long_enough(number):
    if len(number) >= 8:
        assert validate_number(number) is None
    else:
        assert isinstance(validate_number(number), ValidationError)


@pytest.mark.parametrize(
    "number",
    [
        "12-34-5678",  # two hyphens
        "1-23456789",  # first block too short
        "1234-567890",  # first block too long
        "040-12345a6",  # non-digit second block
        "04a-1234567",  # non-digit first block
        "040-",  # empty second block (and too short)
        "-12345678",  # empty first block
        "0401234567-",
        "040 123456",  # no hyphen, non-digit
        "+358401234",
        "abcdefghij",
    ],
)
def test_malformed_numbers_rejected_with_format_message(number):
    error = validate_number(number)
    assert isinstance(error, ValidationError)
    assert error.field == "number"
    if len(number) >= 8:
        assert error.message == f"{number} is not a valid phone number"


@pytest.mark.parametrize("number", ["1234567", "12-3456", "1", "12-45"])
def test_number_shorter_than_eight_rejected(number):
    error = validate_number(number)
    assert isinstance(error, ValidationError)
    assert "shorter than the minimum allowed length (8)" in error.message


def test_missing_number_is_required_error_not_format_error():
    for missing in (None, ""):
        error = validate_number(missing)
        assert isinstance(error, ValidationError)
        assert error.message == "number is required"


def test_name_rules():
    assert validate_name("Ada") is None
    assert validate_name("  A") is None  # raw length, not trimmed
    assert validate_name("Al").message == "name `Al` is shorter than the minimum allowed length (3)"
    assert validate_name("").message == "name is required"
    assert validate_name(None).message == "name is required"


def test_name_checked_before_number():
    error = validate("Al", "bad")
    assert error.field == "name"


def test_unicode_digits_are_not_digits():
    assert is_valid_number_format("٠٤٠١٢٣٤٥٦") is False
