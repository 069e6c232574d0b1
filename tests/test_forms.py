"""Client-side form validation."""
import pytest

from restaurant_staff.client.forms import (
    AGE_MESSAGE, EMAIL_MESSAGE, REQUIRED_MESSAGE, SALARY_MESSAGE, validate_form
)


def form(**overrides):
    values = {
        "name": "  Maria Lopez ",
        "age": "29",
        "position": "chef",
        "mobile": "555-0101",
        "email": "maria@bistro.com",
        "address": "12 Harbor Street",
        "salary": "52000.50",
        "shift": "evening",
        "status": "active",
    }
    values.update(overrides)
    return values


def test_valid_form_is_cleaned_and_typed():
    result = validate_form(form())
    assert result.is_valid
    assert result.data["name"] == "Maria Lopez"
    assert result.data["age"] == 29
    assert result.data["salary"] == 52000.5


@pytest.mark.parametrize("age", ["18", "100", " 45 "])
def test_age_boundaries_accepted(age):
    assert validate_form(form(age=age)).is_valid


@pytest.mark.parametrize("age", ["17", "101", "abc", "30.5"])
def test_age_out_of_range_or_malformed_rejected(age):
    result = validate_form(form(age=age))
    assert result.errors == {"age": AGE_MESSAGE}


@pytest.mark.parametrize("email", ["maria", "maria@bistro", "ma ria@bistro.com", "@bistro.com"])
def test_bad_email_rejected(email):
    assert validate_form(form(email=email)).errors == {"email": EMAIL_MESSAGE}


@pytest.mark.parametrize("salary", ["-1", "lots", "nan", "inf"])
def test_bad_salary_rejected(salary):
    assert validate_form(form(salary=salary)).errors == {"salary": SALARY_MESSAGE}


def test_zero_salary_accepted():
    assert validate_form(form(salary="0")).data["salary"] == 0.0


def test_every_field_required():
    result = validate_form({"name": "   "})
    assert not result.is_valid
    assert set(result.errors) == {
        "name", "age", "position", "mobile", "email", "address", "salary", "shift", "status"
    }
    assert set(result.errors.values()) == {REQUIRED_MESSAGE}
    assert result.data == {}


def test_one_error_per_field_and_others_still_collected():
    result = validate_form(form(age="", email="bad"))
    assert result.errors == {"age": REQUIRED_MESSAGE, "email": EMAIL_MESSAGE}
    assert "name" in result.data
