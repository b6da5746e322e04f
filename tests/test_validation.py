"""Unit tests for form validation."""

from datetime import date, timedelta

from models import Patient
from validation import validate_login, validate_patient, validate_signup


def valid_patient(**overrides) -> Patient:
    fields = dict(
        first_name="Ada",
        last_name="Lovelace",
        date_of_birth=date(1990, 12, 10),
        gender="Female",
        phone="555-000-1111",
        email="ada@example.com",
        address="1 Analytical Way",
        blood_type="AB-",
    )
    fields.update(overrides)
    return Patient(**fields)


class TestValidateLogin:
    def test_valid(self):
        assert validate_login("admin", "admin123") == []

    def test_missing_both(self):
        assert validate_login("  ", None) == ["Username is required", "Password is required"]


class TestValidateSignup:
    def test_valid(self):
        assert validate_signup("u", "p", "p", "u@example.com", "F", "L") == []

    def test_missing_field_short_circuits(self):
        assert validate_signup("u", "p", "other", "bad", "", "L") == ["Please fill in all fields"]

    def test_password_mismatch(self):
        assert validate_signup("u", "p", "q", "u@example.com", "F", "L") == ["Passwords don't match"]

    def test_invalid_email(self):
        assert validate_signup("u", "p", "p", "nope", "F", "L") == ["Please enter a valid email address"]


class TestValidatePatient:
    def test_valid(self):
        assert validate_patient(valid_patient()) == []

    def test_empty_form_reports_every_field(self):
        errors = validate_patient(Patient())

        assert errors == [
            "First name is required.",
            "Last name is required.",
            "Date of birth is required.",
            "Gender is required.",
            "Phone number is required.",
            "Email is required.",
            "Blood type is required.",
            "Address is required.",
        ]

    def test_future_birth_date(self):
        today = date(2024, 1, 1)
        patient = valid_patient(date_of_birth=today + timedelta(days=1))

        assert validate_patient(patient, today=today) == ["Date of birth cannot be in the future."]

    def test_invalid_email(self):
        assert validate_patient(valid_patient(email="ada-at-example")) == ["Email format is invalid."]

    def test_unknown_choices(self):
        errors = validate_patient(valid_patient(gender="Robot", blood_type="Z+"))

        assert len(errors) == 2
        assert errors[0].startswith("Gender must be one of")
        assert errors[1].startswith("Blood type must be one of")

    def test_validation_does_not_touch_registry(self, ctx):
        count = len(ctx.patients.patients)

        validate_patient(Patient())

        assert len(ctx.patients.patients) == count
