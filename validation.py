"""Form validation.

Each validator returns the list of messages to show the user; an empty list
means the form is valid. Nothing here touches a store.
"""

from datetime import date
from typing import List, Optional

from config import BLOOD_TYPES, GENDERS
from models import Patient


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def looks_like_email(value: str) -> bool:
    return "@" in value and "." in value


def validate_login(username: Optional[str], password: Optional[str]) -> List[str]:
    errors = []
    if _blank(username):
        errors.append("Username is required")
    if _blank(password):
        errors.append("Password is required")
    return errors


def validate_signup(
    username: str,
    password: str,
    confirm_password: str,
    email: str,
    first_name: str,
    last_name: str,
) -> List[str]:
    """Check the signup form the way the signup surface does.

    Missing fields short-circuit the remaining checks.
    """
    fields = [username, password, confirm_password, email, first_name, last_name]
    if any(_blank(value) for value in fields):
        return ["Please fill in all fields"]

    errors = []
    if password != confirm_password:
        errors.append("Passwords don't match")
    if not looks_like_email(email.strip()):
        errors.append("Please enter a valid email address")
    return errors


def validate_patient(patient: Patient, today: Optional[date] = None) -> List[str]:
    """Validate the patient edit form."""
    today = today or date.today()
    errors = []

    if _blank(patient.first_name):
        errors.append("First name is required.")
    if _blank(patient.last_name):
        errors.append("Last name is required.")

    if patient.date_of_birth is None:
        errors.append("Date of birth is required.")
    elif patient.date_of_birth > today:
        errors.append("Date of birth cannot be in the future.")

    if _blank(patient.gender):
        errors.append("Gender is required.")
    elif patient.gender not in GENDERS:
        errors.append(f"Gender must be one of: {', '.join(GENDERS)}.")

    if _blank(patient.phone):
        errors.append("Phone number is required.")

    if _blank(patient.email):
        errors.append("Email is required.")
    elif not looks_like_email(patient.email):
        errors.append("Email format is invalid.")

    if _blank(patient.blood_type):
        errors.append("Blood type is required.")
    elif patient.blood_type not in BLOOD_TYPES:
        errors.append(f"Blood type must be one of: {', '.join(BLOOD_TYPES)}.")

    if _blank(patient.address):
        errors.append("Address is required.")

    return errors
