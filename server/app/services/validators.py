import re
from datetime import date
from typing import Callable, Dict, Optional

from app.enums.field_key import FieldKey

MIN_VEHICLE_YEAR = 1980
VIN_LENGTH = 17
MIN_DRIVER_AGE = 16

# Applied with fullmatch, so a trailing newline does not pass. Digits are
# spelled [0-9] because \d also matches non-ASCII digits.
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
ZIP_CODE_RE = re.compile(r"[0-9]{5}(-[0-9]{4})?")
BIRTH_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})(?:[T ].*)?")
YEAR_RE = re.compile(r"[0-9]+")

# A validator returns None when the value passes, else the message to show.
Validator = Callable[[str, int], Optional[str]]

def required(message: str) -> Validator:
    def check(value: str, current_year: int) -> Optional[str]:
        if not value:
            return message
        return None
    return check

def validate_year(value: str, current_year: int) -> Optional[str]:
    if not value:
        return "Year is required"

    max_year = current_year + 1
    # int() alone would also take "+2020", "2_020" and non-ASCII digits
    year = int(value) if YEAR_RE.fullmatch(value) else None

    if year is None or year < MIN_VEHICLE_YEAR or year > max_year:
        return f"Year must be between {MIN_VEHICLE_YEAR} and {max_year}"
    return None

def validate_vin(value: str, current_year: int) -> Optional[str]:
    if not value:
        return "VIN is required"

    # raw length only, the check digit is not verified
    if len(value) != VIN_LENGTH:
        return f"VIN must be {VIN_LENGTH} characters"
    return None

def validate_email(value: str, current_year: int) -> Optional[str]:
    if not value:
        return "Email is required"
    if not EMAIL_RE.fullmatch(value):
        return "Invalid email format"
    return None

def validate_phone(value: str, current_year: int) -> Optional[str]:
    if not value:
        return "Phone is required"
    if not PHONE_RE.fullmatch(value):
        return "Invalid phone number"
    return None

def birth_year(value: str) -> Optional[int]:
    match = BIRTH_DATE_RE.fullmatch(value.strip())
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return None
    return year

def validate_date_of_birth(value: str, current_year: int) -> Optional[str]:
    """
    Age is counted in calendar years only: someone born in December of
    (current_year - 16) already passes in January.
    """
    if not value:
        return "Date of birth is required"

    year = birth_year(value)
    if year is None or current_year - year < MIN_DRIVER_AGE:
        return f"Must be at least {MIN_DRIVER_AGE} years old"
    return None

def validate_zip_code(value: str, current_year: int) -> Optional[str]:
    if not value:
        return "ZIP code is required"
    if not ZIP_CODE_RE.fullmatch(value):
        return "Invalid ZIP code"
    return None

FIELD_VALIDATORS: Dict[FieldKey, Validator] = {
    FieldKey.make: required("Make is required"),
    FieldKey.model: required("Model is required"),
    FieldKey.year: validate_year,
    FieldKey.vin: validate_vin,

    FieldKey.first_name: required("First name is required"),
    FieldKey.last_name: required("Last name is required"),
    FieldKey.email: validate_email,
    FieldKey.phone: validate_phone,
    FieldKey.date_of_birth: validate_date_of_birth,

    FieldKey.address: required("Address is required"),
    FieldKey.city: required("City is required"),
    FieldKey.state: required("State is required"),
    FieldKey.zip_code: validate_zip_code,

    FieldKey.license_number: required("License number is required"),
    FieldKey.years_licensed: required("Years licensed is required"),
    FieldKey.accidents: required("Please select accidents history"),
    FieldKey.violations: required("Please select violations history"),
}

def check_field(key: FieldKey, value: str, current_year: Optional[int] = None) -> Optional[str]:
    if current_year is None:
        current_year = date.today().year
    return FIELD_VALIDATORS[key](value, current_year)
