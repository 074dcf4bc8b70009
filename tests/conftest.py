import pytest

from app.enums.field_key import FieldKey
from app.schemas.wizard import WizardState

CURRENT_YEAR = 2026

VALID_ANSWERS = {
    FieldKey.make: "toyota",
    FieldKey.model: "Camry",
    FieldKey.year: "2020",
    FieldKey.vin: "12345678901234567",
    FieldKey.first_name: "John",
    FieldKey.last_name: "Doe",
    FieldKey.email: "john@example.com",
    FieldKey.phone: "(555) 123-4567",
    FieldKey.date_of_birth: "1990-06-15",
    FieldKey.address: "123 Main Street",
    FieldKey.city: "San Francisco",
    FieldKey.state: "ca",
    FieldKey.zip_code: "94102",
    FieldKey.license_number: "D1234567",
    FieldKey.years_licensed: "6-10",
    FieldKey.accidents: "0",
    FieldKey.violations: "1",
}


@pytest.fixture
def valid_answers():
    return dict(VALID_ANSWERS)


@pytest.fixture
def filled_state(valid_answers):
    return WizardState(answers=valid_answers)
