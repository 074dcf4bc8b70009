"""
Per-step validation.

validate_step and is_step_enabled share check_field, so the Next button
can never be enabled for a step that would then fail validation (or the
other way around).
"""
import logging
from typing import Dict, Mapping, Optional, Tuple

from app.enums.field_key import FieldKey
from app.enums.wizard_step import WizardStep
from app.services.validators import check_field

logger = logging.getLogger(__name__)

STEP_FIELDS: Dict[WizardStep, Tuple[FieldKey, ...]] = {
    WizardStep.vehicle: (
        FieldKey.make,
        FieldKey.model,
        FieldKey.year,
        FieldKey.vin,
    ),
    WizardStep.personal: (
        FieldKey.first_name,
        FieldKey.last_name,
        FieldKey.email,
        FieldKey.phone,
        FieldKey.date_of_birth,
    ),
    WizardStep.address: (
        FieldKey.address,
        FieldKey.city,
        FieldKey.state,
        FieldKey.zip_code,
    ),
    WizardStep.driving_history: (
        FieldKey.license_number,
        FieldKey.years_licensed,
        FieldKey.accidents,
        FieldKey.violations,
    ),
    WizardStep.quotes: (),
}

def step_fields(step: int) -> Tuple[FieldKey, ...]:
    return STEP_FIELDS.get(step, ())

def validate_step(
    step: int,
    answers: Mapping[FieldKey, str],
    current_year: Optional[int] = None,
) -> Dict[FieldKey, str]:
    """Return every failing field of the step with its message. Empty means the step passes."""
    errors = {}
    for key in step_fields(step):
        message = check_field(key, answers.get(key, ""), current_year)
        if message is not None:
            errors[key] = message

    if errors:
        logger.debug("Step %s failed validation: %s", step, [key.value for key in errors])
    return errors

def is_step_enabled(
    step: int,
    answers: Mapping[FieldKey, str],
    current_year: Optional[int] = None,
) -> bool:
    return all(
        check_field(key, answers.get(key, ""), current_year) is None
        for key in step_fields(step)
    )
