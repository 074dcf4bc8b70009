"""Tests for the pure wizard reducers."""

import pytest

from app.enums.field_key import FieldKey
from app.enums.wizard_step import WizardStep
from app.schemas.wizard import WizardState
from app.services.validation import STEP_FIELDS
from app.services.wizard import complete_advance, request_advance, retreat, update_field
from conftest import CURRENT_YEAR


def test_initial_state():
    state = WizardState()
    assert state.current_step == WizardStep.vehicle
    assert len(state.answers) == 17
    assert all(value == "" for value in state.answers.values())
    assert state.errors == {}
    assert state.transitioning is False
    assert state.progress == 20


def test_partial_answers_are_completed():
    state = WizardState(answers={"make": "honda"})
    assert len(state.answers) == 17
    assert state.answers[FieldKey.make] == "honda"
    assert state.answers[FieldKey.vin] == ""


def test_update_field_sets_value_and_keeps_input_untouched():
    state = WizardState()
    updated = update_field(state, FieldKey.model, "Civic")
    assert updated.answers[FieldKey.model] == "Civic"
    assert state.answers[FieldKey.model] == ""


def test_update_field_accepts_wire_key():
    state = update_field(WizardState(), "firstName", "Ada")
    assert state.answers[FieldKey.first_name] == "Ada"


# values that still fail validation after being written
INVALID_VALUES = {
    FieldKey.year: "1979",
    FieldKey.vin: "short",
    FieldKey.email: "a@b",
    FieldKey.phone: "12",
    FieldKey.date_of_birth: f"{CURRENT_YEAR - 10}-01-01",
    FieldKey.zip_code: "ABCDE",
}


def failed_state(key):
    """State on the step owning key, after a failed advance with every answer empty."""
    step = next(step for step, fields in STEP_FIELDS.items() if key in fields)
    state = WizardState(current_step=step)
    return request_advance(state, CURRENT_YEAR)


@pytest.mark.parametrize("key", list(FieldKey))
@pytest.mark.parametrize("value", ["", "invalid", "valid"])
def test_update_field_clears_only_its_error(key, value, valid_answers):
    state = failed_state(key)
    assert key in state.errors
    others = {k: message for k, message in state.errors.items() if k != key}

    written = {"": "", "invalid": INVALID_VALUES.get(key, ""), "valid": valid_answers[key]}[value]
    state = update_field(state, key, written)
    assert key not in state.errors
    assert state.errors == others

    # writing the same value again does not bring the message back
    state = update_field(state, key, written)
    assert key not in state.errors


@pytest.mark.parametrize("key", list(FieldKey))
def test_update_field_is_idempotent(key, valid_answers):
    start = failed_state(key)
    once = update_field(start, key, valid_answers[key])
    twice = update_field(once, key, valid_answers[key])
    assert once.answers == twice.answers
    assert once.errors == twice.errors


def test_advance_from_failing_step_replaces_errors():
    state = WizardState(errors={FieldKey.email: "Invalid email format"})
    state = update_field(state, FieldKey.make, "ford")
    state = request_advance(state, CURRENT_YEAR)

    assert state.current_step == WizardStep.vehicle
    assert state.transitioning is False
    assert state.errors == {
        FieldKey.model: "Model is required",
        FieldKey.year: "Year is required",
        FieldKey.vin: "VIN is required",
    }


def test_advance_from_passing_step(filled_state):
    state = request_advance(filled_state, CURRENT_YEAR)
    assert state.transitioning is True
    assert state.current_step == WizardStep.vehicle

    state = complete_advance(state)
    assert state.current_step == WizardStep.personal
    assert state.errors == {}
    assert state.transitioning is False


def test_advance_ignored_while_transitioning(filled_state):
    pending = request_advance(filled_state, CURRENT_YEAR)
    assert request_advance(pending, CURRENT_YEAR) is pending


def test_complete_advance_without_pending_transition(filled_state):
    assert complete_advance(filled_state) is filled_state


def test_no_advance_past_quotes(filled_state):
    state = filled_state.model_copy(update={"current_step": WizardStep.quotes})
    assert request_advance(state, CURRENT_YEAR) is state


def test_walk_through_every_step(filled_state):
    state = filled_state
    for expected in (2, 3, 4, 5):
        state = complete_advance(request_advance(state, CURRENT_YEAR))
        assert state.current_step == expected
    assert state.progress == 100


def test_retreat_is_clamped_at_first_step():
    state = WizardState()
    assert retreat(state) is state


def test_retreat_keeps_answers_and_errors(filled_state):
    state = filled_state.model_copy(update={
        "current_step": WizardStep.address,
        "errors": {FieldKey.zip_code: "Invalid ZIP code"},
    })
    back = retreat(state)
    assert back.current_step == WizardStep.personal
    assert back.errors == {FieldKey.zip_code: "Invalid ZIP code"}
    assert back.answers == state.answers


def test_retreat_drops_pending_transition(filled_state):
    state = complete_advance(request_advance(filled_state, CURRENT_YEAR))
    pending = request_advance(state, CURRENT_YEAR)

    back = retreat(pending)
    assert back.current_step == WizardStep.vehicle
    assert back.transitioning is False
    assert complete_advance(back) is back
