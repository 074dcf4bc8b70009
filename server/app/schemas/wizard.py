from typing import Dict
from pydantic import BaseModel, Field, field_validator

from app.enums.field_key import FieldKey
from app.enums.wizard_step import WizardStep

def empty_answers() -> Dict[FieldKey, str]:
    return {key: "" for key in FieldKey}

class WizardState(BaseModel):
    current_step: WizardStep = WizardStep.vehicle
    answers: Dict[FieldKey, str] = Field(default_factory=empty_answers)
    errors: Dict[FieldKey, str] = Field(default_factory=dict)
    transitioning: bool = False

    @field_validator("answers")
    @classmethod
    def fill_missing_answers(cls, answers: Dict[FieldKey, str]) -> Dict[FieldKey, str]:
        # every key is always present, missing ones start empty
        return {**empty_answers(), **answers}

    @property
    def progress(self) -> float:
        return self.current_step / len(WizardStep) * 100

class FieldUpdate(BaseModel):
    key: FieldKey
    value: str

class WizardResponse(BaseModel):
    session_id: str
    state: WizardState
    step_enabled: bool
    progress: float
