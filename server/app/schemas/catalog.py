from typing import List, Tuple
from pydantic import BaseModel, ConfigDict

class Option(BaseModel):
    value: str
    label: str

class SelectablePlan(BaseModel):
    name: str
    monthly_price: int
    features: Tuple[str, ...]
    recommended: bool = False

    model_config = ConfigDict(frozen=True)

class PlanChoice(BaseModel):
    name: str

class PlanNotification(BaseModel):
    name: str
    monthly_price: int

class OptionCatalog(BaseModel):
    makes: List[Option]
    states: List[Option]
    years_licensed: List[Option]
    accidents: List[Option]
    violations: List[Option]
