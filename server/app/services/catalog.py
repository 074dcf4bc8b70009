from typing import List, Optional

from app.schemas.catalog import Option, OptionCatalog, SelectablePlan

RECOMMENDED_PLAN_INDEX = 1

def _plans() -> List[SelectablePlan]:
    plans = [
        ("Basic Coverage", 89, (
            "Liability Coverage",
            "State Minimum Requirements",
            "24/7 Claims Support",
            "Online Account Management",
        )),
        ("Standard Coverage", 142, (
            "Comprehensive Coverage",
            "Collision Coverage",
            "Roadside Assistance",
            "Rental Car Coverage",
            "Glass Coverage",
        )),
        ("Premium Coverage", 198, (
            "Full Coverage",
            "Gap Insurance",
            "New Car Replacement",
            "Accident Forgiveness",
            "Vanishing Deductible",
        )),
    ]
    return [
        SelectablePlan(
            name=name,
            monthly_price=price,
            features=features,
            recommended=index == RECOMMENDED_PLAN_INDEX,
        )
        for index, (name, price, features) in enumerate(plans)
    ]

PLANS: List[SelectablePlan] = _plans()

def _options(*pairs) -> List[Option]:
    return [Option(value=value, label=label) for value, label in pairs]

OPTIONS = OptionCatalog(
    makes=_options(
        ("toyota", "Toyota"),
        ("honda", "Honda"),
        ("ford", "Ford"),
        ("chevrolet", "Chevrolet"),
        ("bmw", "BMW"),
        ("mercedes", "Mercedes-Benz"),
        ("audi", "Audi"),
    ),
    states=_options(
        ("ca", "California"),
        ("ny", "New York"),
        ("tx", "Texas"),
        ("fl", "Florida"),
        ("il", "Illinois"),
    ),
    years_licensed=_options(
        ("0-2", "0-2 years"),
        ("3-5", "3-5 years"),
        ("6-10", "6-10 years"),
        ("10+", "10+ years"),
    ),
    accidents=_options(
        ("0", "None"),
        ("1", "1 accident"),
        ("2", "2 accidents"),
        ("3+", "3+ accidents"),
    ),
    violations=_options(
        ("0", "None"),
        ("1", "1 violation"),
        ("2", "2 violations"),
        ("3+", "3+ violations"),
    ),
)

def get_plan(name: str) -> Optional[SelectablePlan]:
    for plan in PLANS:
        if plan.name.lower() == name.lower():
            return plan
    return None
