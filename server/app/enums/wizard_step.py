from enum import IntEnum

class WizardStep(IntEnum):
    vehicle = 1
    personal = 2
    address = 3
    driving_history = 4
    quotes = 5 # no validated fields, final step
