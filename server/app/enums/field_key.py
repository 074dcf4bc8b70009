from enum import Enum

class FieldKey(str, Enum):
    # vehicle
    make = "make"
    model = "model"
    year = "year"
    vin = "vin"

    # personal
    first_name = "firstName"
    last_name = "lastName"
    email = "email"
    phone = "phone"
    date_of_birth = "dateOfBirth"

    # address
    address = "address"
    city = "city"
    state = "state"
    zip_code = "zipCode"

    # driving history
    license_number = "licenseNumber"
    years_licensed = "yearsLicensed"
    accidents = "accidents"
    violations = "violations"
