from datetime import date
from typing import Optional

FIRST_MODEL_YEAR = 1980

CAR_MAKES = ["Toyota", "Honda", "Ford", "Chevrolet", "BMW", "Audi"]

CAR_MODELS = ["Model S", "Model X", "Model 3", "Model Y"]

US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]


def car_years(through: Optional[int] = None):
    """Model years offered by the form, oldest first, as strings."""
    last = through or date.today().year
    return [str(y) for y in range(FIRST_MODEL_YEAR, last + 1)]


def form_options():
    return {
        "years": car_years(),
        "makes": CAR_MAKES,
        "models": CAR_MODELS,
        "states": US_STATES,
    }
