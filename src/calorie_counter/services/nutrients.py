"""Energy and macronutrient extraction from FDC nutrient samples."""

from calorie_counter.domain.errors import MissingEnergyDataError
from calorie_counter.domain.nutrition import Candidate, Macronutrients
from calorie_counter.services.calculator import round_half_up

# FDC nutrient ids, in lookup priority order per nutrient.
NUTRIENT_IDS: dict[str, tuple[int, ...]] = {
    "energy_kcal": (1008, 2047, 2048),
    "energy_kj": (1062,),
    "protein": (1003,),
    "total_fat": (1004,),
    "carbohydrates": (1005,),
    "fiber": (1079,),
    "sugars": (2000, 1063),
    "saturated_fat": (1258,),
}

KJ_PER_KCAL = 4.184

_REQUIRED_MACROS = ("protein", "total_fat", "carbohydrates")
_OPTIONAL_MACROS = ("fiber", "sugars", "saturated_fat")


def nutrient_value(candidate: Candidate, name: str) -> float | None:
    """Return the first reported value for a named nutrient."""
    for nutrient_id in NUTRIENT_IDS[name]:
        for sample in candidate.nutrients:
            if sample.nutrient_id == nutrient_id:
                return sample.value
    return None


def positive_nutrient_value(candidate: Candidate, name: str) -> float | None:
    """Return the first positive value for a named nutrient."""
    for nutrient_id in NUTRIENT_IDS[name]:
        for sample in candidate.nutrients:
            if sample.nutrient_id == nutrient_id and sample.value > 0:
                return sample.value
    return None


def has_calories(candidate: Candidate) -> bool:
    """Whether the candidate reports a positive kcal value."""
    return positive_nutrient_value(candidate, "energy_kcal") is not None


def extract_calories_per_100g(candidate: Candidate) -> float:
    """Return kcal per 100 g, converting from kJ when kcal is missing."""
    kcal = positive_nutrient_value(candidate, "energy_kcal")
    if kcal is not None:
        return kcal
    kilojoules = positive_nutrient_value(candidate, "energy_kj")
    if kilojoules is not None:
        return int(round_half_up(kilojoules / KJ_PER_KCAL))
    raise MissingEnergyDataError(candidate.description)


def extract_macronutrients(candidate: Candidate) -> Macronutrients:
    """Return macronutrients per 100 g.

    Protein, fat and carbohydrates default to zero. Fiber, sugars and
    saturated fat are left unset unless the source reports a positive value.
    """
    required = {
        name: nutrient_value(candidate, name) or 0.0 for name in _REQUIRED_MACROS
    }
    optional = {
        name: positive_nutrient_value(candidate, name) for name in _OPTIONAL_MACROS
    }
    return Macronutrients(**required, **optional)
