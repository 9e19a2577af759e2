"""Error taxonomy for calorie lookups."""


class CalorieLookupError(Exception):
    """Base error for failures raised by the calorie pipeline."""


class InputError(CalorieLookupError):
    """The request was rejected before any upstream call."""


class EmptyQueryError(InputError):
    """The dish name was empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Dish name cannot be empty")


class InvalidServingsError(InputError):
    """The servings count was not a positive number within the allowed range."""

    def __init__(self, servings: float, max_servings: float) -> None:
        super().__init__(
            f"Servings must be a positive number no greater than {max_servings:g}"
        )
        self.servings = servings


class UpstreamError(CalorieLookupError):
    """FoodData Central could not serve the search."""


class UpstreamTimeout(UpstreamError):
    """FoodData Central did not answer in time."""


class UpstreamAuthError(UpstreamError):
    """FoodData Central rejected the API key."""


class UpstreamBadRequest(UpstreamError):
    """FoodData Central rejected the search query."""


class UpstreamUnavailable(UpstreamError):
    """FoodData Central failed or returned a malformed response."""


class NoCandidatesError(CalorieLookupError):
    """The search returned no foods for the dish."""

    def __init__(self, dish_name: str) -> None:
        super().__init__(
            f'No foods found for "{dish_name}". '
            "Try a more specific or common food name."
        )
        self.dish_name = dish_name


class MissingEnergyDataError(CalorieLookupError):
    """The matched food carries no usable energy value."""

    def __init__(self, description: str, dish_name: str | None = None) -> None:
        subject = dish_name or description
        super().__init__(
            f'No calorie information available for "{subject}". '
            f'The food "{description}" does not have energy data.'
        )
        self.description = description
        self.dish_name = dish_name
