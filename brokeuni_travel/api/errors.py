# brokeuni_travel/api/errors.py
"""Exception types shared by the planner services and routes."""

GENERATION_FAILED_MESSAGE = (
    "Failed to get a valid plan from the AI. It might be having a busy day!"
)


class CityLookupError(Exception):
    """The remote city lookup failed (network, HTTP status or payload)."""


class FormValidationError(ValueError):
    """Form input rejected locally; ``str(exc)`` is shown to the user."""


class FlowStateError(RuntimeError):
    """An event arrived in a flow state that does not accept it."""


class GenerationError(Exception):
    """Itinerary generation failed.

    Subclasses keep the failure kinds apart for logging; every kind shares
    the same user-facing message.
    """

    kind = "generation"

    def __init__(self, detail: str = "", user_message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(detail or user_message)
        self.detail = detail
        self.user_message = user_message


class GenerationServiceError(GenerationError):
    """Transport or API-side failure while calling the model."""

    kind = "service"


class GenerationParseError(GenerationError):
    """The model replied with something that is not a JSON document."""

    kind = "parse"


class GenerationSchemaError(GenerationError):
    """The JSON document does not have the requested itinerary shape."""

    kind = "schema"
