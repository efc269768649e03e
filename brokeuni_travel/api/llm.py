"""LLM helpers for the day-trip planner.

Generates a one-day itinerary via OpenAI Chat Completions using a strict
structured-output schema.  The OpenAI client is passed in by the caller
(built once in ``create_app``) instead of being created at import time.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from openai import OpenAI, OpenAIError

from brokeuni_travel.api.errors import (
    GenerationParseError,
    GenerationSchemaError,
    GenerationServiceError,
)
from brokeuni_travel.api.models import Itinerary, TripRequest

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Structured output schema
# ---------------------------------------------------------------------------

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "tripSummary": {
            "type": "object",
            "properties": {
                "destination": {"type": "string"},
                "purpose": {"type": "string"},
            },
            "required": ["destination", "purpose"],
        },
        "schedule": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "time": {"type": "string"},
                    "activity": {"type": "string"},
                    "description": {"type": "string"},
                    "cost": {"type": "number"},
                    "location": {"type": "string"},
                },
                "required": ["time", "activity", "description", "cost"],
            },
        },
        "budget": {
            "type": "object",
            "properties": {
                "totalBudget": {"type": "number"},
                "estimatedCost": {"type": "number"},
                "breakdown": {
                    "type": "object",
                    "properties": {
                        "travel": {"type": "number"},
                        "foodAndDrink": {"type": "number"},
                        "entertainment": {"type": "number"},
                    },
                    "required": ["travel", "foodAndDrink", "entertainment"],
                },
            },
            "required": ["totalBudget", "estimatedCost", "breakdown"],
        },
    },
    "required": ["tripSummary", "schedule", "budget"],
}

SYSTEM_PROMPT = (
    "You are an expert day-trip planner for university students in the UK. "
    "Reply only with a JSON object matching the requested schema."
)

# ---------------------------------------------------------------------------
# Prompt construction helpers
# ---------------------------------------------------------------------------

def _format_money(amount: float) -> str:
    return f"{amount:g}"


def build_prompt(request: TripRequest) -> str:
    return (
        "You are an expert day-trip planner for university students in the UK. "
        "Your goal is to create a detailed, fun, and highly budget-conscious "
        "one-day itinerary.\n\n"
        "The output must be a valid JSON object that strictly adheres to the "
        "provided schema.\n\n"
        "Here are the trip details:\n"
        f"- Starting City: {request.start_city}\n"
        f"- Destination City: {request.destination_city}\n"
        f"- Date of Trip: {request.trip_date}\n"
        f"- Number of People: {request.people_count}\n"
        f"- Budget per Person: £{_format_money(request.budget_per_person)}\n"
        f"- Total Budget: £{_format_money(request.total_budget)}\n"
        f"- Main Interests: {', '.join(request.interests)}\n"
        f"- Travel Preference: {request.travel_preference}\n"
        f"- Dietary Preferences: {request.dietary_preference}\n\n"
        "Instructions:\n"
        "1. Create a step-by-step itinerary in the 'schedule' array. Include "
        "timings, activities, locations, and estimated costs per person.\n"
        "2. Focus on student-friendly options: free museums, cheap eats, "
        "student discounts, and affordable transport.\n"
        "3. The 'purpose' in 'tripSummary' should be a short, exciting summary "
        "based on the interests (e.g., \"An artsy and foodie exploration of "
        "Manchester\").\n"
        "4. Calculate the 'budget' breakdown. 'totalBudget' is the budget per "
        "person multiplied by the number of people. 'estimatedCost' is the sum "
        "of all costs in the schedule multiplied by the number of people.\n"
        "5. Ensure all costs are realistic for the UK today.\n"
        "6. The entire plan should be for a single day."
    )


def _parse_response(content: str | None) -> Dict[str, Any]:
    """Decode the model's raw JSON string."""
    if not content or not content.strip():
        raise GenerationParseError("Model returned an empty response")
    try:
        return json.loads(content.strip())
    except (ValueError, RecursionError) as exc:
        raise GenerationParseError(f"Model response is not valid JSON: {exc}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class GenerationClient:
    """Turns one ``TripRequest`` into one ``Itinerary`` with a single model call."""

    def __init__(
        self,
        client: OpenAI,
        model: str = "gpt-4.1-mini",
        temperature: float = 0.7,
        max_tokens: int = 4096,
    ):
        self._client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate(self, request: TripRequest) -> Itinerary:
        """Return a validated itinerary or raise a ``GenerationError`` subclass."""
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(request)},
        ]

        logger.debug(
            "Calling OpenAI ChatCompletion: model=%s destination=%s people=%d",
            self.model,
            request.destination_city,
            request.people_count,
        )

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "day_trip_itinerary",
                        "schema": RESPONSE_SCHEMA,
                    },
                },
            )
            raw_content = response.choices[0].message.content
        except OpenAIError as exc:
            raise GenerationServiceError(f"OpenAI request failed: {exc}") from exc
        except (IndexError, AttributeError) as exc:
            raise GenerationServiceError(f"Unexpected completion object: {exc}") from exc

        payload = _parse_response(raw_content)

        try:
            itinerary = Itinerary.from_dict(payload)
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise GenerationSchemaError(f"Itinerary payload missing or invalid field: {exc}") from exc

        logger.info(
            "Generated itinerary for %s with %d schedule items",
            itinerary.summary.destination,
            len(itinerary.schedule),
        )
        return itinerary
