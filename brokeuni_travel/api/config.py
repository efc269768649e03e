# brokeuni_travel/api/config.py
"""Configuration management for the day-trip planner."""
import os
from dotenv import load_dotenv

load_dotenv()


def get_openai_api_key():
    """Get OpenAI API key from environment."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY not set")
    return api_key


def get_generation_config():
    """Get itinerary generation (Chat Completions) configuration."""
    return {
        "model": os.getenv("OPENAI_CHAT_MODEL", "gpt-4.1-mini"),
        "temperature": float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
        "max_tokens": int(os.getenv("OPENAI_MAX_TOKENS", "4096")),
    }


def get_geocoding_config():
    """Get remote city lookup configuration."""
    return {
        "provider": os.getenv("GEOCODER_PROVIDER", "nominatim").lower(),
        "nominatim_url": os.getenv(
            "NOMINATIM_URL", "https://nominatim.openstreetmap.org/search"
        ),
        "country": os.getenv("GEOCODER_COUNTRY", "gb"),
        "limit": int(os.getenv("GEOCODER_LIMIT", "5")),
        "timeout": float(os.getenv("GEOCODER_TIMEOUT", "10")),
        "user_agent": os.getenv("GEOCODER_USER_AGENT", "brokeuni-travel/0.1"),
        "google_api_key": os.getenv("GOOGLE_MAPS_API_KEY", ""),
    }


def get_autocomplete_config():
    """Get city autocomplete configuration."""
    return {
        "debounce_seconds": int(os.getenv("AUTOCOMPLETE_DEBOUNCE_MS", "300")) / 1000.0,
    }


def get_cors_origins():
    """Origins allowed for CORS and Socket.IO."""
    origins = os.getenv("CORS_ORIGINS", "*")
    if origins == "*":
        return "*"
    return [origin.strip() for origin in origins.split(",") if origin.strip()]


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 5000))


def validate_geocoding_config(config):
    """Validate the city lookup configuration before building a client."""
    valid_providers = ["nominatim", "google"]
    if config["provider"] not in valid_providers:
        raise ValueError(
            f"Invalid GEOCODER_PROVIDER. Must be one of: {', '.join(valid_providers)}"
        )
    if config["provider"] == "google" and not config["google_api_key"]:
        raise ValueError("GOOGLE_MAPS_API_KEY not set for the google provider")
    if config["limit"] < 1:
        raise ValueError("GEOCODER_LIMIT must be at least 1")
    return True
