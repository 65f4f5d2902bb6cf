# app/core/providers.py
import json
from typing import Optional

# Model providers the app runtime knows how to call, with the config keys
# each one needs.
KNOWN_PROVIDERS = {
    "openai": {
        "name": "OpenAI",
        "config_keys": ["api_key"],
    },
    "cohere": {
        "name": "Cohere",
        "config_keys": ["api_key"],
    },
    "ai21": {
        "name": "AI21 Labs",
        "config_keys": ["api_key"],
    },
}


def get_provider_info(provider_id: str) -> Optional[dict]:
    return KNOWN_PROVIDERS.get(provider_id)


def parse_config(config: str) -> dict:
    """
    Parses a provider config stored as JSON text.

    Raises ValueError when the text is not valid JSON or not a JSON object.
    """
    try:
        parsed = json.loads(config)
    except json.JSONDecodeError as e:
        raise ValueError(f"Provider config is not valid JSON: {e.msg}") from e
    if not isinstance(parsed, dict):
        raise ValueError("Provider config must be a JSON object.")
    return parsed


def missing_config_keys(provider_id: str, config: dict) -> list:
    info = get_provider_info(provider_id)
    if info is None:
        return []
    return [key for key in info["config_keys"] if not config.get(key)]
