"""
OpenRouter catalog adapter.

Converts entries of an OpenRouter /api/v1/models payload (already decoded
into dicts) into ModelRecord. No network access happens here.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from modelpick.schemas.model import Capabilities, Modality, ModelRecord, Pricing
from modelpick.utils.logger import log
from modelpick.utils.model_ids import extract_direct_model_id, normalize_model_id


TOKENS_PER_PRICE_UNIT = 1_000_000  # OpenRouter quotes USD per token


def parse_openrouter_model(raw: Dict[str, Any]) -> ModelRecord:
    """
    Convert one OpenRouter model entry.

    Raises:
        KeyError: If the entry has no "id"
    """
    openrouter_id = raw["id"]
    provider = openrouter_id.split("/", 1)[0]

    # "Anthropic: Claude Sonnet 4.5" -> "Claude Sonnet 4.5"
    name = raw.get("name") or openrouter_id
    if ": " in name:
        name = name.split(": ", 1)[1]

    architecture = raw.get("architecture") or {}
    input_modalities = architecture.get("input_modalities") or ["text"]
    output_modalities = architecture.get("output_modalities") or ["text"]
    params = raw.get("supported_parameters") or []

    return ModelRecord(
        id=normalize_model_id(openrouter_id),
        api_id=extract_direct_model_id(openrouter_id),
        openrouter_id=openrouter_id,
        name=name,
        provider=provider,
        description=raw.get("description"),
        context_window=raw.get("context_length"),
        pricing=_parse_pricing(raw.get("pricing") or {}),
        modality=Modality(input=input_modalities, output=output_modalities),
        capabilities=Capabilities(
            tools="tools" in params,
            vision="image" in input_modalities,
            streaming=True,  # every OpenRouter model streams
            json="response_format" in params,
        ),
        created=_parse_created(raw.get("created")),
    )


def parse_openrouter_catalog(response: Dict[str, Any]) -> List[ModelRecord]:
    """
    Convert a full OpenRouter /models response ({"data": [...]}).

    Entries that cannot be parsed are skipped with a warning.
    """
    models = []
    for raw in response.get("data") or []:
        try:
            models.append(parse_openrouter_model(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log.warning(f"Skipping unparseable OpenRouter entry: {e}")
    return models


def _parse_pricing(pricing: Dict[str, Any]) -> Pricing:
    # Negative prices are OpenRouter's marker for variable pricing; clamp to 0
    return Pricing(
        input=max(0.0, _to_float(pricing.get("prompt")) * TOKENS_PER_PRICE_UNIT),
        output=max(0.0, _to_float(pricing.get("completion")) * TOKENS_PER_PRICE_UNIT),
    )


def _to_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    return float(value)


def _parse_created(value: Any) -> Optional[str]:
    """Epoch seconds -> "YYYY-MM-DD"."""
    if not value:
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc).strftime("%Y-%m-%d")
