"""
Model ID utilities.

Parse, normalize, and match model IDs across calling conventions:
- OpenRouter: "anthropic/claude-3.7-sonnet"
- Direct / SDK: "claude-3-7-sonnet-20250219"
- Variants: "anthropic/claude-3.7-sonnet:thinking"

Also extracts a comparable version number from an ID for freshness scoring.
"""

import re
from dataclasses import dataclass
from typing import Optional


# X.Y not preceded by "x" or a digit (8x22b), not followed by "b" (3.5b) or "x"
_DOT_VERSION = re.compile(r"(?<![x\d])(\d+)\.(\d+)(?!b)(?!x)")
# Single digit after a hyphen: gpt-5, claude-sonnet-4. Not 70b, 8x7b, 2512, 3.5
_SINGLE_VERSION = re.compile(r"-([1-9])(?![0-9.bx])")
# o-series reasoning models: o1, o3-mini, o4
_O_SERIES = re.compile(r"\bo([1-9])(?:-|$)")
# Trailing 8-digit date code: -20250219
_DATE_SUFFIX = re.compile(r"-\d{8}$")
_O_SERIES_PREFIX = re.compile(r"^o[1-9](?:-|$)")


@dataclass(frozen=True)
class ParsedModelId:
    """Components of a model ID."""
    provider: Optional[str]     # None if it cannot be inferred
    model: str                  # without provider prefix or variant
    variant: Optional[str] = None   # "thinking", "beta", "free"


def normalize_model_id(model_id: str) -> str:
    """
    Normalize a model ID for comparison across formats.

    Strips the provider prefix, turns dots into hyphens, drops an 8-digit
    date suffix, and lowercases:

        normalize_model_id("anthropic/claude-3.5-haiku")   # "claude-3-5-haiku"
        normalize_model_id("claude-3-5-haiku-20241022")    # "claude-3-5-haiku"
    """
    normalized = extract_direct_model_id(model_id)
    normalized = normalized.replace(".", "-")
    normalized = _DATE_SUFFIX.sub("", normalized)
    return normalized.lower()


def parse_model_id(model_id: str) -> ParsedModelId:
    """Split a model ID into provider, model and variant."""
    provider: Optional[str] = None
    model = model_id
    variant: Optional[str] = None

    if "/" in model:
        provider, model = model.split("/", 1)

    if ":" in model:
        model, variant = model.split(":", 1)

    if provider is None:
        provider = _infer_provider(model)

    return ParsedModelId(provider=provider, model=model, variant=variant)


def resolve_provider(model_id: str) -> Optional[str]:
    """Provider from the OpenRouter prefix, or inferred from the model name."""
    if "/" in model_id:
        return model_id.split("/", 1)[0]
    return _infer_provider(model_id)


def extract_direct_model_id(model_id: str) -> str:
    """
    Drop the provider prefix from an OpenRouter ID.

        extract_direct_model_id("openai/gpt-4o")  # "gpt-4o"
        extract_direct_model_id("gpt-4o")         # "gpt-4o"
    """
    if "/" in model_id:
        return model_id.split("/", 1)[1]
    return model_id


def to_openrouter_format(model_id: str) -> Optional[str]:
    """Return "provider/model", or None when the provider can't be inferred."""
    if "/" in model_id:
        return model_id

    provider = _infer_provider(model_id)
    if provider is None:
        return None
    return f"{provider}/{model_id}"


def to_direct_format(model_id: str) -> str:
    """Strip the provider prefix."""
    return extract_direct_model_id(model_id)


def matches_model(a: str, b: str) -> bool:
    """
    Check whether two IDs refer to the same model across formats.

        matches_model("anthropic/claude-3.5-haiku", "claude-3-5-haiku-20241022")  # True
    """
    return normalize_model_id(a) == normalize_model_id(b)


def extract_version(model_id: str) -> int:
    """
    Extract a comparable version number from a model ID.

    5.2 -> 520, 4.5 -> 450, 3 -> 300, o3 -> 300. Returns 0 when no version is
    recognizable. Date codes (2512), parameter sizes (70b, 8x22b) and decimal
    sizes (3.5b) are not versions.
    """
    lower = model_id.lower()

    dot_match = _DOT_VERSION.search(lower)
    if dot_match:
        major = int(dot_match.group(1))
        minor = int(dot_match.group(2))
        if 1 <= major <= 9:
            return major * 100 + minor * 10

    single_match = _SINGLE_VERSION.search(lower)
    if single_match:
        return int(single_match.group(1)) * 100

    o_match = _O_SERIES.search(lower)
    if o_match:
        return int(o_match.group(1)) * 100

    return 0


def _infer_provider(model_name: str) -> Optional[str]:
    lower = model_name.lower()

    if lower.startswith("claude"):
        return "anthropic"
    if lower.startswith("gpt") or lower.startswith("chatgpt"):
        return "openai"
    if _O_SERIES_PREFIX.match(lower):
        return "openai"
    if lower.startswith("gemini"):
        return "google"

    return None
