"""
Display formatting for model metadata.

Cosmetic only: the recommendation engine never reads these strings.
"""

import math
import re
from typing import Dict

from modelpick.schemas.model import Pricing


PROVIDER_DISPLAY_NAMES: Dict[str, str] = {
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "google": "Google",
    "meta-llama": "Meta Llama",
    "mistralai": "Mistral AI",
    "deepseek": "DeepSeek",
    "cohere": "Cohere",
    "perplexity": "Perplexity",
    "x-ai": "xAI",
    "nvidia": "NVIDIA",
    "amazon": "Amazon",
    "microsoft": "Microsoft",
}

_TRAILING_ZEROS = re.compile(r"\.?0+$")


def format_price(per_million: float) -> str:
    """
    Format a per-million-token price.

        format_price(0)      # "Free"
        format_price(0.005)  # "<$0.01/M"
        format_price(0.5)    # "$0.50/M"
        format_price(15)     # "$15.0/M"
    """
    if per_million == 0:
        return "Free"
    if per_million < 0.01:
        return "<$0.01/M"
    if per_million < 1:
        return f"${per_million:.2f}/M"
    return f"${per_million:.1f}/M"


def format_pricing(pricing: Pricing) -> str:
    """
    Format combined input/output pricing.

        format_pricing(Pricing(3, 15))  # "$3/$15 per 1M"
        format_pricing(Pricing(0, 0))   # "Free"
    """
    if pricing.input == 0 and pricing.output == 0:
        return "Free"
    return f"${_format_number(pricing.input)}/${_format_number(pricing.output)} per 1M"


def format_context_window(tokens: int) -> str:
    """
    Format a context window size.

        format_context_window(128000)   # "128K"
        format_context_window(1000000)  # "1.0M"
    """
    if tokens >= 1_000_000:
        return f"{tokens / 1_000_000:.1f}M"
    return f"{math.floor(tokens / 1000 + 0.5)}K"


def format_provider_name(slug: str) -> str:
    """
    Human-readable provider name.

        format_provider_name("openai")      # "OpenAI"
        format_provider_name("some-lab")    # "Some Lab"
    """
    if slug in PROVIDER_DISPLAY_NAMES:
        return PROVIDER_DISPLAY_NAMES[slug]
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def _format_number(value: float) -> str:
    if value == math.floor(value):
        return str(int(value))
    return _TRAILING_ZEROS.sub("", f"{value:.2f}")
