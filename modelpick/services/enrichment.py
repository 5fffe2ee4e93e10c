"""
Enrichment and grouping for display.

enrich() decorates a record with its tiers and formatted labels;
group_by_provider() buckets records into provider sections ready to render.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from modelpick.schemas.model import EnrichedModel
from modelpick.services.classifier import classify_tier, classify_cost_tier
from modelpick.utils.formatting import (
    format_context_window,
    format_pricing,
    format_provider_name,
)


@dataclass
class ProviderGroup:
    """A provider's display name and its models."""
    provider: str           # slug: "anthropic"
    provider_name: str      # display: "Anthropic"
    models: List[Any] = field(default_factory=list)


def enrich(model: Any) -> EnrichedModel:
    """Wrap a model with tier, cost tier and formatted labels."""
    return EnrichedModel(
        model=model,
        tier=classify_tier(model),
        cost_tier=classify_cost_tier(model),
        provider_name=format_provider_name(model.provider),
        price_label=format_pricing(model.pricing) if model.pricing else "",
        context_label=format_context_window(model.context_window) if model.context_window else "",
    )


def group_by_provider(
    models: Sequence[Any],
    priority: Sequence[str] = (),
) -> List[ProviderGroup]:
    """
    Group models by provider.

    Providers listed in `priority` come first, in the given order; the rest
    follow alphabetically. Models keep their input order within a group.
    """
    by_provider: Dict[str, List[Any]] = {}
    for model in models:
        by_provider.setdefault(model.provider, []).append(model)

    rank = {provider: index for index, provider in enumerate(priority)}
    ordered = sorted(
        by_provider,
        key=lambda p: (0, rank[p], "") if p in rank else (1, 0, p),
    )

    return [
        ProviderGroup(
            provider=provider,
            provider_name=format_provider_name(provider),
            models=by_provider[provider],
        )
        for provider in ordered
    ]
