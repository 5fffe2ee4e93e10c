"""
Model classification.

Maps a model record to an ordinal capability tier (from naming heuristics and
price) and an ordinal cost tier (from input price), plus range predicates for
filtering and simple capability checks.

Classification never fails: missing price is the cheapest cost tier, and a
name with no recognizable signal is Standard.
"""

from typing import Callable, Any

from modelpick.schemas.tiers import (
    CapabilityTier,
    CostTier,
    capability_rank,
    cost_rank,
)


ModelPredicate = Callable[[Any], bool]


# =============================================================================
# Constants
# =============================================================================

# Efficient-tier tokens. The id uses hyphen-bounded forms and the display name
# space-bounded forms so that "gemini" never matches "mini".
EFFICIENT_ID_TOKENS = ("-mini", "-nano", "-lite", "-flash", "haiku", "tiny", "-small")
EFFICIENT_NAME_TOKENS = (" mini", " nano", " lite", " flash", "haiku", "tiny", " small")

# Flagship-tier tokens matched anywhere in id or name
FLAGSHIP_TOKENS = ("opus", "ultra")
FLAGSHIP_ID_PRO = "-pro"
FLAGSHIP_NAME_PRO = " pro"

# Input price ($/1M tokens) at which a model is flagship regardless of name
FLAGSHIP_PRICE_THRESHOLD = 10.0

# Lower bounds of the cost bands, highest first. Inclusive-lower, exclusive-upper.
COST_TIER_BOUNDS = (
    (20.0, CostTier.ULTRA),
    (10.0, CostTier.PREMIUM),
    (2.0, CostTier.STANDARD),
)

NON_TEXT_OUTPUTS = frozenset(["image", "audio", "video"])


# =============================================================================
# Tier classification
# =============================================================================

def classify_tier(model: Any) -> CapabilityTier:
    """
    Classify a model into a capability tier. First match wins:

    1. Efficient: mini, nano, lite, flash, haiku, tiny, small
    2. Flagship: opus, ultra, pro, or input price >= $10/M
    3. Standard: everything else
    """
    model_id = model.id.lower()
    name = model.name.lower()

    if any(token in model_id for token in EFFICIENT_ID_TOKENS):
        return CapabilityTier.EFFICIENT
    if any(token in name for token in EFFICIENT_NAME_TOKENS):
        return CapabilityTier.EFFICIENT

    if any(token in model_id or token in name for token in FLAGSHIP_TOKENS):
        return CapabilityTier.FLAGSHIP
    if FLAGSHIP_ID_PRO in model_id or FLAGSHIP_NAME_PRO in name:
        return CapabilityTier.FLAGSHIP
    if model.input_price >= FLAGSHIP_PRICE_THRESHOLD:
        return CapabilityTier.FLAGSHIP

    return CapabilityTier.STANDARD


def classify_cost_tier(model: Any) -> CostTier:
    """
    Classify a model into a cost tier by input price per 1M tokens.

    | Tier     | Input price  | Examples                     |
    |----------|--------------|------------------------------|
    | free     | $0           | free-tier models             |
    | budget   | < $2/M       | Haiku ($1), GPT-4o Mini      |
    | standard | $2 - $10/M   | Sonnet ($3), GPT-4o ($2.50)  |
    | premium  | $10 - $20/M  | Opus ($15), o1 ($15)         |
    | ultra    | >= $20/M     | o1-pro ($150)                |
    """
    price = model.input_price
    if price <= 0:
        return CostTier.FREE

    for lower_bound, tier in COST_TIER_BOUNDS:
        if price >= lower_bound:
            return tier
    return CostTier.BUDGET


# =============================================================================
# Ordinal predicates
# =============================================================================

def tier_at_most(threshold: CapabilityTier) -> ModelPredicate:
    """Predicate: capability tier <= threshold. tier_at_most(STANDARD) keeps efficient + standard."""
    max_rank = capability_rank(threshold)
    return lambda model: capability_rank(classify_tier(model)) <= max_rank


def tier_at_least(threshold: CapabilityTier) -> ModelPredicate:
    """Predicate: capability tier >= threshold."""
    min_rank = capability_rank(threshold)
    return lambda model: capability_rank(classify_tier(model)) >= min_rank


def cost_at_most(threshold: CostTier) -> ModelPredicate:
    """Predicate: cost tier <= threshold. cost_at_most(STANDARD) keeps free + budget + standard."""
    max_rank = cost_rank(threshold)
    return lambda model: cost_rank(classify_cost_tier(model)) <= max_rank


def cost_at_least(threshold: CostTier) -> ModelPredicate:
    """Predicate: cost tier >= threshold."""
    min_rank = cost_rank(threshold)
    return lambda model: cost_rank(classify_cost_tier(model)) >= min_rank


# =============================================================================
# Capability checks
# =============================================================================

def supports_tools(model: Any) -> bool:
    return bool(model.capabilities and model.capabilities.tools)


def supports_vision(model: Any) -> bool:
    """True if the vision flag is set or "image" is an input modality."""
    if model.capabilities and model.capabilities.vision:
        return True
    return bool(model.modality and "image" in model.modality.input)


def is_text_focused(model: Any) -> bool:
    """
    True unless the model declares image, audio or video output.

    Models that take images in but only emit text count as text-focused.
    No declared modality is assumed to be text.
    """
    if not model.modality:
        return True
    return not NON_TEXT_OUTPUTS.intersection(model.modality.output)
