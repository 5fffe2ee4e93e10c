"""
Scoring criteria and weighted composition.

A criterion scores one model relative to a comparison set and returns a value
in 0.0-1.0. score_models() combines weighted criteria into one ranked list.

Range-based criteria use min-max normalization over the comparison set. When
the set has no spread (min == max, including empty and single-model sets) the
criterion returns 0.0: there is no signal, so no model is favoured.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Sequence, Tuple

from modelpick.schemas.model import ScoredModel
from modelpick.schemas.tiers import CapabilityTier, tier_distance
from modelpick.services.classifier import classify_tier
from modelpick.utils.model_ids import extract_version


ScoringCriterion = Callable[[Any, Sequence[Any]], float]

# Tier fit by distance from the target tier (0, 1, 2 steps)
TIER_FIT_SCORES = (1.0, 0.5, 0.1)


@dataclass(frozen=True)
class WeightedCriterion:
    """A criterion paired with its (non-normalized) weight."""
    criterion: ScoringCriterion
    weight: float


# =============================================================================
# Normalization helpers
# =============================================================================

def _value_range(values: Iterable[float]) -> Tuple[float, float]:
    values = list(values)
    if not values:
        return 0.0, 0.0
    return min(values), max(values)


def _min_max(value: float, low: float, high: float) -> float:
    """Normalize into 0-1. Returns 0.0 when low == high."""
    if high == low:
        return 0.0
    return (value - low) / (high - low)


# =============================================================================
# Criteria
# =============================================================================

def cost_efficiency(model: Any, all_models: Sequence[Any]) -> float:
    """Cheaper scores higher. Input price, missing treated as $0."""
    low, high = _value_range(m.input_price for m in all_models)
    if high == low:
        return 0.0
    return 1.0 - _min_max(model.input_price, low, high)


def context_capacity(model: Any, all_models: Sequence[Any]) -> float:
    """Larger context window scores higher. Missing treated as 0."""
    low, high = _value_range(m.context_size for m in all_models)
    return _min_max(model.context_size, low, high)


def recency(model: Any, all_models: Sequence[Any]) -> float:
    """Newer creation date scores higher. Missing treated as epoch."""
    low, high = _value_range(m.created_timestamp for m in all_models)
    return _min_max(model.created_timestamp, low, high)


def version_freshness(model: Any, all_models: Sequence[Any]) -> float:
    """Higher version extracted from the id scores higher. No version is 0."""
    low, high = _value_range(extract_version(m.id) for m in all_models)
    return _min_max(extract_version(model.id), low, high)


def tier_fit(target: CapabilityTier) -> ScoringCriterion:
    """
    Criterion scoring closeness to a target capability tier.

    Exact match = 1.0, one step away = 0.5, two steps = 0.1.
    """
    def criterion(model: Any, all_models: Sequence[Any]) -> float:
        return TIER_FIT_SCORES[tier_distance(classify_tier(model), target)]

    return criterion


# =============================================================================
# Composition
# =============================================================================

def score_models(
    models: Sequence[Any],
    criteria: Sequence[WeightedCriterion],
) -> List[ScoredModel]:
    """
    Score models with weighted criteria.

    Weights are renormalized to sum to 1; a zero total gives every model a
    score of 0. Each criterion sees the full `models` sequence as its
    comparison set.

    Returns:
        New list of ScoredModel sorted by score, highest first. Models with
        equal scores keep their input order.
    """
    if not models:
        return []

    total_weight = sum(c.weight for c in criteria)

    scored = []
    for model in models:
        score = 0.0
        if total_weight > 0:
            for weighted in criteria:
                score += (weighted.weight / total_weight) * weighted.criterion(model, models)
        scored.append(ScoredModel(model=model, score=score))

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored
