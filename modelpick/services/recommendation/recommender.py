"""
Purpose-based recommendation.

Composes classification, scoring and selection into a single call:

    recommend(models, "balanced")                # best standard-tier model
    recommend(models, Purpose.CHEAP, count=3)    # three efficient-tier picks

Pipeline (no state survives between calls):
1. Filter: drop models failing the profile's requirements or matching its
   exclusions, and non-text generators unless text_only=False.
2. Score: weight the profile's cost / quality / context axes. The whole
   filtered set is scored together so normalization reflects every
   competitor, not only the model's own tier.
3. Bucket and select: group by distance from the preferred tier and fill
   from the nearest bucket outward.

The preferred tier is a structural ordering, not a weight: an off-tier model
never precedes an on-tier model, whatever their scores. Weights only rank
models within a bucket.
"""

from typing import Any, List, Optional, Sequence, Union

from modelpick.schemas.model import ScoredModel
from modelpick.schemas.purpose import PurposeProfile
from modelpick.schemas.tiers import CapabilityTier, CAPABILITY_TIER_ORDER, tier_distance
from modelpick.services.classifier import classify_tier, is_text_focused, supports_tools
from modelpick.services.recommendation.purposes import (
    Purpose,
    PurposeRegistry,
    get_purpose,
)
from modelpick.services.recommendation.scoring import (
    WeightedCriterion,
    context_capacity,
    cost_efficiency,
    recency,
    score_models,
    version_freshness,
)
from modelpick.services.recommendation.selection import (
    Constraint,
    provider_diversity as provider_diversity_constraint,
    select_models,
)
from modelpick.utils.logger import log


def recommend(
    models: Sequence[Any],
    purpose: Union[str, Purpose, PurposeProfile],
    count: int = 1,
    provider_diversity: bool = True,
    text_only: bool = True,
    registry: Optional[PurposeRegistry] = None,
) -> List[ScoredModel]:
    """
    Recommend the best model(s) for a purpose.

    Args:
        models: Candidate model records (never modified)
        purpose: Built-in purpose name, Purpose member, or a custom profile
        count: Number of models to return
        provider_diversity: When count > 1, prefer one model per provider
            across all tier buckets before repeating a provider
        text_only: Drop models that generate image, audio or video
        registry: Purpose registry for name lookup (defaults to built-ins)

    Returns:
        Up to `count` scored models, preferred tier first. Fewer when not
        enough models pass the profile's filters.

    Raises:
        UnknownPurposeError: If a purpose name is not registered
    """
    profile = purpose if isinstance(purpose, PurposeProfile) else get_purpose(purpose, registry)

    filtered = filter_candidates(models, profile, text_only=text_only)
    log.debug(f"Recommend: {len(filtered)}/{len(models)} models pass purpose filters")
    if not filtered:
        return []

    scored = score_models(filtered, build_criteria(profile))
    buckets = group_by_tier_distance(scored, profile.preferred_tier)
    log.debug(
        f"Recommend: tier buckets around {profile.preferred_tier.value} "
        f"sized {[len(b) for b in buckets]}"
    )

    constraints: List[Constraint] = []
    if provider_diversity and count > 1:
        constraints.append(provider_diversity_constraint())

    return select_from_buckets(buckets, count, constraints)


# =============================================================================
# Pipeline stages
# =============================================================================

def filter_candidates(
    models: Sequence[Any],
    profile: PurposeProfile,
    text_only: bool = True,
) -> List[Any]:
    """Return the models that satisfy the profile's requirements and exclusions."""
    patterns = [p.lower() for p in profile.exclude.patterns]
    excluded_tiers = set(profile.exclude.tiers)
    min_context = profile.require.min_context

    kept = []
    for model in models:
        if text_only and not is_text_focused(model):
            continue
        if profile.require.tools and not supports_tools(model):
            continue
        if min_context and model.context_size < min_context:
            continue
        if excluded_tiers and classify_tier(model) in excluded_tiers:
            continue
        if patterns:
            model_id = model.id.lower()
            name = model.name.lower()
            if any(p in model_id or p in name for p in patterns):
                continue
        kept.append(model)

    return kept


def build_criteria(profile: PurposeProfile) -> List[WeightedCriterion]:
    """
    Map profile weights to scoring criteria.

    - cost -> cost_efficiency
    - quality -> version_freshness and recency, half each
    - context -> context_capacity

    Weights are normalized to sum to 1 first. Zero-weight axes add no
    criterion.
    """
    weights = profile.weights.normalized()
    criteria: List[WeightedCriterion] = []

    if weights.cost > 0:
        criteria.append(WeightedCriterion(cost_efficiency, weights.cost))
    if weights.quality > 0:
        half = weights.quality / 2
        criteria.append(WeightedCriterion(version_freshness, half))
        criteria.append(WeightedCriterion(recency, half))
    if weights.context > 0:
        criteria.append(WeightedCriterion(context_capacity, weights.context))

    return criteria


def group_by_tier_distance(
    scored: Sequence[ScoredModel],
    preferred_tier: CapabilityTier,
) -> List[List[ScoredModel]]:
    """
    Split scored models into buckets by distance from the preferred tier.

    Returns one list per distance (0, 1, 2), each keeping score order.
    """
    buckets: List[List[ScoredModel]] = [[] for _ in CAPABILITY_TIER_ORDER]
    for model in scored:
        buckets[tier_distance(classify_tier(model), preferred_tier)].append(model)
    return buckets


def select_from_buckets(
    buckets: Sequence[Sequence[ScoredModel]],
    count: int,
    constraints: Sequence[Constraint] = (),
) -> List[ScoredModel]:
    """
    Fill `count` slots from tier buckets, nearest bucket first.

    Each bucket is run through select_models() for the slots still open.
    Constraints see the picks from earlier buckets too, so a provider chosen
    on-tier counts against diversity when selecting off-tier.
    """
    result: List[ScoredModel] = []

    for bucket in buckets:
        remaining = count - len(result)
        if remaining <= 0:
            break
        if not bucket:
            continue

        chosen_so_far = list(result)
        bucket_constraints = [_with_prior(c, chosen_so_far) for c in constraints]
        result.extend(select_models(bucket, count=remaining, constraints=bucket_constraints))

    return result


def _with_prior(constraint: Constraint, prior: Sequence[ScoredModel]) -> Constraint:
    """Wrap a constraint so it also counts models picked in earlier buckets."""
    def wrapped(selected: Sequence[Any], candidate: Any) -> bool:
        return constraint([*prior, *selected], candidate)

    return wrapped
