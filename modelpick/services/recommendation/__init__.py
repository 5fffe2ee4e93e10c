"""
Recommendation engine.

Three stages per call:
- Scoring: weighted, min-max normalized criteria (scoring.py)
- Selection: two-pass constrained selection (selection.py)
- Recommendation: purpose filters + tier-bucket fallback (recommender.py)

Usage:
    from modelpick.services.recommendation import recommend, Purpose

    picks = recommend(models, Purpose.BALANCED, count=3)
"""

from modelpick.services.recommendation.scoring import (
    ScoringCriterion,
    WeightedCriterion,
    cost_efficiency,
    context_capacity,
    recency,
    version_freshness,
    tier_fit,
    score_models,
)
from modelpick.services.recommendation.selection import (
    Constraint,
    provider_diversity,
    min_context_window,
    select_models,
)
from modelpick.services.recommendation.purposes import (
    Purpose,
    PURPOSES,
    UnknownPurposeError,
    get_purpose,
    build_registry,
)
from modelpick.services.recommendation.recommender import (
    recommend,
    filter_candidates,
    build_criteria,
    group_by_tier_distance,
)

__all__ = [
    "ScoringCriterion",
    "WeightedCriterion",
    "cost_efficiency",
    "context_capacity",
    "recency",
    "version_freshness",
    "tier_fit",
    "score_models",
    "Constraint",
    "provider_diversity",
    "min_context_window",
    "select_models",
    "Purpose",
    "PURPOSES",
    "UnknownPurposeError",
    "get_purpose",
    "build_registry",
    "recommend",
    "filter_candidates",
    "build_criteria",
    "group_by_tier_distance",
]
