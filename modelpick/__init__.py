"""
modelpick - purpose-based LLM selection from a model catalog.

    from modelpick import ModelCatalog, recommend

    catalog = ModelCatalog("models.yaml")
    catalog.load()
    picks = recommend(catalog.get_all_models(), "coding", count=3)
"""

from modelpick.schemas import (
    CapabilityTier,
    CostTier,
    ModelRecord,
    Pricing,
    Modality,
    Capabilities,
    ScoredModel,
    EnrichedModel,
    PurposeProfile,
    PurposeWeights,
    PurposeRequirements,
    PurposeExclusions,
)
from modelpick.services.catalog import ModelCatalog
from modelpick.services.classifier import classify_tier, classify_cost_tier
from modelpick.services.enrichment import enrich, group_by_provider
from modelpick.services.recommendation import (
    Purpose,
    PURPOSES,
    UnknownPurposeError,
    get_purpose,
    build_registry,
    recommend,
)

__version__ = "0.1.0"

__all__ = [
    "CapabilityTier",
    "CostTier",
    "ModelRecord",
    "Pricing",
    "Modality",
    "Capabilities",
    "ScoredModel",
    "EnrichedModel",
    "PurposeProfile",
    "PurposeWeights",
    "PurposeRequirements",
    "PurposeExclusions",
    "ModelCatalog",
    "classify_tier",
    "classify_cost_tier",
    "enrich",
    "group_by_provider",
    "Purpose",
    "PURPOSES",
    "UnknownPurposeError",
    "get_purpose",
    "build_registry",
    "recommend",
]
