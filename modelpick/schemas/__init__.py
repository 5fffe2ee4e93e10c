"""
Shared data types: tiers, model records, purpose profiles.
"""

from modelpick.schemas.tiers import (
    CapabilityTier,
    CostTier,
    CAPABILITY_TIER_ORDER,
    COST_TIER_ORDER,
)
from modelpick.schemas.model import (
    ModelRecord,
    Pricing,
    Modality,
    Capabilities,
    ScoredModel,
    EnrichedModel,
    unwrap,
)
from modelpick.schemas.purpose import (
    PurposeProfile,
    PurposeWeights,
    PurposeRequirements,
    PurposeExclusions,
)

__all__ = [
    "CapabilityTier",
    "CostTier",
    "CAPABILITY_TIER_ORDER",
    "COST_TIER_ORDER",
    "ModelRecord",
    "Pricing",
    "Modality",
    "Capabilities",
    "ScoredModel",
    "EnrichedModel",
    "unwrap",
    "PurposeProfile",
    "PurposeWeights",
    "PurposeRequirements",
    "PurposeExclusions",
]
