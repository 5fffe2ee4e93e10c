"""
Tier classification schemas.

Two independent ordinal axes:
- CapabilityTier: Efficient < Standard < Flagship (size/capability class)
- CostTier: Free < Budget < Standard < Premium < Ultra (price band)

Both axes have a "standard" member, but they are separate Enum classes so a
capability tier can never compare equal to, or be ranked against, a cost tier.
"""

from enum import Enum
from typing import List


class CapabilityTier(Enum):
    """
    Capability tiers, ordered lowest to highest.

    Derived from naming heuristics and input price (see classifier).
    """
    EFFICIENT = "efficient"   # mini, nano, lite, flash, haiku, tiny, small
    STANDARD = "standard"     # default
    FLAGSHIP = "flagship"     # opus, ultra, pro, or >= $10/M input


class CostTier(Enum):
    """
    Cost tiers by input price per 1M tokens, ordered lowest to highest.
    """
    FREE = "free"           # $0
    BUDGET = "budget"       # < $2/M
    STANDARD = "standard"   # $2 - $10/M
    PREMIUM = "premium"     # $10 - $20/M
    ULTRA = "ultra"         # >= $20/M


CAPABILITY_TIER_ORDER: List[CapabilityTier] = [
    CapabilityTier.EFFICIENT,
    CapabilityTier.STANDARD,
    CapabilityTier.FLAGSHIP,
]

COST_TIER_ORDER: List[CostTier] = [
    CostTier.FREE,
    CostTier.BUDGET,
    CostTier.STANDARD,
    CostTier.PREMIUM,
    CostTier.ULTRA,
]


def capability_rank(tier: CapabilityTier) -> int:
    """Ordinal position of a capability tier (0 = Efficient)."""
    if not isinstance(tier, CapabilityTier):
        raise TypeError(f"Expected CapabilityTier, got {type(tier).__name__}")
    return CAPABILITY_TIER_ORDER.index(tier)


def cost_rank(tier: CostTier) -> int:
    """Ordinal position of a cost tier (0 = Free)."""
    if not isinstance(tier, CostTier):
        raise TypeError(f"Expected CostTier, got {type(tier).__name__}")
    return COST_TIER_ORDER.index(tier)


def tier_distance(a: CapabilityTier, b: CapabilityTier) -> int:
    """Absolute number of steps between two capability tiers (0-2)."""
    return abs(capability_rank(a) - capability_rank(b))
