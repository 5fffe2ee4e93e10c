"""
Built-in purpose profiles.

The registry is a read-only mapping built once at import. Callers that need
extra profiles build a new merged mapping with build_registry(); nothing
registers into the built-in table at runtime.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from modelpick.schemas.purpose import (
    PurposeProfile,
    PurposeWeights,
    PurposeRequirements,
    PurposeExclusions,
)
from modelpick.schemas.tiers import CapabilityTier


class Purpose(Enum):
    """Names of the built-in purpose profiles."""
    CHEAP = "cheap"
    BALANCED = "balanced"
    QUALITY = "quality"
    CODING = "coding"
    CREATIVE = "creative"
    REVIEWER = "reviewer"


class UnknownPurposeError(KeyError, ValueError):
    """Raised when a purpose name is not in the registry."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown purpose: {self.name!r}. Available: {', '.join(self.available)}"


PurposeRegistry = Mapping[str, PurposeProfile]


PURPOSES: PurposeRegistry = MappingProxyType({
    Purpose.CHEAP.value: PurposeProfile(
        preferred_tier=CapabilityTier.EFFICIENT,
        weights=PurposeWeights(cost=0.6, quality=0.2, context=0.2),
    ),
    Purpose.BALANCED.value: PurposeProfile(
        preferred_tier=CapabilityTier.STANDARD,
        weights=PurposeWeights(cost=0.3, quality=0.4, context=0.3),
    ),
    Purpose.QUALITY.value: PurposeProfile(
        preferred_tier=CapabilityTier.FLAGSHIP,
        weights=PurposeWeights(cost=0.1, quality=0.7, context=0.2),
    ),
    Purpose.CODING.value: PurposeProfile(
        preferred_tier=CapabilityTier.STANDARD,
        weights=PurposeWeights(cost=0.2, quality=0.5, context=0.3),
        require=PurposeRequirements(tools=True),
    ),
    Purpose.CREATIVE.value: PurposeProfile(
        preferred_tier=CapabilityTier.FLAGSHIP,
        weights=PurposeWeights(cost=0.1, quality=0.7, context=0.2),
    ),
    # Review work: tool use, room for a diff, and no narrow specialists
    Purpose.REVIEWER.value: PurposeProfile(
        preferred_tier=CapabilityTier.STANDARD,
        weights=PurposeWeights(cost=0.2, quality=0.5, context=0.3),
        require=PurposeRequirements(tools=True, min_context=8000),
        exclude=PurposeExclusions(
            tiers=(CapabilityTier.EFFICIENT,),
            patterns=("code", "coder", "codex", "vision", "-vl", "omni"),
        ),
    ),
})


def get_purpose(
    name: Union[str, Purpose],
    registry: Optional[PurposeRegistry] = None,
) -> PurposeProfile:
    """
    Look up a purpose profile by name.

    Raises:
        UnknownPurposeError: If the name is not registered. There is no
            fallback profile.
    """
    registry = PURPOSES if registry is None else registry
    key = name.value if isinstance(name, Purpose) else name
    try:
        return registry[key]
    except KeyError:
        raise UnknownPurposeError(key, registry.keys()) from None


def build_registry(custom: Optional[Mapping[str, PurposeProfile]] = None) -> PurposeRegistry:
    """
    Return a new read-only registry of the built-ins plus `custom` profiles.

    Custom profiles with a built-in name replace the built-in in the new
    mapping only; PURPOSES itself is never changed.
    """
    merged = dict(PURPOSES)
    if custom:
        merged.update(custom)
    return MappingProxyType(merged)
