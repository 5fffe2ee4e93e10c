"""
Purpose profile schemas.

A purpose profile bundles the policy for one kind of request:
- preferred_tier: hard anchor for selection order (not a scoring weight)
- weights: cost / quality / context trade-off used for ranking within a tier
- require: hard requirements (absent = no constraint)
- exclude: exclusion rules (absent = no exclusion)
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from modelpick.schemas.tiers import CapabilityTier


@dataclass(frozen=True)
class PurposeWeights:
    """
    Scoring weights. Must be non-negative; renormalized to sum to 1 before use.

    - cost: cheaper is better
    - quality: newer / higher version is better
    - context: larger context window is better
    """
    cost: float = 0.0
    quality: float = 0.0
    context: float = 0.0

    def __post_init__(self):
        for axis in ("cost", "quality", "context"):
            value = getattr(self, axis)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Weight '{axis}' must be a finite non-negative number, got {value}")

    @property
    def total(self) -> float:
        return self.cost + self.quality + self.context

    def normalized(self) -> "PurposeWeights":
        """Return weights scaled to sum to 1. All-zero weights stay all-zero."""
        total = self.total
        if total == 0:
            return self
        return PurposeWeights(
            cost=self.cost / total,
            quality=self.quality / total,
            context=self.context / total,
        )


@dataclass(frozen=True)
class PurposeRequirements:
    """Hard requirements a model must meet to be considered."""
    tools: bool = False                 # False = tool support not required
    min_context: Optional[int] = None   # None = no minimum


@dataclass(frozen=True)
class PurposeExclusions:
    """Models matching any rule here are dropped before scoring."""
    tiers: Tuple[CapabilityTier, ...] = ()
    patterns: Tuple[str, ...] = ()      # case-insensitive substrings of id or name

    def __post_init__(self):
        # A lone string is one pattern, not a sequence of characters
        patterns = (self.patterns,) if isinstance(self.patterns, str) else self.patterns
        object.__setattr__(self, "tiers", tuple(self.tiers))
        object.__setattr__(self, "patterns", tuple(patterns))


@dataclass(frozen=True)
class PurposeProfile:
    """Policy bundle for recommending models for one purpose."""
    preferred_tier: CapabilityTier
    weights: PurposeWeights
    require: PurposeRequirements = field(default_factory=PurposeRequirements)
    exclude: PurposeExclusions = field(default_factory=PurposeExclusions)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PurposeProfile":
        """
        Build a profile from plain config data.

        Expected shape (require/exclude optional):
            preferred_tier: standard
            weights: {cost: 0.3, quality: 0.4, context: 0.3}
            require: {tools: true, min_context: 8000}
            exclude: {tiers: [efficient], patterns: ["vision"]}

        Raises:
            ValueError: On an unknown tier name, missing keys, wrongly shaped
                sections, or negative / non-numeric weights
        """
        if not isinstance(data, dict):
            raise ValueError(f"Purpose profile must be a mapping, got {type(data).__name__}")

        tier_name = data.get("preferred_tier")
        if tier_name is None:
            raise ValueError("Purpose profile is missing 'preferred_tier'")

        weights_data = _section(data, "weights")
        require_data = _section(data, "require")
        exclude_data = _section(data, "exclude")

        min_context = require_data.get("min_context")
        if min_context is not None:
            min_context = _to_int(min_context, "require.min_context")

        return cls(
            preferred_tier=_parse_tier(tier_name),
            weights=PurposeWeights(
                cost=_to_float(weights_data.get("cost", 0.0), "weights.cost"),
                quality=_to_float(weights_data.get("quality", 0.0), "weights.quality"),
                context=_to_float(weights_data.get("context", 0.0), "weights.context"),
            ),
            require=PurposeRequirements(
                tools=bool(require_data.get("tools", False)),
                min_context=min_context,
            ),
            exclude=PurposeExclusions(
                tiers=tuple(_parse_tier(t) for t in _string_list(exclude_data, "tiers")),
                patterns=tuple(str(p) for p in _string_list(exclude_data, "patterns")),
            ),
        )


def _parse_tier(value: Any) -> CapabilityTier:
    if isinstance(value, CapabilityTier):
        return value
    try:
        return CapabilityTier(str(value).lower())
    except ValueError:
        valid = [t.value for t in CapabilityTier]
        raise ValueError(f"Invalid tier: {value}. Must be one of {valid}") from None


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Optional nested mapping; absent or null is empty."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def _string_list(data: Dict[str, Any], key: str) -> list:
    """Optional list value. A bare string is rejected rather than split into characters."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"'exclude.{key}' must be a list, got {type(value).__name__}")
    return list(value)


def _to_float(value: Any, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a number, got {value!r}") from None


def _to_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be an integer, got {value!r}") from None
