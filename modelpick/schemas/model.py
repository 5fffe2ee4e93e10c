"""
Canonical model record schemas.

ModelRecord is the single shape every catalog adapter produces and every
recommendation stage consumes. Records are frozen; derived data (scores,
classification labels) is attached by wrapping a record rather than
modifying it. Wrappers forward attribute access to the wrapped record, so a
ScoredModel or EnrichedModel can be passed anywhere a ModelRecord is read.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Tuple, Union, Any

from modelpick.schemas.tiers import CapabilityTier, CostTier


CreatedValue = Union[str, int, float, date, datetime]


@dataclass(frozen=True)
class Pricing:
    """Price per 1M tokens in USD."""
    input: float = 0.0
    output: float = 0.0


@dataclass(frozen=True)
class Modality:
    """Declared input/output modalities (e.g. "text", "image", "audio")."""
    input: Tuple[str, ...] = ("text",)
    output: Tuple[str, ...] = ("text",)

    def __post_init__(self):
        # Accept lists or a single name from adapters and config, store as tuples
        object.__setattr__(self, "input", _as_names(self.input))
        object.__setattr__(self, "output", _as_names(self.output))


def _as_names(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Capabilities:
    """Capability flags. None means the catalog did not say."""
    tools: Optional[bool] = None
    vision: Optional[bool] = None
    streaming: Optional[bool] = None
    json: Optional[bool] = None


@dataclass(frozen=True)
class ModelRecord:
    """
    Normalized model representation across providers.

    Three identifiers cover the common calling conventions:
    - id: base identity ("claude-sonnet-4-5", "gpt-4o")
    - api_id: direct provider API id ("claude-sonnet-4-5-20250929")
    - openrouter_id: OpenRouter id ("anthropic/claude-sonnet-4-5")
    """
    id: str
    name: str
    provider: str
    api_id: Optional[str] = None
    openrouter_id: Optional[str] = None
    description: Optional[str] = None
    context_window: Optional[int] = None
    pricing: Optional[Pricing] = None
    modality: Optional[Modality] = None
    capabilities: Optional[Capabilities] = None
    created: Optional[CreatedValue] = None

    @property
    def input_price(self) -> float:
        """Input price per 1M tokens, 0.0 when unknown."""
        return self.pricing.input if self.pricing else 0.0

    @property
    def context_size(self) -> int:
        """Context window in tokens, 0 when unknown."""
        return self.context_window or 0

    @property
    def created_timestamp(self) -> float:
        """Creation time as epoch seconds. Missing or unparseable is epoch (0.0)."""
        return parse_created(self.created)


def parse_created(value: Optional[CreatedValue]) -> float:
    """
    Convert a creation value to epoch seconds.

    Accepts ISO date/datetime strings ("2025-09-29", "2025-09-29T10:00:00Z"),
    epoch seconds, or date/datetime objects (YAML loads bare dates as date).
    Naive values are treated as UTC.
    """
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return 0.0
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()


class _ModelView:
    """
    Mixin for records derived from a ModelRecord by composition.

    Unknown attributes resolve against the wrapped model, so wrappers nest:
    scoring an EnrichedModel keeps its tier and labels reachable.
    """

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name == "model" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.model, name)


@dataclass(frozen=True)
class ScoredModel(_ModelView):
    """A model with a computed score in the 0.0-1.0 range (higher is better)."""
    model: Any
    score: float = 0.0


@dataclass(frozen=True)
class EnrichedModel(_ModelView):
    """A model decorated with classification and display fields."""
    model: Any
    tier: CapabilityTier = CapabilityTier.STANDARD
    cost_tier: CostTier = CostTier.FREE
    provider_name: str = ""
    price_label: str = ""       # "$3/$15 per 1M", "Free", "" if unknown
    context_label: str = ""     # "128K", "1.0M", "" if unknown


def unwrap(record: Any) -> ModelRecord:
    """Return the innermost ModelRecord behind any number of wrappers."""
    while isinstance(record, _ModelView):
        record = record.model
    return record
