"""
Constrained selection from a pre-scored list.

Two-pass algorithm:
1. First pass walks candidates in score order and admits each one that every
   constraint accepts, given what has been selected so far.
2. Second pass back-fills unadmitted candidates in score order, ignoring
   constraints, until `count` is reached.

Constraints are preferences, not filters: the result holds `count` models
whenever at least `count` candidates survive the pre-filter.
"""

from typing import Any, Callable, List, Optional, Sequence

from modelpick.schemas.model import ScoredModel


Constraint = Callable[[Sequence[Any], Any], bool]


# =============================================================================
# Built-in constraints
# =============================================================================

def provider_diversity(max_per_provider: int = 1) -> Constraint:
    """Admit a candidate only while fewer than `max_per_provider` selected models share its provider."""
    def constraint(selected: Sequence[Any], candidate: Any) -> bool:
        same_provider = sum(1 for m in selected if m.provider == candidate.provider)
        return same_provider < max_per_provider

    return constraint


def min_context_window(tokens: int) -> Constraint:
    """Admit a candidate only if its context window is at least `tokens` (missing = 0)."""
    def constraint(selected: Sequence[Any], candidate: Any) -> bool:
        return candidate.context_size >= tokens

    return constraint


# =============================================================================
# Selection
# =============================================================================

def select_models(
    scored: Sequence[ScoredModel],
    count: int = 1,
    constraints: Sequence[Constraint] = (),
    filter: Optional[Callable[[Any], bool]] = None,
) -> List[ScoredModel]:
    """
    Select up to `count` models from a list sorted by score (highest first).

    Args:
        scored: Scored models, as returned by score_models()
        count: Maximum number of models to return
        constraints: Predicates over (selected, candidate) for the first pass
        filter: Optional pre-filter applied before selection

    Returns:
        Selected models, first-pass picks followed by back-filled ones
    """
    candidates = [m for m in scored if filter(m)] if filter else list(scored)
    if not candidates or count < 1:
        return []

    selected: List[ScoredModel] = []
    admitted = set()

    # First pass: respect constraints
    for index, candidate in enumerate(candidates):
        if len(selected) >= count:
            break
        if all(constraint(selected, candidate) for constraint in constraints):
            selected.append(candidate)
            admitted.add(index)

    # Second pass: fill remaining slots in score order
    for index, candidate in enumerate(candidates):
        if len(selected) >= count:
            break
        if index not in admitted:
            selected.append(candidate)

    return selected
