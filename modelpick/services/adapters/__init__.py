"""
Catalog adapters: provider-specific payloads -> ModelRecord.
"""

from modelpick.services.adapters.openrouter import (
    parse_openrouter_model,
    parse_openrouter_catalog,
)

__all__ = [
    "parse_openrouter_model",
    "parse_openrouter_catalog",
]
