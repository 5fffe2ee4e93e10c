"""
Model Catalog Service.

Loads a local catalog file into ModelRecord objects. Two file shapes are
accepted (YAML or JSON, JSON being read through the YAML loader):

1. Canonical list:

    models:
      - id: claude-sonnet-4-5
        name: Claude Sonnet 4.5
        provider: anthropic
        context_window: 200000
        pricing: {input: 3, output: 15}
        modality: {input: [text, image], output: [text]}
        capabilities: {tools: true, vision: true}
        created: "2025-09-29"

2. A saved OpenRouter /api/v1/models response ({"data": [...]}).

The catalog only reads files; it never fetches or writes anything.
"""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import yaml

from modelpick.schemas.model import Capabilities, Modality, ModelRecord, Pricing
from modelpick.services.adapters.openrouter import parse_openrouter_model
from modelpick.utils.logger import log


class ModelCatalog:
    """
    Loads and queries a model catalog file.

    Usage:
        catalog = ModelCatalog("models.yaml")
        if catalog.load():
            models = catalog.get_all_models()
            anthropic = catalog.get_models_by_provider("anthropic")
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the catalog.

        Args:
            path: Path to a YAML or JSON catalog file
        """
        self.path = Path(path).expanduser()
        self._models: Dict[str, ModelRecord] = {}  # Keyed by model ID, file order
        self._loaded = False

    def load(self) -> bool:
        """
        Load the catalog from disk.

        Returns:
            True if loaded successfully, False otherwise.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            log.error(f"Model catalog not found: {self.path}")
            return False
        except yaml.YAMLError as e:
            log.error(f"Failed to parse model catalog: {e}")
            return False
        except OSError as e:
            log.error(f"Error reading model catalog: {e}")
            return False

        if not isinstance(raw_data, dict):
            log.error(f"Model catalog {self.path} must be a mapping with 'models' or 'data'")
            return False

        self._parse_models(raw_data)
        self._loaded = True
        log.info(f"Loaded {len(self._models)} models from {self.path}")
        return True

    def _parse_models(self, raw_data: Dict[str, Any]) -> None:
        """Parse raw file data into ModelRecord objects."""
        self._models.clear()

        if "data" in raw_data:
            entries = raw_data.get("data") or []
            parse = parse_openrouter_model
        else:
            entries = raw_data.get("models") or []
            parse = parse_model_entry

        for entry in entries:
            if not isinstance(entry, dict):
                continue

            try:
                model = parse(entry)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                log.warning(f"Failed to parse model {entry.get('id', '?')}: {e}")
                continue

            if model.id in self._models:
                log.warning(f"Duplicate model id {model.id} in {self.path}, keeping first")
                continue
            self._models[model.id] = model

    # =========================================================================
    # Query Methods
    # =========================================================================

    @property
    def is_loaded(self) -> bool:
        """Check if catalog is loaded."""
        return self._loaded

    def get_model(self, model_id: str) -> Optional[ModelRecord]:
        """Get a model by ID."""
        return self._models.get(model_id)

    def get_all_models(self) -> List[ModelRecord]:
        """Get all models, in file order."""
        return list(self._models.values())

    def get_models_by_provider(self, provider: str) -> List[ModelRecord]:
        """Get all models from a provider slug (e.g., 'anthropic')."""
        return [m for m in self._models.values() if m.provider == provider]

    def iter_models(self) -> Iterator[ModelRecord]:
        """Iterate over all models."""
        yield from self._models.values()

    def __len__(self) -> int:
        """Return number of models in catalog."""
        return len(self._models)

    def __contains__(self, model_id: str) -> bool:
        """Check if a model ID exists."""
        return model_id in self._models


def parse_model_entry(data: Dict[str, Any]) -> ModelRecord:
    """
    Parse one canonical catalog entry.

    Raises:
        KeyError: If id, name or provider is missing
    """
    pricing_data = data.get("pricing")
    pricing = None
    if isinstance(pricing_data, dict):
        pricing = Pricing(
            input=float(pricing_data.get("input", 0.0)),
            output=float(pricing_data.get("output", 0.0)),
        )

    modality_data = data.get("modality")
    modality = None
    if isinstance(modality_data, dict):
        modality = Modality(
            input=modality_data.get("input", ["text"]),
            output=modality_data.get("output", ["text"]),
        )

    caps_data = data.get("capabilities")
    capabilities = None
    if isinstance(caps_data, dict):
        capabilities = Capabilities(
            tools=caps_data.get("tools"),
            vision=caps_data.get("vision"),
            streaming=caps_data.get("streaming"),
            json=caps_data.get("json"),
        )

    context_window = data.get("context_window")

    return ModelRecord(
        id=str(data["id"]),
        name=str(data["name"]),
        provider=str(data["provider"]),
        api_id=data.get("api_id"),
        openrouter_id=data.get("openrouter_id"),
        description=data.get("description"),
        context_window=int(context_window) if context_window is not None else None,
        pricing=pricing,
        modality=modality,
        capabilities=capabilities,
        created=data.get("created"),
    )
