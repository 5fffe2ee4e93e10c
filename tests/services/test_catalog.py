"""
Unit tests for ModelCatalog.

Tests cover loading, parsing, and querying catalog files in both the
canonical 'models:' shape and the OpenRouter 'data:' shape.
"""

import json
import logging
from pathlib import Path

import pytest

from modelpick.schemas.model import Capabilities, Modality, Pricing
from modelpick.services.catalog import ModelCatalog, parse_model_entry
from modelpick.services.classifier import is_text_focused
from modelpick.services.recommendation import recommend


FIXTURES = Path(__file__).parent.parent / "fixtures"


# =============================================================================
# Test Data
# =============================================================================

SAMPLE_YAML = """
models:
  - id: claude-sonnet-4-5
    name: Claude Sonnet 4.5
    provider: anthropic
    api_id: claude-sonnet-4-5-20250929
    openrouter_id: anthropic/claude-sonnet-4.5
    context_window: 200000
    pricing: {input: 3, output: 15}
    modality: {input: [text, image], output: [text]}
    capabilities: {tools: true, vision: true, streaming: true}
    created: 2025-09-29

  - id: claude-haiku-4-5
    name: Claude Haiku 4.5
    provider: anthropic
    context_window: 200000
    pricing: {input: 1, output: 5}
    capabilities: {tools: true}
    created: "2025-10-01"

  - id: gpt-4o
    name: GPT-4o
    provider: openai
    context_window: 128000
    pricing: {input: 2.5, output: 10}

  - id: mystery
    provider: nowhere
"""


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def sample_yaml_path(tmp_path):
    """Create a temporary YAML catalog."""
    yaml_file = tmp_path / "models.yaml"
    yaml_file.write_text(SAMPLE_YAML)
    return yaml_file


@pytest.fixture
def catalog(sample_yaml_path):
    """A ModelCatalog loaded with sample data."""
    cat = ModelCatalog(sample_yaml_path)
    cat.load()
    return cat


# =============================================================================
# Test: Loading
# =============================================================================

class TestCatalogLoading:
    """Tests for loading catalog files."""

    def test_load_success(self, sample_yaml_path):
        cat = ModelCatalog(sample_yaml_path)
        result = cat.load()

        assert result is True
        assert cat.is_loaded is True
        assert len(cat) == 3  # 'mystery' has no name and is skipped

    def test_not_loaded_initially(self, sample_yaml_path):
        cat = ModelCatalog(sample_yaml_path)

        assert cat.is_loaded is False
        assert len(cat) == 0

    def test_load_file_not_found(self, tmp_path):
        cat = ModelCatalog(tmp_path / "nonexistent.yaml")

        assert cat.load() is False
        assert cat.is_loaded is False

    def test_load_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("invalid: yaml: content: [")

        assert ModelCatalog(yaml_file).load() is False

    def test_load_empty_file(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        cat = ModelCatalog(yaml_file)
        assert cat.load() is True
        assert len(cat) == 0

    def test_load_non_mapping(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- just\n- a list\n")

        assert ModelCatalog(yaml_file).load() is False

    def test_load_json(self, tmp_path):
        json_file = tmp_path / "models.json"
        json_file.write_text(json.dumps({
            "models": [
                {"id": "gpt-4o", "name": "GPT-4o", "provider": "openai",
                 "pricing": {"input": 2.5, "output": 10}},
            ]
        }))

        cat = ModelCatalog(json_file)
        assert cat.load() is True
        assert cat.get_model("gpt-4o").pricing == Pricing(2.5, 10.0)

    def test_reload_replaces_models(self, tmp_path):
        yaml_file = tmp_path / "models.yaml"
        yaml_file.write_text("models:\n  - {id: a, name: A, provider: x}\n")
        cat = ModelCatalog(yaml_file)
        cat.load()

        yaml_file.write_text("models:\n  - {id: b, name: B, provider: x}\n")
        cat.load()

        assert "a" not in cat
        assert "b" in cat

    def test_duplicate_ids_keep_first(self, tmp_path, caplog):
        yaml_file = tmp_path / "dupes.yaml"
        yaml_file.write_text(
            "models:\n"
            "  - {id: a, name: First, provider: x}\n"
            "  - {id: a, name: Second, provider: x}\n"
        )
        cat = ModelCatalog(yaml_file)

        with caplog.at_level(logging.WARNING, logger="modelpick"):
            cat.load()

        assert len(cat) == 1
        assert cat.get_model("a").name == "First"
        assert "Duplicate model id" in caplog.text

    def test_bad_entry_logged(self, sample_yaml_path, caplog):
        with caplog.at_level(logging.WARNING, logger="modelpick"):
            ModelCatalog(sample_yaml_path).load()

        assert "mystery" in caplog.text


# =============================================================================
# Test: Parsing
# =============================================================================

class TestCatalogParsing:
    """Tests for canonical entries."""

    def test_full_entry(self, catalog):
        model = catalog.get_model("claude-sonnet-4-5")

        assert model.name == "Claude Sonnet 4.5"
        assert model.provider == "anthropic"
        assert model.api_id == "claude-sonnet-4-5-20250929"
        assert model.openrouter_id == "anthropic/claude-sonnet-4.5"
        assert model.context_window == 200000
        assert model.pricing == Pricing(3.0, 15.0)
        assert model.modality == Modality(input=("text", "image"), output=("text",))
        assert model.capabilities.tools is True
        assert model.capabilities.json is None

    def test_bare_yaml_date(self, catalog):
        """YAML loads an unquoted date as a date object; it still orders by time."""
        sonnet = catalog.get_model("claude-sonnet-4-5")
        haiku = catalog.get_model("claude-haiku-4-5")

        assert 0 < sonnet.created_timestamp < haiku.created_timestamp

    def test_optional_sections_absent(self, catalog):
        model = catalog.get_model("gpt-4o")

        assert model.modality is None
        assert model.capabilities is None
        assert model.created is None
        assert model.created_timestamp == 0.0

    def test_parse_model_entry_missing_name(self):
        with pytest.raises(KeyError):
            parse_model_entry({"id": "x", "provider": "y"})

    def test_parse_model_entry_defaults(self):
        model = parse_model_entry({
            "id": "x", "name": "X", "provider": "y",
            "modality": {}, "capabilities": {"vision": True},
        })

        assert model.modality == Modality()
        assert model.capabilities == Capabilities(vision=True)
        assert model.context_window is None


    def test_scalar_modality(self):
        """A single modality written as a YAML scalar is one name, not characters."""
        model = parse_model_entry({
            "id": "dall-e-3", "name": "DALL-E 3", "provider": "openai",
            "modality": {"input": "text", "output": "image"},
        })

        assert model.modality.input == ("text",)
        assert model.modality.output == ("image",)
        assert is_text_focused(model) is False

    def test_scalar_modality_in_file(self, tmp_path):
        yaml_file = tmp_path / "images.yaml"
        yaml_file.write_text(
            "models:\n"
            "  - id: dall-e-3\n"
            "    name: DALL-E 3\n"
            "    provider: openai\n"
            "    modality: {input: text, output: image}\n"
        )
        cat = ModelCatalog(yaml_file)
        cat.load()

        assert recommend(cat.get_all_models(), "balanced") == []


class TestOpenRouterCatalogFile:
    """Tests for a saved OpenRouter /models response."""

    @pytest.fixture
    def openrouter_catalog(self):
        cat = ModelCatalog(FIXTURES / "openrouter_sample.json")
        assert cat.load() is True
        return cat

    def test_entries_loaded(self, openrouter_catalog):
        # The entry without an id is skipped
        assert len(openrouter_catalog) == 3

    def test_ids_normalized(self, openrouter_catalog):
        assert "claude-sonnet-4-5" in openrouter_catalog
        assert "gpt-4o-mini" in openrouter_catalog

    def test_fields(self, openrouter_catalog):
        model = openrouter_catalog.get_model("claude-sonnet-4-5")

        assert model.openrouter_id == "anthropic/claude-sonnet-4.5"
        assert model.name == "Claude Sonnet 4.5"
        assert model.pricing.input == pytest.approx(3.0)
        assert model.pricing.output == pytest.approx(15.0)
        assert model.created == "2025-09-29"


# =============================================================================
# Test: Queries
# =============================================================================

class TestCatalogQueries:
    """Tests for query helpers."""

    def test_get_model_missing(self, catalog):
        assert catalog.get_model("nonexistent") is None

    def test_get_all_models_file_order(self, catalog):
        assert [m.id for m in catalog.get_all_models()] == [
            "claude-sonnet-4-5", "claude-haiku-4-5", "gpt-4o",
        ]

    def test_get_models_by_provider(self, catalog):
        anthropic = catalog.get_models_by_provider("anthropic")

        assert [m.id for m in anthropic] == ["claude-sonnet-4-5", "claude-haiku-4-5"]
        assert catalog.get_models_by_provider("google") == []

    def test_iter_models(self, catalog):
        assert len(list(catalog.iter_models())) == 3

    def test_contains(self, catalog):
        assert "gpt-4o" in catalog
        assert "gpt-5" not in catalog

    def test_get_all_models_returns_copy(self, catalog):
        models = catalog.get_all_models()
        models.clear()

        assert len(catalog) == 3
