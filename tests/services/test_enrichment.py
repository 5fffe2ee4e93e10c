"""
Unit tests for enrichment and provider grouping.
"""

from modelpick.schemas.model import EnrichedModel, ModelRecord, unwrap
from modelpick.schemas.tiers import CapabilityTier, CostTier
from modelpick.services.enrichment import enrich, group_by_provider
from modelpick.services.recommendation import recommend
from tests.model_fixtures import (
    ALL_MODELS,
    CODER,
    FLASH,
    GPT4O,
    OPUS,
    SONNET,
    HAIKU,
    create_model,
    ids,
)


class TestEnrich:
    """Tests for enrich()."""

    def test_labels(self):
        row = enrich(SONNET)

        assert isinstance(row, EnrichedModel)
        assert row.tier == CapabilityTier.STANDARD
        assert row.cost_tier == CostTier.STANDARD
        assert row.provider_name == "Anthropic"
        assert row.price_label == "$3/$15 per 1M"
        assert row.context_label == "200K"

    def test_preserves_record_fields(self):
        row = enrich(OPUS)

        assert row.id == OPUS.id
        assert row.name == OPUS.name
        assert row.provider == OPUS.provider
        assert row.pricing == OPUS.pricing
        assert row.context_window == OPUS.context_window
        assert row.created == OPUS.created
        assert unwrap(row) is OPUS

    def test_million_context(self):
        assert enrich(FLASH).context_label == "1.0M"

    def test_unknown_price_and_context(self):
        model = ModelRecord(id="acme", name="Acme", provider="some-lab")
        row = enrich(model)

        assert row.price_label == ""
        assert row.context_label == ""
        assert row.cost_tier == CostTier.FREE
        assert row.provider_name == "Some Lab"

    def test_enrich_scored_model(self):
        """Wrappers nest: enriching a recommendation keeps its score."""
        pick = recommend([SONNET], "balanced")[0]
        row = enrich(pick)

        assert row.score == pick.score
        assert row.id == "claude-sonnet-4-5"
        assert unwrap(row) is SONNET


class TestGroupByProvider:
    """Tests for group_by_provider()."""

    def test_alphabetical_by_default(self):
        groups = group_by_provider([SONNET, GPT4O, CODER, FLASH])

        assert [g.provider for g in groups] == ["anthropic", "deepseek", "google", "openai"]

    def test_priority_first(self):
        groups = group_by_provider(ALL_MODELS, priority=("openai", "google"))

        assert [g.provider for g in groups] == ["openai", "google", "anthropic", "deepseek"]

    def test_priority_provider_missing(self):
        groups = group_by_provider([SONNET], priority=("openai",))

        assert [g.provider for g in groups] == ["anthropic"]

    def test_models_keep_input_order(self):
        groups = group_by_provider([HAIKU, SONNET, OPUS])

        assert len(groups) == 1
        assert ids(groups[0].models) == ["claude-haiku-4-5", "claude-sonnet-4-5", "claude-opus-4-5"]

    def test_display_names(self):
        groups = group_by_provider([
            create_model("grok-3", provider="x-ai"),
            create_model("llama-3", provider="meta-llama"),
        ])

        assert {g.provider_name for g in groups} == {"xAI", "Meta Llama"}

    def test_empty(self):
        assert group_by_provider([]) == []

    def test_groups_enriched_models(self):
        groups = group_by_provider([enrich(m) for m in (SONNET, GPT4O)])

        assert groups[0].models[0].tier == CapabilityTier.STANDARD
