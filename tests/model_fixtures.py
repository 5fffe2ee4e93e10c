"""
Shared model records for tests.

A small, realistic catalog spanning all three capability tiers and four
providers, plus one image generator. Prices are USD per 1M input/output tokens.
"""

from typing import Optional, Sequence

from modelpick.schemas.model import Capabilities, Modality, ModelRecord, Pricing


# --- Model Factory ---


def create_model(
    model_id: str,
    name: Optional[str] = None,
    provider: str = "openai",
    input_price: Optional[float] = 1.0,
    output_price: float = 0.0,
    context_window: Optional[int] = 128000,
    created: Optional[str] = "2025-01-01",
    tools: bool = True,
    inputs: Sequence[str] = ("text",),
    outputs: Sequence[str] = ("text",),
) -> ModelRecord:
    """Create a ModelRecord with sensible defaults. input_price=None means no pricing."""
    return ModelRecord(
        id=model_id,
        name=name or model_id,
        provider=provider,
        context_window=context_window,
        pricing=Pricing(input_price, output_price) if input_price is not None else None,
        modality=Modality(input=inputs, output=outputs),
        capabilities=Capabilities(tools=tools, vision="image" in inputs, streaming=True),
        created=created,
    )


# --- Flagship ---

OPUS = create_model(
    "claude-opus-4-5", "Claude Opus 4.5", "anthropic",
    15.0, 75.0, 200000, "2025-09-29", inputs=("text", "image"),
)
GPT5_PRO = create_model(
    "gpt-5-2-pro", "GPT-5.2 Pro", "openai",
    21.0, 168.0, 256000, "2026-01-15",
)
GEMINI_PRO = create_model(
    "gemini-2-5-pro", "Gemini 2.5 Pro", "google",
    10.0, 40.0, 1000000, "2025-06-01", inputs=("text", "image"),
)

# --- Standard ---

SONNET = create_model(
    "claude-sonnet-4-5", "Claude Sonnet 4.5", "anthropic",
    3.0, 15.0, 200000, "2025-09-29", inputs=("text", "image"),
)
GPT4O = create_model(
    "gpt-4o", "GPT-4o", "openai",
    2.5, 10.0, 128000, "2024-11-20", inputs=("text", "image"),
)
GPT52 = create_model(
    "gpt-5-2", "GPT-5.2", "openai",
    5.0, 40.0, 256000, "2026-01-15",
)
CODER = create_model(
    "deepseek-coder-v2", "DeepSeek Coder V2", "deepseek",
    0.14, 0.28, 128000, "2024-06-01", tools=False,
)

# --- Efficient ---

HAIKU = create_model(
    "claude-haiku-4-5", "Claude Haiku 4.5", "anthropic",
    1.0, 5.0, 200000, "2025-10-01",
)
GPT4O_MINI = create_model(
    "gpt-4o-mini", "GPT-4o Mini", "openai",
    0.15, 0.6, 128000, "2024-07-18",
)
FLASH = create_model(
    "gemini-2-5-flash", "Gemini 2.5 Flash", "google",
    0.075, 0.3, 1000000, "2025-06-01",
)

# --- Non-text ---

IMAGE_GEN = create_model(
    "dall-e-3", "DALL-E 3", "openai",
    0.0, 0.0, None, "2023-11-01", tools=False, outputs=("image",),
)


ALL_MODELS = [
    OPUS, GPT5_PRO, GEMINI_PRO,
    SONNET, GPT4O, GPT52, CODER,
    HAIKU, GPT4O_MINI, FLASH,
    IMAGE_GEN,
]


def ids(models) -> list:
    """Model IDs in order."""
    return [m.id for m in models]
