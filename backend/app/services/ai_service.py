"""AI-backed pipelines: search intent, price suggestion, listing enhancement.

Each pipeline is prompt -> completion client -> extractor -> result, with a
deterministic fallback when the provider call fails or the reply cannot be
extracted. Both failure kinds are handled the same way and neither escapes.
The pipelines hold no state; the completion client is passed in.
"""

import logging
import math
from typing import Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from app import config
from app.ai import prompts
from app.ai.client import CompletionClient
from app.ai.exceptions import ProviderError
from app.ai.extractor import Failed, extract
from app.models.ai import ListingEnhancement, PriceSuggestion, SearchIntent
from app.models.listing import ComparableListing, ProductDraft

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

COMPARABLE_FALLBACK_REASONING = "derived from average of comparable items"
CATEGORY_FALLBACK_REASONING = "derived from category average (limited similar products)"


async def _ask(client: CompletionClient, prompt: str, schema: Type[T], pipeline: str) -> Optional[T]:
    """Return the extracted value, or None when the caller should fall back."""
    try:
        raw = await client.complete(prompt)
    except ProviderError as exc:
        logger.warning("%s: provider call failed, using fallback (%s)", pipeline, exc)
        return None

    logger.debug("%s: raw model output: %r", pipeline, raw)
    result = extract(raw, schema)
    if isinstance(result, Failed):
        logger.warning("%s: could not extract reply, using fallback (%s)", pipeline, result.describe())
        return None
    return result.value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def banded_suggestion(average: float, band: float, reasoning: str) -> PriceSuggestion:
    suggested = round_half_up(average)
    return PriceSuggestion(
        suggested_price=suggested,
        min_price=round_half_up(suggested * (1 - band)),
        max_price=round_half_up(suggested * (1 + band)),
        reasoning=reasoning,
        confidence="medium",
    )


def comparable_fallback(comparables: Sequence[ComparableListing]) -> PriceSuggestion:
    average = sum(c.price for c in comparables) / len(comparables)
    return banded_suggestion(average, config.COMPARABLE_BAND, COMPARABLE_FALLBACK_REASONING)


def category_fallback(average: Optional[float]) -> Optional[PriceSuggestion]:
    """Suggestion used by the HTTP layer when no comparables were found."""
    if average is None:
        return None
    return banded_suggestion(average, config.CATEGORY_BAND, CATEGORY_FALLBACK_REASONING)


def fallback_search_intent(query: str) -> SearchIntent:
    return SearchIntent(keywords=query.split(), intent=query)


def fallback_enhancement(title: str, description: Optional[str]) -> ListingEnhancement:
    return ListingEnhancement(
        improved_title=title,
        improved_description=description or "",
        suggested_keywords=title.split(),
    )


async def extract_search_intent(client: CompletionClient, query: str) -> SearchIntent:
    """Turn a free-text query into a SearchIntent. Never raises."""
    logger.info("search intent: start (query length %d)", len(query))
    intent = await _ask(client, prompts.search_intent_prompt(query), SearchIntent, "search intent")
    return intent if intent is not None else fallback_search_intent(query)


async def suggest_price(
    client: CompletionClient,
    draft: ProductDraft,
    comparables: Sequence[ComparableListing],
) -> Optional[PriceSuggestion]:
    """Suggest a price from comparable sold listings.

    Returns None without calling the provider when there are no comparables;
    the category-average fallback for that case belongs to the caller.
    """
    if not comparables:
        logger.info("price suggestion: no comparables, nothing to suggest")
        return None

    logger.info("price suggestion: start (%d comparables)", len(comparables))
    prompt = prompts.price_suggestion_prompt(draft, comparables)
    suggestion = await _ask(client, prompt, PriceSuggestion, "price suggestion")
    return suggestion if suggestion is not None else comparable_fallback(comparables)


async def enhance_listing(
    client: CompletionClient,
    title: str,
    description: Optional[str] = None,
) -> ListingEnhancement:
    """Rewrite title and description for discoverability. Never raises."""
    logger.info("listing enhancement: start")
    prompt = prompts.listing_enhancement_prompt(title, description)
    enhancement = await _ask(client, prompt, ListingEnhancement, "listing enhancement")
    return enhancement if enhancement is not None else fallback_enhancement(title, description)
