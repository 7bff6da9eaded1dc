import asyncio
import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.ai.client import CompletionClient, get_completion_client
from app.db import get_session
from app.errors import ValidationError
from app.models.listing import PriceSuggestionRequest, ProductDraft
from app.services.ai_service import category_fallback, enhance_listing, suggest_price
from app.services.catalog import category_products_average, find_comparables

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/post", tags=["AI Pricing"])


def load_pricing_data(draft: ProductDraft):
    """Comparables for the draft, plus the category average when there are none."""
    with get_session() as session:
        comparables = find_comparables(session, draft.title, draft.category)
        category_average = None
        if not comparables:
            category_average = category_products_average(session, draft.category)
    return comparables, category_average


@router.post("/ai-price-suggestion")
async def ai_price_suggestion(
    data: Optional[PriceSuggestionRequest] = None,
    client: CompletionClient = Depends(get_completion_client),
):
    data = data or PriceSuggestionRequest()
    title = (data.title or "").strip()
    if not title:
        raise ValidationError("Product title is required")

    try:
        draft = ProductDraft(
            title=title,
            category=data.category,
            condition=data.condition,
            description=data.description,
        )

        comparables, category_average = await run_in_threadpool(load_pricing_data, draft)

        logger.info("Price suggestion for %r: %d comparable sold products", title, len(comparables))

        if comparables:
            price_suggestion, enhanced = await asyncio.gather(
                suggest_price(client, draft, comparables),
                enhance_listing(client, draft.title, draft.description),
            )
        else:
            # Different data source than comparables: all products in the category.
            price_suggestion = category_fallback(category_average)
            enhanced = await enhance_listing(client, draft.title, draft.description)

        return {
            "msg": "success",
            "priceSuggestion": price_suggestion.to_wire() if price_suggestion else None,
            "enhancedDetails": enhanced.to_wire(),
            "similarProductsCount": len(comparables),
        }
    except Exception as e:
        logger.exception("Price suggestion failed")
        return JSONResponse(
            status_code=500,
            content={"msg": "error", "error": str(e), "details": traceback.format_exc()},
        )
