import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.ai.client import CompletionClient, get_completion_client
from app.db import get_session
from app.errors import ValidationError
from app.models.listing import SearchRequest
from app.services.ai_service import extract_search_intent
from app.services.catalog import find_by_text_or_category, serialize_product

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/post", tags=["AI Search"])


def search_catalog(search_intent):
    with get_session() as session:
        return [serialize_product(p) for p in find_by_text_or_category(session, search_intent)]


@router.post("/ai-search")
async def ai_search(
    data: Optional[SearchRequest] = None,
    client: CompletionClient = Depends(get_completion_client),
):
    query = (data.query if data else None) or ""
    if not query.strip():
        raise ValidationError("Search query is required")

    try:
        search_intent = await extract_search_intent(client, query)
        logger.info("AI search %r -> %s", query, search_intent.to_wire())

        products = await run_in_threadpool(search_catalog, search_intent)

        return {
            "msg": "success",
            "count": len(products),
            "searchIntent": search_intent.to_wire(),
            "products": products,
        }
    except Exception as e:
        logger.exception("AI search failed")
        return JSONResponse(status_code=500, content={"msg": "error", "error": str(e)})
