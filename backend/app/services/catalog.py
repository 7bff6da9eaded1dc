"""Product catalog queries used by the AI endpoints.

Text filters are case-insensitive substring matches with LIKE wildcards
escaped, so user text is always matched literally.
"""

import uuid
from typing import List, Optional

from sqlmodel import Session, col, func, or_, select

from app import config
from app.models.ai import SearchIntent
from app.models.listing import ComparableListing, ProductCreate
from app.models.product_db import Product

LOW_PRICE_CONTEXTS = {"budget", "low"}
HIGH_PRICE_CONTEXTS = {"premium", "high"}


def _contains(column, text: str):
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return col(column).ilike(f"%{escaped}%", escape="\\")


def serialize_product(product: Product) -> dict:
    return {
        "id": product.id,
        "title": product.title,
        "description": product.description,
        "category": product.category,
        "condition": product.condition,
        "price": product.price,
        "sold": product.sold,
        "created_at": product.created_at.isoformat() if product.created_at else None,
    }


def find_comparables(
    session: Session,
    title: str,
    category: Optional[str] = None,
    limit: int = config.COMPARABLE_LIMIT,
) -> List[ComparableListing]:
    """Sold products sharing the title's first word or the draft's category."""
    words = title.split()
    clauses = [_contains(Product.title, words[0] if words else title)]
    if category and category.strip():
        clauses.append(_contains(Product.category, category.strip()))

    statement = (
        select(Product)
        .where(col(Product.sold) == True)  # noqa: E712
        .where(col(Product.price) > 0)
        .where(or_(*clauses))
        .order_by(col(Product.created_at).desc())
        .limit(limit)
    )
    return [
        ComparableListing(title=p.title, price=p.price, condition=p.condition, sold=p.sold)
        for p in session.exec(statement).all()
    ]


def category_products_average(session: Session, category: Optional[str]) -> Optional[float]:
    if not category or not category.strip():
        return None
    statement = select(func.avg(Product.price)).where(Product.category == category.strip())
    return session.exec(statement).one()


def aggregate_average_price(session: Session) -> Optional[float]:
    return session.exec(select(func.avg(Product.price))).one()


def find_by_text_or_category(
    session: Session,
    intent: SearchIntent,
    limit: int = config.SEARCH_RESULT_LIMIT,
) -> List[Product]:
    """Apply a SearchIntent to the catalog."""
    text_clauses = []
    for term in [intent.intent, *intent.keywords]:
        term = term.strip()
        if term:
            text_clauses.append(_contains(Product.title, term))
            text_clauses.append(_contains(Product.description, term))

    statement = select(Product)
    if text_clauses:
        statement = statement.where(or_(*text_clauses))
    if intent.category:
        statement = statement.where(_contains(Product.category, intent.category))

    if intent.price_context in LOW_PRICE_CONTEXTS | HIGH_PRICE_CONTEXTS:
        average = aggregate_average_price(session) or config.DEFAULT_CATALOG_AVERAGE
        if intent.price_context in LOW_PRICE_CONTEXTS:
            statement = statement.where(col(Product.price) <= average * config.LOW_PRICE_FACTOR)
        else:
            statement = statement.where(col(Product.price) >= average * config.HIGH_PRICE_FACTOR)

    return list(session.exec(statement.limit(limit)).all())


def create_product(session: Session, data: ProductCreate) -> Product:
    product = Product(id=str(uuid.uuid4()), **data.model_dump())
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


def list_products(
    session: Session,
    category: Optional[str] = None,
    sold: Optional[bool] = None,
) -> List[Product]:
    statement = select(Product)
    if category:
        statement = statement.where(Product.category == category)
    if sold is not None:
        statement = statement.where(Product.sold == sold)
    return list(session.exec(statement.order_by(col(Product.created_at).desc())).all())
