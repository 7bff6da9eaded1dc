from typing import Optional

from fastapi import APIRouter, HTTPException

from app.db import get_session
from app.models.listing import ProductCreate
from app.models.product_db import Product
from app.services.catalog import create_product, list_products, serialize_product

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("/")
def add_product(data: ProductCreate):
    with get_session() as session:
        product = create_product(session, data)
        return {"id": product.id, "message": "Product created"}


@router.get("/")
def get_products(category: Optional[str] = None, sold: Optional[bool] = None):
    with get_session() as session:
        return [serialize_product(p) for p in list_products(session, category=category, sold=sold)]


@router.get("/{product_id}")
def get_product(product_id: str):
    with get_session() as session:
        product = session.get(Product, product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return serialize_product(product)


@router.put("/{product_id}/sold")
def mark_sold(product_id: str):
    with get_session() as session:
        product = session.get(Product, product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        product.sold = True
        session.add(product)
        session.commit()
        return {"message": "Product marked as sold"}
