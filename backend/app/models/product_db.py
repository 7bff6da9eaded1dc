from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

class Product(SQLModel, table=True):
    id: Optional[str] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    description: str = ""
    category: Optional[str] = Field(default=None, index=True)
    condition: Optional[str] = None
    price: float
    sold: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
