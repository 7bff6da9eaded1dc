from pydantic import BaseModel, Field
from typing import Optional

class ProductDraft(BaseModel):
    """What a seller has typed so far. Only the title is guaranteed."""
    title: str = Field(min_length=1)
    category: Optional[str] = None
    condition: Optional[str] = None
    description: Optional[str] = None

class ComparableListing(BaseModel):
    title: str
    price: float = Field(gt=0)
    condition: Optional[str] = None
    sold: bool = True

class ProductCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    category: Optional[str] = None
    condition: Optional[str] = None
    price: float = Field(gt=0)
    sold: bool = False

# Request bodies stay lenient so a missing title/query becomes our own
# 400 response instead of FastAPI's 422.
class PriceSuggestionRequest(BaseModel):
    title: Optional[str] = None
    category: Optional[str] = None
    condition: Optional[str] = None
    description: Optional[str] = None

class SearchRequest(BaseModel):
    query: Optional[str] = None
