"""Shapes the language model is asked to return.

These models double as the validation schemas for the structured-response
extractor, so they run in strict mode: a number must arrive as a number and
a keyword list as a list of strings. Wire names are camelCase.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

PriceContext = Literal["low", "medium", "high", "budget", "premium"]
Confidence = Literal["high", "medium", "low"]

_ABSENT_MARKERS = {"", "null", "none"}


def _absent_if_blank(value):
    # Models write "null", "" or leave the key out; all mean absent.
    if isinstance(value, str) and value.strip().lower() in _ABSENT_MARKERS:
        return None
    return value


def _normalize_choice(value):
    value = _absent_if_blank(value)
    if isinstance(value, str):
        return value.strip().lower()
    return value


class AIResponseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        allow_inf_nan=False,
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class SearchIntent(AIResponseModel):
    keywords: List[str]
    category: Optional[str] = None
    price_context: Optional[PriceContext] = None
    condition: Optional[str] = None
    intent: str

    @field_validator("category", "condition", mode="before")
    @classmethod
    def _blank_is_absent(cls, value):
        return _absent_if_blank(value)

    @field_validator("price_context", mode="before")
    @classmethod
    def _normalize_price_context(cls, value):
        return _normalize_choice(value)


class PriceSuggestion(AIResponseModel):
    suggested_price: float = Field(ge=0)
    min_price: float = Field(ge=0)
    max_price: float = Field(ge=0)
    reasoning: str
    confidence: Confidence

    @field_validator("confidence", mode="before")
    @classmethod
    def _normalize_confidence(cls, value):
        return _normalize_choice(value)

    @field_serializer("suggested_price", "min_price", "max_price")
    def _whole_prices_as_int(self, value: float):
        return int(value) if float(value).is_integer() else value

    @model_validator(mode="after")
    def _check_range(self):
        if not self.min_price <= self.suggested_price <= self.max_price:
            raise ValueError("expected minPrice <= suggestedPrice <= maxPrice")
        return self


class ListingEnhancement(AIResponseModel):
    improved_title: str = Field(min_length=1)
    improved_description: str
    suggested_keywords: List[str]
