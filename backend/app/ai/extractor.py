"""Pull a structured value out of free-form model text.

Language models do not reliably return bare JSON: replies arrive wrapped in
prose or markdown fences, truncated, or with fields of the wrong type. The
extractor never raises for any of that. It returns an ``ExtractionResult``,
either ``Ok(value)`` or ``Failed(reason)``, and the caller picks the
fallback from the tag.
"""

from __future__ import annotations

import enum
import json
import re
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)

# First "{" to last "}", across newlines.
_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


class FailureReason(str, enum.Enum):
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"
    SCHEMA_MISMATCH = "schema_mismatch"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    reason: FailureReason
    field: Optional[str] = None
    detail: str = ""

    def describe(self) -> str:
        if self.field:
            return f"{self.reason.value}({self.field}): {self.detail}"
        return f"{self.reason.value}: {self.detail}"


ExtractionResult = Union[Ok[T], Failed]


def find_json_object(text: str) -> Optional[str]:
    match = _JSON_OBJECT_RE.search(text or "")
    return match.group() if match else None


def extract(raw_text: str, schema: Type[T]) -> ExtractionResult[T]:
    """Locate, parse and validate the JSON object embedded in ``raw_text``.

    ``schema`` is a pydantic model; its validators decide what counts as the
    right shape. Schema mismatches report the offending field by its wire
    name, or no field when a cross-field check failed.
    """
    candidate = find_json_object(raw_text)
    if candidate is None:
        return Failed(FailureReason.NO_JSON_FOUND, detail="no JSON object in model output")

    try:
        data = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError) as exc:
        # Deep nesting exhausts the decoder stack; treat it as unparseable.
        return Failed(FailureReason.MALFORMED_JSON, detail=str(exc))

    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        return Failed(FailureReason.SCHEMA_MISMATCH, field=field, detail=first["msg"])

    return Ok(value)
