"""Pydantic schemas and helpers for validating tool and API payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.color_space import parse_hex

HEX_PATTERN = r"^#?[0-9a-fA-F]{6}$"
SlotLiteral = Literal["top", "bottom", "hoodie", "shorts"]


def _validate_palette(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [parse_hex(value) for value in values]


class ClothingItemInput(BaseModel):
    """Input contract for adding a wardrobe item."""

    slot: SlotLiteral
    name: str = Field(min_length=1)
    primary_hex: str = Field(pattern=HEX_PATTERN)
    brand: str = ""
    palette: List[str] = []
    image_urls: List[str] = []
    tags: List[str] = []

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, palette: List[str]) -> List[str]:
        return _validate_palette(palette) or []


class ClothingItemUpdate(BaseModel):
    """Partial update for a wardrobe item; wear bookkeeping is not editable."""

    slot: Optional[SlotLiteral] = None
    name: Optional[str] = Field(default=None, min_length=1)
    primary_hex: Optional[str] = Field(default=None, pattern=HEX_PATTERN)
    brand: Optional[str] = None
    palette: Optional[List[str]] = None
    image_urls: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, palette: Optional[List[str]]) -> Optional[List[str]]:
        return _validate_palette(palette)


class WearEventInput(BaseModel):
    """A worn outfit as reported by the caller."""

    top_id: str = Field(min_length=1)
    bottom_id: str = Field(min_length=1)
    harmony_score: int = Field(ge=0, le=100)
    drip_score: int = Field(ge=0, le=100)
    outfit: Optional[Dict[str, Any]] = None


class RatingInput(BaseModel):
    entry_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "ClothingItemInput",
    "ClothingItemUpdate",
    "WearEventInput",
    "RatingInput",
    "ValidationResult",
    "validation_failure",
]
