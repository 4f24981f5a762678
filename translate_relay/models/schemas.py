"""
Pydantic models for request/response validation
"""
from pydantic import BaseModel, Field, StrictStr, field_validator
from typing import Any, List


class TranslateRequest(BaseModel):
    """Request body for batch translate"""
    texts: List[str] = Field(..., description="Texts to translate, in order")
    source: StrictStr = Field(..., description="Source language code (e.g. en)")
    target: StrictStr = Field(..., description="Target language code (e.g. ja)")

    @field_validator("texts", mode="before")
    @classmethod
    def blank_non_string_items(cls, v: Any) -> Any:
        # null, numbers, objects and the like translate to ""
        if isinstance(v, list):
            return [item if isinstance(item, str) else "" for item in v]
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "texts": ["Hello", "How are you?"],
                "source": "en",
                "target": "ja"
            }
        }


class TranslateResponse(BaseModel):
    """Response with translated strings, aligned with the request texts"""
    translations: List[str]


class ErrorResponse(BaseModel):
    """Error body for 4xx/5xx responses"""
    error: str
