"""Pydantic DTOs for the translate endpoint."""

from pydantic import BaseModel, Field, field_validator


class TranslateRequest(BaseModel):
    """Text to translate — a single string or a list of strings."""

    text: str | list[str] = Field(..., examples=["こんにちは、世界"])
    target_language: str = Field("en", min_length=2, max_length=16, examples=["en"])

    @field_validator("text")
    @classmethod
    def _text_not_empty(cls, value: str | list[str]) -> str | list[str]:
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("text must not be empty")
        elif not value or not any(item.strip() for item in value):
            raise ValueError("text must contain at least one non-empty string")
        return value


class TranslateResponse(BaseModel):
    """Same shape as the request: string in, string out; list in, list out."""

    translated_text: str | list[str]
