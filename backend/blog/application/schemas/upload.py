"""Pydantic DTOs for image uploads."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    message: str
    url: str
    filename: str
