"""Request models for the link relay API."""

from typing import Optional
from pydantic import BaseModel, validator, Field


class RelayRequest(BaseModel):
    """Request model for the raw relay endpoint."""

    url: Optional[str] = Field(None, description="TikTok video URL")

    @validator('url', pre=True)
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class ResolveRequest(RelayRequest):
    """Request model for relay plus link extraction."""
